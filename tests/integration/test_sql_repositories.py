import pytest

from orderhub.app.repositories.errors import RepositoryConflictError
from orderhub.app.repositories.queries import OrderListQuery, ProductListQuery
from orderhub.domain.entities import (
    Order,
    OrderProduct,
    OrderStatus,
    PriceLevel,
    Product,
    ProductPriceLevel,
)


async def _add_products(uow, hub_id, names):
    products = []
    for index, name in enumerate(names):
        products.append(
            await uow.products.create(
                Product(hub_id=hub_id, name=name, sku=f"SKU-{hub_id}-{index}", currency="USD")
            )
        )
    return products


@pytest.mark.asyncio
async def test_product_pages_cover_every_row_once(sql_uow):
    async with sql_uow:
        await _add_products(sql_uow, 1, [f"Item {n}" for n in range(7)])
        await _add_products(sql_uow, 2, ["Foreign"])
        await sql_uow.commit()

    seen = []
    offset = 0
    async with sql_uow:
        while True:
            total, page = await sql_uow.products.list(
                ProductListQuery(hub_id=1, offset=offset, limit=3)
            )
            if not page:
                break
            seen.extend(product.id for product in page)
            offset += len(page)

    assert total == 7
    assert len(seen) == 7
    assert seen == sorted(set(seen))


@pytest.mark.asyncio
async def test_search_treats_wildcards_literally(sql_uow):
    async with sql_uow:
        await _add_products(sql_uow, 1, ["100% cotton", "1000 threads", "snake_case"])
        await sql_uow.commit()

    async with sql_uow:
        _, percent = await sql_uow.products.list(ProductListQuery(hub_id=1, search="100%"))
        _, underscore = await sql_uow.products.list(ProductListQuery(hub_id=1, search="e_c"))
        _, mixed_case = await sql_uow.products.list(ProductListQuery(hub_id=1, search="COTTON"))

        assert [p.name for p in percent] == ["100% cotton"]
        assert [p.name for p in underscore] == ["snake_case"]
        assert [p.name for p in mixed_case] == ["100% cotton"]


@pytest.mark.asyncio
async def test_duplicate_sku_in_hub_raises_conflict(sql_uow):
    async with sql_uow:
        await sql_uow.products.create(Product(hub_id=1, name="A", sku="DUP", currency="USD"))
        await sql_uow.commit()

    with pytest.raises(RepositoryConflictError):
        async with sql_uow:
            await sql_uow.products.create(Product(hub_id=1, name="B", sku="DUP", currency="USD"))

    async with sql_uow:
        other = await sql_uow.products.create(
            Product(hub_id=2, name="B", sku="DUP", currency="USD")
        )
        await sql_uow.commit()
    assert other.id is not None


@pytest.mark.asyncio
async def test_deleting_product_keeps_order_line_snapshot(sql_uow):
    # Arrange
    async with sql_uow:
        level = await sql_uow.price_levels.create(PriceLevel(hub_id=1, name="Wholesale"))
        (product,) = await _add_products(sql_uow, 1, ["Widget"])
        await sql_uow.products.replace_prices(
            product.id,
            [ProductPriceLevel(product_id=product.id, price_level_id=level.id, price_cents=500)],
        )
        order = await sql_uow.orders.create(Order(hub_id=1, currency="USD", total_cents=1000))
        await sql_uow.orders.add_line(
            OrderProduct(
                order_id=order.id,
                product_id=product.id,
                name="Widget",
                price_cents=500,
                currency="USD",
                quantity=2,
            )
        )
        await sql_uow.commit()

    # Act
    async with sql_uow:
        await sql_uow.products.delete(product)
        await sql_uow.commit()

    # Assert
    async with sql_uow:
        lines = await sql_uow.orders.list_lines(order.id)
        assert [(line.product_id, line.name, line.price_cents) for line in lines] == [
            (None, "Widget", 500)
        ]
        assert await sql_uow.products.get_price(product.id, level.id) is None
        assert await sql_uow.orders.sum_line_totals(order.id) == 1000


@pytest.mark.asyncio
async def test_order_listing_filters_by_status_and_customer(sql_uow):
    async with sql_uow:
        for status in (OrderStatus.draft, OrderStatus.pending, OrderStatus.pending):
            await sql_uow.orders.create(Order(hub_id=1, status=status, currency="USD"))
        await sql_uow.orders.create(Order(hub_id=2, status=OrderStatus.pending, currency="USD"))
        await sql_uow.commit()

    async with sql_uow:
        total, orders = await sql_uow.orders.list(
            OrderListQuery(hub_id=1, status=OrderStatus.pending)
        )
        statuses = {order.status for order in orders}

    assert total == 2
    assert statuses == {OrderStatus.pending}
