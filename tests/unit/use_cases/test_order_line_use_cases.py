import pytest

from orderhub.app.errors import ErrorCode
from orderhub.app.use_cases.orders import (
    AddOrderLineUseCase,
    ChangeOrderLineQuantityUseCase,
    CreateOrderCommand,
    CreateOrderUseCase,
    OrderLineCommand,
    RemoveOrderLineUseCase,
)
from orderhub.app.use_cases.products import (
    DeleteProductUseCase,
    ProductPriceInput,
    UpdateProductCommand,
    UpdateProductUseCase,
)
from orderhub.domain.entities import DiscountStatus, OrderStatus


def stored_total(store, order_id):
    lines = [line for line in store.rows("order_products") if line.order_id == order_id]
    return sum(line.price_cents * line.quantity for line in lines)


@pytest.fixture
def wholesale_setup(seed):
    product = seed.product(name="Widget", sku="WID-1", currency="USD")
    wholesale = seed.price_level("Wholesale")
    seed.price(product, wholesale, 500)
    customer = seed.approved_customer(wholesale)
    return product, wholesale, customer


@pytest.mark.asyncio
async def test_price_change_after_ordering_leaves_line_untouched(
    uow, store, wholesale_setup, admin_ctx
):
    # Arrange
    product, wholesale, customer = wholesale_setup
    order = (await CreateOrderUseCase(uow).execute(
        admin_ctx, CreateOrderCommand(customer_id=customer.id)
    )).value

    added = await AddOrderLineUseCase(uow).execute(
        admin_ctx, order.id, OrderLineCommand(product_id=product.id, quantity=3)
    )
    assert added.value.total_cents == 1500

    # Act
    repriced = await UpdateProductUseCase(uow).execute(
        admin_ctx,
        product.id,
        UpdateProductCommand(
            name="Widget v2",
            prices=[ProductPriceInput(price_level_id=wholesale.id, price_cents=600)],
        ),
    )

    # Assert
    assert repriced.is_ok()
    line = next(store.rows("order_products"))
    assert (line.name, line.price_cents, line.quantity) == ("Widget", 500, 3)
    assert store.get("orders", order.id).total_cents == 1500


@pytest.mark.asyncio
async def test_deleting_product_keeps_line_snapshot(uow, store, wholesale_setup, admin_ctx):
    # Arrange
    product, _, customer = wholesale_setup
    await CreateOrderUseCase(uow).execute(
        admin_ctx,
        CreateOrderCommand(
            customer_id=customer.id,
            lines=[OrderLineCommand(product_id=product.id, quantity=2)],
        ),
    )

    # Act
    result = await DeleteProductUseCase(uow).execute(admin_ctx, product.id)

    # Assert
    assert result.is_ok()
    line = next(store.rows("order_products"))
    assert line.product_id is None
    assert (line.name, line.sku, line.price_cents) == ("Widget", "WID-1", 500)


@pytest.mark.asyncio
async def test_requested_explicit_level_is_refused(uow, store, seed, wholesale_setup, admin_ctx):
    # Arrange
    product, _, customer = wholesale_setup
    partner = seed.price_level("Partner")
    seed.price(product, partner, 100)
    seed.assignment(customer, partner, DiscountStatus.requested)
    order = seed.order(customer=customer)

    # Act
    result = await AddOrderLineUseCase(uow).execute(
        admin_ctx,
        order.id,
        OrderLineCommand(product_id=product.id, quantity=3, price_level_id=partner.id),
    )

    # Assert
    assert result.error.code == ErrorCode.NOT_FOUND
    assert list(store.rows("order_products")) == []
    assert store.get("orders", order.id).total_cents == 0


@pytest.mark.asyncio
async def test_catalog_line_cannot_carry_its_own_price(uow, store, seed, admin_ctx):
    product = seed.product()
    order = seed.order(customer=seed.customer())

    result = await AddOrderLineUseCase(uow).execute(
        admin_ctx, order.id, OrderLineCommand(product_id=product.id, quantity=3, price_cents=1)
    )

    assert result.error.code == ErrorCode.VALIDATION_ERROR
    assert list(store.rows("order_products")) == []


@pytest.mark.asyncio
async def test_total_tracks_every_line_mutation(uow, store, seed, admin_ctx):
    # Arrange
    order = seed.order()
    add = AddOrderLineUseCase(uow)

    # Act / Assert
    first = await add.execute(
        admin_ctx, order.id, OrderLineCommand(name="Bolt", price_cents=25, quantity=4)
    )
    assert first.value.total_cents == 100 == stored_total(store, order.id)

    second = await add.execute(
        admin_ctx, order.id, OrderLineCommand(name="Nut", price_cents=10, quantity=3)
    )
    assert second.value.total_cents == 130 == stored_total(store, order.id)

    bolt_id = second.value.lines[0].id
    changed = await ChangeOrderLineQuantityUseCase(uow).execute(
        admin_ctx, order.id, bolt_id, 10
    )
    assert changed.value.total_cents == 280 == stored_total(store, order.id)
    assert sorted(line.quantity for line in changed.value.lines) == [3, 10]

    nut_id = next(line.id for line in changed.value.lines if line.name == "Nut")
    removed = await RemoveOrderLineUseCase(uow).execute(admin_ctx, order.id, nut_id)
    assert removed.value.total_cents == 250 == stored_total(store, order.id)
    assert store.get("orders", order.id).total_cents == 250


@pytest.mark.asyncio
async def test_quantity_change_keeps_snapshot_without_repricing(
    uow, store, seed, wholesale_setup, admin_ctx
):
    # Arrange
    product, wholesale, customer = wholesale_setup
    created = await CreateOrderUseCase(uow).execute(
        admin_ctx,
        CreateOrderCommand(
            customer_id=customer.id,
            lines=[OrderLineCommand(product_id=product.id, quantity=1)],
        ),
    )
    order = created.value
    rate = next(store.rows("product_price_levels"))
    rate.price_cents = 9999

    # Act
    result = await ChangeOrderLineQuantityUseCase(uow).execute(
        admin_ctx, order.id, order.lines[0].id, 4
    )

    # Assert
    line = result.value.lines[0]
    assert line.price_cents == 500
    assert line.quantity == 4
    assert line.product_id == product.id
    assert result.value.total_cents == 2000


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [OrderStatus.processing, OrderStatus.cancelled])
async def test_lines_are_locked_after_pending(uow, seed, admin_ctx, status):
    order = seed.order(status=status)

    result = await AddOrderLineUseCase(uow).execute(
        admin_ctx, order.id, OrderLineCommand(name="Fee", price_cents=1, quantity=1)
    )

    assert result.error.code == ErrorCode.VALIDATION_ERROR


@pytest.mark.asyncio
async def test_remove_unknown_line_is_not_found(uow, seed, admin_ctx):
    order = seed.order()

    result = await RemoveOrderLineUseCase(uow).execute(admin_ctx, order.id, 999)

    assert result.error.code == ErrorCode.NOT_FOUND


@pytest.mark.asyncio
async def test_line_of_other_order_is_not_found(uow, seed, admin_ctx):
    first = seed.order()
    second = seed.order()
    line = seed.line(second, "Bolt", 25, 1)

    result = await ChangeOrderLineQuantityUseCase(uow).execute(admin_ctx, first.id, line.id, 2)

    assert result.error.code == ErrorCode.NOT_FOUND


@pytest.mark.asyncio
async def test_negative_quantity_change_is_rejected(uow, seed, admin_ctx):
    order = seed.order()
    line = seed.line(order, "Bolt", 25, 1)

    result = await ChangeOrderLineQuantityUseCase(uow).execute(admin_ctx, order.id, line.id, -1)

    assert result.error.code == ErrorCode.VALIDATION_ERROR


@pytest.mark.asyncio
async def test_order_of_other_hub_is_not_found(uow, other_seed, admin_ctx):
    foreign = other_seed.order()

    result = await AddOrderLineUseCase(uow).execute(
        admin_ctx, foreign.id, OrderLineCommand(name="Fee", price_cents=1, quantity=1)
    )

    assert result.error.code == ErrorCode.NOT_FOUND
