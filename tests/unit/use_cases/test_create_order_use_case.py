from unittest.mock import AsyncMock, MagicMock

import pytest

from orderhub.app.errors import ErrorCode
from orderhub.app.repositories.errors import RepositoryError
from orderhub.app.services.price_resolver import PricingPolicy
from orderhub.app.use_cases.orders import (
    CreateOrderCommand,
    CreateOrderUseCase,
    OrderLineCommand,
)
from orderhub.domain.entities import DiscountStatus, OrderStatus


@pytest.mark.asyncio
async def test_create_order_snapshots_catalog_line(uow, store, seed, admin_ctx):
    """Wholesale customer ordering 3 widgets at 500 cents"""
    # Arrange
    product = seed.product(name="Widget", sku="WID-1", currency="USD")
    wholesale = seed.price_level("Wholesale")
    seed.price(product, wholesale, 500)
    customer = seed.approved_customer(wholesale)

    command = CreateOrderCommand(
        customer_id=customer.id,
        lines=[OrderLineCommand(product_id=product.id, quantity=3)],
    )

    # Act
    result = await CreateOrderUseCase(uow).execute(admin_ctx, command)

    # Assert
    assert result.is_ok()
    order = result.value
    assert order.status == OrderStatus.draft
    assert order.currency == "USD"
    assert order.total_cents == 1500
    assert len(order.lines) == 1
    line = order.lines[0]
    assert (line.name, line.sku, line.price_cents, line.currency, line.quantity) == (
        "Widget",
        "WID-1",
        500,
        "USD",
        3,
    )
    assert uow.commits == 1
    assert store.get("orders", order.id).total_cents == 1500


@pytest.mark.asyncio
async def test_customer_without_approved_level_writes_nothing(uow, store, seed, admin_ctx):
    # Arrange
    product = seed.product()
    wholesale = seed.price_level("Wholesale")
    seed.price(product, wholesale, 500)
    customer = seed.customer()

    command = CreateOrderCommand(
        customer_id=customer.id,
        lines=[OrderLineCommand(product_id=product.id, quantity=1)],
    )

    # Act
    result = await CreateOrderUseCase(uow).execute(admin_ctx, command)

    # Assert
    assert result.is_err()
    assert result.error.code == ErrorCode.NOT_FOUND
    assert list(store.rows("orders")) == []
    assert list(store.rows("order_products")) == []


@pytest.mark.asyncio
async def test_failing_second_line_rolls_back_whole_order(uow, store, seed, admin_ctx):
    # Arrange
    priced = seed.product(name="Priced", sku="P-1")
    unpriced = seed.product(name="Unpriced", sku="P-2")
    wholesale = seed.price_level("Wholesale")
    seed.price(priced, wholesale, 100)

    command = CreateOrderCommand(
        lines=[
            OrderLineCommand(product_id=priced.id, quantity=1, price_level_id=wholesale.id),
            OrderLineCommand(product_id=unpriced.id, quantity=1, price_level_id=wholesale.id),
        ],
    )

    # Act
    result = await CreateOrderUseCase(uow).execute(admin_ctx, command)

    # Assert
    assert result.error.code == ErrorCode.PRICE_NOT_CONFIGURED
    assert list(store.rows("orders")) == []
    assert list(store.rows("order_products")) == []


@pytest.mark.asyncio
async def test_ad_hoc_line_is_normalised(uow, admin_ctx):
    command = CreateOrderCommand(
        currency="usd",
        lines=[OrderLineCommand(name="  Delivery   fee ", price_cents=250, quantity=2)],
    )

    result = await CreateOrderUseCase(uow).execute(admin_ctx, command)

    order = result.value
    assert order.currency == "USD"
    assert order.lines[0].name == "Delivery fee"
    assert order.lines[0].product_id is None
    assert order.total_cents == 500


@pytest.mark.asyncio
async def test_catalog_line_with_price_cents_is_rejected(uow, store, seed, admin_ctx):
    """A typed price cannot bypass an unpriced customer"""
    # Arrange
    product = seed.product(name="Widget")
    customer = seed.customer()
    command = CreateOrderCommand(
        customer_id=customer.id,
        lines=[OrderLineCommand(product_id=product.id, price_cents=1, quantity=3)],
    )

    # Act
    result = await CreateOrderUseCase(uow).execute(admin_ctx, command)

    # Assert
    assert result.error.code == ErrorCode.VALIDATION_ERROR
    assert list(store.rows("orders")) == []
    assert list(store.rows("order_products")) == []


@pytest.mark.asyncio
async def test_explicit_level_with_rejected_assignment_writes_nothing(
    uow, store, seed, admin_ctx
):
    # Arrange
    product = seed.product()
    retail = seed.price_level("Retail")
    wholesale = seed.price_level("Wholesale")
    seed.price(product, retail, 800)
    seed.price(product, wholesale, 500)
    customer = seed.approved_customer(retail)
    seed.assignment(customer, wholesale, DiscountStatus.rejected)
    command = CreateOrderCommand(
        customer_id=customer.id,
        lines=[
            OrderLineCommand(product_id=product.id, quantity=3, price_level_id=wholesale.id)
        ],
    )

    # Act
    result = await CreateOrderUseCase(uow).execute(admin_ctx, command)

    # Assert
    assert result.error.code == ErrorCode.NOT_FOUND
    assert list(store.rows("orders")) == []
    assert list(store.rows("order_products")) == []


@pytest.mark.asyncio
async def test_line_currency_must_match_order(uow, seed, admin_ctx):
    product = seed.product(currency="EUR")
    level = seed.price_level("Retail")
    seed.price(product, level, 100)
    command = CreateOrderCommand(
        currency="USD",
        lines=[OrderLineCommand(product_id=product.id, quantity=1, price_level_id=level.id)],
    )

    result = await CreateOrderUseCase(uow).execute(admin_ctx, command)

    assert result.error.code == ErrorCode.VALIDATION_ERROR


@pytest.mark.asyncio
async def test_currency_defaults_to_policy_without_lines(uow, admin_ctx):
    use_case = CreateOrderUseCase(uow, PricingPolicy(default_currency="EUR"))

    result = await use_case.execute(admin_ctx, CreateOrderCommand())

    assert result.value.currency == "EUR"
    assert result.value.total_cents == 0


@pytest.mark.asyncio
async def test_zero_quantity_is_rejected(uow, seed, admin_ctx):
    command = CreateOrderCommand(
        lines=[OrderLineCommand(name="Fee", price_cents=100, quantity=0)]
    )

    result = await CreateOrderUseCase(uow).execute(admin_ctx, command)

    assert result.error.code == ErrorCode.VALIDATION_ERROR


@pytest.mark.asyncio
async def test_duplicate_reference_in_same_hub_conflicts(uow, seed, admin_ctx):
    seed.order(reference="PO-1")

    result = await CreateOrderUseCase(uow).execute(
        admin_ctx, CreateOrderCommand(reference=" PO-1 ")
    )

    assert result.error.code == ErrorCode.CONFLICT


@pytest.mark.asyncio
async def test_same_reference_in_other_hub_is_allowed(uow, other_seed, admin_ctx):
    other_seed.order(reference="PO-1")

    result = await CreateOrderUseCase(uow).execute(
        admin_ctx, CreateOrderCommand(reference="PO-1")
    )

    assert result.is_ok()


@pytest.mark.asyncio
async def test_customer_of_other_hub_is_not_found(uow, other_seed, admin_ctx):
    foreign = other_seed.customer()

    result = await CreateOrderUseCase(uow).execute(
        admin_ctx, CreateOrderCommand(customer_id=foreign.id)
    )

    assert result.error.code == ErrorCode.NOT_FOUND


@pytest.mark.asyncio
async def test_new_order_cannot_start_completed(uow, admin_ctx):
    result = await CreateOrderUseCase(uow).execute(
        admin_ctx, CreateOrderCommand(status="Completed")
    )

    assert result.error.code == ErrorCode.VALIDATION_ERROR


@pytest.mark.asyncio
async def test_caller_without_role_is_forbidden_before_storage(mock_uow, guest_ctx):
    result = await CreateOrderUseCase(mock_uow).execute(guest_ctx, CreateOrderCommand())

    assert result.error.code == ErrorCode.FORBIDDEN
    mock_uow.__aenter__.assert_not_called()


@pytest.mark.asyncio
async def test_storage_failure_becomes_storage_error(mock_uow, admin_ctx):
    # Arrange
    mock_uow.orders = MagicMock()
    mock_uow.orders.create = AsyncMock(side_effect=RepositoryError("disk full"))

    # Act
    result = await CreateOrderUseCase(mock_uow).execute(
        admin_ctx, CreateOrderCommand(currency="USD")
    )

    # Assert
    assert result.error.code == ErrorCode.STORAGE_ERROR
    assert "disk full" not in result.error.message
    mock_uow.commit.assert_not_called()
