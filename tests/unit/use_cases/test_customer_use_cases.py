import pytest

from orderhub.app.errors import ErrorCode
from orderhub.app.use_cases.customers import (
    CreateCustomerCommand,
    CreateCustomerUseCase,
    DeleteCustomerUseCase,
    GetCustomerUseCase,
    ListCustomersUseCase,
    UpdateCustomerCommand,
    UpdateCustomerUseCase,
)
from orderhub.domain.entities import DiscountStatus


@pytest.mark.asyncio
async def test_create_customer_normalizes_email(uow, admin_ctx):
    result = await CreateCustomerUseCase(uow).execute(
        admin_ctx, CreateCustomerCommand(name=" Acme  Stores ", email=" Buyer@Acme.Example.COM ")
    )

    assert result.value.name == "Acme Stores"
    assert result.value.email == "buyer@acme.example.com"
    assert result.value.price_level_id is None


@pytest.mark.asyncio
async def test_email_is_unique_per_hub(uow, seed, admin_ctx, other_hub_admin_ctx):
    seed.customer(email="buyer@acme.example.com")
    command = CreateCustomerCommand(name="Acme", email="BUYER@acme.example.com")

    same_hub = await CreateCustomerUseCase(uow).execute(admin_ctx, command)
    other_hub = await CreateCustomerUseCase(uow).execute(other_hub_admin_ctx, command)

    assert same_hub.error.code == ErrorCode.CONFLICT
    assert other_hub.is_ok()


@pytest.mark.asyncio
async def test_price_level_needs_approved_assignment(uow, seed, admin_ctx):
    # Arrange
    approved = seed.price_level("Wholesale")
    pending = seed.price_level("Retail")
    customer = seed.customer()
    seed.assignment(customer, approved, DiscountStatus.approved)
    seed.assignment(customer, pending, DiscountStatus.requested)
    use_case = UpdateCustomerUseCase(uow)

    # Act
    refused = await use_case.execute(
        admin_ctx, customer.id, UpdateCustomerCommand(price_level_id=pending.id)
    )
    accepted = await use_case.execute(
        admin_ctx, customer.id, UpdateCustomerCommand(price_level_id=approved.id)
    )
    cleared = await use_case.execute(
        admin_ctx, customer.id, UpdateCustomerCommand(price_level_id=None)
    )

    # Assert
    assert refused.error.code == ErrorCode.VALIDATION_ERROR
    assert accepted.value.price_level_id == approved.id
    assert cleared.value.price_level_id is None


@pytest.mark.asyncio
async def test_update_leaves_unsent_fields(uow, seed, admin_ctx):
    level = seed.price_level()
    customer = seed.approved_customer(level)

    result = await UpdateCustomerUseCase(uow).execute(
        admin_ctx, customer.id, UpdateCustomerCommand(phone="555-0100")
    )

    assert result.value.phone == "555-0100"
    assert result.value.price_level_id == level.id
    assert result.value.email == "buyer@acme.example.com"


@pytest.mark.asyncio
async def test_update_to_taken_email_conflicts(uow, seed, admin_ctx):
    seed.customer(email="first@acme.example.com")
    second = seed.customer(email="second@acme.example.com")

    result = await UpdateCustomerUseCase(uow).execute(
        admin_ctx, second.id, UpdateCustomerCommand(email="FIRST@acme.example.com")
    )

    assert result.error.code == ErrorCode.CONFLICT


@pytest.mark.asyncio
async def test_delete_customer_keeps_orders(uow, store, seed, admin_ctx):
    # Arrange
    level = seed.price_level()
    customer = seed.approved_customer(level)
    order = seed.order(customer)

    # Act
    result = await DeleteCustomerUseCase(uow).execute(admin_ctx, customer.id)

    # Assert
    assert result.value.customer_id == customer.id
    assert store.get("customers", customer.id) is None
    assert list(store.rows("discount_assignments")) == []
    assert store.get("orders", order.id).customer_id is None


@pytest.mark.asyncio
async def test_list_and_get_customers(uow, seed, other_seed, manager_ctx):
    # Arrange
    level = seed.price_level()
    billed = seed.approved_customer(level, email="billed@acme.example.com")
    seed.customer(name="Corner Shop", email="shop@corner.example.com")
    foreign = other_seed.customer()

    # Act
    searched = await ListCustomersUseCase(uow).execute(manager_ctx, search="corner")
    by_level = await ListCustomersUseCase(uow).execute(manager_ctx, price_level_id=level.id)
    found = await GetCustomerUseCase(uow).execute(manager_ctx, billed.id)
    hidden = await GetCustomerUseCase(uow).execute(manager_ctx, foreign.id)

    # Assert
    assert [c.name for c in searched.value.items] == ["Corner Shop"]
    assert [c.id for c in by_level.value.items] == [billed.id]
    assert found.value.email == "billed@acme.example.com"
    assert hidden.error.code == ErrorCode.NOT_FOUND


@pytest.mark.asyncio
async def test_customer_writes_require_admin(uow, manager_ctx):
    result = await CreateCustomerUseCase(uow).execute(
        manager_ctx, CreateCustomerCommand(name="Acme", email="buyer@acme.example.com")
    )

    assert result.error.code == ErrorCode.FORBIDDEN
