import pytest

from orderhub.app.errors import ErrorCode
from orderhub.app.services.price_resolver import PricingPolicy
from orderhub.app.use_cases.categories import (
    CreateCategoryCommand,
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    ListCategoriesUseCase,
    UpdateCategoryCommand,
    UpdateCategoryUseCase,
)
from orderhub.app.use_cases.categories.update_category_use_case import creates_cycle
from orderhub.app.use_cases.price_levels import (
    CreatePriceLevelCommand,
    CreatePriceLevelUseCase,
    DeletePriceLevelUseCase,
    ListPriceLevelsUseCase,
    UpdatePriceLevelCommand,
    UpdatePriceLevelUseCase,
)
from orderhub.app.use_cases.pricing import ResolvePriceUseCase
from orderhub.app.use_cases.tags import (
    CreateTagUseCase,
    DeleteTagUseCase,
    ListTagsUseCase,
    RenameTagUseCase,
    TagCommand,
)


# Price levels


@pytest.mark.asyncio
async def test_create_price_level_names_are_unique_ignoring_case(uow, admin_ctx):
    use_case = CreatePriceLevelUseCase(uow)

    first = await use_case.execute(admin_ctx, CreatePriceLevelCommand(name="Wholesale"))
    second = await use_case.execute(admin_ctx, CreatePriceLevelCommand(name="wholesale"))

    assert first.value.name == "Wholesale"
    assert second.error.code == ErrorCode.CONFLICT


@pytest.mark.asyncio
async def test_price_level_writes_require_admin(uow, seed, manager_ctx):
    level = seed.price_level()

    created = await CreatePriceLevelUseCase(uow).execute(
        manager_ctx, CreatePriceLevelCommand(name="Retail")
    )
    renamed = await UpdatePriceLevelUseCase(uow).execute(
        manager_ctx, level.id, UpdatePriceLevelCommand(name="Retail")
    )
    deleted = await DeletePriceLevelUseCase(uow).execute(manager_ctx, level.id)

    assert {r.error.code for r in (created, renamed, deleted)} == {ErrorCode.FORBIDDEN}


@pytest.mark.asyncio
async def test_rename_price_level(uow, seed, admin_ctx):
    level = seed.price_level("Wholesale")
    seed.price_level("Retail")

    renamed = await UpdatePriceLevelUseCase(uow).execute(
        admin_ctx, level.id, UpdatePriceLevelCommand(name=" Trade ")
    )
    taken = await UpdatePriceLevelUseCase(uow).execute(
        admin_ctx, level.id, UpdatePriceLevelCommand(name="Retail")
    )

    assert renamed.value.name == "Trade"
    assert taken.error.code == ErrorCode.CONFLICT


@pytest.mark.asyncio
async def test_delete_price_level_releases_customers_and_keeps_order_lines(
    uow, store, seed, admin_ctx
):
    # Arrange
    level = seed.price_level()
    product = seed.product()
    seed.price(product, level, 500)
    customer = seed.approved_customer(level)
    order = seed.order(customer)
    line = seed.line(order, "Widget", 500, 2)

    # Act
    result = await DeletePriceLevelUseCase(uow).execute(admin_ctx, level.id)

    # Assert
    assert result.value.price_level_id == level.id
    assert store.get("customers", customer.id).price_level_id is None
    assert list(store.rows("product_price_levels")) == []
    assert list(store.rows("discount_assignments")) == []
    assert store.get("order_products", line.id).price_cents == 500


@pytest.mark.asyncio
async def test_list_price_levels_is_hub_scoped(uow, seed, other_seed, manager_ctx):
    seed.price_level("Wholesale")
    seed.price_level("Retail")
    other_seed.price_level("Wholesale")

    result = await ListPriceLevelsUseCase(uow).execute(manager_ctx, limit=1)

    assert result.value.total == 2
    assert [level.name for level in result.value.items] == ["Wholesale"]


# Tags


@pytest.mark.asyncio
async def test_tag_lifecycle(uow, store, seed, admin_ctx):
    # Arrange
    product = seed.product()

    # Act
    created = await CreateTagUseCase(uow).execute(admin_ctx, TagCommand(name="sale"))
    async with uow:
        await uow.products.replace_tags(product.id, [created.value.id])
        await uow.commit()
    renamed = await RenameTagUseCase(uow).execute(
        admin_ctx, created.value.id, TagCommand(name="clearance")
    )
    listed = await ListTagsUseCase(uow).execute(admin_ctx, search="clear")
    deleted = await DeleteTagUseCase(uow).execute(admin_ctx, created.value.id)

    # Assert
    assert renamed.value.name == "clearance"
    assert [tag.name for tag in listed.value.items] == ["clearance"]
    assert deleted.value.tag_id == created.value.id
    assert list(store.rows("tags")) == []
    assert list(store.rows("product_tags")) == []


@pytest.mark.asyncio
async def test_duplicate_and_blank_tag_names_are_rejected(uow, seed, admin_ctx):
    seed.tag("sale")

    duplicate = await CreateTagUseCase(uow).execute(admin_ctx, TagCommand(name="SALE"))
    blank = await CreateTagUseCase(uow).execute(admin_ctx, TagCommand(name="  "))

    assert duplicate.error.code == ErrorCode.CONFLICT
    assert blank.error.code == ErrorCode.VALIDATION_ERROR


# Categories


def test_creates_cycle():
    parents = {1: None, 2: 1, 3: 2, 4: None}

    assert creates_cycle(parents, 1, 1)
    assert creates_cycle(parents, 1, 3)
    assert not creates_cycle(parents, 3, 1)
    assert not creates_cycle(parents, 1, 4)


@pytest.mark.asyncio
async def test_category_cannot_move_under_descendant(uow, seed, admin_ctx):
    root = seed.category("Tools")
    child = seed.category("Hand tools", parent=root)
    grandchild = seed.category("Hammers", parent=child)

    result = await UpdateCategoryUseCase(uow).execute(
        admin_ctx, root.id, UpdateCategoryCommand(parent_id=grandchild.id)
    )

    assert result.error.code == ErrorCode.VALIDATION_ERROR


@pytest.mark.asyncio
async def test_sibling_category_names_are_unique(uow, seed, admin_ctx):
    # Arrange
    tools = seed.category("Tools")
    garden = seed.category("Garden")
    seed.category("Sale", parent=tools)

    # Act
    same_parent = await CreateCategoryUseCase(uow).execute(
        admin_ctx, CreateCategoryCommand(name="sale", parent_id=tools.id)
    )
    other_parent = await CreateCategoryUseCase(uow).execute(
        admin_ctx, CreateCategoryCommand(name="Sale", parent_id=garden.id)
    )

    # Assert
    assert same_parent.error.code == ErrorCode.CONFLICT
    assert other_parent.value.parent_id == garden.id


@pytest.mark.asyncio
async def test_category_tree_hides_archived_branches(uow, seed, manager_ctx):
    # Arrange
    tools = seed.category("Tools")
    hand = seed.category("Hand tools", parent=tools)
    old = seed.category("Old stock", is_archived=True)
    leftover = seed.category("Leftovers", parent=old)

    # Act
    active = await ListCategoriesUseCase(uow).execute(manager_ctx)
    everything = await ListCategoriesUseCase(uow).execute(manager_ctx, include_archived=True)

    # Assert
    assert [node.id for node in active.value] == [tools.id, leftover.id]
    assert [child.id for child in active.value[0].children] == [hand.id]
    assert [node.id for node in everything.value] == [tools.id, old.id]
    assert [child.id for child in everything.value[1].children] == [leftover.id]


@pytest.mark.asyncio
async def test_delete_category_orphans_children_and_products(uow, store, seed, admin_ctx):
    tools = seed.category("Tools")
    hand = seed.category("Hand tools", parent=tools)
    product = seed.product(category_id=tools.id)

    result = await DeleteCategoryUseCase(uow).execute(admin_ctx, tools.id)

    assert result.is_ok()
    assert store.get("categories", hand.id).parent_id is None
    assert store.get("products", product.id).category_id is None


# Pricing


@pytest.mark.asyncio
async def test_resolve_price_uses_fallback_level(uow, seed, manager_ctx):
    # Arrange
    retail = seed.price_level("Retail")
    wholesale = seed.price_level("Wholesale")
    product = seed.product()
    seed.price(product, retail, 1200)

    # Act
    use_case = ResolvePriceUseCase(uow, PricingPolicy(fallback_price_level_name="Retail"))
    result = await use_case.execute(manager_ctx, product.id, price_level_id=wholesale.id)

    # Assert
    assert result.value.price_cents == 1200
    assert result.value.price_level_id == retail.id
    assert result.value.used_fallback is True


@pytest.mark.asyncio
async def test_resolve_price_without_fallback_is_not_configured(uow, seed, manager_ctx):
    level = seed.price_level()
    product = seed.product()

    result = await ResolvePriceUseCase(uow, PricingPolicy()).execute(
        manager_ctx, product.id, price_level_id=level.id
    )

    assert result.error.code == ErrorCode.PRICE_NOT_CONFIGURED


@pytest.mark.asyncio
async def test_resolve_price_requires_order_role(uow, seed, guest_ctx):
    product = seed.product()

    result = await ResolvePriceUseCase(uow, PricingPolicy()).execute(guest_ctx, product.id)

    assert result.error.code == ErrorCode.FORBIDDEN
