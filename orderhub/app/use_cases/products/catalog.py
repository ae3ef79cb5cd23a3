"""
Product checks and views shared by create, update, import and listing.
"""

from typing import Dict, List, Optional, Sequence

from orderhub.app.errors import conflict, not_found, validation_error
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.domain.entities import Product, ProductPriceLevel
from orderhub.domain.validation import (
    normalize_currency,
    sanitize_inline_text,
    sanitize_optional_text,
    sanitize_sku,
)
from orderhub.libs.result import Error, Result, Return

from .dtos import CreateProductCommand, ProductPriceInput, ProductPriceResponse, ProductResponse


def clean_product_fields(command: CreateProductCommand) -> Result[dict]:
    """Sanitized name, currency, sku and description of a new product"""
    name = sanitize_inline_text(command.name)
    if not name:
        return Return.err(validation_error("Product name is required"))
    try:
        currency = normalize_currency(command.currency)
    except ValueError as exc:
        return Return.err(validation_error(str(exc)))
    return Return.ok(
        {
            "name": name,
            "currency": currency,
            "sku": sanitize_sku(command.sku),
            "description": sanitize_optional_text(command.description, multiline=True),
        }
    )


async def check_category(uow: UnitOfWork, hub_id: int, category_id: Optional[int]) -> Optional[Error]:
    if category_id is None:
        return None
    if await uow.categories.get_by_id(hub_id, category_id) is None:
        return not_found("Category")
    return None


async def check_tags(uow: UnitOfWork, hub_id: int, tag_ids: Sequence[int]) -> Optional[Error]:
    wanted = set(tag_ids)
    if not wanted:
        return None
    found = await uow.tags.get_many(hub_id, list(wanted))
    if len({tag.id for tag in found}) != len(wanted):
        return not_found("Tag")
    return None


async def check_prices(
    uow: UnitOfWork, hub_id: int, prices: Sequence[ProductPriceInput]
) -> Optional[Error]:
    seen = set()
    for price in prices:
        if price.price_cents < 0:
            return validation_error("Price cannot be negative")
        if price.price_level_id in seen:
            return validation_error(f"Price level {price.price_level_id} is listed twice")
        seen.add(price.price_level_id)
        if await uow.price_levels.get_by_id(hub_id, price.price_level_id) is None:
            return not_found("Price level")
    return None


def to_rates(product_id: int, prices: Sequence[ProductPriceInput]) -> List[ProductPriceLevel]:
    return [
        ProductPriceLevel(
            product_id=product_id, price_level_id=price.price_level_id, price_cents=price.price_cents
        )
        for price in prices
    ]


async def create_product(
    uow: UnitOfWork, hub_id: int, command: CreateProductCommand
) -> Result[Product]:
    """Validate and insert one product with its prices and tags"""
    fields_result = clean_product_fields(command)
    if fields_result.is_err():
        return fields_result
    fields = fields_result.value

    if fields["sku"] is not None:
        if await uow.products.get_by_sku(hub_id, fields["sku"]) is not None:
            return Return.err(conflict(f"Product with SKU {fields['sku']} already exists"))

    for error in (
        await check_category(uow, hub_id, command.category_id),
        await check_tags(uow, hub_id, command.tag_ids),
        await check_prices(uow, hub_id, command.prices),
    ):
        if error is not None:
            return Return.err(error)

    product = await uow.products.create(
        Product(hub_id=hub_id, category_id=command.category_id, **fields)
    )
    if command.prices:
        await uow.products.replace_prices(product.id, to_rates(product.id, command.prices))
    if command.tag_ids:
        await uow.products.replace_tags(product.id, command.tag_ids)
    return Return.ok(product)


async def product_views(uow: UnitOfWork, products: Sequence[Product]) -> List[ProductResponse]:
    """ProductResponse for each product with its prices and tag ids attached"""
    ids = [product.id for product in products]
    if not ids:
        return []

    prices: Dict[int, List[ProductPriceResponse]] = {product_id: [] for product_id in ids}
    for rate in await uow.products.list_prices(ids):
        prices[rate.product_id].append(ProductPriceResponse.model_validate(rate))

    tags: Dict[int, List[int]] = {product_id: [] for product_id in ids}
    for link in await uow.products.list_tags(ids):
        tags[link.product_id].append(link.tag_id)

    views = []
    for product in products:
        view = ProductResponse.model_validate(product)
        view.prices = sorted(prices[product.id], key=lambda p: p.price_level_id)
        view.tag_ids = sorted(tags[product.id])
        views.append(view)
    return views
