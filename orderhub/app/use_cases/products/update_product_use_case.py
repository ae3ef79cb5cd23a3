"""
Update Product Use Case

Partial update of a product. Catalog edits never touch existing order
lines, which keep their snapshot.
"""

from orderhub.app.context import CATALOG_ROLES, CallerContext, require_role
from orderhub.app.errors import conflict, handles_storage_errors, not_found, validation_error
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.domain.base import utcnow
from orderhub.domain.validation import (
    normalize_currency,
    sanitize_inline_text,
    sanitize_optional_text,
    sanitize_sku,
)
from orderhub.libs.result import Result, Return

from .catalog import check_category, check_prices, check_tags, product_views, to_rates
from .dtos import ProductResponse, UpdateProductCommand


class UpdateProductUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, product_id: int, command: UpdateProductCommand
    ) -> Result[ProductResponse]:
        denied = require_role(ctx, CATALOG_ROLES)
        if denied:
            return Return.err(denied)

        fields = command.model_fields_set
        async with self.uow:
            product = await self.uow.products.get_by_id(ctx.hub_id, product_id)
            if product is None:
                return Return.err(not_found("Product"))

            if "name" in fields:
                name = sanitize_inline_text(command.name or "")
                if not name:
                    return Return.err(validation_error("Product name is required"))
                product.name = name

            if "currency" in fields:
                try:
                    product.currency = normalize_currency(command.currency or "")
                except ValueError as exc:
                    return Return.err(validation_error(str(exc)))

            if "sku" in fields:
                sku = sanitize_sku(command.sku)
                if sku is not None and sku != product.sku:
                    if await self.uow.products.get_by_sku(ctx.hub_id, sku) is not None:
                        return Return.err(conflict(f"Product with SKU {sku} already exists"))
                product.sku = sku

            if "description" in fields:
                product.description = sanitize_optional_text(command.description, multiline=True)

            if "category_id" in fields:
                error = await check_category(self.uow, ctx.hub_id, command.category_id)
                if error is not None:
                    return Return.err(error)
                product.category_id = command.category_id

            if "is_archived" in fields and command.is_archived is not None:
                product.is_archived = command.is_archived

            if command.tag_ids is not None:
                error = await check_tags(self.uow, ctx.hub_id, command.tag_ids)
                if error is not None:
                    return Return.err(error)
                await self.uow.products.replace_tags(product.id, command.tag_ids)

            if command.prices is not None:
                error = await check_prices(self.uow, ctx.hub_id, command.prices)
                if error is not None:
                    return Return.err(error)
                await self.uow.products.replace_prices(
                    product.id, to_rates(product.id, command.prices)
                )

            product.updated_at = utcnow()
            product = await self.uow.products.update(product)
            views = await product_views(self.uow, [product])
            await self.uow.commit()

            return Return.ok(views[0])
