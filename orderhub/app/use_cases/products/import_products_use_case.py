"""
Import Products Use Case

Bulk-creates products from a CSV upload. Either every row is imported or
none is.
"""

import logging

from orderhub.app.context import CATALOG_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors, validation_error
from orderhub.app.repositories.queries import PriceLevelListQuery
from orderhub.app.services.product_csv import ProductCsvError, parse_product_csv
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.libs.result import Error, Result, Return

from .catalog import create_product, product_views
from .dtos import CreateProductCommand, ImportProductsResponse, ProductPriceInput

logger = logging.getLogger(__name__)


class ImportProductsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(self, ctx: CallerContext, csv_text: str) -> Result[ImportProductsResponse]:
        denied = require_role(ctx, CATALOG_ROLES)
        if denied:
            return Return.err(denied)

        async with self.uow:
            _, levels = await self.uow.price_levels.list(PriceLevelListQuery(hub_id=ctx.hub_id))
            level_ids = {level.name: level.id for level in levels}

            try:
                rows = parse_product_csv(csv_text, level_ids.keys())
            except ProductCsvError as exc:
                return Return.err(validation_error(str(exc)))

            products = []
            for row in rows:
                command = CreateProductCommand(
                    name=row.name,
                    currency=row.currency,
                    sku=row.sku,
                    description=row.description,
                    prices=[
                        ProductPriceInput(price_level_id=level_ids[name], price_cents=cents)
                        for name, cents in row.prices.items()
                    ],
                )
                created = await create_product(self.uow, ctx.hub_id, command)
                if created.is_err():
                    error = created.error
                    return Return.err(
                        Error(error.code, f"Row {row.row}: {error.message}")
                    )
                products.append(created.value)

            views = await product_views(self.uow, products)
            await self.uow.commit()

            logger.info("Imported %d products into hub %s", len(products), ctx.hub_id)
            return Return.ok(ImportProductsResponse(created=len(products), products=views))
