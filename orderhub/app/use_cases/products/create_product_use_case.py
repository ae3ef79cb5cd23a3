"""
Create Product Use Case
"""

import logging

from orderhub.app.context import CATALOG_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.libs.result import Result, Return

from .catalog import create_product, product_views
from .dtos import CreateProductCommand, ProductResponse

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """
    Use case for adding a product to the hub catalog.

    Business Rules:
    - Caller must be admin
    - Name is required; currency is a three-letter code
    - SKU is unique within the hub
    - Category, tags and price levels must belong to the hub
    - Prices are non-negative, one per price level
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, command: CreateProductCommand
    ) -> Result[ProductResponse]:
        denied = require_role(ctx, CATALOG_ROLES)
        if denied:
            return Return.err(denied)

        async with self.uow:
            created = await create_product(self.uow, ctx.hub_id, command)
            if created.is_err():
                return Return.err(created.error)

            views = await product_views(self.uow, [created.value])
            await self.uow.commit()

            logger.info("Product %s created in hub %s", created.value.id, ctx.hub_id)
            return Return.ok(views[0])
