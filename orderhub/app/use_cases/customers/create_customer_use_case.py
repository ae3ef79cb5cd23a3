"""
Create Customer Use Case
"""

import logging

from orderhub.app.context import CATALOG_ROLES, CallerContext, require_role
from orderhub.app.errors import conflict, handles_storage_errors, validation_error
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.domain.entities import Customer
from orderhub.domain.validation import (
    normalize_email,
    sanitize_inline_text,
    sanitize_optional_text,
)
from orderhub.libs.result import Result, Return

from .dtos import CreateCustomerCommand, CustomerResponse

logger = logging.getLogger(__name__)


class CreateCustomerUseCase:
    """
    Business Rules:
    - Caller must be admin
    - Email is lowercased and unique within the hub
    - New customers have no price level; one is granted through a discount
      assignment
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, command: CreateCustomerCommand
    ) -> Result[CustomerResponse]:
        denied = require_role(ctx, CATALOG_ROLES)
        if denied:
            return Return.err(denied)

        name = sanitize_inline_text(command.name)
        if not name:
            return Return.err(validation_error("Customer name is required"))
        try:
            email = normalize_email(command.email)
        except ValueError as exc:
            return Return.err(validation_error(str(exc)))

        async with self.uow:
            if await self.uow.customers.get_by_email(ctx.hub_id, email) is not None:
                return Return.err(conflict(f"Customer with email {email} already exists"))

            customer = await self.uow.customers.create(
                Customer(
                    hub_id=ctx.hub_id,
                    name=name,
                    email=email,
                    phone=sanitize_optional_text(command.phone),
                )
            )
            await self.uow.commit()

            logger.info("Customer %s created in hub %s", customer.id, ctx.hub_id)
            return Return.ok(CustomerResponse.model_validate(customer))
