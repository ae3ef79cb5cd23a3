"""
Update Customer Use Case

Partial update of a customer. price_level_id can only point at a level the
customer holds an approved discount assignment for, or be cleared.
"""

from orderhub.app.context import CATALOG_ROLES, CallerContext, require_role
from orderhub.app.errors import conflict, handles_storage_errors, not_found, validation_error
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.domain.base import utcnow
from orderhub.domain.entities import DiscountStatus
from orderhub.domain.validation import (
    normalize_email,
    sanitize_inline_text,
    sanitize_optional_text,
)
from orderhub.libs.result import Result, Return

from .dtos import CustomerResponse, UpdateCustomerCommand


class UpdateCustomerUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, customer_id: int, command: UpdateCustomerCommand
    ) -> Result[CustomerResponse]:
        denied = require_role(ctx, CATALOG_ROLES)
        if denied:
            return Return.err(denied)

        fields = command.model_fields_set
        async with self.uow:
            customer = await self.uow.customers.get_by_id(ctx.hub_id, customer_id)
            if customer is None:
                return Return.err(not_found("Customer"))

            if "name" in fields:
                name = sanitize_inline_text(command.name or "")
                if not name:
                    return Return.err(validation_error("Customer name is required"))
                customer.name = name

            if "email" in fields:
                try:
                    email = normalize_email(command.email or "")
                except ValueError as exc:
                    return Return.err(validation_error(str(exc)))
                if email != customer.email:
                    existing = await self.uow.customers.get_by_email(ctx.hub_id, email)
                    if existing is not None:
                        return Return.err(
                            conflict(f"Customer with email {email} already exists")
                        )
                customer.email = email

            if "phone" in fields:
                customer.phone = sanitize_optional_text(command.phone)

            if "price_level_id" in fields and command.price_level_id is not None:
                assignment = await self.uow.discounts.get_by_customer_and_level(
                    customer.id, command.price_level_id
                )
                if assignment is None or assignment.status != DiscountStatus.approved:
                    return Return.err(
                        validation_error(
                            "Customer has no approved discount assignment for that price level"
                        )
                    )
            if "price_level_id" in fields:
                customer.price_level_id = command.price_level_id

            customer.updated_at = utcnow()
            customer = await self.uow.customers.update(customer)
            await self.uow.commit()

            return Return.ok(CustomerResponse.model_validate(customer))
