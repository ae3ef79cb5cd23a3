"""
Caller context handed to every use case.

Identity and roles come from the external auth service; this package never
authenticates anyone, it only checks the role set it is given.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from orderhub.app.errors import forbidden
from orderhub.libs.result import Error

ADMIN_ROLE = "admin"
ORDERS_MANAGER_ROLE = "orders_manager"

CATALOG_ROLES = (ADMIN_ROLE,)
ORDER_ROLES = (ADMIN_ROLE, ORDERS_MANAGER_ROLE)
APPROVAL_ROLES = (ORDERS_MANAGER_ROLE,)


@dataclass(frozen=True)
class CallerContext:
    hub_id: int
    roles: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def create(cls, hub_id: int, roles: Iterable[str]) -> "CallerContext":
        return cls(
            hub_id=hub_id,
            roles=frozenset(role.strip().lower() for role in roles if role and role.strip()),
        )

    def has_any_role(self, roles: Iterable[str]) -> bool:
        return any(role in self.roles for role in roles)


def require_role(ctx: CallerContext, roles: Iterable[str]) -> Optional[Error]:
    """Return a FORBIDDEN error unless the caller holds one of `roles`"""
    if ctx.has_any_role(roles):
        return None
    return forbidden()
