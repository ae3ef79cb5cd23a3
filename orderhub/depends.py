from typing import Optional

from fastapi import Depends, HTTPException, Query, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from orderhub.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from orderhub.api.utils.jwt import verify_jwt
from orderhub.app.context import CallerContext
from orderhub.app.services.price_resolver import PricingPolicy

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_caller_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> CallerContext:
    """
    Dependency to extract the caller's hub and roles from the bearer token.

    Raises:
        HTTPException: 401 if the token is invalid, expired, or lacks a hub_id
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token",
        )

    payload = verify_jwt(credentials.credentials)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    try:
        hub_id = int(payload["hub_id"])
    except (KeyError, TypeError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has no hub",
        )

    roles = payload.get("roles") or []
    if isinstance(roles, str):
        roles = [roles]
    return CallerContext.create(hub_id, roles)


def get_pricing_policy(request: Request) -> PricingPolicy:
    return request.app.state.pricing_policy


class PageParams:
    def __init__(self, offset: int, limit: int):
        self.offset = offset
        self.limit = limit


def get_page_params(
    request: Request,
    offset: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
) -> PageParams:
    """offset/limit query parameters, limit defaulted and capped from configuration"""
    config = request.app.state.config
    if limit is None:
        limit = config.DEFAULT_PAGE_SIZE
    return PageParams(offset=offset, limit=min(limit, config.MAX_PAGE_SIZE))
