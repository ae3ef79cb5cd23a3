from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from orderhub.app.errors import ErrorCode
from orderhub.app.services.price_resolver import PricingPolicy
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    error_dict = {
        "code": ErrorCode.VALIDATION_ERROR,
        "message": f"Invalid {location}: {first.get('msg', 'invalid request')}",
    }
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"error": error_dict}
    )


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, str(ApplicationConfig.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Hub Orders API", version="0.1.0")
    app.state.config = ApplicationConfig
    app.state.pricing_policy = PricingPolicy(
        fallback_price_level_name=ApplicationConfig.FALLBACK_PRICE_LEVEL,
        default_currency=ApplicationConfig.DEFAULT_CURRENCY,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from orderhub.api.routes import (
        categories,
        customers,
        discounts,
        health_check,
        orders,
        price_levels,
        pricing,
        products,
        tags,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(orders.router, prefix=prefix, tags=["Orders"])
    app.include_router(products.router, prefix=prefix, tags=["Products"])
    app.include_router(price_levels.router, prefix=prefix, tags=["Price Levels"])
    app.include_router(categories.router, prefix=prefix, tags=["Categories"])
    app.include_router(tags.router, prefix=prefix, tags=["Tags"])
    app.include_router(customers.router, prefix=prefix, tags=["Customers"])
    app.include_router(discounts.router, prefix=prefix, tags=["Discounts"])
    app.include_router(pricing.router, prefix=prefix, tags=["Pricing"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    return app
