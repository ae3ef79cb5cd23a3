"""
Error codes returned by use cases, and the translation of repository
failures into them.
"""

import functools
import logging

from orderhub.app.repositories.errors import RepositoryConflictError, RepositoryError
from orderhub.libs.result import Error, Return

logger = logging.getLogger(__name__)


class ErrorCode:
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    PRICE_NOT_CONFIGURED = "PRICE_NOT_CONFIGURED"
    FORBIDDEN = "FORBIDDEN"
    STORAGE_ERROR = "STORAGE_ERROR"


def validation_error(message: str) -> Error:
    return Error(ErrorCode.VALIDATION_ERROR, message)


def not_found(entity: str) -> Error:
    return Error(ErrorCode.NOT_FOUND, f"{entity} not found")


def conflict(message: str) -> Error:
    return Error(ErrorCode.CONFLICT, message)


def forbidden(message: str = "You do not have permission to perform this action") -> Error:
    return Error(ErrorCode.FORBIDDEN, message)


def handles_storage_errors(execute):
    """
    Wrap a use case's execute() so repository exceptions become results.

    The unit of work has already rolled back by the time the exception
    reaches this wrapper (it propagates out of `async with uow`).
    """

    @functools.wraps(execute)
    async def wrapper(self, *args, **kwargs):
        try:
            return await execute(self, *args, **kwargs)
        except RepositoryConflictError as exc:
            logger.warning("%s hit a uniqueness conflict: %s", type(self).__name__, exc)
            return Return.err(conflict("A record with the same unique value already exists"))
        except RepositoryError:
            logger.exception("%s failed in storage", type(self).__name__)
            return Return.err(
                Error(ErrorCode.STORAGE_ERROR, "Storage failure, the change was not saved")
            )

    return wrapper
