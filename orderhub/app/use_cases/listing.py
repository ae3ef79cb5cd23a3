"""Helpers shared by list use cases."""

from typing import Type, TypeVar

from pydantic import ValidationError

from orderhub.app.errors import validation_error
from orderhub.app.repositories.queries import ListQuery
from orderhub.libs.result import Result, Return

Q = TypeVar("Q", bound=ListQuery)


def build_query(query_cls: Type[Q], **fields) -> Result[Q]:
    """Build a list query, turning bad paging or filter values into VALIDATION_ERROR"""
    try:
        return Return.ok(query_cls(**fields))
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        return Return.err(validation_error(f"Invalid {location}: {first.get('msg')}"))
