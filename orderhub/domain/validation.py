"""Input sanitation shared by catalog, customer and order commands."""

from typing import Optional

from pydantic import validate_email
from pydantic_core import PydanticCustomError

CURRENCY_CODE_LEN = 3


def sanitize_inline_text(value: str) -> str:
    """Trim, drop control characters and collapse runs of whitespace"""
    parts = []
    previous_whitespace = False
    for ch in value.strip():
        if ch.isspace():
            if not previous_whitespace:
                parts.append(" ")
                previous_whitespace = True
        elif not ch.isprintable():
            continue
        else:
            parts.append(ch)
            previous_whitespace = False
    return "".join(parts)


def sanitize_multiline_text(value: str) -> str:
    """Sanitize each line, strip blank edges and keep at most one blank line in a row"""
    lines = [sanitize_inline_text(line) for line in value.splitlines()]
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()

    result = []
    for line in lines:
        if not line and result and not result[-1]:
            continue
        result.append(line)
    return "\n".join(result)


def sanitize_optional_text(value: Optional[str], multiline: bool = False) -> Optional[str]:
    if value is None:
        return None
    cleaned = sanitize_multiline_text(value) if multiline else sanitize_inline_text(value)
    return cleaned or None


def sanitize_sku(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    cleaned = "".join(ch for ch in value.strip() if ch.isprintable())
    return cleaned or None


def normalize_currency(value: str) -> str:
    """Return an uppercase three-letter code or raise ValueError"""
    code = (value or "").strip()
    if len(code) != CURRENCY_CODE_LEN or not (code.isascii() and code.isalpha()):
        raise ValueError(f"Invalid currency code: {code!r}")
    return code.upper()


def normalize_email(value: str) -> str:
    try:
        _, email = validate_email((value or "").strip())
    except PydanticCustomError as exc:
        raise ValueError(f"Invalid email address: {value!r}") from exc
    return email.lower()
