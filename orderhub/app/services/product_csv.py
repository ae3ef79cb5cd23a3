"""
Product CSV upload parsing.

The first row is a header. Column names are matched case-insensitively:

    name (or title)   required
    currency          required
    sku, description  optional
    <price level>     one column per price level name, decimal price ("12.50")

Unrecognised columns are ignored. Empty price cells mean "no price at this
level". Any bad row rejects the whole upload.
"""

import csv
import io
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, List, Optional

from orderhub.domain.validation import (
    normalize_currency,
    sanitize_inline_text,
    sanitize_multiline_text,
    sanitize_sku,
)

NAME_COLUMNS = ("name", "title")
CURRENCY_COLUMN = "currency"
SKU_COLUMN = "sku"
DESCRIPTION_COLUMN = "description"
RESERVED_COLUMNS = NAME_COLUMNS + (CURRENCY_COLUMN, SKU_COLUMN, DESCRIPTION_COLUMN)

CENTS = Decimal("100")


class ProductCsvError(ValueError):
    def __init__(self, message: str, row: Optional[int] = None):
        self.row = row
        super().__init__(f"Row {row}: {message}" if row is not None else message)


@dataclass
class ProductCsvRow:
    row: int
    name: str
    currency: str
    sku: Optional[str] = None
    description: Optional[str] = None
    # price level name (as spelled in the catalog) -> cents
    prices: Dict[str, int] = field(default_factory=dict)


def parse_price_cents(raw: str) -> int:
    """'12.5' -> 1250; at most two decimals, never negative"""
    try:
        amount = Decimal(raw)
    except InvalidOperation:
        raise ValueError(f"Invalid price {raw!r}")
    if not amount.is_finite() or amount < 0:
        raise ValueError(f"Invalid price {raw!r}")
    cents = amount * CENTS
    if cents != cents.to_integral_value():
        raise ValueError(f"Price {raw!r} has more than two decimals")
    return int(cents)


def parse_product_csv(text: str, price_level_names: Iterable[str]) -> List[ProductCsvRow]:
    reader = csv.reader(io.StringIO(text.lstrip("\ufeff")))
    try:
        header = next(reader)
    except StopIteration:
        raise ProductCsvError("The upload is empty")

    columns = [column.strip().lower() for column in header]
    levels = {name.strip().lower(): name for name in price_level_names}

    def index_of(name: str) -> Optional[int]:
        return columns.index(name) if name in columns else None

    name_indexes = [i for i in (index_of(c) for c in NAME_COLUMNS) if i is not None]
    currency_index = index_of(CURRENCY_COLUMN)
    if not name_indexes or currency_index is None:
        raise ProductCsvError("Header must contain name (or title) and currency columns")
    sku_index = index_of(SKU_COLUMN)
    description_index = index_of(DESCRIPTION_COLUMN)
    price_indexes = {
        i: levels[column]
        for i, column in enumerate(columns)
        if column not in RESERVED_COLUMNS and column in levels
    }

    rows = []
    for row_number, record in enumerate(reader, start=2):
        if not any(cell.strip() for cell in record):
            continue

        def cell(index: Optional[int]) -> str:
            if index is None or index >= len(record):
                return ""
            return record[index].strip()

        name = ""
        for index in name_indexes:
            name = sanitize_inline_text(cell(index))
            if name:
                break
        if not name:
            raise ProductCsvError("name is required", row_number)

        raw_currency = cell(currency_index)
        if not raw_currency:
            raise ProductCsvError("currency is required", row_number)
        try:
            currency = normalize_currency(raw_currency)
        except ValueError as exc:
            raise ProductCsvError(str(exc), row_number)

        prices = {}
        for index, level_name in price_indexes.items():
            raw_price = cell(index)
            if not raw_price:
                continue
            try:
                prices[level_name] = parse_price_cents(raw_price)
            except ValueError as exc:
                raise ProductCsvError(f"{level_name}: {exc}", row_number)

        rows.append(
            ProductCsvRow(
                row=row_number,
                name=name,
                currency=currency,
                sku=sanitize_sku(cell(sku_index)),
                description=sanitize_multiline_text(cell(description_index)) or None,
                prices=prices,
            )
        )

    if not rows:
        raise ProductCsvError("The upload has no product rows")
    return rows
