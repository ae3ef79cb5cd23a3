"""
In-memory table store backing the fake repositories.

Rows are SQLModel entities keyed by id. Unique keys mirror the SQL indexes,
including the SQL rule that a NULL never collides with anything.
"""

from typing import Dict, Iterator, Optional, Tuple, Type

from sqlmodel import SQLModel

from orderhub.app.repositories.errors import RepositoryConflictError
from orderhub.domain.entities import (
    Category,
    Customer,
    DiscountAssignment,
    Order,
    OrderProduct,
    PriceLevel,
    Product,
    ProductPriceLevel,
    ProductTag,
    Tag,
)

MODELS: Dict[str, Type[SQLModel]] = {
    "products": Product,
    "price_levels": PriceLevel,
    "product_price_levels": ProductPriceLevel,
    "categories": Category,
    "tags": Tag,
    "product_tags": ProductTag,
    "customers": Customer,
    "discount_assignments": DiscountAssignment,
    "orders": Order,
    "order_products": OrderProduct,
}

UNIQUE_KEYS: Dict[str, Tuple[Tuple[str, ...], ...]] = {
    "products": (("hub_id", "sku"),),
    "price_levels": (("hub_id", "name"),),
    "product_price_levels": (("product_id", "price_level_id"),),
    "categories": (("hub_id", "parent_id", "name"),),
    "tags": (("hub_id", "name"),),
    "product_tags": (("product_id", "tag_id"),),
    "customers": (("hub_id", "email"),),
    "discount_assignments": (("customer_id", "price_level_id"),),
    "orders": (("hub_id", "reference"),),
    "order_products": (),
}


class InMemoryStore:
    def __init__(self):
        self.tables: Dict[str, Dict[int, SQLModel]] = {name: {} for name in MODELS}
        self.sequences: Dict[str, int] = {name: 0 for name in MODELS}

    def rows(self, table: str) -> Iterator[SQLModel]:
        """Rows of a table in id order"""
        data = self.tables[table]
        for row_id in sorted(data):
            yield data[row_id]

    def get(self, table: str, row_id: Optional[int]) -> Optional[SQLModel]:
        if row_id is None:
            return None
        return self.tables[table].get(row_id)

    def save(self, table: str, entity: SQLModel) -> SQLModel:
        self._check_unique(table, entity)
        if entity.id is None:
            self.sequences[table] += 1
            entity.id = self.sequences[table]
        else:
            self.sequences[table] = max(self.sequences[table], entity.id)
        self.tables[table][entity.id] = entity
        return entity

    def delete(self, table: str, row_id: int) -> None:
        self.tables[table].pop(row_id, None)

    def snapshot(self) -> dict:
        return {
            "tables": {
                name: {row_id: row.model_dump() for row_id, row in data.items()}
                for name, data in self.tables.items()
            },
            "sequences": dict(self.sequences),
        }

    def restore(self, snapshot: dict) -> None:
        self.tables = {
            name: {row_id: MODELS[name](**values) for row_id, values in data.items()}
            for name, data in snapshot["tables"].items()
        }
        self.sequences = dict(snapshot["sequences"])

    def _check_unique(self, table: str, entity: SQLModel) -> None:
        for columns in UNIQUE_KEYS[table]:
            key = tuple(getattr(entity, column) for column in columns)
            if any(value is None for value in key):
                continue
            for row in self.tables[table].values():
                if row.id == entity.id:
                    continue
                if tuple(getattr(row, column) for column in columns) == key:
                    raise RepositoryConflictError(
                        f"{type(entity).__name__} violates unique key {columns}"
                    )
