"""
In-memory repository implementations.

Same contracts as the SQL repositories: hub-scoped lookups, id-ordered
pages, case-insensitive search, and the same cleanup on delete.
"""

from typing import Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

from orderhub.adapter.memory.store import InMemoryStore
from orderhub.app.repositories.category_repository import ICategoryRepository
from orderhub.app.repositories.customer_repository import ICustomerRepository
from orderhub.app.repositories.discount_assignment_repository import (
    IDiscountAssignmentRepository,
)
from orderhub.app.repositories.order_repository import IOrderRepository
from orderhub.app.repositories.price_level_repository import IPriceLevelRepository
from orderhub.app.repositories.product_repository import IProductRepository
from orderhub.app.repositories.queries import (
    CustomerListQuery,
    DiscountAssignmentListQuery,
    ListQuery,
    OrderListQuery,
    PriceLevelListQuery,
    ProductListQuery,
    TagListQuery,
)
from orderhub.app.repositories.tag_repository import ITagRepository
from orderhub.domain.entities import (
    Category,
    Customer,
    DiscountAssignment,
    DiscountStatus,
    Order,
    OrderProduct,
    PriceLevel,
    Product,
    ProductPriceLevel,
    ProductTag,
    Tag,
)

T = TypeVar("T")


def _contains(term: str, *values: Optional[str]) -> bool:
    needle = term.casefold()
    return any(value is not None and needle in value.casefold() for value in values)


def _page(rows: Iterable[T], predicate: Callable[[T], bool], query: ListQuery) -> Tuple[int, List[T]]:
    matched = [row for row in rows if predicate(row)]
    end = None if query.limit is None else query.offset + query.limit
    return len(matched), matched[query.offset:end]


class InMemoryRepository:
    table: str

    def __init__(self, store: InMemoryStore):
        self.store = store

    def _find(self, hub_id: int, row_id: int):
        row = self.store.get(self.table, row_id)
        if row is None or row.hub_id != hub_id:
            return None
        return row

    def _first(self, predicate):
        return next((row for row in self.store.rows(self.table) if predicate(row)), None)


class InMemoryProductRepository(InMemoryRepository, IProductRepository):
    table = "products"

    async def get_by_id(self, hub_id: int, product_id: int) -> Optional[Product]:
        return self._find(hub_id, product_id)

    async def get_by_sku(self, hub_id: int, sku: str) -> Optional[Product]:
        return self._first(lambda p: p.hub_id == hub_id and p.sku == sku)

    async def list(self, query: ProductListQuery) -> Tuple[int, List[Product]]:
        tagged = None
        if query.tag_id is not None:
            tagged = {
                link.product_id
                for link in self.store.rows("product_tags")
                if link.tag_id == query.tag_id
            }

        def matches(product: Product) -> bool:
            if product.hub_id != query.hub_id:
                return False
            if not query.include_archived and product.is_archived:
                return False
            if query.category_id is not None and product.category_id != query.category_id:
                return False
            if tagged is not None and product.id not in tagged:
                return False
            if query.sku is not None and product.sku != query.sku:
                return False
            if query.search and not _contains(
                query.search, product.name, product.sku, product.description
            ):
                return False
            return True

        return _page(self.store.rows(self.table), matches, query)

    async def create(self, product: Product) -> Product:
        return self.store.save(self.table, product)

    async def update(self, product: Product) -> Product:
        return self.store.save(self.table, product)

    async def delete(self, product: Product) -> None:
        for rate in list(self.store.rows("product_price_levels")):
            if rate.product_id == product.id:
                self.store.delete("product_price_levels", rate.id)
        for link in list(self.store.rows("product_tags")):
            if link.product_id == product.id:
                self.store.delete("product_tags", link.id)
        for line in self.store.rows("order_products"):
            if line.product_id == product.id:
                line.product_id = None
        self.store.delete(self.table, product.id)

    async def get_price(
        self, product_id: int, price_level_id: int
    ) -> Optional[ProductPriceLevel]:
        return next(
            (
                rate
                for rate in self.store.rows("product_price_levels")
                if rate.product_id == product_id and rate.price_level_id == price_level_id
            ),
            None,
        )

    async def list_prices(self, product_ids: Sequence[int]) -> List[ProductPriceLevel]:
        wanted = set(product_ids)
        return [r for r in self.store.rows("product_price_levels") if r.product_id in wanted]

    async def replace_prices(
        self, product_id: int, prices: Sequence[ProductPriceLevel]
    ) -> List[ProductPriceLevel]:
        for rate in list(self.store.rows("product_price_levels")):
            if rate.product_id == product_id:
                self.store.delete("product_price_levels", rate.id)
        return [
            self.store.save(
                "product_price_levels",
                ProductPriceLevel(
                    product_id=product_id,
                    price_level_id=price.price_level_id,
                    price_cents=price.price_cents,
                ),
            )
            for price in prices
        ]

    async def list_tags(self, product_ids: Sequence[int]) -> List[ProductTag]:
        wanted = set(product_ids)
        return [link for link in self.store.rows("product_tags") if link.product_id in wanted]

    async def replace_tags(self, product_id: int, tag_ids: Sequence[int]) -> None:
        for link in list(self.store.rows("product_tags")):
            if link.product_id == product_id:
                self.store.delete("product_tags", link.id)
        for tag_id in dict.fromkeys(tag_ids):
            self.store.save("product_tags", ProductTag(product_id=product_id, tag_id=tag_id))


class InMemoryPriceLevelRepository(InMemoryRepository, IPriceLevelRepository):
    table = "price_levels"

    async def get_by_id(self, hub_id: int, price_level_id: int) -> Optional[PriceLevel]:
        return self._find(hub_id, price_level_id)

    async def get_by_name(self, hub_id: int, name: str) -> Optional[PriceLevel]:
        wanted = name.lower()
        return self._first(lambda lvl: lvl.hub_id == hub_id and lvl.name.lower() == wanted)

    async def list(self, query: PriceLevelListQuery) -> Tuple[int, List[PriceLevel]]:
        return _page(
            self.store.rows(self.table),
            lambda lvl: lvl.hub_id == query.hub_id
            and (not query.search or _contains(query.search, lvl.name)),
            query,
        )

    async def create(self, price_level: PriceLevel) -> PriceLevel:
        return self.store.save(self.table, price_level)

    async def update(self, price_level: PriceLevel) -> PriceLevel:
        return self.store.save(self.table, price_level)

    async def delete(self, price_level: PriceLevel) -> None:
        for rate in list(self.store.rows("product_price_levels")):
            if rate.price_level_id == price_level.id:
                self.store.delete("product_price_levels", rate.id)
        for assignment in list(self.store.rows("discount_assignments")):
            if assignment.price_level_id == price_level.id:
                self.store.delete("discount_assignments", assignment.id)
        for customer in self.store.rows("customers"):
            if customer.price_level_id == price_level.id:
                customer.price_level_id = None
        self.store.delete(self.table, price_level.id)


class InMemoryCategoryRepository(InMemoryRepository, ICategoryRepository):
    table = "categories"

    async def get_by_id(self, hub_id: int, category_id: int) -> Optional[Category]:
        return self._find(hub_id, category_id)

    async def get_by_name(
        self, hub_id: int, parent_id: Optional[int], name: str
    ) -> Optional[Category]:
        wanted = name.lower()
        return self._first(
            lambda c: c.hub_id == hub_id and c.parent_id == parent_id and c.name.lower() == wanted
        )

    async def list_all(self, hub_id: int, include_archived: bool = True) -> List[Category]:
        return [
            c
            for c in self.store.rows(self.table)
            if c.hub_id == hub_id and (include_archived or not c.is_archived)
        ]

    async def create(self, category: Category) -> Category:
        return self.store.save(self.table, category)

    async def update(self, category: Category) -> Category:
        return self.store.save(self.table, category)

    async def delete(self, category: Category) -> None:
        for child in self.store.rows(self.table):
            if child.parent_id == category.id:
                child.parent_id = None
        for product in self.store.rows("products"):
            if product.category_id == category.id:
                product.category_id = None
        self.store.delete(self.table, category.id)


class InMemoryTagRepository(InMemoryRepository, ITagRepository):
    table = "tags"

    async def get_by_id(self, hub_id: int, tag_id: int) -> Optional[Tag]:
        return self._find(hub_id, tag_id)

    async def get_by_name(self, hub_id: int, name: str) -> Optional[Tag]:
        wanted = name.lower()
        return self._first(lambda t: t.hub_id == hub_id and t.name.lower() == wanted)

    async def get_many(self, hub_id: int, tag_ids: Sequence[int]) -> List[Tag]:
        wanted = set(tag_ids)
        return [t for t in self.store.rows(self.table) if t.hub_id == hub_id and t.id in wanted]

    async def list(self, query: TagListQuery) -> Tuple[int, List[Tag]]:
        return _page(
            self.store.rows(self.table),
            lambda t: t.hub_id == query.hub_id
            and (not query.search or _contains(query.search, t.name)),
            query,
        )

    async def create(self, tag: Tag) -> Tag:
        return self.store.save(self.table, tag)

    async def update(self, tag: Tag) -> Tag:
        return self.store.save(self.table, tag)

    async def delete(self, tag: Tag) -> None:
        for link in list(self.store.rows("product_tags")):
            if link.tag_id == tag.id:
                self.store.delete("product_tags", link.id)
        self.store.delete(self.table, tag.id)


class InMemoryCustomerRepository(InMemoryRepository, ICustomerRepository):
    table = "customers"

    async def get_by_id(self, hub_id: int, customer_id: int) -> Optional[Customer]:
        return self._find(hub_id, customer_id)

    async def get_by_email(self, hub_id: int, email: str) -> Optional[Customer]:
        wanted = email.strip().lower()
        return self._first(lambda c: c.hub_id == hub_id and c.email == wanted)

    async def list(self, query: CustomerListQuery) -> Tuple[int, List[Customer]]:
        def matches(customer: Customer) -> bool:
            if customer.hub_id != query.hub_id:
                return False
            if (
                query.price_level_id is not None
                and customer.price_level_id != query.price_level_id
            ):
                return False
            if query.search and not _contains(
                query.search, customer.name, customer.email, customer.phone
            ):
                return False
            return True

        return _page(self.store.rows(self.table), matches, query)

    async def create(self, customer: Customer) -> Customer:
        return self.store.save(self.table, customer)

    async def update(self, customer: Customer) -> Customer:
        return self.store.save(self.table, customer)

    async def delete(self, customer: Customer) -> None:
        for assignment in list(self.store.rows("discount_assignments")):
            if assignment.customer_id == customer.id:
                self.store.delete("discount_assignments", assignment.id)
        for order in self.store.rows("orders"):
            if order.customer_id == customer.id:
                order.customer_id = None
        self.store.delete(self.table, customer.id)


class InMemoryDiscountAssignmentRepository(InMemoryRepository, IDiscountAssignmentRepository):
    table = "discount_assignments"

    async def get_by_id(self, hub_id: int, assignment_id: int) -> Optional[DiscountAssignment]:
        return self._find(hub_id, assignment_id)

    async def get_by_customer_and_level(
        self, customer_id: int, price_level_id: int
    ) -> Optional[DiscountAssignment]:
        return self._first(
            lambda a: a.customer_id == customer_id and a.price_level_id == price_level_id
        )

    async def list(
        self, query: DiscountAssignmentListQuery
    ) -> Tuple[int, List[DiscountAssignment]]:
        return _page(
            self.store.rows(self.table),
            lambda a: a.hub_id == query.hub_id
            and (query.status is None or a.status == query.status)
            and (query.customer_id is None or a.customer_id == query.customer_id),
            query,
        )

    async def list_approved_for_customer(self, customer_id: int) -> List[DiscountAssignment]:
        return [
            a
            for a in self.store.rows(self.table)
            if a.customer_id == customer_id and a.status == DiscountStatus.approved
        ]

    async def create(self, assignment: DiscountAssignment) -> DiscountAssignment:
        return self.store.save(self.table, assignment)

    async def update(self, assignment: DiscountAssignment) -> DiscountAssignment:
        return self.store.save(self.table, assignment)


class InMemoryOrderRepository(InMemoryRepository, IOrderRepository):
    table = "orders"

    async def get_by_id(self, hub_id: int, order_id: int) -> Optional[Order]:
        return self._find(hub_id, order_id)

    async def get_by_reference(self, hub_id: int, reference: str) -> Optional[Order]:
        return self._first(lambda o: o.hub_id == hub_id and o.reference == reference)

    async def list(self, query: OrderListQuery) -> Tuple[int, List[Order]]:
        def matches(order: Order) -> bool:
            if order.hub_id != query.hub_id:
                return False
            if query.status is not None and order.status != query.status:
                return False
            if query.customer_id is not None and order.customer_id != query.customer_id:
                return False
            if query.created_from is not None and order.created_at < query.created_from:
                return False
            if query.created_to is not None and order.created_at > query.created_to:
                return False
            if query.search and not _contains(query.search, order.reference, order.notes):
                return False
            return True

        return _page(self.store.rows(self.table), matches, query)

    async def create(self, order: Order) -> Order:
        return self.store.save(self.table, order)

    async def update(self, order: Order) -> Order:
        return self.store.save(self.table, order)

    async def delete(self, order: Order) -> None:
        for line in list(self.store.rows("order_products")):
            if line.order_id == order.id:
                self.store.delete("order_products", line.id)
        self.store.delete(self.table, order.id)

    async def list_lines(self, order_id: int) -> List[OrderProduct]:
        return [line for line in self.store.rows("order_products") if line.order_id == order_id]

    async def get_line(self, order_id: int, line_id: int) -> Optional[OrderProduct]:
        line = self.store.get("order_products", line_id)
        if line is None or line.order_id != order_id:
            return None
        return line

    async def add_line(self, line: OrderProduct) -> OrderProduct:
        return self.store.save("order_products", line)

    async def delete_line(self, line: OrderProduct) -> None:
        self.store.delete("order_products", line.id)

    async def sum_line_totals(self, order_id: int) -> int:
        return sum(line.line_total_cents for line in await self.list_lines(order_id))
