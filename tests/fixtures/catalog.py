"""Seed rows straight into the in-memory store for use case tests."""

from typing import Optional

from orderhub.adapter.memory.store import InMemoryStore
from orderhub.domain.entities import (
    Category,
    Customer,
    DiscountAssignment,
    DiscountStatus,
    Order,
    OrderProduct,
    OrderStatus,
    PriceLevel,
    Product,
    ProductPriceLevel,
    Tag,
)


class CatalogSeeder:
    def __init__(self, store: InMemoryStore, hub_id: int):
        self.store = store
        self.hub_id = hub_id

    def product(
        self,
        name: str = "Widget",
        sku: Optional[str] = "WID-1",
        currency: str = "USD",
        description: Optional[str] = None,
        is_archived: bool = False,
        category_id: Optional[int] = None,
    ) -> Product:
        return self.store.save(
            "products",
            Product(
                hub_id=self.hub_id,
                name=name,
                sku=sku,
                currency=currency,
                description=description,
                is_archived=is_archived,
                category_id=category_id,
            ),
        )

    def price_level(self, name: str = "Wholesale") -> PriceLevel:
        return self.store.save("price_levels", PriceLevel(hub_id=self.hub_id, name=name))

    def price(self, product: Product, level: PriceLevel, price_cents: int) -> ProductPriceLevel:
        return self.store.save(
            "product_price_levels",
            ProductPriceLevel(
                product_id=product.id, price_level_id=level.id, price_cents=price_cents
            ),
        )

    def customer(
        self,
        name: str = "Acme Stores",
        email: str = "buyer@acme.example.com",
        price_level: Optional[PriceLevel] = None,
    ) -> Customer:
        return self.store.save(
            "customers",
            Customer(
                hub_id=self.hub_id,
                name=name,
                email=email,
                price_level_id=price_level.id if price_level else None,
            ),
        )

    def assignment(
        self,
        customer: Customer,
        level: PriceLevel,
        status: DiscountStatus = DiscountStatus.approved,
    ) -> DiscountAssignment:
        return self.store.save(
            "discount_assignments",
            DiscountAssignment(
                hub_id=self.hub_id,
                customer_id=customer.id,
                price_level_id=level.id,
                status=status,
            ),
        )

    def approved_customer(self, level: PriceLevel, email: str = "buyer@acme.example.com") -> Customer:
        customer = self.customer(email=email, price_level=level)
        self.assignment(customer, level, DiscountStatus.approved)
        return customer

    def order(
        self,
        customer: Optional[Customer] = None,
        status: OrderStatus = OrderStatus.draft,
        currency: str = "USD",
        reference: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Order:
        return self.store.save(
            "orders",
            Order(
                hub_id=self.hub_id,
                customer_id=customer.id if customer else None,
                status=status,
                currency=currency,
                reference=reference,
                notes=notes,
                total_cents=0,
            ),
        )

    def line(self, order: Order, name: str, price_cents: int, quantity: int) -> OrderProduct:
        line = self.store.save(
            "order_products",
            OrderProduct(
                order_id=order.id,
                name=name,
                price_cents=price_cents,
                currency=order.currency,
                quantity=quantity,
            ),
        )
        order.total_cents += price_cents * quantity
        return line

    def category(self, name: str, parent: Optional[Category] = None, is_archived: bool = False):
        return self.store.save(
            "categories",
            Category(
                hub_id=self.hub_id,
                name=name,
                parent_id=parent.id if parent else None,
                is_archived=is_archived,
            ),
        )

    def tag(self, name: str) -> Tag:
        return self.store.save("tags", Tag(hub_id=self.hub_id, name=name))
