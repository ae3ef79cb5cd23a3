from typing import List, Optional, Sequence, Tuple

from sqlalchemy import delete, or_, update
from sqlmodel import select

from orderhub.adapter.repositories.base import SqlModelRepository, like_pattern
from orderhub.app.repositories.product_repository import IProductRepository
from orderhub.app.repositories.queries import ProductListQuery
from orderhub.domain.entities import OrderProduct, Product, ProductPriceLevel, ProductTag


class ProductRepository(SqlModelRepository, IProductRepository):
    """Product repository implementation using SQLModel"""

    async def get_by_id(self, hub_id: int, product_id: int) -> Optional[Product]:
        stmt = select(Product).where(Product.id == product_id, Product.hub_id == hub_id)
        result = await self._exec(stmt)
        return result.one_or_none()

    async def get_by_sku(self, hub_id: int, sku: str) -> Optional[Product]:
        stmt = select(Product).where(Product.hub_id == hub_id, Product.sku == sku)
        result = await self._exec(stmt)
        return result.one_or_none()

    async def list(self, query: ProductListQuery) -> Tuple[int, List[Product]]:
        conditions = [Product.hub_id == query.hub_id]
        if not query.include_archived:
            conditions.append(Product.is_archived == False)  # noqa: E712
        if query.category_id is not None:
            conditions.append(Product.category_id == query.category_id)
        if query.tag_id is not None:
            tagged = select(ProductTag.product_id).where(ProductTag.tag_id == query.tag_id)
            conditions.append(Product.id.in_(tagged))
        if query.sku is not None:
            conditions.append(Product.sku == query.sku)
        if query.search:
            pattern = like_pattern(query.search)
            conditions.append(
                or_(
                    Product.name.ilike(pattern, escape="\\"),
                    Product.sku.ilike(pattern, escape="\\"),
                    Product.description.ilike(pattern, escape="\\"),
                )
            )
        return await self._page(Product, conditions, query)

    async def create(self, product: Product) -> Product:
        return await self._save(product)

    async def update(self, product: Product) -> Product:
        return await self._save(product)

    async def delete(self, product: Product) -> None:
        await self._execute(
            delete(ProductPriceLevel).where(ProductPriceLevel.product_id == product.id)
        )
        await self._execute(delete(ProductTag).where(ProductTag.product_id == product.id))
        # Order lines keep their snapshot, only the weak reference goes
        await self._execute(
            update(OrderProduct)
            .where(OrderProduct.product_id == product.id)
            .values(product_id=None)
        )
        await self._delete(product)

    async def get_price(
        self, product_id: int, price_level_id: int
    ) -> Optional[ProductPriceLevel]:
        stmt = select(ProductPriceLevel).where(
            ProductPriceLevel.product_id == product_id,
            ProductPriceLevel.price_level_id == price_level_id,
        )
        result = await self._exec(stmt)
        return result.one_or_none()

    async def list_prices(self, product_ids: Sequence[int]) -> List[ProductPriceLevel]:
        if not product_ids:
            return []
        stmt = (
            select(ProductPriceLevel)
            .where(ProductPriceLevel.product_id.in_(list(product_ids)))
            .order_by(ProductPriceLevel.id)
        )
        result = await self._exec(stmt)
        return list(result.all())

    async def replace_prices(
        self, product_id: int, prices: Sequence[ProductPriceLevel]
    ) -> List[ProductPriceLevel]:
        await self._execute(
            delete(ProductPriceLevel).where(ProductPriceLevel.product_id == product_id)
        )
        rows = [
            ProductPriceLevel(
                product_id=product_id,
                price_level_id=price.price_level_id,
                price_cents=price.price_cents,
            )
            for price in prices
        ]
        if not rows:
            return []
        return await self._save_all(rows)

    async def list_tags(self, product_ids: Sequence[int]) -> List[ProductTag]:
        if not product_ids:
            return []
        stmt = (
            select(ProductTag)
            .where(ProductTag.product_id.in_(list(product_ids)))
            .order_by(ProductTag.id)
        )
        result = await self._exec(stmt)
        return list(result.all())

    async def replace_tags(self, product_id: int, tag_ids: Sequence[int]) -> None:
        await self._execute(delete(ProductTag).where(ProductTag.product_id == product_id))
        rows = [ProductTag(product_id=product_id, tag_id=tag_id) for tag_id in dict.fromkeys(tag_ids)]
        if rows:
            await self._save_all(rows)
