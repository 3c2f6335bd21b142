# app/CatalogPakage/service/product_store.py
import logging
from typing import Optional

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from ..errors import StoreError
from ..model.product import Product

logger = logging.getLogger(__name__)


class ProductStore:
    """CRUD over the ``products`` table.

    ``get`` returns ``None`` for a missing row; ``update`` and ``delete``
    return ``False``. Any database failure is rolled back, logged and
    raised as :class:`StoreError`.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _fail(self, action: str, e: SQLAlchemyError):
        logger.error("Database error on %s: %s", action, e)
        await self.session.rollback()
        raise StoreError(f"{action} failed") from e

    async def create(self, name, description, price, image=None) -> int:
        product = Product(name=name, description=description, price=price, image=image)
        try:
            self.session.add(product)
            await self.session.commit()
            await self.session.refresh(product)
        except SQLAlchemyError as e:
            await self._fail("create product", e)
        return product.id

    async def get(self, product_id: int) -> Optional[Product]:
        try:
            result = await self.session.execute(
                select(Product)
                .where(Product.id == product_id)
                .execution_options(populate_existing=True)
            )
        except SQLAlchemyError as e:
            await self._fail(f"get product {product_id}", e)
        return result.scalar_one_or_none()

    async def list(self) -> list[Product]:
        try:
            result = await self.session.execute(select(Product).order_by(Product.id))
        except SQLAlchemyError as e:
            await self._fail("list products", e)
        return list(result.scalars().all())

    async def update(self, product_id: int, name, description, price, image) -> bool:
        try:
            result = await self.session.execute(
                update(Product)
                .where(Product.id == product_id)
                .values(name=name, description=description, price=price, image=image)
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self._fail(f"update product {product_id}", e)

        if not result.rowcount:
            logger.warning("Update skipped: product %s not found", product_id)
            return False
        return True

    async def delete(self, product_id: int) -> bool:
        try:
            result = await self.session.execute(
                delete(Product).where(Product.id == product_id)
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self._fail(f"delete product {product_id}", e)

        if not result.rowcount:
            logger.warning("Delete skipped: product %s not found", product_id)
            return False
        return True
