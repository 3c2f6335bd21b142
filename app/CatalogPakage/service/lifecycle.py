# app/CatalogPakage/service/lifecycle.py
import enum
import logging
from dataclasses import dataclass
from typing import Optional

from ..errors import StoreError
from ..model.product import Product
from ..utils.image_resolver import resolve_image
from ..utils.image_storage import ImageStorage
from ..utils.keyed_lock import KeyedLock
from .product_store import ProductStore

logger = logging.getLogger(__name__)

# Общие для процесса блокировки по id товара
product_locks = KeyedLock()


class WriteStatus(enum.Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass
class WriteResult:
    status: WriteStatus
    product: Optional[Product] = None

    @property
    def ok(self) -> bool:
        return self.status is WriteStatus.OK


class ProductLifecycle:
    """Keeps product rows and their image files consistent.

    Image filenames passed in are already stored by :class:`ImageStorage`.
    A filename that never ends up in a row is removed again, and an image
    dropped from a row (replaced or deleted) is removed from disk. File
    removal is best effort and never fails the operation.
    """

    def __init__(self, store: ProductStore, images: ImageStorage, locks: KeyedLock = product_locks):
        self.store = store
        self.images = images
        self.locks = locks

    async def create(self, name, description, price, image: Optional[str] = None) -> WriteResult:
        try:
            product_id = await self.store.create(name, description, price, image)
        except StoreError:
            self.images.remove(image)
            return WriteResult(WriteStatus.FAILED)

        logger.info("Created product %s", product_id)
        return await self._reload(product_id, name=name, description=description,
                                  price=price, image=image)

    async def update(self, product_id: int, name, description, price,
                     uploaded_image: Optional[str] = None) -> WriteResult:
        async with self.locks.hold(product_id):
            try:
                current = await self.store.get(product_id)
                if current is None:
                    self.images.remove(uploaded_image)
                    return WriteResult(WriteStatus.NOT_FOUND)

                previous_image = current.image
                image = resolve_image(uploaded_image, previous_image)
                updated = await self.store.update(product_id, name, description, price, image)
            except StoreError:
                self.images.remove(uploaded_image)
                return WriteResult(WriteStatus.FAILED)

            if not updated:
                self.images.remove(uploaded_image)
                return WriteResult(WriteStatus.NOT_FOUND)

        # Заменённый файл больше никому не принадлежит
        if previous_image and previous_image != image:
            self.images.remove(previous_image)

        logger.info("Updated product %s (image %s)", product_id, image)
        return await self._reload(product_id, name=name, description=description,
                                  price=price, image=image)

    async def delete(self, product_id: int) -> WriteResult:
        async with self.locks.hold(product_id):
            try:
                product = await self.store.get(product_id)
                if product is None:
                    return WriteResult(WriteStatus.NOT_FOUND)

                if product.image:
                    self.images.remove(product.image)

                if not await self.store.delete(product_id):
                    return WriteResult(WriteStatus.NOT_FOUND)
            except StoreError:
                return WriteResult(WriteStatus.FAILED)

        logger.info("Deleted product %s", product_id)
        return WriteResult(WriteStatus.OK, product)

    async def _reload(self, product_id: int, **written) -> WriteResult:
        # Запись уже закоммичена: неудачное перечитывание не делает её FAILED
        try:
            product = await self.store.get(product_id)
        except StoreError:
            logger.warning("Product %s saved but could not be re-read", product_id)
            product = Product(id=product_id, **written)
        return WriteResult(WriteStatus.OK, product)
