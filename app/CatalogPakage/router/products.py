# app/CatalogPakage/router/products.py
from fastapi import APIRouter, Depends, UploadFile, File, HTTPException, Form
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import StoreError
from ..model.database import get_db
from ..schema.product import ProductResponse
from ..service.lifecycle import ProductLifecycle, WriteResult, WriteStatus
from ..service.product_store import ProductStore
from ..utils.image_storage import ImageStorage, get_image_storage

router = APIRouter(prefix="/products", tags=["Products"])


def get_store(db: AsyncSession = Depends(get_db)) -> ProductStore:
    return ProductStore(db)


def get_lifecycle(
        store: ProductStore = Depends(get_store),
        images: ImageStorage = Depends(get_image_storage)
) -> ProductLifecycle:
    return ProductLifecycle(store, images)


def unwrap(result: WriteResult):
    if result.status is WriteStatus.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Product not found")
    if result.status is WriteStatus.FAILED:
        raise HTTPException(status_code=500, detail="Database error")
    return result.product


@router.get("/", response_model=list[ProductResponse], description="Список всех товаров.")
async def get_products(store: ProductStore = Depends(get_store)):
    try:
        return await store.list()
    except StoreError:
        raise HTTPException(status_code=500, detail="Database error")


@router.get("/{product_id}", response_model=ProductResponse, description="Товар по его {ID}.")
async def get_product(product_id: int, store: ProductStore = Depends(get_store)):
    try:
        product = await store.get(product_id)
    except StoreError:
        raise HTTPException(status_code=500, detail="Database error")
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post("/", response_model=ProductResponse, status_code=201, description="Добавление товара.")
async def create_product(
        name: str = Form(...),
        description: str = Form(None),
        price: float = Form(None),
        image: UploadFile = File(None),
        images: ImageStorage = Depends(get_image_storage),
        lifecycle: ProductLifecycle = Depends(get_lifecycle)
):
    image_name = await images.save(image)
    return unwrap(await lifecycle.create(name, description, price, image_name))


@router.put("/{product_id}", response_model=ProductResponse,
            description="Изменение товара. Без нового файла изображение остаётся прежним.")
async def edit_product(
        product_id: int,
        name: str = Form(...),
        description: str = Form(None),
        price: float = Form(None),
        image: UploadFile = File(None),
        images: ImageStorage = Depends(get_image_storage),
        lifecycle: ProductLifecycle = Depends(get_lifecycle)
):
    image_name = await images.save(image)
    return unwrap(await lifecycle.update(product_id, name, description, price, image_name))


@router.delete("/{product_id}", response_model=ProductResponse,
               description="Удаление товара вместе с файлом изображения.")
async def delete_product(product_id: int, lifecycle: ProductLifecycle = Depends(get_lifecycle)):
    return unwrap(await lifecycle.delete(product_id))
