from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

import app.logging_config
from .CatalogPakage.router.products import router as products_router
from .CatalogPakage.model.database import create_tables
from .CatalogPakage.schema.product import IMAGE_URL_PREFIX
from .CatalogPakage.utils.image_storage import UPLOAD_DIR

Path(UPLOAD_DIR).mkdir(parents=True, exist_ok=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Создаём таблицы при старте приложения
    await create_tables()
    yield


app = FastAPI(title="Product Catalog API", version="1.0.0", lifespan=lifespan)

# Наружу отдаётся только каталог загрузок, адрес совпадает с image_url
app.mount(IMAGE_URL_PREFIX, StaticFiles(directory=UPLOAD_DIR), name="images")

app.include_router(products_router, prefix="/api")


@app.get("/")
async def read_root():
    return {"message": "Welcome to Product Catalog API"}


@app.get("/health")
async def health_check():
    return {"status": "ok"}
