import os
import tempfile
from pathlib import Path

# До импорта приложения: логи и загрузки тестов не должны попадать в рабочие каталоги
_TMP = Path(tempfile.mkdtemp(prefix="catalog-tests-"))
os.environ.setdefault("LOG_DIR", str(_TMP / "logs"))
os.environ.setdefault("UPLOAD_DIR", str(_TMP / "public" / "images"))
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TMP / 'shop.db'}")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.CatalogPakage.model.database import create_tables, get_db
from app.CatalogPakage.service.lifecycle import ProductLifecycle
from app.CatalogPakage.service.product_store import ProductStore
from app.CatalogPakage.utils.image_storage import ImageStorage, get_image_storage
from app.CatalogPakage.utils.keyed_lock import KeyedLock


class RecordingImageStorage(ImageStorage):
    """ImageStorage that remembers every removal request."""

    def __init__(self, directory):
        super().__init__(directory)
        self.removed = []

    def remove(self, filename):
        self.removed.append(filename)
        return super().remove(filename)

    def put(self, filename: str, content: bytes = b"image-bytes") -> str:
        self.path(filename).write_bytes(content)
        return filename

    def exists(self, filename: str) -> bool:
        return self.path(filename).exists()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'db' / 'shop.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def store(session):
    return ProductStore(session)


@pytest.fixture
def images(tmp_path):
    return RecordingImageStorage(tmp_path / "uploads")


@pytest.fixture
def lifecycle(store, images):
    return ProductLifecycle(store, images, KeyedLock())


@pytest_asyncio.fixture
async def client(session_factory, images):
    from app.main import app as fastapi_app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_image_storage] = lambda: images
    async with AsyncClient(transport=ASGITransport(app=fastapi_app), base_url="http://test") as c:
        yield c
    fastapi_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def served_client(session_factory):
    """Client whose uploads land in UPLOAD_DIR, the directory the app serves."""
    from app.main import app as fastapi_app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=fastapi_app), base_url="http://test") as c:
        yield c
    fastapi_app.dependency_overrides.clear()
