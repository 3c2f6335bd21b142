# app/CatalogPakage/model/database.py
from pathlib import Path
import os

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base

load_dotenv()


def build_database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    user = os.getenv("POSTGRES_USER")
    if user:
        pswd = os.getenv("POSTGRES_PASSWORD")
        host = os.getenv("POSTGRES_HOST", "postgres")
        port = os.getenv("POSTGRES_PORT", "5432")
        database = os.getenv("POSTGRES_DB", "shop")
        return f"postgresql+asyncpg://{user}:{pswd}@{host}:{port}/{database}"

    # Локальный запуск: SQLite-файл
    return "sqlite+aiosqlite:///./db/shop.db"


DATABASE_URL = build_database_url()

engine = create_async_engine(DATABASE_URL, echo=os.getenv("SQL_ECHO", "0") == "1")

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)

Base = declarative_base()


async def get_db():
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def create_tables(bind=engine):
    # Для SQLite каталог с файлом базы должен существовать заранее
    url = bind.url
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
