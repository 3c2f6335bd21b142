from .database import AsyncSessionLocal, Base, get_db, create_tables
from .product import Product

__all__ = [
    'AsyncSessionLocal', 'Base', 'get_db', 'create_tables', 'Product'
]
__version__ = '1.0.0'
