# app/CatalogPakage/model/product.py
from sqlalchemy import Column, Integer, String, Text, Float, DateTime, func
from .database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255))
    description = Column(Text)
    price = Column(Float)
    image = Column(String(512))  # Имя файла в каталоге загрузок, без пути
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Product id={self.id} name={self.name!r} image={self.image!r}>"
