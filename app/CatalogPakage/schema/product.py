# app/CatalogPakage/schema/product.py
from pydantic import BaseModel, computed_field
from typing import Optional
from datetime import datetime

IMAGE_URL_PREFIX = "/api/files/uploads"


class ProductBase(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None


class ProductResponse(ProductBase):
    id: int
    image: Optional[str] = None
    created_at: Optional[datetime] = None

    @computed_field
    @property
    def image_url(self) -> Optional[str]:
        if not self.image:
            return None
        return f"{IMAGE_URL_PREFIX}/{self.image}"

    class Config:
        from_attributes = True
