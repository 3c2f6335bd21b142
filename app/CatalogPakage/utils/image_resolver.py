# app/CatalogPakage/utils/image_resolver.py
from typing import Optional


def resolve_image(uploaded: Optional[str], existing: Optional[str]) -> Optional[str]:
    # Новое изображение не загружено -> оставляем старое
    if uploaded:
        return uploaded
    return existing
