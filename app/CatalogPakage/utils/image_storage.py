# app/CatalogPakage/utils/image_storage.py
import logging
import os
import time
import uuid
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

logger = logging.getLogger(__name__)

UPLOAD_DIR = os.getenv("UPLOAD_DIR", "./static/uploads")


def generate_unique_filename(original_filename: str) -> str:
    # Метка времени в мс + uuid против коллизий
    ext = Path(original_filename).suffix
    return f"{int(time.time() * 1000)}_{uuid.uuid4().hex}{ext}"


class ImageStorage:
    def __init__(self, directory: str = UPLOAD_DIR):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def path(self, filename: str) -> Path:
        # Только имя файла: никаких "../" из базы
        return self.directory / Path(filename).name

    async def save(self, upload: Optional[UploadFile]) -> Optional[str]:
        if upload is None or not upload.filename:
            return None

        filename = generate_unique_filename(upload.filename)
        with open(self.path(filename), "wb") as f:
            f.write(await upload.read())
        logger.info("Stored image %s (original name %s)", filename, upload.filename)
        return filename

    def remove(self, filename: Optional[str]) -> bool:
        if not filename:
            return False
        try:
            os.remove(self.path(filename))
        except OSError as e:
            logger.error("Error deleting image %s: %s", filename, e)
            return False
        logger.info("Deleted image %s", filename)
        return True


def get_image_storage() -> ImageStorage:
    return ImageStorage(UPLOAD_DIR)
