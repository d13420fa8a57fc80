# application/use_cases/save_image_usecase.py
from __future__ import annotations
import logging
from pathlib import Path

from application.services.binary_decoder import create_image_from_binary_string
from infrastructure.filesystem.storage import ImageStorage

logger = logging.getLogger(__name__)

class SaveImageUseCase:
    def __init__(self, *, storage: ImageStorage) -> None:
        self.storage = storage

    async def execute(self, binary_str: str) -> Path | None:
        """
        Decodifica la cadena binaria y guarda la imagen en el storage.
        Los errores de decodificación y de disco se propagan al llamador.
        """
        image = create_image_from_binary_string(binary_str)
        logger.info("Decoded %s (%d bytes, %s)", image.filename, image.size, image.content_type)
        return await self.storage.save(image)
