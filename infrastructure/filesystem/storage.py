# infrastructure/filesystem/storage.py
from __future__ import annotations
import asyncio
import logging
from pathlib import Path

from config.settings import OUTPUT_DIR
from domain.models import BinaryFile

logger = logging.getLogger(__name__)


class InvalidFileNameError(ValueError):
    pass


def safe_filename(name: str) -> str:
    # solo el último componente; "../x.png" -> "x.png"
    base = Path((name or "").replace("\\", "/")).name
    if base in ("", ".", ".."):
        raise InvalidFileNameError(f"Invalid file name: {name!r}")
    return base


class ImageStorage:
    def __init__(self, base: Path = OUTPUT_DIR) -> None:
        self.base = base

    def target_path(self, name: str) -> Path:
        return self.base / safe_filename(name)

    def _write(self, fp: Path, data: bytes) -> None:
        self.base.mkdir(parents=True, exist_ok=True)
        fp.write_bytes(data)

    async def save(self, file: BinaryFile | None) -> Path | None:
        if not file:
            logger.error("No file provided")
            return None

        data = await file.read()
        fp = self.target_path(file.filename)
        await asyncio.to_thread(self._write, fp, data)
        logger.info("File saved at %s", fp)
        return fp


async def download_file(file: BinaryFile | None, *, output_dir: Path = OUTPUT_DIR) -> Path | None:
    return await ImageStorage(base=output_dir).save(file)
