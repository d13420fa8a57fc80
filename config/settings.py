# config/settings.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import logging
import os
from dotenv import load_dotenv

load_dotenv()

# Destino fijo de las imágenes (relativo al cwd del proceso)
OUTPUT_DIR = Path("./images")

IMAGE_MIME_TYPE = "image/png"
IMAGE_EXTENSION = ".png"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # ───────── helpers ─────────
    def log_level(self) -> int:
        level = logging.getLevelName(self.LOG_LEVEL)
        return level if isinstance(level, int) else logging.INFO

    def output_dir_path(self) -> Path:
        return OUTPUT_DIR
