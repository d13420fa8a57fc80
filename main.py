# main.py
# Punto de entrada: cadena binaria (argumento o stdin) -> ./images/<millis>.png
from __future__ import annotations
import asyncio
import logging
import sys
from config.settings import LOG_FORMAT, Settings
from infrastructure.filesystem.storage import ImageStorage
from application.use_cases.save_image_usecase import SaveImageUseCase

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    settings = Settings()
    logging.basicConfig(level=settings.log_level(), format=LOG_FORMAT)

    args = sys.argv[1:] if argv is None else argv
    binary_str = args[0] if args else sys.stdin.read()
    if not binary_str.strip():
        logger.error("No binary string provided")
        logger.error("Usage: python main.py <binary_string>  (or pipe it through stdin)")
        return 2

    uc = SaveImageUseCase(storage=ImageStorage(base=settings.output_dir_path()))
    try:
        asyncio.run(uc.execute(binary_str))
    except Exception:
        logger.exception("Error saving image")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
