# application/services/binary_decoder.py
from __future__ import annotations
import base64
import binascii
import time

from config.settings import IMAGE_EXTENSION, IMAGE_MIME_TYPE
from domain.models import BinaryFile

_ASCII_WHITESPACE = " \t\n\f\r"
_ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/")


class BinaryStringDecodeError(ValueError):
    pass


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def decode_binary_string(binary_str: str) -> bytes:
    """
    Decodifica igual que ``atob`` del navegador: ignora espacios ASCII y
    tolera el relleno ``=`` ausente. Cada byte decodificado pasa tal cual al
    buffer (sin codec de texto, los bytes >= 128 no se alteran).
    """
    data = "".join(ch for ch in binary_str if ch not in _ASCII_WHITESPACE)
    if len(data) % 4 == 0:
        if data.endswith("=="):
            data = data[:-2]
        elif data.endswith("="):
            data = data[:-1]
    if len(data) % 4 == 1:
        raise BinaryStringDecodeError(f"Invalid binary string length: {len(data)}")

    bad = next((ch for ch in data if ch not in _ALPHABET), None)
    if bad is not None:
        raise BinaryStringDecodeError(f"Invalid character in binary string: {bad!r}")

    try:
        return base64.b64decode(data + "=" * (-len(data) % 4), validate=True)
    except binascii.Error as exc:
        raise BinaryStringDecodeError(str(exc)) from exc


def encode_binary_string(data: bytes) -> str:
    # inverso de decode_binary_string (``btoa``)
    return base64.b64encode(data).decode("ascii")


def create_image_from_binary_string(binary_str: str, *, now_ms: int | None = None) -> BinaryFile:
    byte_array = decode_binary_string(binary_str)
    stamp = _now_ms() if now_ms is None else now_ms
    return BinaryFile(
        filename=f"{stamp}{IMAGE_EXTENSION}",
        content=byte_array,
        content_type=IMAGE_MIME_TYPE,
    )
