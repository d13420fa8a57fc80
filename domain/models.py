# domain/models.py
from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class BinaryFile:
    filename: str
    content: bytes
    content_type: str

    @property
    def size(self) -> int:
        return len(self.content)

    async def read(self) -> bytes:
        return self.content
