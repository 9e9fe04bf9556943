from __future__ import annotations

from typing import Optional, Protocol


class SelectionStore(Protocol):
    def read(self, key: str) -> Optional[bytes]:
        ...

    def write(self, key: str, blob: bytes) -> None:
        ...
