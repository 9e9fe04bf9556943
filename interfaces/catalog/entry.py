from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LlmEntry:
    id: str
    name: str
    org: str
    model_size: str       # "70B", "1.5T"
    license_type: str     # free text, e.g. "Apache 2.0"
    latest_update: str    # "Month Year"
    content: str
    link: Optional[str] = None

    def validate(self) -> None:
        for field_name in ("id", "name", "org", "model_size", "license_type", "latest_update"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"LlmEntry.{field_name} must be a non-empty string.")
        if not isinstance(self.content, str):
            raise ValueError("LlmEntry.content must be a string.")
        if self.link is not None and (not isinstance(self.link, str) or not self.link.strip()):
            raise ValueError("LlmEntry.link must be a non-empty string or None.")
