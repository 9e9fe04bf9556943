from __future__ import annotations

from dataclasses import dataclass
from config.calculator_config import CalculatorConfig
from config.storage_config import StorageConfig


@dataclass(frozen=True)
class AppConfigShape:
    storage: StorageConfig
    calculator: CalculatorConfig
    log_level: str
    persist_selections: bool
