from __future__ import annotations

from dataclasses import dataclass
import os
from config.calculator_config import CalculatorConfig
from config.storage_config import StorageConfig

@dataclass(frozen=True, slots=True)
class AppConfig:
    storage: StorageConfig
    calculator: CalculatorConfig
    log_level: str = "WARNING"
    persist_selections: bool = True


def build_settings() -> AppConfig:

    storage = StorageConfig.from_strings(
        app_name="LLMTray",
        org="ModView",
        selections_subdir="selections",
        data_dir=None, # resolved by bootstrap
    )

    calculator = CalculatorConfig.from_strings(
        default_model_size_b=7.0,
        default_precision="FP16",
        default_overhead=1.2,
        precision_choices=["FP32", "FP16", "INT8", "INT4"],
        overhead_choices=[1.2, 1.1],
        convert_to_gib=os.getenv("CONVERT_TO_GIB", "").strip() in {"1", "true", "True", "yes", "YES"},
    )

    log_level = os.getenv("LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    # Off keeps filter selections for this run only
    persist_selections = os.getenv("PERSIST_SELECTIONS", "1").strip() not in {"0", "false", "False", "no", "NO"}

    return AppConfig(
        storage=storage,
        calculator=calculator,
        log_level=log_level,
        persist_selections=persist_selections,
    )
