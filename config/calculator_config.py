from __future__ import annotations
from dataclasses import dataclass

from services.memory_estimator import PRECISION_BITS

@dataclass(frozen=True, slots=True)
class CalculatorConfig:
    default_model_size_b: float     # parameters in billions
    default_precision: str          # "FP16"
    default_overhead: float         # 1.2 standard, 1.1 accelerated
    precision_choices: tuple[str, ...]
    overhead_choices: tuple[float, ...]
    convert_to_gib: bool = False    # False keeps the raw formula figure

    def validate(self) -> None:
        if not isinstance(self.default_model_size_b, (int, float)) or self.default_model_size_b <= 0:
            raise ValueError("CalculatorConfig.default_model_size_b must be a positive number.")
        if not self.precision_choices:
            raise ValueError("CalculatorConfig.precision_choices must not be empty.")
        unknown = [p for p in self.precision_choices if p not in PRECISION_BITS]
        if unknown:
            raise ValueError(f"CalculatorConfig.precision_choices has unknown labels: {', '.join(unknown)}")
        if self.default_precision not in self.precision_choices:
            raise ValueError("CalculatorConfig.default_precision must be one of precision_choices.")
        if not self.overhead_choices:
            raise ValueError("CalculatorConfig.overhead_choices must not be empty.")
        for o in self.overhead_choices:
            if not isinstance(o, (int, float)) or o <= 0:
                raise ValueError("CalculatorConfig.overhead_choices must hold positive numbers.")
        if not isinstance(self.default_overhead, (int, float)) or self.default_overhead <= 0:
            raise ValueError("CalculatorConfig.default_overhead must be a positive number.")
        if not isinstance(self.convert_to_gib, bool):
            raise ValueError("CalculatorConfig.convert_to_gib must be a bool.")

    @staticmethod
    def from_strings(
            default_model_size_b: float | str,
            default_precision: str,
            default_overhead: float | str,
            precision_choices: list[str] | tuple[str, ...],
            overhead_choices: list[float] | tuple[float, ...],
            convert_to_gib: bool = False,
    ) -> "CalculatorConfig":
        cfg = CalculatorConfig(
            default_model_size_b=float(default_model_size_b),
            default_precision=default_precision.strip().upper(),
            default_overhead=float(default_overhead),
            precision_choices=tuple(p.strip().upper() for p in precision_choices),
            overhead_choices=tuple(float(o) for o in overhead_choices),
            convert_to_gib=convert_to_gib,
        )
        cfg.validate()
        return cfg
