from __future__ import annotations

from dataclasses import dataclass
import logging
import math

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = "FP16"

PRECISION_BITS: dict[str, float] = {
    "FP32": 32.0,
    "FP16": 16.0,
    "INT8": 8.0,
    "INT4": 4.0,
}

# Bytes per parameter before the precision correction
BASE_BYTES = 1.0

# Half-open [low, high) memory ranges, checked in order
GPU_TIERS: list[tuple[float, float, str]] = [
    (0.0, 8.0, "At least 1 8GB GPU"),
    (8.0, 12.0, "At least 1 12GB GPU"),
    (12.0, 24.0, "At least 1 24GB GPU"),
    (24.0, 48.0, "At least 1 48GB GPU"),
    (48.0, 80.0, "At least 1 80GB GPU"),
    (80.0, 170.0, "At least 2 80GB GPU"),
    (170.0, math.inf, "Multiple GPUs needed"),
]


@dataclass(frozen=True, slots=True)
class CalculatorInput:
    model_size_b: float
    precision: str = DEFAULT_PRECISION
    overhead: float = 1.2

    def validate(self) -> None:
        if isinstance(self.model_size_b, bool) or not isinstance(self.model_size_b, (int, float)):
            raise ValueError("CalculatorInput.model_size_b must be a number.")
        if not math.isfinite(self.model_size_b) or self.model_size_b <= 0:
            raise ValueError("CalculatorInput.model_size_b must be a positive number.")
        if not isinstance(self.precision, str):
            raise ValueError("CalculatorInput.precision must be a string.")
        if isinstance(self.overhead, bool) or not isinstance(self.overhead, (int, float)):
            raise ValueError("CalculatorInput.overhead must be a number.")
        if not math.isfinite(self.overhead) or self.overhead <= 0:
            raise ValueError("CalculatorInput.overhead must be a positive number.")


@dataclass(frozen=True, slots=True)
class MemoryEstimate:
    required_memory: float
    display_value: str
    gpu_recommendation: str


def get_precision_bits(precision: str) -> float:
    # Unrecognized labels fall back to FP16
    return PRECISION_BITS.get(precision, PRECISION_BITS[DEFAULT_PRECISION])


def calculate_model_memory(
    model_size_b: float,
    precision: str,
    overhead: float,
    *,
    convert_to_gib: bool = False,
) -> float:
    """
    M = P * 4 * B / (32 / Q) * O

    P is taken in billions and the result is left unconverted, so the
    figure shown as "GB" is the raw value of the formula. With
    convert_to_gib=True, P is scaled to a parameter count and M is divided
    by 1024^3, giving a figure that really is in GiB.
    """
    CalculatorInput(model_size_b, precision, overhead).validate()
    p = model_size_b * 1_000_000_000 if convert_to_gib else model_size_b
    q = get_precision_bits(precision)
    memory = p * 4 * BASE_BYTES / (32.0 / q) * overhead
    if convert_to_gib:
        memory = memory / (1024.0 * 1024.0 * 1024.0)
    return memory


def format_memory(memory: float) -> str:
    return f"{memory:.0f}"


def recommend_gpu(memory_gb: float) -> str:
    if isinstance(memory_gb, bool) or not isinstance(memory_gb, (int, float)) or math.isnan(memory_gb):
        raise ValueError("memory_gb must be a number.")
    if memory_gb < 0:
        raise ValueError("memory_gb must not be negative.")
    for low, high, label in GPU_TIERS:
        if low <= memory_gb < high:
            return label
    return GPU_TIERS[-1][2]


def estimate(
    model_size_b: float,
    precision: str = DEFAULT_PRECISION,
    overhead: float = 1.2,
    *,
    convert_to_gib: bool = False,
) -> MemoryEstimate:
    if precision not in PRECISION_BITS:
        logger.debug("Unknown precision %r, using %s", precision, DEFAULT_PRECISION)
    memory = calculate_model_memory(
        model_size_b,
        precision,
        overhead,
        convert_to_gib=convert_to_gib,
    )
    return MemoryEstimate(
        required_memory=memory,
        display_value=format_memory(memory),
        gpu_recommendation=recommend_gpu(memory),
    )
