import math

import pytest

from services.memory_estimator import (
    CalculatorInput,
    calculate_model_memory,
    estimate,
    format_memory,
    get_precision_bits,
    recommend_gpu,
)


@pytest.mark.parametrize(
    "precision,bits",
    [("FP32", 32.0), ("FP16", 16.0), ("INT8", 8.0), ("INT4", 4.0), ("BOGUS", 16.0), ("", 16.0)],
)
def test_precision_bits(precision, bits):
    assert get_precision_bits(precision) == bits


def test_fp16_seven_billion_with_standard_overhead():
    # 7 * 4 * 1 / (32 / 16) * 1.2
    memory = calculate_model_memory(7, "FP16", 1.2)
    assert memory == pytest.approx(16.8)

    result = estimate(7, "FP16", 1.2)
    assert result.required_memory == pytest.approx(16.8)
    assert result.display_value == "17"
    assert result.gpu_recommendation == "At least 1 24GB GPU"


@pytest.mark.parametrize(
    "precision,expected,display",
    [
        ("FP32", 33.6, "34"),
        ("INT8", 8.4, "8"),
        ("INT4", 4.2, "4"),
    ],
)
def test_other_precisions(precision, expected, display):
    result = estimate(7, precision, 1.2)
    assert result.required_memory == pytest.approx(expected)
    assert result.display_value == display


def test_accelerated_overhead():
    assert calculate_model_memory(70, "FP16", 1.1) == pytest.approx(154.0)


def test_unknown_precision_falls_back_to_fp16():
    assert estimate(7, "BOGUS", 1.2) == estimate(7, "FP16", 1.2)


def test_convert_to_gib():
    memory = calculate_model_memory(7, "FP16", 1.2, convert_to_gib=True)
    assert memory == pytest.approx(7e9 * 4 / 2 * 1.2 / 1024 ** 3)
    result = estimate(7, "FP16", 1.2, convert_to_gib=True)
    assert result.display_value == "16"
    assert result.gpu_recommendation == "At least 1 24GB GPU"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"model_size_b": 0, "precision": "FP16", "overhead": 1.2},
        {"model_size_b": -7, "precision": "FP16", "overhead": 1.2},
        {"model_size_b": 7, "precision": "FP16", "overhead": 0},
        {"model_size_b": 7, "precision": "FP16", "overhead": -1.1},
        {"model_size_b": math.nan, "precision": "FP16", "overhead": 1.2},
    ],
)
def test_out_of_domain_inputs_are_rejected(kwargs):
    with pytest.raises(ValueError):
        calculate_model_memory(**kwargs)
    with pytest.raises(ValueError):
        CalculatorInput(**kwargs).validate()


def test_format_memory():
    assert format_memory(16.8) == "17"
    assert format_memory(0.2) == "0"
    assert format_memory(1234.4) == "1234"


@pytest.mark.parametrize(
    "memory,label",
    [
        (0, "At least 1 8GB GPU"),
        (7.99, "At least 1 8GB GPU"),
        (8, "At least 1 12GB GPU"),
        (11.99, "At least 1 12GB GPU"),
        (12, "At least 1 24GB GPU"),
        (24, "At least 1 48GB GPU"),
        (48, "At least 1 80GB GPU"),
        (79.99, "At least 1 80GB GPU"),
        (80, "At least 2 80GB GPU"),
        (169.99, "At least 2 80GB GPU"),
        (170, "Multiple GPUs needed"),
        (10_000, "Multiple GPUs needed"),
        (math.inf, "Multiple GPUs needed"),
    ],
)
def test_recommend_gpu_boundaries(memory, label):
    assert recommend_gpu(memory) == label


@pytest.mark.parametrize("memory", [-0.5, math.nan])
def test_recommend_gpu_rejects_invalid_memory(memory):
    with pytest.raises(ValueError):
        recommend_gpu(memory)


def test_estimator_is_deterministic():
    assert estimate(13, "INT8", 1.1) == estimate(13, "INT8", 1.1)
