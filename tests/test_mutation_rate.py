"""Tests for mutation rate calculation."""

import math

import pytest

from protozoa.evolution import (
    DEFAULT_MUTATION_CONFIG,
    MutationConfig,
    MutationContext,
    MutationRateCalculator,
    clamp_rate,
)
from protozoa.exceptions import ConfigurationError


def test_default_rate():
    assert MutationRateCalculator().rate() == pytest.approx(0.01)
    assert DEFAULT_MUTATION_CONFIG.base_rate == 0.01


@pytest.mark.parametrize(
    "context",
    [
        None,
        MutationContext(),
        MutationContext(difficulty=0.0),
        MutationContext(difficulty=1e12, block_height=840000),
        MutationContext(difficulty=-5.0),
    ],
)
def test_difficulty_multiplier_is_inert(context):
    calculator = MutationRateCalculator()
    assert calculator.difficulty_multiplier(context) == 1.0
    assert calculator.rate(context) == calculator.rate()


@pytest.mark.parametrize("base_rate", [0.0, 0.01, 0.5, 1.0, 3.0, -1.0])
def test_rate_always_within_unit_interval(base_rate):
    rate = MutationRateCalculator(MutationConfig(base_rate=base_rate)).rate(MutationContext(difficulty=2.0))
    assert 0.0 <= rate <= 1.0


def test_config_bounds_clamp_rate():
    config = MutationConfig(base_rate=0.9, min_rate=0.1, max_rate=0.25)
    assert MutationRateCalculator(config).rate() == 0.25
    config = MutationConfig(base_rate=0.0, min_rate=0.1, max_rate=0.25)
    assert MutationRateCalculator(config).rate() == 0.1


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
@pytest.mark.parametrize("field", ["base_rate", "min_rate", "max_rate"])
def test_config_rejects_non_finite(field, value):
    with pytest.raises(ConfigurationError):
        MutationConfig(**{field: value})


@pytest.mark.parametrize(
    "min_rate,max_rate",
    [(0.5, 0.1), (-0.1, 0.5), (0.0, 1.5)],
)
def test_config_rejects_bad_bounds(min_rate, max_rate):
    with pytest.raises(ConfigurationError):
        MutationConfig(min_rate=min_rate, max_rate=max_rate)


def test_config_rejects_non_numeric():
    with pytest.raises(ConfigurationError):
        MutationConfig(base_rate="0.1")


def test_clamp_rate():
    assert clamp_rate(-0.5) == 0.0
    assert clamp_rate(1.5) == 1.0
    assert clamp_rate(0.3) == 0.3
    assert clamp_rate(0.3, 0.4, 0.6) == 0.4
