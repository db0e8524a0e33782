"""Unit tests for the scalar leaf metrics."""

from __future__ import annotations

from pathlib import Path
import sys

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from moment_distances import (
    AbsoluteDifference,
    AbsoluteRelative,
    DivisionByZeroError,
    InvalidOptionsError,
    NonFiniteInputError,
    RelativeDifference,
    distance,
)


# ---------------------------------------------------------------------------
# AbsoluteDifference / RelativeDifference


def test_absolute_difference() -> None:
    assert distance(AbsoluteDifference(), 0.2, 0.3) == pytest.approx(0.1)
    assert distance(AbsoluteDifference(), 0.3, 0.6) == pytest.approx(0.3)


def test_relative_difference_normalizes_by_data() -> None:
    assert distance(RelativeDifference(), 0.2, 0.3) == pytest.approx(0.5)
    assert distance(RelativeDifference(), 0.2, 0.23) == pytest.approx(0.15)
    assert distance(RelativeDifference(), -2.0, 1.0) == pytest.approx(1.5)


@pytest.mark.parametrize("metric", [AbsoluteDifference(), RelativeDifference()])
@pytest.mark.parametrize("value", [0.7, -3.0, 1e-12, 42])
def test_scalar_self_distance_is_zero(metric, value) -> None:
    assert distance(metric, value, value) == 0


@pytest.mark.parametrize("metric", [AbsoluteDifference(), RelativeDifference()])
@pytest.mark.parametrize("bad", [float("nan"), float("inf"), -np.inf])
def test_scalar_metrics_reject_non_finite(metric, bad) -> None:
    with pytest.raises(NonFiniteInputError):
        distance(metric, 1.0, bad)
    with pytest.raises(NonFiniteInputError):
        distance(metric, bad, 1.0)


def test_absolute_difference_rejects_nan_model() -> None:
    with pytest.raises(NonFiniteInputError) as excinfo:
        distance(AbsoluteDifference(), 0, float("nan"))
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.context is not None and "model" in excinfo.value.context


def test_relative_difference_rejects_zero_data() -> None:
    with pytest.raises(DivisionByZeroError):
        distance(RelativeDifference(), 0, 0.3)
    with pytest.raises(ZeroDivisionError):
        distance(RelativeDifference(), 0.0, 0.0)


def test_scalar_metrics_accept_numpy_scalars() -> None:
    result = distance(AbsoluteDifference(), np.float32(0.5), np.int64(2))
    assert isinstance(result, float)
    assert result == pytest.approx(1.5)


# ---------------------------------------------------------------------------
# AbsoluteRelative


def _scalar_pair() -> tuple[float, float]:
    rng = np.random.default_rng(7)
    s1, s2 = rng.uniform(0.1, 2.0, size=2)
    return float(s1), float(s2)


def test_absolute_relative_without_adjustment_is_absolute() -> None:
    s1, s2 = _scalar_pair()
    assert distance(AbsoluteRelative(), s1, s2) == pytest.approx(abs(s1 - s2))


def test_absolute_relative_infinite_adjustment_is_relative() -> None:
    s1, s2 = _scalar_pair()
    metric = AbsoluteRelative(relative_adjustment=np.inf)
    assert distance(metric, s1, s2) == pytest.approx(abs(s1 - s2) / max(abs(s1), abs(s2)))


def test_absolute_relative_soft_adjustment() -> None:
    s1, s2 = _scalar_pair()
    metric = AbsoluteRelative(relative_adjustment=0.3)
    expected = abs(s1 - s2) / max(1, 0.3 * max(abs(s1), abs(s2)))
    assert distance(metric, s1, s2) == pytest.approx(expected)


def test_absolute_relative_soft_adjustment_far_from_origin() -> None:
    metric = AbsoluteRelative(relative_adjustment=0.5)
    assert distance(metric, 100.0, 110.0) == pytest.approx(10.0 / 55.0)


@pytest.mark.parametrize("adjustment", [None, 0.3, np.inf])
def test_absolute_relative_self_distance_is_zero(adjustment) -> None:
    metric = AbsoluteRelative(relative_adjustment=adjustment)
    assert distance(metric, 1.3, 1.3) == 0
    assert distance(metric, [1.0, -2.0, 0.5], [1.0, -2.0, 0.5]) == 0


def test_absolute_relative_on_vectors_uses_euclidean_norm() -> None:
    x = np.array([1.0, 2.0, 2.0])
    y = np.zeros(3)
    assert distance(AbsoluteRelative(), x, y) == pytest.approx(3.0)
    assert distance(AbsoluteRelative(relative_adjustment=np.inf), x, y) == pytest.approx(1.0)


def test_absolute_relative_custom_norm() -> None:
    def max_norm(v: np.ndarray) -> float:
        return float(np.max(np.abs(v)))

    metric = AbsoluteRelative(norm=max_norm)
    assert distance(metric, [1.0, 5.0], [2.0, 1.0]) == pytest.approx(4.0)


def test_absolute_relative_relative_singularity_propagates_nan() -> None:
    metric = AbsoluteRelative(relative_adjustment=np.inf)
    assert np.isnan(distance(metric, 0.0, 0.0))


def test_absolute_relative_rejects_non_finite_operands() -> None:
    with pytest.raises(NonFiniteInputError):
        distance(AbsoluteRelative(), [1.0, np.nan], [1.0, 2.0])


@pytest.mark.parametrize("adjustment", [0.0, -1.0, float("nan")])
def test_absolute_relative_rejects_bad_adjustment(adjustment) -> None:
    with pytest.raises(InvalidOptionsError):
        AbsoluteRelative(relative_adjustment=adjustment)


def test_scalar_reprs() -> None:
    assert repr(AbsoluteDifference()) == "AbsoluteDifference()"
    assert repr(RelativeDifference()) == "RelativeDifference()"
    assert repr(AbsoluteRelative()) == "AbsoluteRelative()"
    assert repr(AbsoluteRelative(relative_adjustment=0.3)) == "AbsoluteRelative(relative_adjustment=0.3)"


def test_scalar_metrics_promote_unsigned_integers() -> None:
    assert distance(AbsoluteDifference(), np.uint8(2), np.uint8(3)) == pytest.approx(1.0)
    assert distance(RelativeDifference(), np.uint8(2), np.uint8(3)) == pytest.approx(0.5)
