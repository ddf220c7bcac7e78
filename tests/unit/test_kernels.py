"""
Tests for the numba scalar kernels

Checks:
1. Accumulation order of the dot product chains
2. Cross product expansion against numpy
3. IEEE behaviour of the reciprocal (no ZeroDivisionError)
4. Rounding halves away from zero
5. warmup() compiles and logs
"""

import logging
import math

import numpy as np
import pytest

from kvector.kernels import (
    cross3,
    dot3,
    dot4,
    reciprocal,
    round_half_away,
    warmup,
)


class TestDotChains:
    """Tests for dot3 / dot4"""

    def test_dot3_simple(self) -> None:
        """(1,2,3).(4,5,6) = 32"""
        assert dot3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0) == 32.0

    def test_dot3_accumulates_from_last_term(self) -> None:
        """The last two terms are summed before the first is folded in"""
        # left to right would give (1 + 1e16) - 1e16 == 0.0
        assert dot3(1.0, 1e16, -1e16, 1.0, 1.0, 1.0) == 1.0

    def test_dot4_simple(self) -> None:
        """(1,2,3,4).(1,1,1,1) = 10"""
        assert dot4(1.0, 2.0, 3.0, 4.0, 1.0, 1.0, 1.0, 1.0) == 10.0

    def test_dot4_accumulates_from_last_term(self) -> None:
        """Same ordering guarantee for four terms"""
        assert dot4(1.0, 1e16, -1e16, 0.0, 1.0, 1.0, 1.0, 1.0) == 1.0

    def test_nan_propagates(self) -> None:
        """NaN input gives NaN output"""
        assert math.isnan(dot3(math.nan, 0.0, 0.0, 1.0, 1.0, 1.0))


class TestCross3:
    """Tests for cross3"""

    def test_basis(self) -> None:
        """i x j = k"""
        assert cross3(1.0, 0.0, 0.0, 0.0, 1.0, 0.0) == (0.0, 0.0, 1.0)

    def test_matches_numpy(self) -> None:
        """Agrees with numpy.cross"""
        a = (1.5, -2.0, 3.25)
        b = (0.25, 4.0, -1.0)
        expected = np.cross(np.array(a), np.array(b))
        assert cross3(*a, *b) == pytest.approx(tuple(expected))


class TestReciprocal:
    """Tests for reciprocal"""

    def test_regular_value(self) -> None:
        """1/4 = 0.25"""
        assert reciprocal(4.0) == 0.25

    def test_zero_gives_inf(self) -> None:
        """1/0 is +inf, not an exception"""
        assert reciprocal(0.0) == math.inf

    def test_negative_zero_gives_minus_inf(self) -> None:
        """1/-0 is -inf"""
        assert reciprocal(-0.0) == -math.inf


class TestRoundHalfAway:
    """Tests for round_half_away"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1.4, 1.0),
            (2.5, 3.0),
            (-1.5, -2.0),
            (0.5, 1.0),
            (-0.5, -1.0),
            (0.49999999999999994, 0.0),
            (7.0, 7.0),
            (1e300, 1e300),
        ],
    )
    def test_values(self, value: float, expected: float) -> None:
        """Halves go away from zero, unlike builtin round()"""
        assert round_half_away(value) == expected

    def test_keeps_sign_of_zero(self) -> None:
        """-0.4 rounds to -0.0"""
        result = round_half_away(-0.4)
        assert result == 0.0
        assert math.copysign(1.0, result) == -1.0

    def test_infinity_passes_through(self) -> None:
        """inf stays inf"""
        assert round_half_away(math.inf) == math.inf
        assert round_half_away(-math.inf) == -math.inf

    def test_nan_passes_through(self) -> None:
        """nan stays nan"""
        assert math.isnan(round_half_away(math.nan))


class TestWarmup:
    """Tests for warmup"""

    def test_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """warmup() reports readiness on the kernels logger"""
        caplog.set_level(logging.DEBUG, logger="kvector.kernels")
        warmup()
        assert any("kernels ready" in r.getMessage() for r in caplog.records)
