"""Tests for one-rep max estimation."""

import pytest

from hevy_trainer.metrics.one_rep_max import (
    DEFAULT_MAX_ALLOWED_REPS,
    FORMULAS,
    OneRepMaxFormula,
    brzycki_formula,
    estimate_one_rep_max,
)


class TestFormulas:
    """Tests for the individual formulas at 100 kg x 5."""

    def test_brzycki(self):
        assert estimate_one_rep_max(100, 5) == pytest.approx(112.5)

    def test_epley(self):
        assert estimate_one_rep_max(100, 5, OneRepMaxFormula.EPLEY) == pytest.approx(116.65)

    def test_lombardi(self):
        result = estimate_one_rep_max(100, 5, OneRepMaxFormula.LOMBARDI)
        assert result == pytest.approx(117.46, abs=0.01)

    def test_oconner(self):
        assert estimate_one_rep_max(100, 5, OneRepMaxFormula.OCONNER) == pytest.approx(112.5)

    def test_formula_by_name(self):
        """Formulas can be selected by their string value."""
        assert estimate_one_rep_max(100, 5, "epley") == pytest.approx(116.65)

    def test_every_formula_is_registered(self):
        assert set(FORMULAS) == set(OneRepMaxFormula)

    def test_brzycki_clamps_at_37_reps(self):
        """Past 36 reps Brzycki would divide by zero or go negative."""
        assert brzycki_formula(10, 37) == 360
        assert brzycki_formula(10, 50) == 360


class TestSingleRep:
    """A single rep is its own 1RM."""

    @pytest.mark.parametrize("formula", list(OneRepMaxFormula))
    def test_one_rep_returns_weight(self, formula):
        assert estimate_one_rep_max(142.5, 1, formula) == 142.5


class TestInvalidInput:
    """Inputs that cannot produce an estimate."""

    def test_zero_weight(self):
        assert estimate_one_rep_max(0, 5) is None

    def test_negative_weight(self):
        assert estimate_one_rep_max(-20, 5) is None

    def test_zero_reps(self):
        assert estimate_one_rep_max(100, 0) is None

    def test_fractional_reps(self):
        assert estimate_one_rep_max(100, 2.5) is None

    def test_whole_float_reps_accepted(self):
        assert estimate_one_rep_max(100, 5.0) == pytest.approx(112.5)

    def test_reps_above_limit(self):
        assert estimate_one_rep_max(100, DEFAULT_MAX_ALLOWED_REPS + 1) is None

    def test_reps_at_limit(self):
        assert estimate_one_rep_max(100, DEFAULT_MAX_ALLOWED_REPS) is not None

    def test_custom_rep_limit(self):
        assert estimate_one_rep_max(100, 12, max_allowed_reps=10) is None
        assert estimate_one_rep_max(100, 20, max_allowed_reps=20) is not None

    def test_unknown_formula_rejected(self):
        with pytest.raises(ValueError):
            estimate_one_rep_max(100, 5, "wathan")
