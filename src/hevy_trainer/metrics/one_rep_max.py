"""Estimated one-rep max (1RM) from a weight lifted for a number of reps.

Implements four common formulas:
- Brzycki:  weight x 36 / (37 - reps)
- Epley:    weight x (1 + 0.0333 x reps)
- Lombardi: weight x reps^0.1
- O'Conner: weight x (1 + 0.025 x reps)

All of them lose accuracy past 10-15 reps, so estimates above
``max_allowed_reps`` are refused rather than extrapolated.
"""

from enum import Enum
from typing import Callable, Dict, Optional, Union


DEFAULT_MAX_ALLOWED_REPS = 15

# Brzycki divides by (37 - reps); at and past 37 it is clamped to the 36-rep value.
BRZYCKI_REP_CEILING = 37


class OneRepMaxFormula(str, Enum):
    """Available 1RM estimation formulas."""
    BRZYCKI = "brzycki"
    EPLEY = "epley"
    LOMBARDI = "lombardi"
    OCONNER = "oconner"


def brzycki_formula(weight: float, reps: int) -> float:
    """Brzycki: weight x 36 / (37 - reps)."""
    if reps == 1:
        return weight
    if reps >= BRZYCKI_REP_CEILING:
        return weight * 36
    return weight * (36 / (BRZYCKI_REP_CEILING - reps))


def epley_formula(weight: float, reps: int) -> float:
    """Epley: weight x (1 + 0.0333 x reps)."""
    if reps == 1:
        return weight
    return weight * (1 + 0.0333 * reps)


def lombardi_formula(weight: float, reps: int) -> float:
    """Lombardi: weight x reps^0.1."""
    if reps == 1:
        return weight
    return weight * reps ** 0.1


def oconner_formula(weight: float, reps: int) -> float:
    """O'Conner: weight x (1 + 0.025 x reps)."""
    if reps == 1:
        return weight
    return weight * (1 + 0.025 * reps)


FORMULAS: Dict[OneRepMaxFormula, Callable[[float, int], float]] = {
    OneRepMaxFormula.BRZYCKI: brzycki_formula,
    OneRepMaxFormula.EPLEY: epley_formula,
    OneRepMaxFormula.LOMBARDI: lombardi_formula,
    OneRepMaxFormula.OCONNER: oconner_formula,
}


def _as_whole_reps(reps: Union[int, float]) -> Optional[int]:
    """Return reps as an int if it is a whole number, else None."""
    if isinstance(reps, bool):
        return None
    if isinstance(reps, int):
        return reps
    if isinstance(reps, float) and reps.is_integer():
        return int(reps)
    return None


def estimate_one_rep_max(
    weight_kg: float,
    reps: Union[int, float],
    formula: Union[OneRepMaxFormula, str] = OneRepMaxFormula.BRZYCKI,
    max_allowed_reps: int = DEFAULT_MAX_ALLOWED_REPS,
) -> Optional[float]:
    """
    Estimate the maximal single-repetition weight.

    Args:
        weight_kg: Weight lifted in kg
        reps: Repetitions performed
        formula: Formula to use (default Brzycki)
        max_allowed_reps: Highest rep count considered reliable

    Returns:
        Estimated 1RM in kg, or None when weight is not positive, reps is
        not a positive whole number, or reps exceeds max_allowed_reps.

    Raises:
        ValueError: If formula is not a known OneRepMaxFormula value
    """
    formula = OneRepMaxFormula(formula)

    if weight_kg is None or weight_kg <= 0:
        return None

    whole_reps = _as_whole_reps(reps)
    if whole_reps is None or whole_reps <= 0:
        return None

    if whole_reps == 1:
        return weight_kg

    if whole_reps > max_allowed_reps:
        return None

    return FORMULAS[formula](weight_kg, whole_reps)
