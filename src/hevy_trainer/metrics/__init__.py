"""Strength metrics."""

from .one_rep_max import (
    DEFAULT_MAX_ALLOWED_REPS,
    FORMULAS,
    OneRepMaxFormula,
    brzycki_formula,
    epley_formula,
    estimate_one_rep_max,
    lombardi_formula,
    oconner_formula,
)

__all__ = [
    "DEFAULT_MAX_ALLOWED_REPS",
    "FORMULAS",
    "OneRepMaxFormula",
    "brzycki_formula",
    "epley_formula",
    "estimate_one_rep_max",
    "lombardi_formula",
    "oconner_formula",
]
