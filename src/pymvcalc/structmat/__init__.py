"""Structural matrices relating vec and vech representations."""

from pymvcalc.structmat._commutation import commutation, spcommutation
from pymvcalc.structmat._duplication import (
    duplication,
    elimination,
    spduplication,
    spelimination,
)

__all__ = [
    "commutation",
    "spcommutation",
    "duplication",
    "spduplication",
    "elimination",
    "spelimination",
]
