"""
Tolerance tiers for approximate matrix comparison.

Exact arithmetic is used everywhere in the core (the singularity check
compares against zero exactly). These tiers only govern approximate
equality: Matrix.allclose() and the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Results of a few additions and multiplications
EXACT_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-12,
    name='exact_fp64',
    description='double precision, short arithmetic chains',
)

# Cofactor expansion and 1/det scaling accumulate rounding error
COFACTOR_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-9,
    name='cofactor_fp64',
    description='double precision, recursive cofactor expansion',
)

DEFAULT_TOLERANCE = COFACTOR_FP64
