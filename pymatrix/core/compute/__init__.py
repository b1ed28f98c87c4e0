"""
Shared compute infrastructure for PyMatrix.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for approximate comparison
"""

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    DEFAULT_TOLERANCE,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "DEFAULT_TOLERANCE",
]
