"""
Generic result container for PyMatrix computations.

The Result class provides a standardized envelope around whatever an
operation produced (a Matrix or a scalar). This keeps timing, warnings
and provenance in one place while letting each domain define its own
parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (operation, operand shapes)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Versions of the software that produced a result."""
    import numpy as np
    from pymatrix import __version__

    return {
        'pymatrix_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (the computed value)
        info: Structured metadata (operation, operand shapes)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions used for the computation

    Examples:
        >>> Result(
        ...     params=MatrixParams(value=2.0, operation='determinant'),
        ...     info={'operation': 'determinant', 'shapes': [(2, 2)]},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_cofactor',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
