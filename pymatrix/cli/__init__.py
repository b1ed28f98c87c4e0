"""
Command-line adapter for PyMatrix.

Entry point: ``pymatrix`` console script or ``python -m pymatrix.cli``.
"""

from pymatrix.cli.main import main

__all__ = ["main"]
