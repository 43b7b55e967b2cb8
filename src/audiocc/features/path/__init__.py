"""
Summary: Package entry for destination path building.
Why: Offer a single import surface for path layout rules.
"""

from .usecases import PathBuilder

__all__ = ["PathBuilder"]
