"""Path use cases."""

from .path_builder import PathBuilder

__all__ = ["PathBuilder"]
