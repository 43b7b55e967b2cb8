"""Organization use cases: bundling and consolidation."""

from .bundler import BundleCallback, bundle
from .consolidator import Consolidator

__all__ = ["BundleCallback", "Consolidator", "bundle"]
