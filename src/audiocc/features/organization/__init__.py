"""
Summary: Package entry for folder bundling and consolidation.
Why: Offer one import surface for collection-level layout operations.
"""

from .usecases import BundleCallback, Consolidator, bundle

__all__ = ["BundleCallback", "Consolidator", "bundle"]
