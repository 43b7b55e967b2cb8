"""
Summary: Package marker for metadata adapters.
Why: Keep adapter exports together for easy discovery.
"""

from .mutagen_prober import MutagenProber

__all__ = ["MutagenProber"]
