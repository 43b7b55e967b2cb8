# Where: audiocc.shared.__init__
# What: Provide a concise import surface for shared records.
# Why: Encourage consistent reuse of Info and PathInfo across features.

"""Shared records exposed at the package level."""

from .info import UNTITLED, Info
from .path_info import PathInfo, get_path_info

__all__ = ["Info", "PathInfo", "UNTITLED", "get_path_info"]
