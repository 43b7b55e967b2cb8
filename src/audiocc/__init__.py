"""audiocc: organize audio recordings into a canonical folder layout."""

__version__ = "0.1.0"
