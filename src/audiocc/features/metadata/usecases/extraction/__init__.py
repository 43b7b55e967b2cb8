"""Metadata inference helpers: rule tables, text normalization and the extractor."""

from .info_extractor import InfoExtractor
from .normalize import expand_century, fix_whitespace, normalize_text, valid_date
from .rules import DATE_RULES, DISC_TRACK_RULES, PatternRule, RuleMatch, first_match

__all__ = [
    "DATE_RULES",
    "DISC_TRACK_RULES",
    "InfoExtractor",
    "PatternRule",
    "RuleMatch",
    "expand_century",
    "first_match",
    "fix_whitespace",
    "normalize_text",
    "valid_date",
]
