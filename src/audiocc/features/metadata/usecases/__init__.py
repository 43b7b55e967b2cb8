"""Metadata use cases: inference, reconciliation and their ports."""

from .extraction import InfoExtractor, normalize_text
from .ports import ProbedTags, ProberPort
from .reconcile import TagReconciler

__all__ = ["InfoExtractor", "ProbedTags", "ProberPort", "TagReconciler", "normalize_text"]
