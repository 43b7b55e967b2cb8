# Where: audiocc.features.metadata.__init__
# What: Expose metadata inference and reconciliation services.
# Why: Provide a cohesive import surface for processing and UI layers.

from .usecases import InfoExtractor, ProbedTags, ProberPort, TagReconciler, normalize_text

__all__ = ["InfoExtractor", "ProbedTags", "ProberPort", "TagReconciler", "normalize_text"]
