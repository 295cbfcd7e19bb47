# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .classifier_service import ClassifierService, classify, concat_transform, is_alphabetic

__all__ = [
    "ClassifierService",
    "classify",
    "concat_transform",
    "is_alphabetic",
]
