# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - classification.py: Classify request/result/response schemas
# - identity.py: Static identity echoed in responses
#
# These models define the "contract" between API and clients.
# =============================================================================

from .classification import (
    ClassificationResult,
    ClassifyRequest,
    ClassifyResponse,
    ErrorResponse,
    OperationCodeResponse,
)
from .identity import Identity

__all__ = [
    # Classification
    "ClassificationResult",
    "ClassifyRequest",
    "ClassifyResponse",
    "ErrorResponse",
    "OperationCodeResponse",
    # Identity
    "Identity",
]
