# =============================================================================
# app/routers/classify.py - Classify Endpoints
# =============================================================================
# POST classifies the `data` list; GET returns the static operation code.
# Mounted in main.py at /classify and at the legacy /bfhl path.
# =============================================================================

import logging

from fastapi import APIRouter

from app.dependencies import DeduplicateDep, IdentityDep, SettingsDep
from app.exceptions import InternalServerError
from core.models.classification import (
    ClassifyRequest,
    ClassifyResponse,
    ErrorResponse,
    OperationCodeResponse,
)
from core.services.classifier_service import ClassifierService

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.post(
    "",
    response_model=ClassifyResponse,
    responses={
        400: {"model": ErrorResponse, "description": "`data` missing or not an array"},
        500: {"model": ErrorResponse, "description": "Unexpected failure"},
    },
)
async def classify_tokens(
    body: ClassifyRequest,
    identity: IdentityDep,
    deduplicate: DeduplicateDep,
):
    """
    Classify a list of tokens.

    Splits `data` into odd numbers, even numbers, alphabets and special
    characters, and returns the numeric sum and the reversed alternating-caps
    concatenation of all letters, alongside the configured identity.
    """
    try:
        return ClassifierService.build_response(
            body.data,
            identity=identity,
            deduplicate=deduplicate,
        )
    except Exception as e:
        logger.exception(f"Failed to classify {len(body.data)} tokens: {e}")
        raise InternalServerError() from e


@router.get("", response_model=OperationCodeResponse)
async def get_operation_code(settings: SettingsDep):
    """
    Operation code probe.

    Returns a static code; useful for checking the route is wired up.
    """
    return OperationCodeResponse(operation_code=settings.OPERATION_CODE)
