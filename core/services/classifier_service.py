# =============================================================================
# core/services/classifier_service.py - Token Classification Logic
# =============================================================================
# Classifies each whole token as numeric, alphabetic or special, sums the
# numeric tokens and builds the reversed alternating-caps concat string.
#
# Pure functions only: no I/O, no shared state, input is never mutated.
# =============================================================================

import logging
import math
import re
from typing import Any, Sequence

from core.models.classification import ClassificationResult, ClassifyResponse
from core.models.identity import Identity
from lib.utils import (
    Number,
    dedupe,
    format_number,
    integer_part,
    parse_number,
    stringify_token,
)

logger = logging.getLogger(__name__)

_ALPHABETIC_PATTERN = re.compile(r"[A-Za-z]+")


# =============================================================================
# Classification
# =============================================================================

def is_alphabetic(text: str) -> bool:
    """True when the text is one or more ASCII letters and nothing else."""
    return _ALPHABETIC_PATTERN.fullmatch(text) is not None


def concat_transform(chars: Sequence[str]) -> str:
    """
    Reverse the characters, then alternate caps starting with upper.

    Example:
        concat_transform(["a", "A", "Z"])  # "ZaA"
    """
    return "".join(
        char.upper() if index % 2 == 0 else char.lower()
        for index, char in enumerate(reversed(chars))
    )


def _add(total: Number, value: Number) -> Number:
    try:
        return total + value
    except OverflowError:
        # integer total has outgrown the float range before a decimal arrived
        return math.inf if total > 0 else -math.inf


def classify(tokens: Sequence[Any], deduplicate: bool = False) -> ClassificationResult:
    """
    Classify a list of tokens.

    Each token is judged on its whole string form, checked in this order:
    1. Numeric: trimmed text parses as a finite number. Summed; filed under
       even/odd by its integer part (truncated toward zero).
    2. Alphabetic: ASCII letters only. Upper-cased into `alphabets`; its
       characters feed the concat string.
    3. Special: everything else.

    Args:
        tokens: Strings/numbers as decoded from JSON
        deduplicate: Keep only the first occurrence of each value in the
            four output lists (sum and concat string are unaffected)

    Returns:
        ClassificationResult with all six fields populated
    """
    odd_numbers: list[str] = []
    even_numbers: list[str] = []
    alphabets: list[str] = []
    special_characters: list[str] = []
    letters: list[str] = []
    total: Number = 0

    for token in tokens:
        text = stringify_token(token)

        value = parse_number(text)
        if value is not None:
            total = _add(total, value)
            if integer_part(value) % 2 == 0:
                even_numbers.append(text)
            else:
                odd_numbers.append(text)
        elif is_alphabetic(text):
            alphabets.append(text.upper())
            letters.extend(text)
        else:
            special_characters.append(text)

    if deduplicate:
        odd_numbers = dedupe(odd_numbers)
        even_numbers = dedupe(even_numbers)
        alphabets = dedupe(alphabets)
        special_characters = dedupe(special_characters)

    return ClassificationResult(
        odd_numbers=odd_numbers,
        even_numbers=even_numbers,
        alphabets=alphabets,
        special_characters=special_characters,
        sum=format_number(total),
        concat_string=concat_transform(letters),
    )


# =============================================================================
# Service
# =============================================================================

class ClassifierService:
    """
    Service for the classify endpoint.

    Provides a clean interface between API routes and the classifier.
    """

    @staticmethod
    def build_response(
        tokens: Sequence[Any],
        identity: Identity,
        deduplicate: bool = False,
    ) -> ClassifyResponse:
        """
        Classify tokens and attach the identity fields.

        Args:
            tokens: The request's `data` list
            identity: Identity configured at startup
            deduplicate: Passed through to classify()

        Returns:
            ClassifyResponse ready to serialize
        """
        result = classify(tokens, deduplicate=deduplicate)

        logger.debug(
            f"Classified {len(tokens)} tokens: "
            f"odd={len(result.odd_numbers)} even={len(result.even_numbers)} "
            f"alpha={len(result.alphabets)} special={len(result.special_characters)}"
        )

        return ClassifyResponse(
            user_id=identity.user_id,
            email=identity.email,
            roll_number=identity.roll_number,
            **result.model_dump(),
        )
