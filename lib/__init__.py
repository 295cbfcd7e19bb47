# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - utils.py: Token coercion, numeric parsing/rendering, de-duplication
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.utils import (
    dedupe,
    format_number,
    integer_part,
    parse_number,
    stringify_token,
)

__all__ = [
    "dedupe",
    "format_number",
    "integer_part",
    "parse_number",
    "stringify_token",
]
