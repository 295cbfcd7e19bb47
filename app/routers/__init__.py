# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - classify.py: Token classification endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import classify
from . import health

__all__ = [
    "classify",
    "health",
]
