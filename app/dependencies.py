# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for configuration-derived values.
# These are injected into route handlers using Depends() and can be
# replaced in tests via app.dependency_overrides.
# =============================================================================

from typing import Annotated

from fastapi import Depends

from app.config import Settings, get_settings
from core.models.identity import Identity


def get_identity(settings: Annotated[Settings, Depends(get_settings)]) -> Identity:
    """
    Get the configured identity.

    Returns the Identity echoed in every classify response.
    """
    return settings.identity


def get_deduplicate(settings: Annotated[Settings, Depends(get_settings)]) -> bool:
    """Whether output lists are de-duplicated."""
    return settings.DEDUPLICATE_RESULTS


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
IdentityDep = Annotated[Identity, Depends(get_identity)]
DeduplicateDep = Annotated[bool, Depends(get_deduplicate)]
