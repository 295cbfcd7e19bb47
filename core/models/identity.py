# =============================================================================
# core/models/identity.py - Identity Schema
# =============================================================================
# The static identity fields echoed in every classify response.
# Built once from settings at startup and injected into the route, so tests
# can swap in a different identity without touching module globals.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class Identity(BaseModel):
    """
    Identity of the API owner.

    Example:
        {
            "full_name": "john_doe",
            "birth_date": "17091999",
            "email": "john@xyz.com",
            "roll_number": "ABCD123"
        }
    """

    model_config = ConfigDict(frozen=True)

    # Lowercase, underscore-separated
    full_name: str = Field(
        ...,
        min_length=1,
        description="Full name in lowercase (e.g. john_doe)"
    )

    # ddmmyyyy
    birth_date: str = Field(
        ...,
        min_length=1,
        description="Birth date in ddmmyyyy format"
    )

    email: str = Field(
        ...,
        description="Contact email"
    )

    roll_number: str = Field(
        ...,
        description="Roll / reference number"
    )

    @property
    def user_id(self) -> str:
        """
        Composite identifier: name and date joined with an underscore.

        Example: "john_doe" + "17091999" -> "john_doe_17091999"
        """
        return f"{self.full_name}_{self.birth_date}"
