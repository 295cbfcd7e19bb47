# =============================================================================
# core/models/classification.py - Classification Schemas
# =============================================================================
# These models define the API contract for the classify endpoint:
# - ClassifyRequest: Input body ({"data": [...]})
# - ClassificationResult: What the classifier derives from the tokens
# - ClassifyResponse: Result merged with the identity fields
# - ErrorResponse / OperationCodeResponse: Small fixed-shape bodies
#
# Every token lands in exactly one of odd/even/alphabets/special.
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field


class ClassifyRequest(BaseModel):
    """
    Schema for the classify request body.

    Elements are normally strings or numbers; anything else JSON can carry
    is accepted and classified by its string form.

    Example:
        {
            "data": ["1", "2", "a", "$", 42]
        }
    """

    data: list[Any] = Field(
        ...,
        description="Tokens to classify (strings or numbers)"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"data": ["1", "2", "3", "a", "A", "$", "Z"]},
                {"data": ["a", "1", "334", "4", "R", "$"]},
                {"data": []},
            ]
        }
    }


class ClassificationResult(BaseModel):
    """
    Output of the classifier for one list of tokens.

    Numeric tokens keep their original string form; alphabetic tokens are
    upper-cased; `sum` is the numeric total as a decimal string.

    Example:
        {
            "odd_numbers": ["1", "3"],
            "even_numbers": ["2"],
            "alphabets": ["A", "A", "Z"],
            "special_characters": ["$"],
            "sum": "6",
            "concat_string": "ZaA"
        }
    """

    odd_numbers: list[str] = Field(
        default_factory=list,
        description="Numeric tokens whose integer value is odd"
    )

    even_numbers: list[str] = Field(
        default_factory=list,
        description="Numeric tokens whose integer value is even"
    )

    alphabets: list[str] = Field(
        default_factory=list,
        description="Alphabetic tokens, upper-cased"
    )

    special_characters: list[str] = Field(
        default_factory=list,
        description="Tokens that are neither numeric nor alphabetic"
    )

    sum: str = Field(
        default="0",
        description="Sum of all numeric tokens as a decimal string"
    )

    concat_string: str = Field(
        default="",
        description="Alphabetic characters reversed, in alternating caps"
    )


class ClassifyResponse(BaseModel):
    """
    Successful response body for POST /classify.

    Field order here is the order clients see in the JSON.
    """

    is_success: bool = True
    user_id: str
    email: str
    roll_number: str
    odd_numbers: list[str]
    even_numbers: list[str]
    alphabets: list[str]
    special_characters: list[str]
    sum: str
    concat_string: str

    model_config = {
        "json_schema_extra": {
            "example": {
                "is_success": True,
                "user_id": "john_doe_17091999",
                "email": "john@xyz.com",
                "roll_number": "ABCD123",
                "odd_numbers": ["1"],
                "even_numbers": ["334", "4"],
                "alphabets": ["A", "R"],
                "special_characters": ["$"],
                "sum": "339",
                "concat_string": "Ra"
            }
        }
    }


class ErrorResponse(BaseModel):
    """Error body returned for 400/500 responses."""
    is_success: bool = False
    error: str


class OperationCodeResponse(BaseModel):
    """Response for GET /classify."""
    operation_code: int
