"""Base Pydantic model with strict defaults for dbc configs."""

from pydantic import BaseModel, ConfigDict


class DbcBaseModel(BaseModel):
    """Base model for all dbc configuration schemas.

    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Strips whitespace from strings
    """

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        str_strip_whitespace=True,
    )
