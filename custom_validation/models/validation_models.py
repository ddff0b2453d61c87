"""
custom_validation/models/validation_models.py

Pydantic DTOs for the validation endpoints.
The file-upload request has no DTO — FastAPI handles multipart/form-data
natively in the controller; only the min-age body and the shared response
shape are defined here.
"""

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class MinAgeRequest(BaseModel):
    """
    JSON body for POST /validate/min-age.

        { "date_of_birth": "2001-05-14" }
        { "date_of_birth": "2001-05-14", "years": 21, "months": 6 }
    """

    date_of_birth: Optional[date] = None
    years: Optional[int] = Field(
        default=None,
        ge=0,
        description="Minimum age in years. Defaults to the DEFAULT_MIN_AGE_YEARS setting.",
    )
    months: int = Field(default=0, ge=0)
    days: int = Field(default=0, ge=0)
    error_message: Optional[str] = None
    field_name: str = "DateOfBirth"

    @field_validator("field_name")
    @classmethod
    def field_name_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("field_name cannot be empty.")
        return v.strip()


class ValidationResponse(BaseModel):
    """
    Outcome of validating one object.

        { "valid": true, "errors": {} }
        { "valid": false, "errors": { "Resume": ["Resume should be in PDF format."] } }
    """

    valid: bool
    errors: Dict[str, List[str]] = Field(default_factory=dict)
