"""
custom_validation/api/validation_controller.py

Handles incoming requests to POST /validate/file and POST /validate/min-age.

This layer is responsible only for HTTP concerns:
  - Parsing the multipart form or JSON body.
  - Building the rules from request parameters, falling back to settings.
  - Delegating evaluation to ValidationService.
  - Translating service-level errors into appropriate HTTP responses.

Responses:
  200  The rules were evaluated.  Body reports whether the input is valid
       and the messages per field.  A failed rule is still a 200.
  400  The rules could not be built — for example, an unknown file-type
       name or a negative age component.
  422  The JSON body did not match the schema (FastAPI default).
  500  An unexpected error occurred while evaluating the rules.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile
from fastapi.responses import JSONResponse

from custom_validation.core.config import settings
from custom_validation.core.exceptions import (
    AppBaseException,
    ConfigurationError,
    UnknownFileTypeError,
)
from custom_validation.core.logger import get_logger
from custom_validation.models.validation_models import MinAgeRequest, ValidationResponse
from custom_validation.services.validation_service import validation_service
from custom_validation.validators.base import FieldAccessor
from custom_validation.validators.file_type import FileType, FileTypeValidator
from custom_validation.validators.min_age import MinAgeValidator

logger = get_logger(__name__)

router = APIRouter(prefix="/validate", tags=["Validate"])


@dataclass
class UploadForm:
    """The multipart form as an object the rules can be attached to."""

    file: Optional[UploadFile] = None


# ── Helpers ────────────────────────────────────────────────────────────────────

def _err(message: str, status: int = 400) -> JSONResponse:
    """Return a JSON error response with the standard error shape."""
    return JSONResponse(status_code=status, content={"error": message})


def _ok(result: ValidationResponse) -> JSONResponse:
    return JSONResponse(status_code=200, content=result.model_dump())


# ── Endpoints ──────────────────────────────────────────────────────────────────

@router.post("/file", response_model=ValidationResponse, summary="Validate an uploaded file's type")
async def validate_file(
    file: Optional[UploadFile] = File(default=None),
    file_types: Optional[str] = Form(default=None),
    field_name: str = Form(default="File"),
) -> JSONResponse:
    """
    Accepts multipart/form-data with the following fields:

      file        (optional) — the upload to check.  A missing file is valid.
      file_types  (optional) — comma-separated FileType names, e.g. "PDF,PNG".
                               Defaults to DEFAULT_FILE_TYPES in settings.
                               One name selects the singular message, several
                               names the plural one.
      field_name  (optional) — label used in messages.  Defaults to "File".
    """
    if file_types:
        try:
            types = FileType.parse(file_types)
        except UnknownFileTypeError as exc:
            logger.warning("Rejected file-type configuration: %s", exc)
            return _err(str(exc))
    else:
        # A bad DEFAULT_FILE_TYPES is a server fault; main.py maps it to 500.
        types = FileType.parse(settings.default_file_types)

    rule = FileTypeValidator(types[0] if len(types) == 1 else types)

    logger.info(
        "File validation request — '%s' (%s) against %s",
        file.filename if file else None,
        file.content_type if file else None,
        ",".join(t.name for t in types),
    )

    try:
        result = validation_service.validate(
            UploadForm(file=file),
            {"file": [rule]},
            display_names={"file": field_name},
        )
    except AppBaseException as exc:
        logger.exception("File validation error: %s", exc)
        return _err("File validation failed.", status=500)

    return _ok(result)


@router.post("/min-age", response_model=ValidationResponse, summary="Validate a minimum age")
async def validate_min_age(body: MinAgeRequest) -> JSONResponse:
    """
    Accepts a JSON body with the following fields:

      date_of_birth  (optional) — ISO date.  A missing value is valid.
      years          (optional) — defaults to DEFAULT_MIN_AGE_YEARS in settings.
      months, days   (optional) — default to 0.
      error_message  (optional) — replaces the below-minimum message.
      field_name     (optional) — name used in messages.  Defaults to "DateOfBirth".
    """
    years = settings.default_min_age_years if body.years is None else body.years

    try:
        rule = MinAgeValidator(years, body.months, body.days, error_message=body.error_message)
    except ConfigurationError as exc:
        logger.warning("Rejected minimum-age configuration: %s", exc)
        return _err(str(exc))

    accessor = FieldAccessor(
        name=body.field_name,
        declared_type=Optional[date],
        get_value=lambda request: request.date_of_birth,
    )

    logger.info(
        "Min-age validation request — %s against %s",
        body.date_of_birth,
        rule.requirement.describe() or "no requirement",
    )

    try:
        result = validation_service.validate_fields(body, [(accessor, [rule])])
    except AppBaseException as exc:
        logger.exception("Min-age validation error: %s", exc)
        return _err("Minimum-age validation failed.", status=500)

    return _ok(result)
