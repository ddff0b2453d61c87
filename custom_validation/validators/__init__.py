"""custom_validation/validators/__init__.py — public API of the validators package."""

from custom_validation.validators.base import (
    FieldAccessor,
    ValidationErrorCode,
    ValidationResult,
    ValidationRule,
)
from custom_validation.validators.file_type import (
    MIME_TYPES,
    FileType,
    FileTypeValidator,
    UploadedFile,
    validate_file_type,
)
from custom_validation.validators.min_age import (
    AgeRequirement,
    MinAgeValidator,
    validate_min_age,
    validate_min_age_field,
)

__all__ = [
    "AgeRequirement",
    "FieldAccessor",
    "FileType",
    "FileTypeValidator",
    "MIME_TYPES",
    "MinAgeValidator",
    "UploadedFile",
    "ValidationErrorCode",
    "ValidationResult",
    "ValidationRule",
    "validate_file_type",
    "validate_min_age",
    "validate_min_age_field",
]
