"""custom_validation — file-type and minimum-age validation rules."""

from custom_validation.core.exceptions import (
    AppBaseException,
    ConfigurationError,
    UnknownFileTypeError,
)
from custom_validation.validators import (
    AgeRequirement,
    FieldAccessor,
    FileType,
    FileTypeValidator,
    MinAgeValidator,
    UploadedFile,
    ValidationErrorCode,
    ValidationResult,
    validate_file_type,
    validate_min_age,
    validate_min_age_field,
)

__all__ = [
    "AgeRequirement",
    "AppBaseException",
    "ConfigurationError",
    "FieldAccessor",
    "FileType",
    "FileTypeValidator",
    "MinAgeValidator",
    "UnknownFileTypeError",
    "UploadedFile",
    "ValidationErrorCode",
    "ValidationResult",
    "validate_file_type",
    "validate_min_age",
    "validate_min_age_field",
]
