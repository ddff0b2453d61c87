"""
custom_validation/core/exceptions.py

Custom exception hierarchy for the application.

Only integration mistakes are raised. Ordinary validation failures are
returned as ValidationResult values and never surface here.
"""


class AppBaseException(Exception):
    """Root exception — catch-all for any application-level error."""


# ── Rule configuration exceptions ──────────────────────────────────────────────

class ConfigurationError(AppBaseException):
    """
    Raised when a rule is attached to a field that does not exist or whose
    declared type the rule cannot handle, or when the rule itself is
    configured with invalid values.
    """


class UnknownFileTypeError(AppBaseException):
    """Raised when a file-type name does not match any FileType member."""
