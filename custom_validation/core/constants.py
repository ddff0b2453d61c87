"""
custom_validation/core/constants.py

Application-wide fixed constants.

These are the user-facing messages of the validation rules. Host
applications match on them, so they are NOT configurable via environment
variables.
"""

# ── File-type rule ─────────────────────────────────────────────────────────────

#: Returned for a non-null upload with zero length.
EMPTY_FILE_MESSAGE: str = "Selected file is empty."

#: Used when a single FileType is configured. {0} = field, {1} = type name.
FILE_TYPE_MESSAGE: str = "{0} should be in {1} format."

#: Used when a sequence of FileTypes is configured. {1} = comma-joined names.
FILE_TYPES_MESSAGE: str = "{0} should be in {1} formats."

# ── Minimum-age rule ───────────────────────────────────────────────────────────

#: {0} = field name.
FUTURE_DATE_MESSAGE: str = "{0} can not be greater than today's date"

#: {0} = positive components only, e.g. "5 years 3 days".
MIN_AGE_MESSAGE: str = "Minimum age should be at least {0} ."
