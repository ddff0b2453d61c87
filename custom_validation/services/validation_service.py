"""
custom_validation/services/validation_service.py

Runs validation rules against an object the way a host framework's model
validation would:

    instance + {field_name: [rule, ...]}
      └─ FieldAccessor per field        (ConfigurationError if missing)
           └─ rule.validate_field()     (ConfigurationError if incompatible)
                └─ failures collected per field → ValidationResponse

Configuration errors are integration bugs: they propagate immediately and
are never collected as field errors.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from custom_validation.core.logger import get_logger
from custom_validation.models.validation_models import ValidationResponse
from custom_validation.validators.base import FieldAccessor, ValidationRule

logger = get_logger(__name__)

FieldChecks = Sequence[Tuple[FieldAccessor, Sequence[ValidationRule]]]


class ValidationService:
    """
    Evaluates every rule for every field and reports all failures at once.

    Rules are independent: a failing rule does not stop the remaining rules
    on the same field or on other fields.
    """

    # ── Public API ─────────────────────────────────────────────────────────────

    def validate(
        self,
        instance: Any,
        rules: Mapping[str, Sequence[ValidationRule]],
        display_names: Optional[Mapping[str, str]] = None,
    ) -> ValidationResponse:
        """
        Validate ``instance`` against rules keyed by field name.

        Args:
            instance      : Object whose class annotates the named fields.
            rules         : ``{field_name: [rule, ...]}``.
            display_names : Optional labels used in messages instead of
                            field names.

        Returns:
            ValidationResponse with failures grouped by field name.

        Raises:
            ConfigurationError: If a field is missing or a rule is attached to
                                a field of an incompatible type.
        """
        display_names = display_names or {}
        owner = type(instance)
        checks = [
            (FieldAccessor.for_field(owner, name, display_name=display_names.get(name)), field_rules)
            for name, field_rules in rules.items()
        ]
        return self.validate_fields(instance, checks)

    def validate_fields(self, instance: Any, checks: FieldChecks) -> ValidationResponse:
        """
        Validate ``instance`` using explicit accessors.

        Useful when the value does not live on an annotated attribute, or the
        caller wants to control the field name reported in messages.
        """
        errors: Dict[str, List[str]] = {}

        for accessor, field_rules in checks:
            for rule in field_rules:
                result = rule.validate_field(instance, accessor)
                if not result:
                    errors.setdefault(accessor.label, []).append(result.message or "")

        if errors:
            logger.info(
                "%s failed validation on %d field(s): %s",
                type(instance).__name__,
                len(errors),
                ", ".join(errors),
            )
        return ValidationResponse(valid=not errors, errors=errors)


# ── Module-level singleton ─────────────────────────────────────────────────────
# Controllers import this instance.  Tests construct ValidationService directly.

validation_service = ValidationService()
