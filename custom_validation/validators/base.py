"""
custom_validation/validators/base.py

Shared vocabulary for all validation rules.

Design goals:
  - Rules never inspect objects by reflection on their own. A FieldAccessor
    is passed in instead, describing one named field: its declared type and
    how to read its value from an instance.
  - Validation failures are values (ValidationResult), not exceptions.
    Only integration mistakes raise, as ConfigurationError.
"""

from __future__ import annotations

import enum
import operator
import types
import typing
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple

from custom_validation.core.exceptions import ConfigurationError
from custom_validation.core.logger import get_logger

logger = get_logger(__name__)


# ── Result types ───────────────────────────────────────────────────────────────

class ValidationErrorCode(str, enum.Enum):
    """Category of an ordinary (user-facing) validation failure."""

    EMPTY_FILE = "EmptyFile"
    UNSUPPORTED_FILE_TYPE = "UnsupportedFileType"
    FUTURE_DATE = "FutureDate"
    BELOW_MINIMUM_AGE = "BelowMinimumAge"


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a single rule evaluation.

    A result with no ``code`` is a success. Failures carry a human-readable
    message and the names of the members (fields) it applies to, so a host
    can show the message next to the right input.

    Attributes:
        code         : Failure category, ``None`` on success.
        message      : User-facing message, ``None`` on success.
        member_names : Field names the failure applies to (may be empty).
    """

    code: Optional[ValidationErrorCode] = None
    message: Optional[str] = None
    member_names: Tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.code is None

    def __bool__(self) -> bool:
        return self.is_valid

    @classmethod
    def success(cls) -> "ValidationResult":
        return SUCCESS

    @classmethod
    def failure(
        cls,
        code: ValidationErrorCode,
        message: str,
        member_names: Tuple[str, ...] = (),
    ) -> "ValidationResult":
        return cls(code=code, message=message, member_names=tuple(member_names))


SUCCESS = ValidationResult()


# ── Field access ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class FieldAccessor:
    """
    Describes one named field of a target object.

    Attributes:
        name          : Attribute name on the instance.
        declared_type : The type the field is declared with (may be Optional).
        get_value     : Reads the field's runtime value from an instance.
        display_name  : Label used in messages; defaults to ``name``.
    """

    name: str
    declared_type: Any
    get_value: Callable[[Any], Any] = field(compare=False, repr=False)
    display_name: Optional[str] = None

    @property
    def label(self) -> str:
        return self.display_name or self.name

    @classmethod
    def for_field(
        cls,
        owner: type,
        name: str,
        display_name: Optional[str] = None,
    ) -> "FieldAccessor":
        """
        Build an accessor from the type annotations of ``owner``.

        Works for dataclasses, pydantic models and any annotated class.
        Read-only properties are supported through their return annotation.

        Raises:
            ConfigurationError: If ``owner`` declares no field called ``name``.
        """
        declared = _declared_type(owner, name)
        if declared is None:
            logger.error("%s has no field named '%s'.", owner.__name__, name)
            raise ConfigurationError(
                f"The object does not contain the property '{name}'"
            )
        return cls(
            name=name,
            declared_type=declared,
            get_value=operator.attrgetter(name),
            display_name=display_name,
        )


def _declared_type(owner: type, name: str) -> Any:
    # pydantic models expose resolved annotations per field.
    model_fields = getattr(owner, "model_fields", None)
    if isinstance(model_fields, dict) and name in model_fields:
        return model_fields[name].annotation

    try:
        hints = typing.get_type_hints(owner)
    except (NameError, TypeError):
        hints = getattr(owner, "__annotations__", {})
    if name in hints:
        return hints[name]

    prop = getattr(owner, name, None)
    if isinstance(prop, property) and prop.fget is not None:
        return typing.get_type_hints(prop.fget).get("return")
    return None


def declared_members(declared_type: Any) -> Tuple[Any, ...]:
    """
    Return the non-None members of a declared type.

    ``Optional[X]`` and ``X | None`` both yield ``(X,)``; a plain ``X``
    yields ``(X,)``.
    """
    origin = typing.get_origin(declared_type)
    if origin is typing.Union or origin is types.UnionType:
        return tuple(arg for arg in typing.get_args(declared_type) if arg is not type(None))
    return (declared_type,)


def is_declared_as(declared_type: Any, accepted: Tuple[type, ...]) -> bool:
    """True when every non-None member of ``declared_type`` is one of ``accepted``."""
    members = declared_members(declared_type)
    return bool(members) and all(
        isinstance(member, type) and issubclass(member, accepted) for member in members
    )


# ── Abstract base ──────────────────────────────────────────────────────────────

class ValidationRule(ABC):
    """
    Contract every validation rule must fulfil.

    Subclasses implement ``validate_value`` (the pure check) and list the
    field types they can be attached to in ``accepted_types``.
    ``validate_field`` adds the integration-time precondition checks.
    """

    #: Field types this rule may be attached to.
    accepted_types: Tuple[type, ...] = ()

    #: Whether failure messages use the accessor's display name.
    uses_display_name: bool = False

    @abstractmethod
    def validate_value(self, value: Any, field_name: str) -> ValidationResult:
        """
        Check one field value.

        Args:
            value      : The field's runtime value; may be ``None``.
            field_name : Name used in failure messages and member names.

        Returns:
            ValidationResult — success, or a failure with a message.
        """

    def validate_field(self, instance: Any, accessor: FieldAccessor) -> ValidationResult:
        """
        Check the field described by ``accessor`` on ``instance``.

        Raises:
            ConfigurationError: If the field's declared type is incompatible
                                with this rule.
        """
        self.check_declared_type(accessor)
        field_name = accessor.label if self.uses_display_name else accessor.name
        return self.validate_value(accessor.get_value(instance), field_name)

    def check_declared_type(self, accessor: FieldAccessor) -> None:
        if is_declared_as(accessor.declared_type, self.accepted_types):
            return

        accepted = " or ".join(t.__name__ for t in self.accepted_types)
        logger.error(
            "%s attached to '%s' declared as %r.",
            type(self).__name__,
            accessor.name,
            accessor.declared_type,
        )
        raise ConfigurationError(
            f"{type(self).__name__} is not valid on property '{accessor.name}' "
            f"of type {accessor.declared_type!r}. "
            f"It is only valid on {accepted} (optionally nullable)."
        )
