"""
custom_validation/validators/min_age.py

Minimum-age rule for date-of-birth fields.

Age is measured with calendar arithmetic rather than fixed-length
durations: the time elapsed since the date of birth is laid out from a
fixed epoch, and compared with the epoch advanced by the required years,
months and days. "1 month" therefore follows real month lengths instead
of meaning 30 × 24 h.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Any, Callable, Optional, Union

from custom_validation.core.constants import FUTURE_DATE_MESSAGE, MIN_AGE_MESSAGE
from custom_validation.core.exceptions import ConfigurationError
from custom_validation.core.logger import get_logger
from custom_validation.validators.base import (
    FieldAccessor,
    ValidationErrorCode,
    ValidationResult,
    ValidationRule,
)

logger = get_logger(__name__)

#: Origin for both the elapsed-age point and the threshold point.
EPOCH: datetime = datetime.min

DateLike = Union[date, datetime]


# ── Calendar helpers ───────────────────────────────────────────────────────────

def add_calendar(start: datetime, years: int = 0, months: int = 0, days: int = 0) -> datetime:
    """
    Advance ``start`` by years, then months, then days.

    Month steps clamp the day to the target month's length
    (Jan 31 + 1 month → Feb 28/29).
    """
    month_index = start.month - 1 + months
    year = start.year + years + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return start.replace(year=year, month=month, day=day) + timedelta(days=days)


def _as_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        moment = value
    else:
        moment = datetime.combine(value, time.min)
    # Aware values are compared in local wall-clock time.
    if moment.tzinfo is not None:
        moment = moment.astimezone().replace(tzinfo=None)
    return moment


# ── Requirement ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class AgeRequirement:
    """
    Minimum elapsed time since a date of birth.

    Attributes:
        years  : Whole years, >= 0.
        months : Whole months, >= 0 (normally 0–11).
        days   : Whole days, >= 0 (normally 0–31).

    A requirement with every component at zero has no effect.
    """

    years: int = 0
    months: int = 0
    days: int = 0

    def __post_init__(self) -> None:
        for name in ("years", "months", "days"):
            component = getattr(self, name)
            if not isinstance(component, int) or isinstance(component, bool) or component < 0:
                raise ConfigurationError(
                    f"Minimum age {name} must be a non-negative integer, got {component!r}."
                )
        try:
            object.__setattr__(
                self, "_threshold", add_calendar(EPOCH, self.years, self.months, self.days)
            )
        except (ValueError, OverflowError) as exc:
            raise ConfigurationError(f"Minimum age {self} is out of range: {exc}") from exc

    @property
    def is_active(self) -> bool:
        return self.years > 0 or self.months > 0 or self.days > 0

    @property
    def threshold(self) -> datetime:
        """The epoch advanced by this requirement."""
        return self._threshold  # type: ignore[attr-defined]

    def describe(self) -> str:
        """Positive components only, e.g. ``"5 years 3 days"``."""
        parts = []
        if self.years > 0:
            parts.append(f"{self.years} years")
        if self.months > 0:
            parts.append(f"{self.months} months")
        if self.days > 0:
            parts.append(f"{self.days} days")
        return " ".join(parts)


# ── Rule ───────────────────────────────────────────────────────────────────────

class MinAgeValidator(ValidationRule):
    """
    Checks that a date of birth is not in the future and meets a minimum age.

    ``None`` values always pass. Meeting the requirement exactly passes.
    """

    accepted_types = (date,)   # datetime is a date subclass

    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        days: int = 0,
        error_message: Optional[str] = None,
        clock: Optional[Callable[[], DateLike]] = None,
    ) -> None:
        """
        Args:
            years, months, days : The minimum age.
            error_message       : Replaces the default below-minimum message.
            clock               : Returns "now"; defaults to ``datetime.now``.
                                  Tests inject a fixed clock.
        """
        self.requirement = AgeRequirement(years, months, days)
        self.error_message = error_message
        self._clock: Callable[[], DateLike] = clock or datetime.now

    @classmethod
    def from_requirement(
        cls,
        requirement: AgeRequirement,
        error_message: Optional[str] = None,
        clock: Optional[Callable[[], DateLike]] = None,
    ) -> "MinAgeValidator":
        return cls(
            requirement.years,
            requirement.months,
            requirement.days,
            error_message=error_message,
            clock=clock,
        )

    def validate_value(self, value: Optional[DateLike], field_name: str) -> ValidationResult:
        if value is None:
            return ValidationResult.success()

        date_of_birth = _as_datetime(value)
        now = _as_datetime(self._clock())

        if date_of_birth > now:
            logger.debug("'%s' — %s is in the future.", field_name, date_of_birth)
            return ValidationResult.failure(
                ValidationErrorCode.FUTURE_DATE,
                FUTURE_DATE_MESSAGE.format(field_name),
            )

        if not self.requirement.is_active:
            return ValidationResult.success()

        age_point = EPOCH + (now - date_of_birth)
        if age_point >= self.requirement.threshold:
            return ValidationResult.success()

        logger.debug(
            "'%s' — %s is below the minimum age (%s).",
            field_name,
            date_of_birth,
            self.requirement.describe(),
        )
        message = self.error_message or MIN_AGE_MESSAGE.format(self.requirement.describe())
        return ValidationResult.failure(
            ValidationErrorCode.BELOW_MINIMUM_AGE,
            message,
            member_names=(field_name,),
        )


def validate_min_age(
    field_value: Optional[DateLike],
    requirement: AgeRequirement,
    field_name: str,
    error_message: Optional[str] = None,
    now: Optional[DateLike] = None,
) -> ValidationResult:
    """Functional form of :class:`MinAgeValidator`."""
    clock = (lambda: now) if now is not None else None
    rule = MinAgeValidator.from_requirement(requirement, error_message=error_message, clock=clock)
    return rule.validate_value(field_value, field_name)


def validate_min_age_field(
    instance: Any,
    field_name: str,
    years: int = 0,
    months: int = 0,
    days: int = 0,
    error_message: Optional[str] = None,
) -> ValidationResult:
    """
    Validate the date field ``field_name`` of ``instance``.

    For rules whose thresholds come from a database, a settings file or any
    other runtime source, rather than from a declaration.

    Raises:
        ConfigurationError: If the field is missing or not a date type.
    """
    accessor = FieldAccessor.for_field(type(instance), field_name)
    return MinAgeValidator(years, months, days, error_message=error_message).validate_field(
        instance, accessor
    )
