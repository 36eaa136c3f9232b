"""Input validation rules for premium quoting requests."""

from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta, timezone
from typing import Any

from travel_premium.core.constants import CHILD_AGE_LIMIT, CHILDREN_PLAN
from travel_premium.core.errors import ValidationError
from travel_premium.models.premium import InsuredPerson

MISSING_FIELDS_MESSAGE = "필수 파라미터가 누락되었습니다."
PERIOD_ORDER_MESSAGE = "도착일시는 출발일시보다 이후여야 합니다."
ONE_DAY = timedelta(days=1)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def validate_required_fields(fields: dict[str, Any]) -> None:
    """Raise when any required field is absent or blank."""
    missing = [name for name, value in fields.items() if _is_missing(value)]
    if missing:
        raise ValidationError(MISSING_FIELDS_MESSAGE)


def validate_age(age: Any) -> int:
    """Validate insurance age as a non-negative integer."""
    if isinstance(age, bool) or (isinstance(age, float) and not age.is_integer()):
        raise ValidationError("나이는 0 이상의 정수여야 합니다.")
    try:
        normalized = int(age)
    except (TypeError, ValueError) as exc:
        raise ValidationError("나이는 0 이상의 정수여야 합니다.") from exc
    if normalized < 0:
        raise ValidationError("나이는 0 이상의 정수여야 합니다.")
    return normalized


def parse_instant(value: datetime | date | str, field_name: str) -> datetime:
    """Parse a travel instant into a naive UTC datetime."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif not isinstance(value, str):
        raise ValidationError(f"{field_name} 형식이 올바르지 않습니다.")
    else:
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise ValidationError(f"{field_name} 형식이 올바르지 않습니다.") from exc

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def calculate_period_days(
    departure: datetime | date | str,
    arrival: datetime | date | str,
) -> int:
    """Return the trip length in whole days, rounding half a day up."""
    start = parse_instant(departure, "출발일시")
    end = parse_instant(arrival, "도착일시")
    period_days = math.floor((end - start) / ONE_DAY + 0.5)
    if period_days <= 0:
        raise ValidationError(PERIOD_ORDER_MESSAGE)
    return period_days


def apply_age_plan_override(age: int, plan_type: str) -> str:
    """Children under the age limit are always quoted on the children's plan."""
    if age < CHILD_AGE_LIMIT:
        return CHILDREN_PLAN
    return plan_type


def validate_participants(participants: list[InsuredPerson] | None) -> list[InsuredPerson]:
    """Validate a group participant list and normalize ages."""
    if not participants:
        raise ValidationError("피보험자 정보를 입력해주세요.")

    normalized: list[InsuredPerson] = []
    for index, person in enumerate(participants, start=1):
        if _is_missing(person.age) or _is_missing(person.gender) or _is_missing(person.plan_type):
            raise ValidationError(f"{index}번째 피보험자의 필수 정보가 누락되었습니다.")
        normalized.append(
            InsuredPerson(
                age=validate_age(person.age),
                gender=str(person.gender).strip(),
                plan_type=str(person.plan_type).strip(),
                has_medical_expense=bool(person.has_medical_expense),
            )
        )
    return normalized
