"""Priced estimates for quote documents."""

from __future__ import annotations

import logging
import re
from datetime import date
from decimal import Decimal

from travel_premium.core.constants import (
    DOMESTIC_TRAVEL,
    ECONOMY_PLAN,
    LONG_STAY,
    OVERSEAS_TRAVEL,
)
from travel_premium.core.errors import RateNotFound, ValidationError
from travel_premium.core.validation import (
    apply_age_plan_override,
    calculate_period_days,
    validate_required_fields,
)
from travel_premium.models.estimate import EstimateLine, EstimateParticipant, EstimateQuote
from travel_premium.models.premium import InsuredPerson
from travel_premium.services.premium_calculator import PremiumCalculator

logger = logging.getLogger(__name__)

BIRTH_DATE_PATTERN = re.compile(r"^\d{8}$")
MALE = "남자"
FEMALE = "여자"
LONG_STAY_PRODUCT_MARKERS = ("long-term", "장기", "study", "working", "business")


def insurance_type_for_product(product_cd: str) -> str:
    """Map a product code to the insurance type used for rate lookups."""
    if "domestic" in product_cd or "국내" in product_cd:
        return DOMESTIC_TRAVEL
    if any(marker in product_cd for marker in LONG_STAY_PRODUCT_MARKERS):
        return LONG_STAY
    if "overseas" in product_cd or "해외" in product_cd:
        return OVERSEAS_TRAVEL
    return DOMESTIC_TRAVEL


def calculate_age(birth_date: str, today: date | None = None) -> int:
    """Return full years of age from a YYYYMMDD birth date."""
    if not BIRTH_DATE_PATTERN.match(birth_date or ""):
        raise ValidationError("생년월일은 YYYYMMDD 형식이어야 합니다.")
    try:
        birth = date(int(birth_date[:4]), int(birth_date[4:6]), int(birth_date[6:8]))
    except ValueError as exc:
        raise ValidationError("생년월일이 올바르지 않습니다.") from exc

    reference = today or date.today()
    age = reference.year - birth.year
    if (reference.month, reference.day) < (birth.month, birth.day):
        age -= 1
    if age < 0:
        raise ValidationError("생년월일은 미래 날짜를 허용하지 않습니다.")
    return age


class EstimateService:
    """Prices estimate participants on the default economy or children's plan."""

    def __init__(self, calculator: PremiumCalculator):
        self._calculator = calculator

    def quote_estimate(
        self,
        product_cd: str,
        start_date: date | str,
        end_date: date | str,
        participants: list[EstimateParticipant],
        today: date | None = None,
    ) -> EstimateQuote:
        """Price every participant of an estimate request.

        A participant whose premium row is missing stays on the document at 0
        and is flagged as unpriced, so the estimate is still produced.
        """
        validate_required_fields(
            {"product_cd": product_cd, "start_date": start_date, "end_date": end_date}
        )
        if not participants:
            raise ValidationError("피보험자 정보를 입력해주세요.")

        insurance_type = insurance_type_for_product(product_cd)
        period_days = calculate_period_days(start_date, end_date)

        lines: list[EstimateLine] = []
        total = Decimal("0")
        for participant in participants:
            age = calculate_age(participant.birth_date, today)
            plan_type = apply_age_plan_override(age, ECONOMY_PLAN)
            gender = MALE if participant.gender == MALE else FEMALE
            person = InsuredPerson(
                age=age,
                gender=gender,
                plan_type=plan_type,
                has_medical_expense=False,
            )

            try:
                premium = self._calculator.price_person(
                    insurance_type,
                    person,
                    period_days,
                    apply_additional_fee=False,
                ).premium
                priced = True
            except RateNotFound as exc:
                logger.warning(
                    "Estimate participant %s left unpriced: %s",
                    participant.sequence,
                    exc.key.describe() if exc.key else exc.message,
                )
                premium = Decimal("0")
                priced = False

            lines.append(
                EstimateLine(
                    sequence=participant.sequence,
                    gender=gender,
                    birth_date=participant.birth_date,
                    age=age,
                    plan_type=plan_type,
                    premium=premium,
                    priced=priced,
                )
            )
            total += premium

        return EstimateQuote(
            insurance_type=insurance_type,
            period_days=period_days,
            lines=lines,
            total_premium=total,
        )
