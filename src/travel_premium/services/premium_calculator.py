"""Premium calculation for a single insured person."""

from __future__ import annotations

import logging
from decimal import ROUND_FLOOR, Decimal

from travel_premium.core.constants import (
    FULL_RATE_PERCENT,
    FULL_RATE_PERIOD_DAYS,
    OVERSEAS_TRAVEL,
    ROUNDING_UNIT,
    USD,
)
from travel_premium.core.errors import ExchangeRateNotFound, RateNotFound
from travel_premium.core.validation import (
    apply_age_plan_override,
    calculate_period_days,
    validate_age,
    validate_required_fields,
)
from travel_premium.models.premium import InsuredPerson, PremiumQuote, PremiumRequest
from travel_premium.models.rates import RateKey
from travel_premium.repositories.rate_repository import RateRepository
from travel_premium.services.currency_resolver import (
    CurrencyResolver,
    is_euro_forced,
    is_foreign_currency_applicable,
)

logger = logging.getLogger(__name__)

PREMIUM_NOT_FOUND_MESSAGE = "해당 조건의 보험료 정보를 찾을 수 없습니다."
FOREIGN_PREMIUM_NOT_FOUND_MESSAGE = "해당 조건의 외화 플랜 보험료 정보를 찾을 수 없습니다."
EURO_PLAN_NOT_FOUND_MESSAGE = "해당 조건의 워킹홀리데이(유로화플랜) 보험료 정보를 찾을 수 없습니다."
HUNDRED = Decimal("100")
ZERO = Decimal("0")


def round_down_premium(amount: Decimal) -> Decimal:
    """Truncate a premium to the 10 KRW unit, e.g. 317852.5 -> 317850."""
    units = (amount / ROUNDING_UNIT).to_integral_value(rounding=ROUND_FLOOR)
    return units * ROUNDING_UNIT


class PremiumCalculator:
    """Combines rate lookups into a final premium."""

    def __init__(self, rate_repo: RateRepository, currency_resolver: CurrencyResolver | None = None):
        self._rate_repo = rate_repo
        self._currency_resolver = currency_resolver or CurrencyResolver(rate_repo)

    def calculate_premium(self, request: PremiumRequest) -> PremiumQuote:
        """Validate a quoting request and price the insured person."""
        logger.debug(
            "Premium calculation requested: insurance_type=%s age=%s gender=%s plan_type=%s "
            "has_medical_expense=%s departure=%s arrival=%s foreign=%s country=%s",
            request.insurance_type,
            request.age,
            request.gender,
            request.plan_type,
            request.has_medical_expense,
            request.departure,
            request.arrival,
            request.is_foreign_currency_plan,
            request.destination_country,
        )
        validate_required_fields(
            {
                "insurance_type": request.insurance_type,
                "age": request.age,
                "gender": request.gender,
                "plan_type": request.plan_type,
                "departure": request.departure,
                "arrival": request.arrival,
            }
        )
        age = validate_age(request.age)
        period_days = calculate_period_days(request.departure, request.arrival)
        logger.debug("Insurance period resolved: period_days=%s", period_days)

        return self.price_person(
            request.insurance_type,
            InsuredPerson(
                age=age,
                gender=request.gender,
                plan_type=request.plan_type,
                has_medical_expense=bool(request.has_medical_expense),
            ),
            period_days,
            is_foreign_currency_plan=request.is_foreign_currency_plan,
            destination_country=request.destination_country,
        )

    def price_person(
        self,
        insurance_type: str,
        person: InsuredPerson,
        period_days: int,
        is_foreign_currency_plan: bool = False,
        destination_country: str | None = None,
        apply_additional_fee: bool = True,
    ) -> PremiumQuote:
        """Price one validated person for an already computed period."""
        final_plan_type = apply_age_plan_override(person.age, person.plan_type)
        if final_plan_type != person.plan_type:
            logger.debug(
                "Plan overridden by age: requested=%s final=%s age=%s",
                person.plan_type,
                final_plan_type,
                person.age,
            )

        key = RateKey(
            insurance_type=insurance_type,
            plan_type=final_plan_type,
            age=person.age,
            gender=person.gender,
            has_medical_expense=bool(person.has_medical_expense),
        )

        currency: str | None = None
        if is_foreign_currency_applicable(insurance_type, is_foreign_currency_plan):
            annual_premium, currency = self._foreign_annual_premium(
                key,
                person.plan_type,
                destination_country,
            )
        else:
            annual_premium = self._krw_annual_premium(key)

        short_term_rate = self.resolve_short_term_rate(insurance_type, period_days)
        additional_fee = ZERO
        if apply_additional_fee:
            additional_fee = self.resolve_additional_fee(insurance_type, final_plan_type)

        raw_premium = annual_premium * (short_term_rate / HUNDRED) + additional_fee
        premium = round_down_premium(raw_premium)
        logger.debug(
            "Premium calculated: annual=%s short_term_rate=%s additional_fee=%s raw=%s premium=%s",
            annual_premium,
            short_term_rate,
            additional_fee,
            raw_premium,
            premium,
        )

        return PremiumQuote(
            premium=premium,
            annual_premium=annual_premium,
            short_term_rate=short_term_rate,
            period_days=period_days,
            plan_type=final_plan_type,
            additional_fee=additional_fee,
            currency=currency,
        )

    def _krw_annual_premium(self, key: RateKey) -> Decimal:
        rate = self._rate_repo.find_premium_rate(key)
        if rate is None:
            raise RateNotFound(PREMIUM_NOT_FOUND_MESSAGE, key=key)
        logger.debug("Annual premium resolved: %s (rate id=%s)", rate.annual_premium, rate.id)
        return rate.annual_premium

    def _foreign_annual_premium(
        self,
        key: RateKey,
        requested_plan_type: str | None,
        destination_country: str | None,
    ) -> tuple[Decimal, str]:
        """Return korean + foreign * exchange rate, and the currency used."""
        forced = is_euro_forced(requested_plan_type)
        currency = self._currency_resolver.resolve(key, requested_plan_type, destination_country)
        rate = self._rate_repo.find_foreign_premium_rate(key, currency)

        if rate is None and currency != USD and not forced:
            logger.debug("No %s premium row, retrying with USD", currency)
            rate = self._rate_repo.find_foreign_premium_rate(key, USD)
            if rate is not None:
                currency = USD

        if rate is None:
            message = EURO_PLAN_NOT_FOUND_MESSAGE if forced else FOREIGN_PREMIUM_NOT_FOUND_MESSAGE
            raise RateNotFound(message, key=key)

        exchange_rate = self._rate_repo.find_latest_exchange_rate(currency)
        if exchange_rate is None:
            raise ExchangeRateNotFound(currency)

        annual_premium = rate.korean_premium + rate.foreign_premium * exchange_rate.rate
        logger.debug(
            "Foreign annual premium resolved: currency=%s korean=%s foreign=%s exchange_rate=%s annual=%s",
            currency,
            rate.korean_premium,
            rate.foreign_premium,
            exchange_rate.rate,
            annual_premium,
        )
        return annual_premium, currency

    def resolve_short_term_rate(self, insurance_type: str, period_days: int) -> Decimal:
        """Return the proration percentage for a trip length."""
        if period_days >= FULL_RATE_PERIOD_DAYS:
            logger.debug("Period of %s days uses the full annual rate", period_days)
            return FULL_RATE_PERCENT

        rate = self._rate_repo.find_short_term_rate(insurance_type, period_days)
        if rate is None:
            logger.warning(
                "No short-term bracket covers %s days for %s, applying %s%%",
                period_days,
                insurance_type,
                FULL_RATE_PERCENT,
            )
            return FULL_RATE_PERCENT

        logger.debug(
            "Short-term rate resolved: bracket=%s days rate=%s%%",
            rate.period_days,
            rate.rate_percentage,
        )
        return rate.rate_percentage

    def resolve_additional_fee(self, insurance_type: str, plan_type: str) -> Decimal:
        """Return the flat plan surcharge, which only overseas travel carries."""
        if insurance_type != OVERSEAS_TRAVEL:
            return ZERO

        fee = self._rate_repo.find_plan_additional_fee(insurance_type, plan_type)
        if fee is None:
            logger.warning("No additional fee registered for %s / %s, applying 0", insurance_type, plan_type)
            return ZERO

        logger.debug("Additional fee resolved: plan=%s fee=%s", plan_type, fee.additional_fee)
        return fee.additional_fee
