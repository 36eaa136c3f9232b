"""Currency selection for foreign-currency plans."""

from __future__ import annotations

import logging

from travel_premium.core.constants import (
    EUR,
    EURO_COUNTRIES,
    EURO_WORKING_HOLIDAY_PLAN,
    FOREIGN_CURRENCY_INSURANCE_TYPES,
    USD,
)
from travel_premium.models.rates import RateKey
from travel_premium.repositories.rate_repository import RateRepository

logger = logging.getLogger(__name__)


def is_foreign_currency_applicable(insurance_type: str, is_foreign_currency_plan: bool) -> bool:
    """Foreign-currency pricing only exists for long-stay insurance types."""
    return is_foreign_currency_plan and insurance_type in FOREIGN_CURRENCY_INSURANCE_TYPES


def is_euro_forced(requested_plan_type: str | None) -> bool:
    return requested_plan_type == EURO_WORKING_HOLIDAY_PLAN


class CurrencyResolver:
    """Picks USD or EUR for a foreign-currency quote."""

    def __init__(self, rate_repo: RateRepository):
        self._rate_repo = rate_repo

    def resolve(
        self,
        key: RateKey,
        requested_plan_type: str | None,
        destination_country: str | None,
    ) -> str:
        """Return the currency to price in.

        The euro working-holiday plan is always EUR. Eurozone destinations use
        EUR when a EUR row exists for the key, everything else is USD.
        """
        if is_euro_forced(requested_plan_type):
            logger.debug("Euro working-holiday plan forces EUR")
            return EUR

        if destination_country and destination_country.strip() in EURO_COUNTRIES:
            if self._rate_repo.has_foreign_premium_rate(key, EUR):
                logger.debug("EUR rate found for eurozone destination %s", destination_country)
                return EUR

        return USD
