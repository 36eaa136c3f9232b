"""Exchange rate lookup for display."""

from __future__ import annotations

from datetime import date, timedelta

from travel_premium.core.constants import EUR, USD
from travel_premium.core.errors import ExchangeRateNotFound, ValidationError
from travel_premium.models.rates import ExchangeRate
from travel_premium.repositories.rate_repository import RateRepository

SUPPORTED_CURRENCIES = (USD, EUR)


class ExchangeRateService:
    """Serves the rate shown to customers, which prefers yesterday's rate.

    Pricing does not use this lookup; it always takes the latest active rate.
    """

    def __init__(self, rate_repo: RateRepository):
        self._rate_repo = rate_repo

    def get_display_rate(self, currency: str = USD, today: date | None = None) -> ExchangeRate:
        """Return yesterday's rate, falling back to the latest registered one."""
        normalized = currency.strip().upper()
        if normalized not in SUPPORTED_CURRENCIES:
            raise ValidationError("지원하지 않는 통화입니다.")

        yesterday = (today or date.today()) - timedelta(days=1)
        rate = self._rate_repo.find_exchange_rate_on(normalized, yesterday.isoformat())
        if rate is None:
            rate = self._rate_repo.find_latest_exchange_rate(normalized)
        if rate is None:
            raise ExchangeRateNotFound(normalized, f"{normalized} 환율 정보를 찾을 수 없습니다.")
        return rate
