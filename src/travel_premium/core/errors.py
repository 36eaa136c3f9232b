"""Pricing error taxonomy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from travel_premium.models.rates import RateKey


class PricingError(Exception):
    """Base class for errors surfaced to quoting callers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PricingError, ValueError):
    """Caller input is missing or inconsistent."""


class RateNotFound(PricingError):
    """No premium row matches the requested lookup key."""

    def __init__(
        self,
        message: str,
        key: RateKey | None = None,
        participant_index: int | None = None,
    ):
        super().__init__(message)
        self.key = key
        self.participant_index = participant_index


class ExchangeRateNotFound(PricingError):
    """No active exchange rate is registered for a currency."""

    def __init__(self, currency: str, message: str | None = None):
        super().__init__(
            message or f"{currency} 환율 정보를 찾을 수 없습니다. 환율을 먼저 등록해주세요."
        )
        self.currency = currency
