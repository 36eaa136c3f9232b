"""Tests for the display exchange rate lookup."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from travel_premium.core.errors import ExchangeRateNotFound, ValidationError

TODAY = date(2024, 6, 2)


def test_display_rate_prefers_yesterday(container, seeder) -> None:
    seeder.exchange_rate("USD", "1350", "2024-06-01")
    seeder.exchange_rate("USD", "1380", "2024-06-02")

    rate = container.exchange_rate_service.get_display_rate("usd", today=TODAY)

    assert rate.rate == Decimal("1350")
    assert rate.rate_date == "2024-06-01"


def test_display_rate_falls_back_to_latest(container, seeder) -> None:
    seeder.exchange_rate("EUR", "1440", "2024-05-20")
    seeder.exchange_rate("EUR", "1455", "2024-05-28")

    rate = container.exchange_rate_service.get_display_rate("EUR", today=TODAY)

    assert rate.rate == Decimal("1455")


def test_display_and_pricing_rates_can_differ(container, seeder) -> None:
    seeder.exchange_rate("USD", "1350", "2024-06-01")
    seeder.exchange_rate("USD", "1380", "2024-06-02")

    display = container.exchange_rate_service.get_display_rate("USD", today=TODAY)
    pricing = container.rate_repo.find_latest_exchange_rate("USD")

    assert display.rate == Decimal("1350")
    assert pricing.rate == Decimal("1380")


def test_display_rate_missing(container) -> None:
    with pytest.raises(ExchangeRateNotFound):
        container.exchange_rate_service.get_display_rate("USD", today=TODAY)


def test_display_rate_rejects_unknown_currency(container) -> None:
    with pytest.raises(ValidationError):
        container.exchange_rate_service.get_display_rate("JPY", today=TODAY)
