"""Read-only repository over the premium rate tables."""

from __future__ import annotations

import sqlite3
from decimal import Decimal
from typing import Any

from travel_premium.models.rates import (
    ExchangeRate,
    ForeignCurrencyPremiumRate,
    PlanAdditionalFee,
    PremiumRate,
    RateKey,
    ShortTermRate,
)
from travel_premium.repositories.db_pool import ThreadLocalConnection

LATEST_EFFECTIVE_ORDER = "ORDER BY COALESCE(effective_from_date, '1900-01-01') DESC, id DESC"
RATE_KEY_WHERE = (
    "insurance_type = ? AND plan_type = ? AND age = ? AND gender = ? "
    "AND has_medical_expense = ?"
)


def _to_decimal(value: Any) -> Decimal:
    return Decimal(str(value))


def _key_params(key: RateKey) -> tuple[Any, ...]:
    return (
        key.insurance_type,
        key.plan_type,
        key.age,
        key.gender,
        1 if key.has_medical_expense else 0,
    )


class RateRepository:
    """Resolves the active rate rows used by premium calculation."""

    def __init__(self, pool: ThreadLocalConnection):
        self._pool = pool

    def _latest_effective(
        self,
        table: str,
        columns: str,
        where: str,
        params: tuple[Any, ...],
    ) -> sqlite3.Row | None:
        """Return the newest effective active row, nulls oldest, highest id on ties."""
        return self._pool.fetchone(
            f"""
            SELECT id, {columns}, effective_from_date
            FROM {table}
            WHERE {where}
              AND is_active = 1
            {LATEST_EFFECTIVE_ORDER}
            LIMIT 1
            """,
            params,
        )

    def find_premium_rate(self, key: RateKey) -> PremiumRate | None:
        """Fetch the active KRW annual premium for a rate key."""
        row = self._latest_effective(
            "premium_rates",
            "annual_premium",
            RATE_KEY_WHERE,
            _key_params(key),
        )
        if not row:
            return None
        return PremiumRate(
            id=row["id"],
            annual_premium=_to_decimal(row["annual_premium"]),
            effective_from_date=row["effective_from_date"],
        )

    def find_foreign_premium_rate(
        self,
        key: RateKey,
        currency: str,
    ) -> ForeignCurrencyPremiumRate | None:
        """Fetch the active foreign-currency premium split for a rate key."""
        row = self._latest_effective(
            "foreign_currency_premium_rates",
            "currency, korean_premium, foreign_premium",
            f"{RATE_KEY_WHERE} AND currency = ?",
            _key_params(key) + (currency,),
        )
        if not row:
            return None
        return ForeignCurrencyPremiumRate(
            id=row["id"],
            currency=row["currency"],
            korean_premium=_to_decimal(row["korean_premium"]),
            foreign_premium=_to_decimal(row["foreign_premium"]),
            effective_from_date=row["effective_from_date"],
        )

    def has_foreign_premium_rate(self, key: RateKey, currency: str) -> bool:
        """Return whether any active foreign-currency row exists for a key."""
        row = self._pool.fetchone(
            f"""
            SELECT 1
            FROM foreign_currency_premium_rates
            WHERE {RATE_KEY_WHERE}
              AND currency = ?
              AND is_active = 1
            LIMIT 1
            """,
            _key_params(key) + (currency,),
        )
        return row is not None

    def find_short_term_rate(self, insurance_type: str, period_days: int) -> ShortTermRate | None:
        """Fetch the smallest short-term bracket covering the trip length."""
        row = self._pool.fetchone(
            """
            SELECT id, period_days, rate_percentage
            FROM short_term_rates
            WHERE insurance_type = ?
              AND period_days >= ?
              AND is_active = 1
            ORDER BY period_days ASC, id DESC
            LIMIT 1
            """,
            (insurance_type, period_days),
        )
        if not row:
            return None
        return ShortTermRate(
            id=row["id"],
            period_days=int(row["period_days"]),
            rate_percentage=_to_decimal(row["rate_percentage"]),
        )

    def find_plan_additional_fee(
        self,
        insurance_type: str,
        plan_type: str,
    ) -> PlanAdditionalFee | None:
        """Fetch the active flat surcharge for a plan."""
        row = self._latest_effective(
            "plan_additional_fees",
            "additional_fee",
            "insurance_type = ? AND plan_type = ?",
            (insurance_type, plan_type),
        )
        if not row:
            return None
        return PlanAdditionalFee(
            id=row["id"],
            additional_fee=_to_decimal(row["additional_fee"]),
            effective_from_date=row["effective_from_date"],
        )

    def find_latest_exchange_rate(self, currency: str) -> ExchangeRate | None:
        """Fetch the most recent active rate for a currency, regardless of date."""
        row = self._pool.fetchone(
            """
            SELECT id, currency, exchange_rate, rate_date
            FROM exchange_rates
            WHERE currency = ?
              AND is_active = 1
            ORDER BY rate_date DESC, id DESC
            LIMIT 1
            """,
            (currency,),
        )
        return self._to_exchange_rate(row)

    def find_exchange_rate_on(self, currency: str, rate_date: str) -> ExchangeRate | None:
        """Fetch the active rate registered for one date."""
        row = self._pool.fetchone(
            """
            SELECT id, currency, exchange_rate, rate_date
            FROM exchange_rates
            WHERE currency = ?
              AND rate_date = ?
              AND is_active = 1
            ORDER BY id DESC
            LIMIT 1
            """,
            (currency, rate_date),
        )
        return self._to_exchange_rate(row)

    @staticmethod
    def _to_exchange_rate(row: sqlite3.Row | None) -> ExchangeRate | None:
        if not row:
            return None
        return ExchangeRate(
            id=row["id"],
            currency=row["currency"],
            rate=_to_decimal(row["exchange_rate"]),
            rate_date=str(row["rate_date"]),
        )
