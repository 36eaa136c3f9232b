"""Shared fixtures for repository, service and API tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from travel_premium.core.config import AppConfig, DatabaseConfig, LoggingConfig, ServerConfig
from travel_premium.core.container import ServiceContainer, build_container
from travel_premium.repositories.db_pool import ThreadLocalConnection


class RateSeeder:
    """Inserts reference rows straight into the rate tables."""

    def __init__(self, pool: ThreadLocalConnection):
        self.pool = pool

    def premium(
        self,
        insurance_type,
        plan_type,
        age,
        gender,
        annual_premium,
        has_medical_expense=False,
        effective_from_date=None,
        is_active=True,
    ) -> int:
        cursor = self.pool.execute(
            """
            INSERT INTO premium_rates (
                insurance_type, plan_type, age, gender, has_medical_expense,
                annual_premium, effective_from_date, is_active
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                insurance_type,
                plan_type,
                age,
                gender,
                int(has_medical_expense),
                str(annual_premium),
                effective_from_date,
                int(is_active),
            ),
        )
        return int(cursor.lastrowid)

    def foreign(
        self,
        insurance_type,
        plan_type,
        age,
        gender,
        currency,
        korean_premium,
        foreign_premium,
        has_medical_expense=False,
        effective_from_date=None,
    ) -> int:
        cursor = self.pool.execute(
            """
            INSERT INTO foreign_currency_premium_rates (
                insurance_type, plan_type, age, gender, has_medical_expense,
                currency, korean_premium, foreign_premium, effective_from_date
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                insurance_type,
                plan_type,
                age,
                gender,
                int(has_medical_expense),
                currency,
                str(korean_premium),
                str(foreign_premium),
                effective_from_date,
            ),
        )
        return int(cursor.lastrowid)

    def short_term(self, insurance_type, period_days, rate_percentage, is_active=True) -> int:
        cursor = self.pool.execute(
            """
            INSERT INTO short_term_rates (insurance_type, period_days, rate_percentage, is_active)
            VALUES (?, ?, ?, ?)
            """,
            (insurance_type, period_days, str(rate_percentage), int(is_active)),
        )
        return int(cursor.lastrowid)

    def additional_fee(self, insurance_type, plan_type, fee, effective_from_date=None) -> int:
        cursor = self.pool.execute(
            """
            INSERT INTO plan_additional_fees (insurance_type, plan_type, additional_fee, effective_from_date)
            VALUES (?, ?, ?, ?)
            """,
            (insurance_type, plan_type, str(fee), effective_from_date),
        )
        return int(cursor.lastrowid)

    def exchange_rate(self, currency, rate, rate_date, is_active=True) -> int:
        cursor = self.pool.execute(
            """
            INSERT INTO exchange_rates (currency, exchange_rate, rate_date, is_active)
            VALUES (?, ?, ?, ?)
            """,
            (currency, str(rate), rate_date, int(is_active)),
        )
        return int(cursor.lastrowid)


def build_test_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        database=DatabaseConfig(path=str(tmp_path / "rates.db")),
        server=ServerConfig(host="127.0.0.1", port=8000),
        logging=LoggingConfig(level="DEBUG", format="%(levelname)s %(name)s: %(message)s"),
    )


@pytest.fixture
def container(tmp_path) -> ServiceContainer:
    built = build_container(build_test_config(tmp_path))
    yield built
    built.pool.close_connection()


@pytest.fixture
def seeder(container) -> RateSeeder:
    return RateSeeder(container.pool)
