"""Database schema management."""

from __future__ import annotations

from travel_premium.repositories.db_pool import ThreadLocalConnection


def initialize_schema(pool: ThreadLocalConnection) -> None:
    """Create rate tables and indexes if they do not exist."""
    pool.execute(
        """
        CREATE TABLE IF NOT EXISTS premium_rates (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            insurance_type TEXT NOT NULL,
            plan_type TEXT NOT NULL,
            age INTEGER NOT NULL,
            gender TEXT NOT NULL,
            has_medical_expense INTEGER NOT NULL DEFAULT 0,
            annual_premium TEXT NOT NULL,
            effective_from_date TEXT,
            is_active INTEGER NOT NULL DEFAULT 1,
            created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
        """
    )

    pool.execute(
        """
        CREATE TABLE IF NOT EXISTS foreign_currency_premium_rates (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            insurance_type TEXT NOT NULL,
            plan_type TEXT NOT NULL,
            age INTEGER NOT NULL,
            gender TEXT NOT NULL,
            has_medical_expense INTEGER NOT NULL DEFAULT 0,
            currency TEXT NOT NULL CHECK (currency IN ('USD', 'EUR')),
            korean_premium TEXT NOT NULL,
            foreign_premium TEXT NOT NULL,
            effective_from_date TEXT,
            is_active INTEGER NOT NULL DEFAULT 1,
            created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
        """
    )

    pool.execute(
        """
        CREATE TABLE IF NOT EXISTS short_term_rates (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            insurance_type TEXT NOT NULL,
            period_days INTEGER NOT NULL,
            rate_percentage TEXT NOT NULL,
            is_active INTEGER NOT NULL DEFAULT 1,
            created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
        """
    )

    pool.execute(
        """
        CREATE TABLE IF NOT EXISTS plan_additional_fees (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            insurance_type TEXT NOT NULL,
            plan_type TEXT NOT NULL,
            additional_fee TEXT NOT NULL,
            effective_from_date TEXT,
            is_active INTEGER NOT NULL DEFAULT 1,
            created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
        """
    )

    pool.execute(
        """
        CREATE TABLE IF NOT EXISTS exchange_rates (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            currency TEXT NOT NULL,
            exchange_rate TEXT NOT NULL,
            rate_date TEXT NOT NULL,
            is_active INTEGER NOT NULL DEFAULT 1,
            created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
        """
    )

    pool.execute(
        """
        CREATE INDEX IF NOT EXISTS idx_premium_rates_lookup
        ON premium_rates(insurance_type, plan_type, age, gender, has_medical_expense)
        """
    )
    pool.execute(
        """
        CREATE INDEX IF NOT EXISTS idx_foreign_rates_lookup
        ON foreign_currency_premium_rates(
            insurance_type, plan_type, age, gender, has_medical_expense, currency
        )
        """
    )
    pool.execute(
        "CREATE INDEX IF NOT EXISTS idx_short_term_rates_lookup "
        "ON short_term_rates(insurance_type, period_days)"
    )
    pool.execute(
        "CREATE INDEX IF NOT EXISTS idx_plan_fees_lookup "
        "ON plan_additional_fees(insurance_type, plan_type)"
    )
    pool.execute(
        "CREATE INDEX IF NOT EXISTS idx_exchange_rates_lookup "
        "ON exchange_rates(currency, rate_date)"
    )
