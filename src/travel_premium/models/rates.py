"""Rate reference data models."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class RateKey:
    """Lookup key shared by base and foreign-currency premium tables."""

    insurance_type: str
    plan_type: str
    age: int
    gender: str
    has_medical_expense: bool

    def describe(self) -> str:
        """Render the key for diagnostic messages."""
        return (
            f"insurance_type={self.insurance_type}, plan_type={self.plan_type}, "
            f"age={self.age}, gender={self.gender}, "
            f"has_medical_expense={int(self.has_medical_expense)}"
        )


@dataclass(frozen=True)
class PremiumRate:
    id: int
    annual_premium: Decimal
    effective_from_date: str | None


@dataclass(frozen=True)
class ForeignCurrencyPremiumRate:
    id: int
    currency: str
    korean_premium: Decimal
    foreign_premium: Decimal
    effective_from_date: str | None


@dataclass(frozen=True)
class ShortTermRate:
    id: int
    period_days: int
    rate_percentage: Decimal


@dataclass(frozen=True)
class PlanAdditionalFee:
    id: int
    additional_fee: Decimal
    effective_from_date: str | None


@dataclass(frozen=True)
class ExchangeRate:
    id: int
    currency: str
    rate: Decimal
    rate_date: str
