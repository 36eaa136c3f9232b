"""Premium quoting models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal


@dataclass
class InsuredPerson:
    """Per-person attributes that select a premium row."""

    age: int | None
    gender: str | None
    plan_type: str | None
    has_medical_expense: bool = False


@dataclass
class PremiumRequest:
    """Input model for a single-person premium calculation."""

    insurance_type: str | None
    age: int | None
    gender: str | None
    plan_type: str | None
    departure: datetime | date | str | None
    arrival: datetime | date | str | None
    has_medical_expense: bool = False
    is_foreign_currency_plan: bool = False
    destination_country: str | None = None


@dataclass
class PremiumQuote:
    """Output model for one priced person."""

    premium: Decimal
    annual_premium: Decimal
    short_term_rate: Decimal
    period_days: int
    plan_type: str
    additional_fee: Decimal = Decimal("0")
    currency: str | None = None


@dataclass
class GroupPremiumRequest:
    """Input model for a shared-window batch of insured persons."""

    insurance_type: str | None
    departure: datetime | date | str | None
    arrival: datetime | date | str | None
    participants: list[InsuredPerson] = field(default_factory=list)


@dataclass
class ParticipantQuote:
    """Per-participant line of a group quote."""

    index: int
    age: int
    gender: str
    plan_type: str
    premium: Decimal
    annual_premium: Decimal
    short_term_rate: Decimal


@dataclass
class GroupPremiumQuote:
    """Output model for a group quote."""

    total_premium: Decimal
    period_days: int
    participants: list[ParticipantQuote]
