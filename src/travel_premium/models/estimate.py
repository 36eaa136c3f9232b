"""Estimate document models."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class EstimateParticipant:
    """One insured person listed on an estimate request."""

    sequence: int
    gender: str
    birth_date: str


@dataclass
class EstimateLine:
    sequence: int
    gender: str
    birth_date: str
    age: int
    plan_type: str
    premium: Decimal
    priced: bool = True


@dataclass
class EstimateQuote:
    """Priced estimate ready for document rendering."""

    insurance_type: str
    period_days: int
    lines: list[EstimateLine]
    total_premium: Decimal
