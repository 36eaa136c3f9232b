"""
Request/response schemas for the travel pricing endpoints.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class CalculatePremiumRequest(BaseModel):
    insurance_type: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    plan_type: Optional[str] = None
    has_medical_expense: bool = False
    departure_date: Optional[str] = None
    arrival_date: Optional[str] = None
    currency_plan: Optional[str] = None
    travel_country: Optional[str] = None


class CalculatePremiumResponse(BaseModel):
    success: bool = True
    premium: int
    annual_premium: float
    short_term_rate: float
    period_days: int
    currency: Optional[str] = None


class GroupParticipantInput(BaseModel):
    age: Optional[int] = None
    gender: Optional[str] = None
    plan_type: Optional[str] = None
    has_medical_expense: bool = False


class CalculateGroupPremiumRequest(BaseModel):
    insurance_type: Optional[str] = None
    insured_persons: List[GroupParticipantInput] = Field(default_factory=list)
    departure_date: Optional[str] = None
    arrival_date: Optional[str] = None


class GroupParticipantResult(BaseModel):
    index: int
    age: int
    gender: str
    plan_type: str
    premium: int
    annual_premium: float
    short_term_rate: float


class CalculateGroupPremiumResponse(BaseModel):
    success: bool = True
    total_premium: int
    period_days: int
    insured_persons: List[GroupParticipantResult]


class ExchangeRateResponse(BaseModel):
    success: bool = True
    currency: str
    exchangeRate: float
    rateDate: str


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
