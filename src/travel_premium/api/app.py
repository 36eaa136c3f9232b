"""
FastAPI service for travel premium quoting (thin API wrapper).

Endpoints:
- GET  /health
- POST /api/travel/calculate-premium
- POST /api/travel/calculate-group-premium
- GET  /api/travel/exchange-rate

The API layer stays thin:
- maps request bodies onto pricing models
- calls the pricing services
- translates pricing errors into status codes
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from travel_premium.api.schemas import (
    CalculateGroupPremiumRequest,
    CalculateGroupPremiumResponse,
    CalculatePremiumRequest,
    CalculatePremiumResponse,
    ErrorResponse,
    ExchangeRateResponse,
    GroupParticipantResult,
)
from travel_premium.core.constants import FOREIGN_CURRENCY_PLAN, USD
from travel_premium.core.container import ServiceContainer
from travel_premium.core.errors import ExchangeRateNotFound, RateNotFound, ValidationError
from travel_premium.core.validation import MISSING_FIELDS_MESSAGE
from travel_premium.models.premium import GroupPremiumRequest, InsuredPerson, PremiumRequest

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "보험료 계산 중 오류가 발생했습니다."
ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


def _container(request: Request) -> ServiceContainer:
    return request.app.state.container


def create_app(container: ServiceContainer) -> FastAPI:
    """Build the HTTP app around an already wired container."""
    app = FastAPI(title="Travel Premium Engine", version="0.1.0")
    app.state.container = container

    # -----------------------------
    # Error mapping
    # -----------------------------
    @app.exception_handler(RequestValidationError)
    async def _on_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
        return _error(400, MISSING_FIELDS_MESSAGE)

    @app.exception_handler(ValidationError)
    async def _on_validation(request: Request, exc: ValidationError) -> JSONResponse:
        return _error(400, exc.message)

    @app.exception_handler(RateNotFound)
    async def _on_rate_not_found(request: Request, exc: RateNotFound) -> JSONResponse:
        return _error(404, exc.message)

    @app.exception_handler(ExchangeRateNotFound)
    async def _on_exchange_rate_not_found(request: Request, exc: ExchangeRateNotFound) -> JSONResponse:
        return _error(404, exc.message)

    @app.exception_handler(Exception)
    async def _on_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path)
        return _error(500, INTERNAL_ERROR_MESSAGE)

    # -----------------------------
    # Routes
    # -----------------------------
    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {"status": "ok"}

    @app.post(
        "/api/travel/calculate-premium",
        response_model=CalculatePremiumResponse,
        response_model_exclude_none=True,
        responses=ERROR_RESPONSES,
    )
    def calculate_premium(body: CalculatePremiumRequest, request: Request) -> Dict[str, Any]:
        quote = _container(request).premium_calculator.calculate_premium(
            PremiumRequest(
                insurance_type=body.insurance_type,
                age=body.age,
                gender=body.gender,
                plan_type=body.plan_type,
                departure=body.departure_date,
                arrival=body.arrival_date,
                has_medical_expense=body.has_medical_expense,
                is_foreign_currency_plan=body.currency_plan == FOREIGN_CURRENCY_PLAN,
                destination_country=body.travel_country,
            )
        )
        response: Dict[str, Any] = {
            "success": True,
            "premium": int(quote.premium),
            "annual_premium": float(quote.annual_premium),
            "short_term_rate": float(quote.short_term_rate),
            "period_days": quote.period_days,
        }
        if quote.currency is not None:
            response["currency"] = quote.currency
        return response

    @app.post(
        "/api/travel/calculate-group-premium",
        response_model=CalculateGroupPremiumResponse,
        responses=ERROR_RESPONSES,
    )
    def calculate_group_premium(body: CalculateGroupPremiumRequest, request: Request) -> Dict[str, Any]:
        quote = _container(request).group_premium_service.calculate_group_premium(
            GroupPremiumRequest(
                insurance_type=body.insurance_type,
                departure=body.departure_date,
                arrival=body.arrival_date,
                participants=[
                    InsuredPerson(
                        age=person.age,
                        gender=person.gender,
                        plan_type=person.plan_type,
                        has_medical_expense=person.has_medical_expense,
                    )
                    for person in body.insured_persons
                ],
            )
        )
        return {
            "success": True,
            "total_premium": int(quote.total_premium),
            "period_days": quote.period_days,
            "insured_persons": [
                GroupParticipantResult(
                    index=line.index,
                    age=line.age,
                    gender=line.gender,
                    plan_type=line.plan_type,
                    premium=int(line.premium),
                    annual_premium=float(line.annual_premium),
                    short_term_rate=float(line.short_term_rate),
                )
                for line in quote.participants
            ],
        }

    @app.get(
        "/api/travel/exchange-rate",
        response_model=ExchangeRateResponse,
        responses=ERROR_RESPONSES,
    )
    def exchange_rate(request: Request, currency: str = Query(USD)) -> Dict[str, Any]:
        rate = _container(request).exchange_rate_service.get_display_rate(currency)
        return {
            "success": True,
            "currency": rate.currency,
            "exchangeRate": float(rate.rate),
            "rateDate": rate.rate_date,
        }

    return app
