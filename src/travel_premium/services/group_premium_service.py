"""Group premium aggregation over a shared trip window."""

from __future__ import annotations

import logging
from decimal import Decimal

from travel_premium.core.errors import RateNotFound
from travel_premium.core.validation import (
    calculate_period_days,
    validate_participants,
    validate_required_fields,
)
from travel_premium.models.premium import GroupPremiumQuote, GroupPremiumRequest, ParticipantQuote
from travel_premium.services.premium_calculator import PremiumCalculator

logger = logging.getLogger(__name__)


class GroupPremiumService:
    """Prices every participant of a group request and totals the result."""

    def __init__(self, calculator: PremiumCalculator):
        self._calculator = calculator

    def calculate_group_premium(self, request: GroupPremiumRequest) -> GroupPremiumQuote:
        """Price each participant on the KRW path and sum per-person premiums.

        Each premium is rounded before summation. The first participant without
        a premium row fails the whole batch, naming its 1-based position.
        """
        validate_required_fields(
            {
                "insurance_type": request.insurance_type,
                "departure": request.departure,
                "arrival": request.arrival,
            }
        )
        participants = validate_participants(request.participants)
        period_days = calculate_period_days(request.departure, request.arrival)
        logger.debug(
            "Group premium requested: insurance_type=%s participants=%s period_days=%s",
            request.insurance_type,
            len(participants),
            period_days,
        )

        quotes: list[ParticipantQuote] = []
        total = Decimal("0")
        for index, person in enumerate(participants, start=1):
            try:
                quote = self._calculator.price_person(request.insurance_type, person, period_days)
            except RateNotFound as exc:
                key_text = exc.key.describe() if exc.key else "unknown"
                raise RateNotFound(
                    f"{index}번째 피보험자: {exc.message} ({key_text})",
                    key=exc.key,
                    participant_index=index,
                ) from exc

            quotes.append(
                ParticipantQuote(
                    index=index,
                    age=person.age,
                    gender=person.gender,
                    plan_type=quote.plan_type,
                    premium=quote.premium,
                    annual_premium=quote.annual_premium,
                    short_term_rate=quote.short_term_rate,
                )
            )
            total += quote.premium

        logger.debug("Group premium calculated: total=%s", total)
        return GroupPremiumQuote(total_premium=total, period_days=period_days, participants=quotes)
