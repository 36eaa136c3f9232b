"""Application dependency container."""

from __future__ import annotations

from dataclasses import dataclass

from travel_premium.core.config import AppConfig, load_config
from travel_premium.repositories.db_pool import ThreadLocalConnection
from travel_premium.repositories.rate_repository import RateRepository
from travel_premium.repositories.schema import initialize_schema
from travel_premium.services.currency_resolver import CurrencyResolver
from travel_premium.services.estimate_service import EstimateService
from travel_premium.services.exchange_rate_service import ExchangeRateService
from travel_premium.services.group_premium_service import GroupPremiumService
from travel_premium.services.premium_calculator import PremiumCalculator


@dataclass
class ServiceContainer:
    """Wires repositories and services."""

    config: AppConfig
    pool: ThreadLocalConnection
    rate_repo: RateRepository
    premium_calculator: PremiumCalculator
    group_premium_service: GroupPremiumService
    exchange_rate_service: ExchangeRateService
    estimate_service: EstimateService


def build_container(config: AppConfig | None = None) -> ServiceContainer:
    """Build dependencies and initialize schema."""
    config = config or load_config()

    pool = ThreadLocalConnection(config.database)
    initialize_schema(pool)

    rate_repo = RateRepository(pool)
    calculator = PremiumCalculator(rate_repo, CurrencyResolver(rate_repo))

    return ServiceContainer(
        config=config,
        pool=pool,
        rate_repo=rate_repo,
        premium_calculator=calculator,
        group_premium_service=GroupPremiumService(calculator),
        exchange_rate_service=ExchangeRateService(rate_repo),
        estimate_service=EstimateService(calculator),
    )
