"""Dependency Wiring: builds service components per request.

Invariants:
    - Every component gets the request-scoped AsyncSession from get_db
    - The payment gateway is resolved through get_payment_gateway so tests can override it
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from redhope.config import Settings, get_settings
from redhope.core.payment_protocols import PaymentGateway
from redhope.infrastructure.database import get_db
from redhope.infrastructure.payment_gateway import StripePaymentGateway
from redhope.services.dashboard_aggregator import DashboardAggregator
from redhope.services.donation_registry import DonationRegistry
from redhope.services.funding_reconciliation import FundingReconciliation
from redhope.services.user_directory import UserDirectory


def get_payment_gateway(
    settings: Settings = Depends(get_settings),
) -> PaymentGateway:
    return StripePaymentGateway(settings.stripe_secret_key)


def get_user_directory(db: AsyncSession = Depends(get_db)) -> UserDirectory:
    return UserDirectory(db)


def get_donation_registry(db: AsyncSession = Depends(get_db)) -> DonationRegistry:
    return DonationRegistry(db)


def get_dashboard_aggregator(
    db: AsyncSession = Depends(get_db),
) -> DashboardAggregator:
    return DashboardAggregator(db)


def get_funding_reconciliation(
    db: AsyncSession = Depends(get_db),
    gateway: PaymentGateway = Depends(get_payment_gateway),
    settings: Settings = Depends(get_settings),
) -> FundingReconciliation:
    return FundingReconciliation(
        db, gateway,
        site_domain=settings.site_domain,
        currency=settings.stripe_currency,
    )
