"""Dashboard Aggregator: read-only summary counts for the admin dashboard."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from redhope.core.domain_types import Role
from redhope.models.donation_request import DonationRequest
from redhope.models.funding import Funding
from redhope.models.user import User
from redhope.schemas.dashboard import DashboardStats


class DashboardAggregator:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def stats(self) -> DashboardStats:
        total_donors = await self.db.scalar(
            select(func.count()).select_from(User).where(User.role == Role.DONOR.value),
        )
        total_funding = await self.db.scalar(select(func.sum(Funding.amount)))
        total_requests = await self.db.scalar(
            select(func.count()).select_from(DonationRequest),
        )
        return DashboardStats(
            total_donors=total_donors or 0,
            total_funding=total_funding or 0,
            total_donation_requests=total_requests or 0,
        )
