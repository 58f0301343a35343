"""Dashboard Schemas."""

from redhope.schemas.common import WireModel


class DashboardStats(WireModel):
    total_donors: int
    total_funding: int | float
    total_donation_requests: int
