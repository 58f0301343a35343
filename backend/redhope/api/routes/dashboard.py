"""Dashboard Routes: aggregate statistics for the admin/volunteer dashboard."""

from fastapi import APIRouter, Depends

from redhope.api.dependencies import get_dashboard_aggregator
from redhope.api.guards import operation_guard, require_token
from redhope.services.dashboard_aggregator import DashboardAggregator

router = APIRouter(tags=["dashboard"], dependencies=[Depends(require_token)])


@router.get("/dashboard-stats")
async def dashboard_stats(
    aggregator: DashboardAggregator = Depends(get_dashboard_aggregator),
):
    with operation_guard("Failed to get dashboard stats"):
        return await aggregator.stats()
