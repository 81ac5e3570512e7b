from fastapi import APIRouter

from ...application.dtos import AnalyticsResponse, DashboardStatsResponse
from ..deps import AnalyticsServiceDep

router = APIRouter(tags=["analytics"])


@router.get("/analytics", response_model=AnalyticsResponse)
def get_analytics(service: AnalyticsServiceDep) -> AnalyticsResponse:
    """Completed-service totals and current utilization."""
    return AnalyticsResponse.from_analytics(service.analytics())


@router.get("/dashboard-stats", response_model=DashboardStatsResponse)
def get_dashboard_stats(service: AnalyticsServiceDep) -> DashboardStatsResponse:
    return DashboardStatsResponse.from_stats(service.dashboard_stats())
