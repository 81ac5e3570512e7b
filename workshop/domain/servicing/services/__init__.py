from .analytics_service import DashboardStats, ShopAnalytics, ShopAnalyticsService
from .duration_estimator import DurationEstimator
from .resource_allocation_service import (
    AllocationDecision,
    AllocationPolicy,
    ResourceAllocationService,
)
from .shop_resource_service import ShopResourceService
from .work_order_service import WorkOrderResult, WorkOrderService

__all__ = [
    "AllocationDecision",
    "AllocationPolicy",
    "DashboardStats",
    "DurationEstimator",
    "ResourceAllocationService",
    "ShopAnalytics",
    "ShopAnalyticsService",
    "ShopResourceService",
    "WorkOrderResult",
    "WorkOrderService",
]
