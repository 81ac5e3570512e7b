"""Read-only shop statistics for the analytics and dashboard views."""

from collections.abc import Callable
from datetime import datetime

from ...shared.base import DomainService, ValueObject
from ..repositories.workshop_repository import WorkshopRepository
from ..value_objects.enums import TechnicianStatus, WorkOrderStatus


class ShopAnalytics(ValueObject):
    completed_services: int
    average_service_time: float
    total_revenue: float
    technician_utilization: float
    bay_utilization: float


class DashboardStats(ValueObject):
    total_technicians: int
    active_jobs: int
    available_technicians: int
    queue_count: int
    capacity_used: int
    bays_active: int
    low_stock_items: int
    last_updated: datetime


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


class ShopAnalyticsService(DomainService):
    """Aggregates over the completed history and the current shop state."""

    def __init__(
        self, repository: WorkshopRepository, clock: Callable[[], datetime]
    ) -> None:
        self._repository = repository
        self._clock = clock

    def analytics(self) -> ShopAnalytics:
        with self._repository.transaction():
            receipts = self._repository.list_receipts()
            snapshot = self._repository.snapshot()

        return ShopAnalytics(
            completed_services=len(receipts),
            average_service_time=round(_mean([r.predicted_hours for r in receipts]), 2),
            total_revenue=round(sum(r.amount for r in receipts), 2),
            technician_utilization=round(
                _mean([t.load_percent for t in snapshot.technicians]), 2
            ),
            bay_utilization=round(_mean([b.current_load for b in snapshot.bays]), 2),
        )

    def dashboard_stats(self) -> DashboardStats:
        """Headline counters for the shop floor dashboard."""
        with self._repository.transaction():
            snapshot = self._repository.snapshot()
            stock = self._repository.list_stock()

        technicians = snapshot.technicians
        orders = snapshot.work_orders
        return DashboardStats(
            total_technicians=len(technicians),
            active_jobs=sum(1 for o in orders if o.status == WorkOrderStatus.IN_PROGRESS),
            available_technicians=sum(
                1 for t in technicians if t.status == TechnicianStatus.AVAILABLE
            ),
            queue_count=snapshot.queued_order_count,
            capacity_used=round(_mean([t.load_percent for t in technicians])),
            bays_active=sum(1 for b in snapshot.bays if b.assigned_technician_ids),
            low_stock_items=sum(1 for item in stock if item.is_low),
            last_updated=self._clock(),
        )
