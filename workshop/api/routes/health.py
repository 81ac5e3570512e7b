"""
Health Check API Routes

Reports whether the shop state is reachable and how full the shop is.
"""

from fastapi import APIRouter

from ...core.observability import get_logger
from ..deps import ClockDep, RepositoryDep, SettingsDep

logger = get_logger(__name__)
router = APIRouter()


@router.get("/health", summary="Overall system health")
def get_health_status(
    repository: RepositoryDep, clock: ClockDep, app_settings: SettingsDep
) -> dict[str, object]:
    with repository.transaction():
        snapshot = repository.snapshot()

    response = {
        "status": "healthy",
        "timestamp": clock().isoformat(),
        "environment": app_settings.ENVIRONMENT,
        "technicians": len(snapshot.technicians),
        "bays": len(snapshot.bays),
        "live_work_orders": snapshot.live_order_count,
        "queued_work_orders": snapshot.queued_order_count,
    }
    logger.debug("Health check performed", live_work_orders=snapshot.live_order_count)
    return response
