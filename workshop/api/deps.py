"""
API Dependencies

Wires the shared repository and the domain services into FastAPI routes.
"""

from collections.abc import Callable
from datetime import datetime
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from ..core.config import Settings, settings
from ..domain.servicing.repositories import WorkshopRepository
from ..domain.servicing.services import (
    AllocationPolicy,
    DurationEstimator,
    ResourceAllocationService,
    ShopAnalyticsService,
    ShopResourceService,
    WorkOrderService,
)
from ..domain.servicing.value_objects import BusinessHours
from ..infrastructure.repositories import create_repository


def get_settings() -> Settings:
    return settings


@lru_cache
def get_repository() -> WorkshopRepository:
    """Process-wide shop state, created on first use."""
    return create_repository(settings)


def get_clock() -> Callable[[], datetime]:
    tz = settings.tzinfo
    return lambda: datetime.now(tz)


SettingsDep = Annotated[Settings, Depends(get_settings)]
RepositoryDep = Annotated[WorkshopRepository, Depends(get_repository)]
ClockDep = Annotated[Callable[[], datetime], Depends(get_clock)]


def get_work_order_service(
    repository: RepositoryDep, clock: ClockDep, app_settings: SettingsDep
) -> WorkOrderService:
    allocator = ResourceAllocationService(
        repository,
        AllocationPolicy(
            shop_capacity=app_settings.SHOP_CAPACITY,
            hours_per_technician=app_settings.HOURS_PER_TECHNICIAN,
            max_technicians_per_order=app_settings.MAX_TECHNICIANS_PER_ORDER,
            bay_load_ceiling=app_settings.BAY_LOAD_CEILING,
        ),
    )
    return WorkOrderService(
        repository=repository,
        estimator=DurationEstimator(repository.get_catalog_entry),
        allocator=allocator,
        business_hours=BusinessHours(
            app_settings.WORK_START_HOUR, app_settings.WORK_END_HOUR
        ),
        clock=clock,
        hourly_rate=app_settings.HOURLY_RATE,
        service_id_prefix=app_settings.SERVICE_ID_PREFIX,
    )


def get_shop_resource_service(
    repository: RepositoryDep, app_settings: SettingsDep
) -> ShopResourceService:
    return ShopResourceService(repository, app_settings.RESTOCK_QUANTITY)


def get_analytics_service(repository: RepositoryDep, clock: ClockDep) -> ShopAnalyticsService:
    return ShopAnalyticsService(repository, clock)


WorkOrderServiceDep = Annotated[WorkOrderService, Depends(get_work_order_service)]
ShopResourceServiceDep = Annotated[ShopResourceService, Depends(get_shop_resource_service)]
AnalyticsServiceDep = Annotated[ShopAnalyticsService, Depends(get_analytics_service)]
