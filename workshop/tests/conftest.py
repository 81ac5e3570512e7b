from collections.abc import Callable, Generator
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from workshop.api.deps import get_clock, get_repository, get_settings
from workshop.core.config import Settings
from workshop.domain.servicing.services import (
    AllocationPolicy,
    ResourceAllocationService,
    ShopAnalyticsService,
    ShopResourceService,
    WorkOrderService,
)
from workshop.infrastructure.repositories import (
    InMemoryWorkshopRepository,
    create_repository,
)
from workshop.main import app
from workshop.tests.utils.factories import build_work_order_service, fixed_clock


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def clock() -> Callable[[], datetime]:
    return fixed_clock


@pytest.fixture
def repository(test_settings: Settings) -> InMemoryWorkshopRepository:
    """Seeded demo shop: 20 technicians, 6 bays, 8 parts, 12 tasks."""
    return create_repository(test_settings)


@pytest.fixture
def allocator(
    repository: InMemoryWorkshopRepository, test_settings: Settings
) -> ResourceAllocationService:
    return ResourceAllocationService(
        repository,
        AllocationPolicy(
            shop_capacity=test_settings.SHOP_CAPACITY,
            hours_per_technician=test_settings.HOURS_PER_TECHNICIAN,
            max_technicians_per_order=test_settings.MAX_TECHNICIANS_PER_ORDER,
            bay_load_ceiling=test_settings.BAY_LOAD_CEILING,
        ),
    )


@pytest.fixture
def work_order_service(
    repository: InMemoryWorkshopRepository, clock: Callable[[], datetime]
) -> WorkOrderService:
    return build_work_order_service(repository, clock)


@pytest.fixture
def shop_resource_service(repository: InMemoryWorkshopRepository) -> ShopResourceService:
    return ShopResourceService(repository, restock_quantity=5)


@pytest.fixture
def analytics_service(
    repository: InMemoryWorkshopRepository, clock: Callable[[], datetime]
) -> ShopAnalyticsService:
    return ShopAnalyticsService(repository, clock)


@pytest.fixture
def client(
    repository: InMemoryWorkshopRepository,
    test_settings: Settings,
    clock: Callable[[], datetime],
) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_repository] = lambda: repository
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_clock] = lambda: clock
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
