from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from workshop.domain.servicing.entities import ServiceBay, Technician, WorkOrder
from workshop.domain.servicing.repositories import WorkshopRepository
from workshop.domain.servicing.services import (
    DurationEstimator,
    ResourceAllocationService,
    WorkOrderService,
)
from workshop.domain.servicing.value_objects import (
    ApprovalSpeed,
    BusinessHours,
    CarModel,
    DurationEstimate,
    FuelType,
    ServiceIntake,
    ServicePackage,
    ServiceType,
    Skill,
    WorkOrderStatus,
)

# Monday 11:00 UTC, inside the 10:00-19:00 window
FIXED_NOW = datetime(2025, 3, 10, 11, 0, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_NOW


def make_intake(tasks: tuple[str, ...] | list[str] = ("Oil Change",), **overrides: Any) -> ServiceIntake:
    """Intake with every condition signal at its best value."""
    fields: dict[str, Any] = {
        "car_number": "ABC-123",
        "car_model": CarModel.XC60,
        "manufacture_year": 2024,
        "fuel_type": FuelType.PETROL,
        "total_kilometers": 15000,
        "km_since_last_service": 0,
        "days_since_last_service": 30,
        "service_type": ServiceType.REGULAR,
        "selected_tasks": tuple(tasks),
        "service_package": ServicePackage.BASIC,
        "approval_speed": ApprovalSpeed.FAST,
    }
    fields.update(overrides)
    return ServiceIntake(**fields)


def make_estimate(hours: float, skill: Skill = Skill.GENERAL) -> DurationEstimate:
    return DurationEstimate(
        base_hours=hours,
        condition_factor=0.0,
        condition_adjustment=0.0,
        shop_load_hours=0.0,
        predicted_hours=hours,
        primary_skill=skill,
    )


def make_technician(
    name: str,
    skill: Skill = Skill.GENERAL,
    rating: float = 4.0,
    jobs: int = 0,
) -> Technician:
    return Technician(
        name=name,
        skill=skill,
        rating=rating,
        active_job_ids=[f"JOB-{name}-{i}" for i in range(jobs)],
    )


def make_bay(bay_number: int, orders: dict[str, list[UUID]] | None = None) -> ServiceBay:
    return ServiceBay(bay_number=bay_number, order_assignments=orders or {})


def make_work_order(
    service_id: str,
    status: WorkOrderStatus = WorkOrderStatus.IN_PROGRESS,
    queue_position: int | None = None,
) -> WorkOrder:
    queued = status == WorkOrderStatus.QUEUED
    return WorkOrder(
        service_id=service_id,
        car_number="XYZ-999",
        car_model=CarModel.XC90,
        manufacture_year=2020,
        fuel_type=FuelType.DIESEL,
        total_kilometers=40000,
        km_since_last_service=2000,
        days_since_last_service=90,
        service_type=ServiceType.REGULAR,
        selected_tasks=["Oil Change"],
        health_score=90,
        predicted_hours=1.0,
        actual_start_time=FIXED_NOW,
        estimated_completion=FIXED_NOW,
        assigned_bay_id=None if queued else uuid4(),
        assigned_bay="QUEUED" if queued else "Bay 1",
        queue_position=(queue_position or 1) if queued else None,
        status=status,
    )


def build_work_order_service(
    repository: WorkshopRepository,
    clock: Callable[[], datetime] = fixed_clock,
) -> WorkOrderService:
    return WorkOrderService(
        repository=repository,
        estimator=DurationEstimator(repository.get_catalog_entry),
        allocator=ResourceAllocationService(repository),
        business_hours=BusinessHours(10, 19),
        clock=clock,
    )
