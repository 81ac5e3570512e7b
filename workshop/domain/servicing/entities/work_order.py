"""Work order aggregate and the receipt it leaves behind on completion."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from ...shared.base import Entity, ValueObject
from ...shared.exceptions import BusinessRuleError, ValidationError
from ..value_objects.enums import (
    BodyDamage,
    CarModel,
    FuelType,
    RustLevel,
    ServiceType,
    WorkOrderStatus,
)

QUEUED_BAY_LABEL = "QUEUED"


class Receipt(ValueObject):
    """Immutable record of a completed work order."""

    service_id: str
    car_number: str
    car_model: CarModel
    service_type: ServiceType
    selected_tasks: tuple[str, ...]
    predicted_hours: float
    assigned_bay: str
    technician_names: tuple[str, ...]
    completed_at: datetime
    amount: float


class WorkOrder(Entity):
    """
    A single vehicle service job from intake to completion.

    The order owns its technician and bay slots exclusively while it is
    live. Completion hands them back and produces a Receipt.
    """

    service_id: str = Field(min_length=1)

    # Vehicle and service description
    car_number: str = Field(min_length=1)
    car_model: CarModel
    manufacture_year: int
    fuel_type: FuelType
    total_kilometers: int = Field(ge=0)
    km_since_last_service: int = Field(ge=0)
    days_since_last_service: int = Field(ge=0)
    service_type: ServiceType
    selected_tasks: list[str] = Field(min_length=1)
    health_score: int = Field(ge=0, le=100)
    error_codes: list[str] = Field(default_factory=list)
    rust_level: RustLevel = RustLevel.NONE
    body_damage: BodyDamage = BodyDamage.NONE

    # Scheduling outcome
    predicted_hours: float = Field(gt=0)
    actual_start_time: datetime
    estimated_completion: datetime
    assigned_technician_ids: list[UUID] = Field(default_factory=list)
    assigned_bay_id: UUID | None = None
    assigned_bay: str = QUEUED_BAY_LABEL
    queue_position: int | None = Field(default=None, ge=1)
    progress: int = Field(default=0, ge=0, le=100)
    status: WorkOrderStatus = WorkOrderStatus.IN_PROGRESS

    def is_valid(self) -> bool:
        """Validate business rules."""
        if self.status == WorkOrderStatus.QUEUED:
            return (
                self.assigned_bay_id is None
                and self.assigned_bay == QUEUED_BAY_LABEL
                and self.queue_position is not None
            )
        return self.assigned_bay_id is not None and self.queue_position is None

    @property
    def is_queued(self) -> bool:
        return self.status == WorkOrderStatus.QUEUED

    def advance_progress(self, progress: int) -> None:
        """
        Record externally reported progress.

        Reaching 100 moves the order to Completing. Progress is clamped to
        0-100 and only applied to an order that holds a bay.

        Raises:
            BusinessRuleError: If the order is queued or already completed
        """
        if self.status.is_terminal:
            raise BusinessRuleError(
                "ORDER_COMPLETED",
                f"Work order {self.service_id} is already completed",
                {"order_id": self.service_id},
            )
        if self.is_queued:
            raise BusinessRuleError(
                "ORDER_QUEUED",
                f"Work order {self.service_id} is waiting for a bay",
                {"order_id": self.service_id, "queue_position": self.queue_position},
            )
        if isinstance(progress, bool) or not isinstance(progress, int):
            raise ValidationError("progress", str(progress), "progress must be an integer")
        self.progress = max(0, min(100, progress))
        if self.progress >= 100:
            self.status = WorkOrderStatus.COMPLETING

    def close(
        self, technician_names: list[str], completed_at: datetime, hourly_rate: float
    ) -> Receipt:
        """Mark the order completed and produce its receipt."""
        self.status = WorkOrderStatus.COMPLETED
        return Receipt(
            service_id=self.service_id,
            car_number=self.car_number,
            car_model=self.car_model,
            service_type=self.service_type,
            selected_tasks=tuple(self.selected_tasks),
            predicted_hours=self.predicted_hours,
            assigned_bay=self.assigned_bay,
            technician_names=tuple(technician_names),
            completed_at=completed_at,
            amount=round(self.predicted_hours * hourly_rate, 2),
        )
