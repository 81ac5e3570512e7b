"""
Work order Data Transfer Objects.

Request and response models for intake, progress, completion and receipts.
The wire format is camelCase; snake_case field names are accepted too.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ...domain.servicing.entities import Receipt, WorkOrder
from ...domain.servicing.services import WorkOrderResult
from ...domain.servicing.value_objects import (
    AppointmentType,
    ApprovalSpeed,
    BodyDamage,
    CarModel,
    FuelType,
    RustLevel,
    ServiceIntake,
    ServicePackage,
    ServiceType,
    WarrantyStatus,
    Weather,
    WorkOrderStatus,
)

EARLIEST_MANUFACTURE_YEAR = 2000


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ServiceRequest(CamelModel):
    """DTO for a vehicle service intake."""

    car_number: str = Field(..., min_length=1, description="Registration plate")
    car_model: CarModel
    manufacture_year: int = Field(..., ge=EARLIEST_MANUFACTURE_YEAR)
    fuel_type: FuelType
    total_kilometers: int = Field(..., ge=0)
    km_since_last_service: int = Field(..., ge=0)
    days_since_last_service: int = Field(..., ge=0)
    service_type: ServiceType
    selected_tasks: list[str] = Field(..., min_length=1, description="Catalog task names")
    health_score: int = Field(100, ge=0, le=100)
    error_codes: list[str] = Field(default_factory=list)
    rust_level: RustLevel = RustLevel.NONE
    body_damage: BodyDamage = BodyDamage.NONE
    warranty_status: WarrantyStatus = WarrantyStatus.OUT_OF_WARRANTY
    battery_soh: float = Field(100, ge=0, le=100, alias="batterySOH")
    fluid_degradation: float = Field(0, ge=0, le=100)
    wear_tear_score: float = Field(0, ge=0, le=100)
    appointment_type: AppointmentType = AppointmentType.APPOINTMENT
    service_package: ServicePackage = ServicePackage.STANDARD
    customer_approval_speed: ApprovalSpeed = ApprovalSpeed.NORMAL
    weather: Weather = Weather.CLEAR
    peak_hours: bool = False

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "carNumber": "ABC-123",
                "carModel": "XC60",
                "manufactureYear": 2019,
                "fuelType": "Hybrid",
                "totalKilometers": 85000,
                "kmSinceLastService": 12000,
                "daysSinceLastService": 400,
                "serviceType": "Regular Service",
                "selectedTasks": ["Oil Change", "Brake Inspection"],
            }
        }
    )

    @field_validator("manufacture_year")
    @classmethod
    def validate_manufacture_year(cls, v: int) -> int:
        """Validate the vehicle is not from the future."""
        if v > datetime.now().year:
            raise ValueError("Manufacture year cannot be in the future")
        return v

    def to_intake(self) -> ServiceIntake:
        return ServiceIntake(
            car_number=self.car_number,
            car_model=self.car_model,
            manufacture_year=self.manufacture_year,
            fuel_type=self.fuel_type,
            total_kilometers=self.total_kilometers,
            km_since_last_service=self.km_since_last_service,
            days_since_last_service=self.days_since_last_service,
            service_type=self.service_type,
            selected_tasks=tuple(self.selected_tasks),
            health_score=self.health_score,
            error_codes=tuple(self.error_codes),
            rust_level=self.rust_level,
            body_damage=self.body_damage,
            warranty_status=self.warranty_status,
            battery_soh=self.battery_soh,
            fluid_degradation=self.fluid_degradation,
            wear_tear_score=self.wear_tear_score,
            appointment_type=self.appointment_type,
            service_package=self.service_package,
            approval_speed=self.customer_approval_speed,
            weather=self.weather,
            peak_hours=self.peak_hours,
        )


class WorkOrderCreatedResponse(CamelModel):
    """DTO returned from intake."""

    service_id: str
    predicted_hours: float
    assigned_technician_names: list[str]
    assigned_bay_label: str
    estimated_completion: datetime
    queue_position: int | None = None
    status: WorkOrderStatus
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: WorkOrderResult) -> "WorkOrderCreatedResponse":
        return cls(
            service_id=result.service_id,
            predicted_hours=result.predicted_hours,
            assigned_technician_names=list(result.assigned_technicians),
            assigned_bay_label=result.assigned_bay,
            estimated_completion=result.estimated_completion,
            queue_position=result.queue_position,
            status=result.status,
            warnings=list(result.warnings),
        )


class WorkOrderResponse(CamelModel):
    """DTO for a live work order."""

    service_id: str
    car_number: str
    car_model: CarModel
    service_type: ServiceType
    selected_tasks: list[str]
    predicted_hours: float
    actual_start_time: datetime
    estimated_completion: datetime
    assigned_technician_ids: list[UUID]
    assigned_bay: str
    queue_position: int | None = None
    progress: int
    status: WorkOrderStatus

    @classmethod
    def from_entity(cls, order: WorkOrder) -> "WorkOrderResponse":
        return cls(
            service_id=order.service_id,
            car_number=order.car_number,
            car_model=order.car_model,
            service_type=order.service_type,
            selected_tasks=list(order.selected_tasks),
            predicted_hours=round(order.predicted_hours, 2),
            actual_start_time=order.actual_start_time,
            estimated_completion=order.estimated_completion,
            assigned_technician_ids=list(order.assigned_technician_ids),
            assigned_bay=order.assigned_bay,
            queue_position=order.queue_position,
            progress=order.progress,
            status=order.status,
        )


class ProgressUpdateRequest(CamelModel):
    """DTO for reporting progress; values outside 0-100 are clamped."""

    progress: int


class ReceiptResponse(CamelModel):
    service_id: str
    car_number: str
    car_model: CarModel
    service_type: ServiceType
    selected_tasks: list[str]
    predicted_hours: float
    assigned_bay: str
    technician_names: list[str]
    completed_at: datetime
    amount: float

    @classmethod
    def from_receipt(cls, receipt: Receipt) -> "ReceiptResponse":
        return cls(
            service_id=receipt.service_id,
            car_number=receipt.car_number,
            car_model=receipt.car_model,
            service_type=receipt.service_type,
            selected_tasks=list(receipt.selected_tasks),
            predicted_hours=round(receipt.predicted_hours, 2),
            assigned_bay=receipt.assigned_bay,
            technician_names=list(receipt.technician_names),
            completed_at=receipt.completed_at,
            amount=receipt.amount,
        )


class CompleteWorkOrderResponse(CamelModel):
    success: bool = True
    receipt: ReceiptResponse
