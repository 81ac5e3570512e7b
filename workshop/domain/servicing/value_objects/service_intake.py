"""Validated intake handed from the API layer to the work-order lifecycle."""

from pydantic import Field

from ...shared.base import ValueObject
from .enums import (
    AppointmentType,
    ApprovalSpeed,
    BodyDamage,
    CarModel,
    FuelType,
    RustLevel,
    ServicePackage,
    ServiceType,
    WarrantyStatus,
    Weather,
)
from .vehicle_condition import VehicleSignals


class ServiceIntake(ValueObject):
    """A vehicle service request as the domain sees it."""

    car_number: str = Field(min_length=1)
    car_model: CarModel
    manufacture_year: int
    fuel_type: FuelType
    total_kilometers: int = Field(ge=0)
    km_since_last_service: int = Field(ge=0)
    days_since_last_service: int = Field(ge=0)
    service_type: ServiceType
    selected_tasks: tuple[str, ...] = Field(min_length=1)
    health_score: int = Field(default=100, ge=0, le=100)
    error_codes: tuple[str, ...] = ()
    rust_level: RustLevel = RustLevel.NONE
    body_damage: BodyDamage = BodyDamage.NONE
    warranty_status: WarrantyStatus = WarrantyStatus.OUT_OF_WARRANTY
    battery_soh: float = Field(default=100, ge=0, le=100)
    fluid_degradation: float = Field(default=0, ge=0, le=100)
    wear_tear_score: float = Field(default=0, ge=0, le=100)
    appointment_type: AppointmentType = AppointmentType.APPOINTMENT
    service_package: ServicePackage = ServicePackage.STANDARD
    approval_speed: ApprovalSpeed = ApprovalSpeed.NORMAL
    weather: Weather = Weather.CLEAR
    peak_hours: bool = False

    def to_signals(self) -> VehicleSignals:
        return VehicleSignals(
            manufacture_year=self.manufacture_year,
            fuel_type=self.fuel_type,
            health_score=self.health_score,
            km_since_last_service=self.km_since_last_service,
            error_code_count=len(self.error_codes),
            rust_level=self.rust_level,
            body_damage=self.body_damage,
            battery_soh=self.battery_soh,
            fluid_degradation=self.fluid_degradation,
            wear_tear_score=self.wear_tear_score,
            service_package=self.service_package,
            approval_speed=self.approval_speed,
            appointment_type=self.appointment_type,
            weather=self.weather,
            peak_hours=self.peak_hours,
        )
