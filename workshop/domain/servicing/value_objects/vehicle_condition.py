"""Vehicle and shop-condition signals that stretch a job beyond its catalog time."""

from pydantic import Field

from ...shared.base import ValueObject
from .enums import (
    AppointmentType,
    ApprovalSpeed,
    BodyDamage,
    FuelType,
    RustLevel,
    ServicePackage,
    Skill,
    Weather,
)
from .service_task import TaskCatalogEntry


class VehicleSignals(ValueObject):
    """
    Condition signals read from an intake request.

    Each signal maps to one bounded factor; the factors are summed and
    multiplied by the base catalog time to give the condition adjustment.
    """

    manufacture_year: int
    fuel_type: FuelType = FuelType.PETROL
    health_score: int = Field(default=100, ge=0, le=100)
    km_since_last_service: int = Field(default=0, ge=0)
    error_code_count: int = Field(default=0, ge=0)
    rust_level: RustLevel = RustLevel.NONE
    body_damage: BodyDamage = BodyDamage.NONE
    battery_soh: float = Field(default=100, ge=0, le=100)
    fluid_degradation: float = Field(default=0, ge=0, le=100)
    wear_tear_score: float = Field(default=0, ge=0, le=100)
    service_package: ServicePackage = ServicePackage.STANDARD
    approval_speed: ApprovalSpeed = ApprovalSpeed.NORMAL
    appointment_type: AppointmentType = AppointmentType.APPOINTMENT
    weather: Weather = Weather.CLEAR
    peak_hours: bool = False

    def age_factor(self, current_year: int) -> float:
        age = current_year - self.manufacture_year
        if age > 10:
            return 0.2
        if age > 5:
            return 0.1
        return 0.0

    def mileage_factor(self) -> float:
        if self.km_since_last_service > 10000:
            return 0.15
        if self.km_since_last_service > 5000:
            return 0.08
        return 0.0

    def battery_factor(self) -> float:
        if not self.fuel_type.has_traction_battery:
            return 0.0
        return (100 - self.battery_soh) / 300

    def condition_factors(self, current_year: int) -> dict[str, float]:
        """
        Break the condition multiplier down by signal.

        Args:
            current_year: Year used to compute vehicle age

        Returns:
            Mapping of signal name to its factor
        """
        return {
            "vehicle_age": self.age_factor(current_year),
            "health": (100 - self.health_score) / 200,
            "rust": self.rust_level.weight,
            "body_damage": self.body_damage.weight,
            "mileage": self.mileage_factor(),
            "error_codes": self.error_code_count * 0.25,
            "battery": self.battery_factor(),
            "fluids": self.fluid_degradation / 300,
            "wear": self.wear_tear_score / 300,
            "service_package": self.service_package.weight,
            "approval_speed": self.approval_speed.weight,
            "appointment": self.appointment_type.weight,
            "peak_hours": 0.08 if self.peak_hours else 0.0,
            "weather": self.weather.weight,
        }


class DurationEstimate(ValueObject):
    """Predicted duration of a work order and how it was derived."""

    base_hours: float
    condition_factor: float
    condition_adjustment: float
    shop_load_hours: float
    predicted_hours: float
    primary_skill: Skill
    required_parts: tuple[str, ...] = ()
    resolved_tasks: tuple[TaskCatalogEntry, ...] = ()
    skipped_tasks: tuple[str, ...] = ()

    @property
    def warnings(self) -> list[str]:
        return [f"Unknown service task skipped: {name}" for name in self.skipped_tasks]
