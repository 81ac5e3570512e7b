"""Value objects for the service-shop domain."""

from .business_calendar import BusinessHours
from .enums import (
    AppointmentType,
    ApprovalSpeed,
    BodyDamage,
    CarModel,
    FuelType,
    RustLevel,
    ServicePackage,
    ServiceType,
    Skill,
    TechnicianStatus,
    WarrantyStatus,
    Weather,
    WorkOrderStatus,
)
from .service_intake import ServiceIntake
from .service_task import TaskCatalogEntry
from .vehicle_condition import DurationEstimate, VehicleSignals

__all__ = [
    "AppointmentType",
    "ApprovalSpeed",
    "BodyDamage",
    "BusinessHours",
    "CarModel",
    "DurationEstimate",
    "FuelType",
    "RustLevel",
    "ServiceIntake",
    "ServicePackage",
    "ServiceType",
    "Skill",
    "TaskCatalogEntry",
    "TechnicianStatus",
    "VehicleSignals",
    "WarrantyStatus",
    "Weather",
    "WorkOrderStatus",
]
