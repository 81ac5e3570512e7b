"""Domain enums for the service shop.

Categorical intake signals carry their duration weight, so an unknown value
fails at construction instead of silently weighing nothing.
"""

from enum import Enum


class Skill(str, Enum):
    """Technician specialization, also the category of a catalog task."""

    ENGINE = "Engine"
    BRAKE = "Brake"
    AC = "AC"
    GENERAL = "General"

    @property
    def is_generic(self) -> bool:
        """Generic work can be handled by any technician."""
        return self == Skill.GENERAL


class TechnicianStatus(str, Enum):
    """Technician status enumeration."""

    AVAILABLE = "Available"
    BUSY = "Busy"
    OFFLINE = "Offline"


class WorkOrderStatus(str, Enum):
    """Work order status enumeration."""

    QUEUED = "Queued"
    IN_PROGRESS = "In Progress"
    COMPLETING = "Completing"
    COMPLETED = "Completed"

    @property
    def holds_bay(self) -> bool:
        """Check if an order in this status occupies a bay."""
        return self in {WorkOrderStatus.IN_PROGRESS, WorkOrderStatus.COMPLETING}

    @property
    def is_terminal(self) -> bool:
        return self == WorkOrderStatus.COMPLETED


class RustLevel(str, Enum):
    NONE = "None"
    MINOR = "Minor"
    MODERATE = "Moderate"
    SEVERE = "Severe"

    @property
    def weight(self) -> float:
        return {
            RustLevel.NONE: 0.0,
            RustLevel.MINOR: 0.1,
            RustLevel.MODERATE: 0.2,
            RustLevel.SEVERE: 0.4,
        }[self]


class BodyDamage(str, Enum):
    NONE = "None"
    MINOR = "Minor"
    MODERATE = "Moderate"
    SEVERE = "Severe"

    @property
    def weight(self) -> float:
        return {
            BodyDamage.NONE: 0.0,
            BodyDamage.MINOR: 0.05,
            BodyDamage.MODERATE: 0.15,
            BodyDamage.SEVERE: 0.3,
        }[self]


class ServicePackage(str, Enum):
    BASIC = "Basic"
    STANDARD = "Standard"
    PREMIUM = "Premium"

    @property
    def weight(self) -> float:
        return {
            ServicePackage.BASIC: 0.0,
            ServicePackage.STANDARD: 0.05,
            ServicePackage.PREMIUM: 0.12,
        }[self]


class ApprovalSpeed(str, Enum):
    """How quickly the customer signs off on extra work."""

    FAST = "Fast"
    NORMAL = "Normal"
    SLOW = "Slow"

    @property
    def weight(self) -> float:
        return {
            ApprovalSpeed.FAST: 0.0,
            ApprovalSpeed.NORMAL: 0.05,
            ApprovalSpeed.SLOW: 0.15,
        }[self]


class Weather(str, Enum):
    CLEAR = "Clear"
    RAIN = "Rain"
    EXTREME = "Extreme"

    @property
    def weight(self) -> float:
        return {
            Weather.CLEAR: 0.0,
            Weather.RAIN: 0.05,
            Weather.EXTREME: 0.12,
        }[self]


class AppointmentType(str, Enum):
    APPOINTMENT = "Appointment"
    WALK_IN = "Walk-in"

    @property
    def weight(self) -> float:
        return 0.1 if self == AppointmentType.WALK_IN else 0.0


class FuelType(str, Enum):
    PETROL = "Petrol"
    DIESEL = "Diesel"
    HYBRID = "Hybrid"
    ELECTRIC = "Electric"

    @property
    def has_traction_battery(self) -> bool:
        """Only fully electric vehicles carry a battery state-of-health penalty."""
        return self == FuelType.ELECTRIC


class CarModel(str, Enum):
    XC40 = "XC40"
    XC60 = "XC60"
    XC90 = "XC90"
    S60 = "S60"
    S90 = "S90"
    V60 = "V60"
    V90 = "V90"


class ServiceType(str, Enum):
    REGULAR = "Regular Service"
    MAJOR = "Major Service"
    REPAIR = "Repair"
    DIAGNOSTIC = "Diagnostic"


class WarrantyStatus(str, Enum):
    IN_WARRANTY = "In Warranty"
    OUT_OF_WARRANTY = "Out of Warranty"
