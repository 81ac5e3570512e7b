"""
Domain Exceptions

Typed errors for the service-shop domain. Capacity exhaustion and stock
shortages are not errors here: they degrade into warnings on a successful
result. What remains is rejected input, broken business rules and unknown ids.
"""

from enum import Enum


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    NOT_FOUND = "not_found"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, str | int | float | bool | None] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, object]:
        """Convert error to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainError):
    """Raised when domain validation rules are violated."""

    def __init__(
        self,
        field_name: str,
        value: str | int | float | bool | None,
        message: str,
        error_code: str | None = None,
    ) -> None:
        self.field_name = field_name
        self.value = value
        self.error_code = error_code or "VALIDATION_ERROR"

        full_message = f"Validation failed for field '{field_name}': {message}"
        details = {
            "field": field_name,
            "value": str(value) if value is not None else None,
            "error_code": self.error_code,
        }
        super().__init__(full_message, ErrorType.VALIDATION, details)


class NoServiceTasksResolvedError(ValidationError):
    """Raised when none of the requested task names exist in the catalog."""

    def __init__(self, task_names: list[str]) -> None:
        super().__init__(
            "selected_tasks",
            ", ".join(task_names),
            "none of the selected tasks exist in the service catalog",
            "UNKNOWN_SERVICE_TASKS",
        )
        self.task_names = list(task_names)


class BusinessRuleError(DomainError):
    """Raised when business rules are violated."""

    def __init__(
        self,
        rule_name: str,
        message: str,
        details: dict[str, str | int | float | bool | None] | None = None,
    ) -> None:
        details = dict(details or {})
        details["rule"] = rule_name
        super().__init__(message, ErrorType.BUSINESS_RULE, details)
        self.rule_name = rule_name


class EntityNotFoundError(DomainError):
    """Raised when an entity lookup misses."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        details = {"entity_type": entity_type, "entity_id": str(entity_id)}
        super().__init__(f"{entity_type} not found: {entity_id}", ErrorType.NOT_FOUND, details)
        self.entity_type = entity_type
        self.entity_id = entity_id


class WorkOrderNotFoundError(EntityNotFoundError):
    """Raised when a work order is not live (unknown or already completed)."""

    def __init__(self, order_id: str) -> None:
        super().__init__("work_order", order_id)
        self.order_id = order_id


class TechnicianNotFoundError(EntityNotFoundError):
    """Raised when a technician is not found."""

    def __init__(self, technician_id: object) -> None:
        super().__init__("technician", technician_id)


class StockItemNotFoundError(EntityNotFoundError):
    """Raised when a part is not stocked."""

    def __init__(self, part_name: str) -> None:
        super().__init__("stock_item", part_name)
        self.part_name = part_name
