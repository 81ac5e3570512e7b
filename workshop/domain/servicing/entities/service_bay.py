"""Service bay entity: a physical station shared by a few technicians."""

from uuid import UUID

from pydantic import Field, computed_field

from ...shared.base import Entity
from ...shared.exceptions import BusinessRuleError


class ServiceBay(Entity):
    """
    A service bay.

    Occupancy is tracked per work order. The technician list, load and
    availability are all derived from it.
    """

    bay_number: int = Field(ge=1)
    bay_type: str = "General Service Bay"
    tools_present: list[str] = Field(default_factory=list)
    technician_capacity: int = Field(default=3, ge=1)
    load_per_job: int = Field(default=50, ge=1, le=100)
    order_assignments: dict[str, list[UUID]] = Field(default_factory=dict)

    def is_valid(self) -> bool:
        """Validate business rules."""
        return len(self.assigned_technician_ids) <= self.technician_capacity

    @computed_field  # type: ignore[prop-decorator]
    @property
    def label(self) -> str:
        return f"Bay {self.bay_number}"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def assigned_technician_ids(self) -> list[UUID]:
        """Distinct technicians working in the bay, in arrival order."""
        seen: list[UUID] = []
        for technician_ids in self.order_assignments.values():
            for technician_id in technician_ids:
                if technician_id not in seen:
                    seen.append(technician_id)
        return seen

    @computed_field  # type: ignore[prop-decorator]
    @property
    def current_load(self) -> int:
        return min(100, len(self.order_assignments) * self.load_per_job)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_available(self) -> bool:
        return len(self.assigned_technician_ids) < self.technician_capacity

    @property
    def free_slots(self) -> int:
        return max(0, self.technician_capacity - len(self.assigned_technician_ids))

    def is_eligible(self, load_ceiling: int) -> bool:
        """Check if the bay can take another job."""
        return self.is_available and self.current_load < load_ceiling

    def fit_technicians(self, ranked_ids: list[UUID]) -> list[UUID]:
        """
        Keep the best-ranked technicians that still fit in the bay.

        Technicians already working here do not consume a new slot.
        """
        present = set(self.assigned_technician_ids)
        slots = self.free_slots
        fitted: list[UUID] = []
        for technician_id in ranked_ids:
            if technician_id in present:
                fitted.append(technician_id)
            elif slots > 0:
                fitted.append(technician_id)
                slots -= 1
        return fitted

    def occupy(self, order_id: str, technician_ids: list[UUID]) -> None:
        """
        Put a work order and its technicians in the bay.

        Raises:
            BusinessRuleError: If the technicians would exceed the bay capacity
        """
        if self.fit_technicians(technician_ids) != list(technician_ids):
            raise BusinessRuleError(
                "BAY_AT_CAPACITY",
                f"{self.label} cannot take {len(technician_ids)} more technicians",
                {"bay_id": str(self.id), "order_id": order_id},
            )
        self.order_assignments = {**self.order_assignments, order_id: list(technician_ids)}

    def release(self, order_id: str) -> list[UUID]:
        """Remove a work order from the bay and return the technicians it held."""
        assignments = dict(self.order_assignments)
        released = assignments.pop(order_id, [])
        self.order_assignments = assignments
        return released
