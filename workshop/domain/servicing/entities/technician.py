"""Technician entity: skilled labour with a bounded number of concurrent jobs."""

from pydantic import Field, computed_field

from ...shared.base import Entity
from ...shared.exceptions import BusinessRuleError
from ..value_objects.enums import Skill, TechnicianStatus


class Technician(Entity):
    """
    A shop technician.

    Load and status are derived from the active job list, so they can never
    disagree with it.
    """

    name: str = Field(min_length=1, max_length=100)
    skill: Skill
    experience_level: int = Field(default=0, ge=0, description="Years in the trade")
    rating: float = Field(default=4.0, ge=0, le=5)
    certifications: list[str] = Field(default_factory=list)
    job_capacity: int = Field(default=3, ge=1)
    active_job_ids: list[str] = Field(default_factory=list)

    def is_valid(self) -> bool:
        """Validate business rules."""
        return (
            bool(self.name)
            and len(self.active_job_ids) <= self.job_capacity
            and len(set(self.active_job_ids)) == len(self.active_job_ids)
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def load_percent(self) -> int:
        """Share of job capacity in use, 0-100."""
        return min(100, round(len(self.active_job_ids) * 100 / self.job_capacity))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> TechnicianStatus:
        if self.active_job_ids:
            return TechnicianStatus.BUSY
        return TechnicianStatus.AVAILABLE

    @property
    def has_capacity(self) -> bool:
        return len(self.active_job_ids) < self.job_capacity

    def can_handle(self, skill: Skill) -> bool:
        """Generic work goes to anyone; specialist work needs the matching skill."""
        return skill.is_generic or self.skill == skill

    def assign_job(self, order_id: str) -> None:
        """
        Take on a work order.

        Raises:
            BusinessRuleError: If the technician is already at capacity
        """
        if order_id in self.active_job_ids:
            return
        if not self.has_capacity:
            raise BusinessRuleError(
                "TECHNICIAN_AT_CAPACITY",
                f"Technician {self.name} already holds {self.job_capacity} jobs",
                {"technician_id": str(self.id), "order_id": order_id},
            )
        self.active_job_ids = [*self.active_job_ids, order_id]

    def release_job(self, order_id: str) -> bool:
        """Drop a work order; returns False if the technician did not hold it."""
        if order_id not in self.active_job_ids:
            return False
        self.active_job_ids = [j for j in self.active_job_ids if j != order_id]
        return True
