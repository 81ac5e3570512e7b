"""
Resource Allocation Service

Assigns technicians and a service bay to a new work order, or queues it when
the shop is full. Also reserves stock for the order's parts and hands
resources back when an order completes.
"""

import math
from dataclasses import dataclass
from uuid import UUID

from ....core.observability import CAPACITY_WARNINGS, get_logger
from ...shared.base import DomainService
from ..entities.service_bay import ServiceBay
from ..entities.technician import Technician
from ..entities.work_order import QUEUED_BAY_LABEL, WorkOrder
from ..repositories.workshop_repository import WorkshopRepository, WorkshopSnapshot
from ..value_objects.enums import Skill
from ..value_objects.vehicle_condition import DurationEstimate

logger = get_logger(__name__)


@dataclass(frozen=True)
class AllocationPolicy:
    """Capacity knobs for allocation."""

    shop_capacity: int = 6
    hours_per_technician: float = 2.0
    max_technicians_per_order: int = 3
    bay_load_ceiling: int = 90


class AllocationDecision:
    """Represents a resource allocation decision."""

    def __init__(
        self,
        technician_ids: list[UUID],
        bay_id: UUID | None,
        bay_label: str,
        queue_position: int | None = None,
        warnings: list[str] | None = None,
        technicians_trimmed: int = 0,
    ) -> None:
        self.technician_ids = technician_ids.copy()
        self.bay_id = bay_id
        self.bay_label = bay_label
        self.queue_position = queue_position
        self.warnings = list(warnings or [])
        self.technicians_trimmed = technicians_trimmed

    @property
    def queued(self) -> bool:
        return self.bay_id is None

    @property
    def lead_technician_id(self) -> UUID | None:
        return self.technician_ids[0] if self.technician_ids else None

    @classmethod
    def for_queue(cls, position: int, warning: str) -> "AllocationDecision":
        return cls(
            technician_ids=[],
            bay_id=None,
            bay_label=QUEUED_BAY_LABEL,
            queue_position=position,
            warnings=[warning],
        )


class ResourceAllocationService(DomainService):
    """
    Service for allocating technicians and bays to work orders.

    ``allocate`` is pure over a snapshot. ``commit``, ``reserve_parts`` and
    ``release`` write through the repository and are expected to run inside
    the caller's ``repository.transaction()``.
    """

    def __init__(
        self,
        repository: WorkshopRepository,
        policy: AllocationPolicy | None = None,
    ) -> None:
        """
        Initialize the resource allocation service.

        Args:
            repository: Shop state access interface
            policy: Capacity limits, defaults to the reference shop policy
        """
        self._repository = repository
        self._policy = policy or AllocationPolicy()

    @property
    def policy(self) -> AllocationPolicy:
        return self._policy

    def technicians_needed(self, predicted_hours: float) -> int:
        """One technician per started block of hours, between 1 and the cap."""
        needed = math.ceil(predicted_hours / self._policy.hours_per_technician)
        return max(1, min(self._policy.max_technicians_per_order, needed))

    def rank_technicians(
        self, skill: Skill, technicians: list[Technician]
    ) -> list[Technician]:
        """Qualified technicians with spare capacity, least loaded then best rated."""
        candidates = [t for t in technicians if t.can_handle(skill) and t.has_capacity]
        return sorted(candidates, key=lambda t: (t.load_percent, -t.rating))

    def select_bay(self, bays: list[ServiceBay]) -> ServiceBay | None:
        """Least loaded bay with a free technician slot and load under the ceiling."""
        eligible = [b for b in bays if b.is_eligible(self._policy.bay_load_ceiling)]
        if not eligible:
            return None
        return min(eligible, key=lambda b: b.current_load)

    def allocate(
        self, estimate: DurationEstimate, snapshot: WorkshopSnapshot
    ) -> AllocationDecision:
        """
        Decide where a new work order goes.

        Args:
            estimate: Duration estimate for the order
            snapshot: Shop state read inside the current transaction

        Returns:
            Allocation with technicians and bay, or a queue position
        """
        queue_position = snapshot.queued_order_count + 1

        if snapshot.live_order_count >= self._policy.shop_capacity:
            CAPACITY_WARNINGS.labels(kind="shop_full").inc()
            logger.warning(
                "Shop at capacity, queueing work order",
                live_orders=snapshot.live_order_count,
                queue_position=queue_position,
            )
            return AllocationDecision.for_queue(
                queue_position,
                f"Workshop at capacity. Service queued at position {queue_position}",
            )

        bay = self.select_bay(snapshot.bays)
        if bay is None:
            CAPACITY_WARNINGS.labels(kind="no_bay").inc()
            logger.warning("No service bay available, queueing work order")
            return AllocationDecision.for_queue(
                queue_position, "All service bays are currently in use"
            )

        warnings: list[str] = []
        ranked = self.rank_technicians(estimate.primary_skill, snapshot.technicians)
        chosen = ranked[: self.technicians_needed(estimate.predicted_hours)]

        if not chosen:
            fallback = next((t for t in snapshot.technicians if t.has_capacity), None)
            if fallback is not None:
                logger.info(
                    "No skill match, falling back to first free technician",
                    skill=estimate.primary_skill.value,
                    technician=fallback.name,
                )
                chosen = [fallback]
            else:
                CAPACITY_WARNINGS.labels(kind="no_technician").inc()
                logger.warning("All technicians are at maximum capacity")
                warnings.append("All technicians are at maximum capacity")

        chosen_ids = [t.id for t in chosen]
        fitted = bay.fit_technicians(chosen_ids)
        if len(fitted) < len(chosen_ids):
            logger.info(
                "Technician selection trimmed to bay capacity",
                bay=bay.label,
                requested=len(chosen_ids),
                assigned=len(fitted),
            )

        return AllocationDecision(
            technician_ids=fitted,
            bay_id=bay.id,
            bay_label=bay.label,
            warnings=warnings,
            technicians_trimmed=len(chosen_ids) - len(fitted),
        )

    def commit(self, order_id: str, allocation: AllocationDecision) -> None:
        """Write the allocation's technician and bay occupancy."""
        if allocation.queued:
            return

        for technician_id in allocation.technician_ids:
            technician = self._repository.get_technician(technician_id)
            if technician is None:
                continue
            technician.assign_job(order_id)
            self._repository.save_technician(technician)

        bay = self._repository.get_bay(allocation.bay_id)
        if bay is not None:
            bay.occupy(order_id, allocation.technician_ids)
            self._repository.save_bay(bay)

    def reserve_parts(self, parts: tuple[str, ...] | list[str]) -> list[str]:
        """
        Take one unit of each distinct part, warning on shortages.

        Stock shortages never block allocation.

        Returns:
            Warning messages for missing, exhausted or low parts
        """
        warnings: list[str] = []
        for part_name in dict.fromkeys(parts):
            item = self._repository.get_stock_item(part_name)
            if item is None:
                logger.warning("Required part is not stocked", part=part_name)
                warnings.append(f"{part_name} is not stocked")
                continue

            remaining = item.reserve_one()
            self._repository.set_stock_quantity(part_name, remaining)

            if item.is_out:
                logger.warning("Part out of stock", part=part_name)
                warnings.append(f"{part_name} is out of stock")
            elif item.is_low:
                logger.warning(
                    "Part stock running low",
                    part=part_name,
                    quantity=remaining,
                    minimum=item.minimum_stock,
                )
                warnings.append(f"{part_name} stock is running low")
        return warnings

    def release(self, order: WorkOrder) -> list[str]:
        """
        Hand back the technician and bay slots a work order held.

        Returns:
            Names of the technicians that were released
        """
        names: list[str] = []
        for technician_id in order.assigned_technician_ids:
            technician = self._repository.get_technician(technician_id)
            if technician is None:
                continue
            technician.release_job(order.service_id)
            self._repository.save_technician(technician)
            names.append(technician.name)

        if order.assigned_bay_id is not None:
            bay = self._repository.get_bay(order.assigned_bay_id)
            if bay is not None:
                bay.release(order.service_id)
                self._repository.save_bay(bay)
        return names
