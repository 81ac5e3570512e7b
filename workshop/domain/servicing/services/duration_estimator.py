"""
Duration Estimator

Predicts how long a work order will take: catalog base time, stretched by
vehicle-condition factors, plus a flat surcharge when the shop is busy.
"""

from collections.abc import Callable, Iterable

from ....core.observability import get_logger
from ...shared.base import DomainService
from ...shared.exceptions import NoServiceTasksResolvedError
from ..value_objects.enums import Skill
from ..value_objects.service_task import TaskCatalogEntry
from ..value_objects.vehicle_condition import DurationEstimate, VehicleSignals

logger = get_logger(__name__)

CatalogLookup = Callable[[str], TaskCatalogEntry | None]


class DurationEstimator(DomainService):
    """
    Deterministic duration model.

    predicted = base + base * sum(condition factors) + shop load surcharge
    """

    BUSY_SHOP_ORDERS = 4
    FULL_SHOP_ORDERS = 6
    BUSY_SHOP_HOURS = 0.2
    FULL_SHOP_HOURS = 0.3

    def __init__(self, catalog_lookup: CatalogLookup) -> None:
        """
        Initialize the estimator.

        Args:
            catalog_lookup: Returns the catalog entry for a task name, or None
        """
        self._lookup = catalog_lookup

    def shop_load_hours(self, active_order_count: int) -> float:
        """Flat surcharge for a busy shop, not scaled by base time."""
        if active_order_count >= self.FULL_SHOP_ORDERS:
            return self.FULL_SHOP_HOURS
        if active_order_count >= self.BUSY_SHOP_ORDERS:
            return self.BUSY_SHOP_HOURS
        return 0.0

    def resolve_tasks(
        self, task_names: Iterable[str]
    ) -> tuple[list[TaskCatalogEntry], list[str]]:
        """Split requested task names into catalog entries and unknown names."""
        resolved: list[TaskCatalogEntry] = []
        skipped: list[str] = []
        for name in task_names:
            entry = self._lookup(name)
            if entry is None:
                logger.warning("Unknown service task skipped", task_name=name)
                skipped.append(name)
            else:
                resolved.append(entry)
        return resolved, skipped

    @staticmethod
    def primary_skill(tasks: list[TaskCatalogEntry]) -> Skill:
        """Skill of the longest task; the first one wins a tie."""
        if not tasks:
            return Skill.GENERAL
        longest = tasks[0]
        for task in tasks[1:]:
            if task.base_time_hours > longest.base_time_hours:
                longest = task
        return longest.category

    @staticmethod
    def required_parts(tasks: list[TaskCatalogEntry]) -> tuple[str, ...]:
        """Distinct parts across all tasks, in first-seen order."""
        parts: dict[str, None] = {}
        for task in tasks:
            for part in task.required_parts:
                parts.setdefault(part, None)
        return tuple(parts)

    def estimate(
        self,
        task_names: list[str],
        signals: VehicleSignals,
        active_order_count: int,
        current_year: int,
    ) -> DurationEstimate:
        """
        Predict the job duration in hours.

        Args:
            task_names: Requested catalog task names
            signals: Vehicle and shop-condition signals
            active_order_count: Live work orders at intake time
            current_year: Year used for vehicle age

        Returns:
            Duration estimate with its breakdown

        Raises:
            NoServiceTasksResolvedError: If no task name is in the catalog
        """
        resolved, skipped = self.resolve_tasks(task_names)
        if not resolved:
            raise NoServiceTasksResolvedError(list(task_names))

        base_hours = sum(task.base_time_hours for task in resolved)
        condition_factor = sum(signals.condition_factors(current_year).values())
        condition_adjustment = base_hours * condition_factor
        shop_load = self.shop_load_hours(active_order_count)

        return DurationEstimate(
            base_hours=base_hours,
            condition_factor=condition_factor,
            condition_adjustment=condition_adjustment,
            shop_load_hours=shop_load,
            predicted_hours=base_hours + condition_adjustment + shop_load,
            primary_skill=self.primary_skill(resolved),
            required_parts=self.required_parts(resolved),
            resolved_tasks=tuple(resolved),
            skipped_tasks=tuple(skipped),
        )
