"""
Work Order Service

Lifecycle manager for work orders: intake, progress reporting and completion.
Every operation runs as a single repository transaction so the
read-decide-write sequence never interleaves with another request.
"""

from collections.abc import Callable
from datetime import datetime
from uuid import UUID

from ....core.observability import (
    LIVE_WORK_ORDERS,
    QUEUED_WORK_ORDERS,
    WORK_ORDERS_COMPLETED,
    WORK_ORDERS_CREATED,
    get_logger,
)
from ...shared.base import DomainService, ValueObject
from ...shared.exceptions import WorkOrderNotFoundError
from ..entities.work_order import Receipt, WorkOrder
from ..repositories.workshop_repository import WorkshopRepository
from ..value_objects.business_calendar import BusinessHours
from ..value_objects.enums import WorkOrderStatus
from ..value_objects.service_intake import ServiceIntake
from .duration_estimator import DurationEstimator
from .resource_allocation_service import ResourceAllocationService

logger = get_logger(__name__)

QUEUED_ID_SUFFIX = "QUE"

Clock = Callable[[], datetime]


class WorkOrderResult(ValueObject):
    """Outcome of an intake request."""

    service_id: str
    predicted_hours: float
    assigned_technicians: tuple[str, ...]
    assigned_bay: str
    estimated_completion: datetime
    queue_position: int | None = None
    status: WorkOrderStatus
    warnings: tuple[str, ...] = ()


class WorkOrderService(DomainService):
    """
    Orchestrates estimation, allocation and scheduling into work orders.

    Queued orders are never promoted automatically; they stay Queued until
    something outside this service reassigns them.
    """

    def __init__(
        self,
        repository: WorkshopRepository,
        estimator: DurationEstimator,
        allocator: ResourceAllocationService,
        business_hours: BusinessHours,
        clock: Clock,
        hourly_rate: float = 250.0,
        service_id_prefix: str = "VOL",
    ) -> None:
        """
        Initialize the work order service.

        Args:
            repository: Shop state, also the transaction boundary
            estimator: Duration model
            allocator: Technician and bay allocation
            business_hours: Daily work window used for the ETA
            clock: Returns "now" in the shop's timezone
            hourly_rate: Billing rate for receipts
            service_id_prefix: Leading token of generated work order ids
        """
        self._repository = repository
        self._estimator = estimator
        self._allocator = allocator
        self._business_hours = business_hours
        self._clock = clock
        self._hourly_rate = hourly_rate
        self._service_id_prefix = service_id_prefix

    def create_work_order(self, intake: ServiceIntake) -> WorkOrderResult:
        """
        Turn a validated intake into a committed work order.

        Args:
            intake: Vehicle, tasks and condition signals

        Returns:
            The created order's id, resources, ETA and any warnings

        Raises:
            NoServiceTasksResolvedError: If none of the tasks are in the catalog
        """
        now = self._clock()

        with self._repository.transaction():
            snapshot = self._repository.snapshot()

            estimate = self._estimator.estimate(
                list(intake.selected_tasks),
                intake.to_signals(),
                snapshot.live_order_count,
                now.year,
            )
            estimated_completion = self._business_hours.project(
                now, estimate.predicted_hours
            )
            decision = self._allocator.allocate(estimate, snapshot)
            service_id = self._generate_service_id(now, decision.lead_technician_id)
            stock_warnings = self._allocator.reserve_parts(estimate.required_parts)

            order = WorkOrder(
                service_id=service_id,
                car_number=intake.car_number,
                car_model=intake.car_model,
                manufacture_year=intake.manufacture_year,
                fuel_type=intake.fuel_type,
                total_kilometers=intake.total_kilometers,
                km_since_last_service=intake.km_since_last_service,
                days_since_last_service=intake.days_since_last_service,
                service_type=intake.service_type,
                selected_tasks=list(intake.selected_tasks),
                health_score=intake.health_score,
                error_codes=list(intake.error_codes),
                rust_level=intake.rust_level,
                body_damage=intake.body_damage,
                predicted_hours=estimate.predicted_hours,
                actual_start_time=now,
                estimated_completion=estimated_completion,
                assigned_technician_ids=decision.technician_ids,
                assigned_bay_id=decision.bay_id,
                assigned_bay=decision.bay_label,
                queue_position=decision.queue_position,
                status=(
                    WorkOrderStatus.QUEUED
                    if decision.queued
                    else WorkOrderStatus.IN_PROGRESS
                ),
            )
            order.validate_rules()

            self._allocator.commit(service_id, decision)
            self._repository.save_work_order(order)
            technician_names = self._technician_names(decision.technician_ids)
            self._refresh_gauges()

        WORK_ORDERS_CREATED.labels(status=order.status.value).inc()
        logger.info(
            "Work order queued" if order.is_queued else "Work order created",
            service_id=service_id,
            predicted_hours=round(estimate.predicted_hours, 2),
            bay=order.assigned_bay,
            technicians=technician_names,
            queue_position=order.queue_position,
        )

        return WorkOrderResult(
            service_id=service_id,
            predicted_hours=round(estimate.predicted_hours, 2),
            assigned_technicians=tuple(technician_names),
            assigned_bay=order.assigned_bay,
            estimated_completion=estimated_completion,
            queue_position=order.queue_position,
            status=order.status,
            warnings=(*estimate.warnings, *decision.warnings, *stock_warnings),
        )

    def update_progress(self, order_id: str, progress: int) -> WorkOrder:
        """
        Record externally reported progress on a live order.

        Raises:
            WorkOrderNotFoundError: If the order is not live
            ValidationError: If progress is not an integer
            BusinessRuleError: If the order is queued and holds no bay
        """
        with self._repository.transaction():
            order = self._repository.get_work_order(order_id)
            if order is None:
                raise WorkOrderNotFoundError(order_id)
            order.advance_progress(progress)
            self._repository.save_work_order(order)

        logger.info(
            "Work order progress updated",
            service_id=order_id,
            progress=order.progress,
            status=order.status.value,
        )
        return order

    def complete_work_order(self, order_id: str) -> Receipt:
        """
        Complete a live order, release its resources and record a receipt.

        An unknown or already completed id changes nothing.

        Args:
            order_id: Service id of the order

        Returns:
            The receipt appended to the completed history

        Raises:
            WorkOrderNotFoundError: If the order is not live
        """
        with self._repository.transaction():
            order = self._repository.get_work_order(order_id)
            if order is None:
                logger.info("Completion requested for unknown work order", service_id=order_id)
                raise WorkOrderNotFoundError(order_id)

            technician_names = self._allocator.release(order)
            receipt = order.close(technician_names, self._clock(), self._hourly_rate)
            self._repository.add_receipt(receipt)
            self._repository.remove_work_order(order_id)
            self._refresh_gauges()

        WORK_ORDERS_COMPLETED.inc()
        logger.info(
            "Work order completed",
            service_id=order_id,
            bay=receipt.assigned_bay,
            amount=receipt.amount,
        )
        return receipt

    def list_work_orders(self) -> list[WorkOrder]:
        return self._repository.list_work_orders()

    def list_receipts(self) -> list[Receipt]:
        return self._repository.list_receipts()

    def _generate_service_id(self, now: datetime, lead_technician_id: UUID | None) -> str:
        """Build the id token, suffixing -2, -3, ... on a collision."""
        suffix = (
            str(lead_technician_id)[:3].upper()
            if lead_technician_id is not None
            else QUEUED_ID_SUFFIX
        )
        base = f"{self._service_id_prefix}_{now:%Y%m%d%H%M%S}_{suffix}"
        candidate = base
        counter = 2
        while self._repository.service_id_exists(candidate):
            candidate = f"{base}-{counter}"
            counter += 1
        return candidate

    def _technician_names(self, technician_ids: list[UUID]) -> list[str]:
        names = []
        for technician_id in technician_ids:
            technician = self._repository.get_technician(technician_id)
            if technician is not None:
                names.append(technician.name)
        return names

    def _refresh_gauges(self) -> None:
        orders = self._repository.list_work_orders()
        LIVE_WORK_ORDERS.set(len(orders))
        QUEUED_WORK_ORDERS.set(sum(1 for o in orders if o.is_queued))
