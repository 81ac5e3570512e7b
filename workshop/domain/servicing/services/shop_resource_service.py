"""Roster and stock management outside the work-order lifecycle."""

from uuid import UUID

from ....core.observability import get_logger
from ...shared.base import DomainService
from ...shared.exceptions import (
    BusinessRuleError,
    StockItemNotFoundError,
    TechnicianNotFoundError,
)
from ..entities.stock_item import StockItem
from ..entities.technician import Technician
from ..repositories.workshop_repository import WorkshopRepository

logger = get_logger(__name__)


class ShopResourceService(DomainService):
    """Adds and removes technicians and manages stock levels."""

    def __init__(self, repository: WorkshopRepository, restock_quantity: int = 5) -> None:
        self._repository = repository
        self._restock_quantity = restock_quantity

    def add_technician(self, technician: Technician) -> Technician:
        with self._repository.transaction():
            self._repository.save_technician(technician)
        logger.info("Technician added", technician=technician.name, skill=technician.skill.value)
        return technician

    def remove_technician(self, technician_id: UUID) -> None:
        """
        Take a technician off the roster.

        Raises:
            TechnicianNotFoundError: If the id is unknown
            BusinessRuleError: If the technician still holds jobs
        """
        with self._repository.transaction():
            technician = self._repository.get_technician(technician_id)
            if technician is None:
                raise TechnicianNotFoundError(technician_id)
            if technician.active_job_ids:
                raise BusinessRuleError(
                    "TECHNICIAN_HAS_ACTIVE_JOBS",
                    f"Technician {technician.name} still holds {len(technician.active_job_ids)} jobs",
                    {"technician_id": str(technician_id)},
                )
            self._repository.remove_technician(technician_id)
        logger.info("Technician removed", technician=technician.name)

    def add_stock_item(self, item: StockItem) -> StockItem:
        """
        Raises:
            BusinessRuleError: If the part is already stocked
        """
        with self._repository.transaction():
            if self._repository.get_stock_item(item.part_name) is not None:
                raise BusinessRuleError(
                    "DUPLICATE_PART",
                    f"{item.part_name} is already stocked",
                    {"part_name": item.part_name},
                )
            self._repository.save_stock_item(item)
        logger.info("Stock item added", part=item.part_name, quantity=item.quantity)
        return item

    def update_stock_item(
        self, part_name: str, quantity: int | None = None, minimum_stock: int | None = None
    ) -> StockItem:
        with self._repository.transaction():
            item = self._get_stock_item(part_name)
            if quantity is not None:
                item.quantity = quantity
            if minimum_stock is not None:
                item.minimum_stock = minimum_stock
            self._repository.save_stock_item(item)
        return item

    def remove_stock_item(self, part_name: str) -> None:
        with self._repository.transaction():
            if not self._repository.remove_stock_item(part_name):
                raise StockItemNotFoundError(part_name)
        logger.info("Stock item removed", part=part_name)

    def restock(self, part_name: str) -> StockItem:
        """Add the configured restock quantity to a part."""
        with self._repository.transaction():
            item = self._get_stock_item(part_name)
            item.restock(self._restock_quantity)
            self._repository.save_stock_item(item)
        logger.info("Part restocked", part=part_name, quantity=item.quantity)
        return item

    def _get_stock_item(self, part_name: str) -> StockItem:
        item = self._repository.get_stock_item(part_name)
        if item is None:
            raise StockItemNotFoundError(part_name)
        return item
