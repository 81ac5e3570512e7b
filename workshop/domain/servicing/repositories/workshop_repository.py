"""
Workshop Repository Interface

Defines the contract for the shop's shared state: technicians, bays, stock,
the task catalog, live work orders and the completed-receipt log.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from uuid import UUID

from ..entities.service_bay import ServiceBay
from ..entities.stock_item import StockItem
from ..entities.technician import Technician
from ..entities.work_order import Receipt, WorkOrder
from ..value_objects.enums import WorkOrderStatus
from ..value_objects.service_task import TaskCatalogEntry


@dataclass(frozen=True)
class WorkshopSnapshot:
    """Consistent copy of the allocation-relevant state."""

    technicians: list[Technician] = field(default_factory=list)
    bays: list[ServiceBay] = field(default_factory=list)
    work_orders: list[WorkOrder] = field(default_factory=list)

    @property
    def live_order_count(self) -> int:
        return len(self.work_orders)

    @property
    def queued_order_count(self) -> int:
        return sum(1 for o in self.work_orders if o.status == WorkOrderStatus.QUEUED)


class WorkshopRepository(ABC):
    """
    Abstract repository for the shop's shared state.

    Implementations return copies from every read; callers change state only
    by saving an entity back. ``transaction()`` gives exclusive access for a
    whole read-decide-write sequence.
    """

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """
        Hold exclusive access to the repository.

        Reads and writes made inside the block see no interleaving writer.
        Re-entrant for the holding thread.
        """
        pass

    @abstractmethod
    def snapshot(self) -> WorkshopSnapshot:
        """Copy technicians, bays and live work orders in one consistent read."""
        pass

    # Technicians

    @abstractmethod
    def list_technicians(self) -> list[Technician]:
        pass

    @abstractmethod
    def get_technician(self, technician_id: UUID) -> Technician | None:
        pass

    @abstractmethod
    def save_technician(self, technician: Technician) -> Technician:
        """Insert or replace a technician."""
        pass

    @abstractmethod
    def remove_technician(self, technician_id: UUID) -> bool:
        pass

    # Service bays

    @abstractmethod
    def list_bays(self) -> list[ServiceBay]:
        pass

    @abstractmethod
    def get_bay(self, bay_id: UUID) -> ServiceBay | None:
        pass

    @abstractmethod
    def save_bay(self, bay: ServiceBay) -> ServiceBay:
        pass

    # Stock

    @abstractmethod
    def list_stock(self) -> list[StockItem]:
        pass

    @abstractmethod
    def get_stock_item(self, part_name: str) -> StockItem | None:
        pass

    @abstractmethod
    def save_stock_item(self, item: StockItem) -> StockItem:
        pass

    @abstractmethod
    def set_stock_quantity(self, part_name: str, quantity: int) -> StockItem | None:
        """Overwrite a part's quantity, clamped at zero. None if not stocked."""
        pass

    @abstractmethod
    def remove_stock_item(self, part_name: str) -> bool:
        pass

    # Task catalog

    @abstractmethod
    def list_catalog(self) -> list[TaskCatalogEntry]:
        pass

    @abstractmethod
    def get_catalog_entry(self, name: str) -> TaskCatalogEntry | None:
        pass

    # Work orders

    @abstractmethod
    def list_work_orders(self) -> list[WorkOrder]:
        pass

    @abstractmethod
    def get_work_order(self, service_id: str) -> WorkOrder | None:
        pass

    @abstractmethod
    def save_work_order(self, order: WorkOrder) -> WorkOrder:
        pass

    @abstractmethod
    def remove_work_order(self, service_id: str) -> bool:
        pass

    @abstractmethod
    def service_id_exists(self, service_id: str) -> bool:
        """Check live orders and receipts for an id."""
        pass

    # Completed history

    @abstractmethod
    def add_receipt(self, receipt: Receipt) -> None:
        pass

    @abstractmethod
    def list_receipts(self) -> list[Receipt]:
        pass
