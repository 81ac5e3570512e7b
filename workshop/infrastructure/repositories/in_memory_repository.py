"""
In-memory Workshop Repository

Process-lifetime storage for the shop state behind a single re-entrant lock.
Reads hand out deep copies; a failed outermost transaction restores the state
it started from.
"""

import copy
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from uuid import UUID

from ...core.observability import get_logger
from ...domain.servicing.entities import (
    Receipt,
    ServiceBay,
    StockItem,
    Technician,
    WorkOrder,
)
from ...domain.servicing.repositories import WorkshopRepository, WorkshopSnapshot
from ...domain.servicing.value_objects import TaskCatalogEntry

logger = get_logger(__name__)


class InMemoryWorkshopRepository(WorkshopRepository):
    """Lock-guarded dictionaries keyed by entity identity."""

    def __init__(self, catalog: list[TaskCatalogEntry] | None = None) -> None:
        self._lock = threading.RLock()
        self._depth = 0
        self._technicians: dict[UUID, Technician] = {}
        self._bays: dict[UUID, ServiceBay] = {}
        self._stock: dict[str, StockItem] = {}
        self._catalog: dict[str, TaskCatalogEntry] = {
            entry.name: entry for entry in catalog or []
        }
        self._work_orders: dict[str, WorkOrder] = {}
        self._receipts: list[Receipt] = []

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._lock:
            outermost = self._depth == 0
            saved = self._capture() if outermost else None
            self._depth += 1
            try:
                yield
            except Exception:
                if outermost:
                    logger.warning("Rolling back workshop transaction")
                    self._restore(saved)
                raise
            finally:
                self._depth -= 1

    def _capture(self) -> dict[str, object]:
        return copy.deepcopy(
            {
                "technicians": self._technicians,
                "bays": self._bays,
                "stock": self._stock,
                "work_orders": self._work_orders,
                "receipts": self._receipts,
            }
        )

    def _restore(self, saved: dict[str, object] | None) -> None:
        if saved is None:
            return
        self._technicians = saved["technicians"]  # type: ignore[assignment]
        self._bays = saved["bays"]  # type: ignore[assignment]
        self._stock = saved["stock"]  # type: ignore[assignment]
        self._work_orders = saved["work_orders"]  # type: ignore[assignment]
        self._receipts = saved["receipts"]  # type: ignore[assignment]

    def snapshot(self) -> WorkshopSnapshot:
        with self._lock:
            return WorkshopSnapshot(
                technicians=self.list_technicians(),
                bays=self.list_bays(),
                work_orders=self.list_work_orders(),
            )

    # Technicians

    def list_technicians(self) -> list[Technician]:
        with self._lock:
            return [t.model_copy(deep=True) for t in self._technicians.values()]

    def get_technician(self, technician_id: UUID) -> Technician | None:
        with self._lock:
            technician = self._technicians.get(technician_id)
            return technician.model_copy(deep=True) if technician else None

    def save_technician(self, technician: Technician) -> Technician:
        with self._lock:
            self._technicians[technician.id] = technician.model_copy(deep=True)
            return technician

    def remove_technician(self, technician_id: UUID) -> bool:
        with self._lock:
            return self._technicians.pop(technician_id, None) is not None

    # Service bays

    def list_bays(self) -> list[ServiceBay]:
        with self._lock:
            return [b.model_copy(deep=True) for b in self._bays.values()]

    def get_bay(self, bay_id: UUID) -> ServiceBay | None:
        with self._lock:
            bay = self._bays.get(bay_id)
            return bay.model_copy(deep=True) if bay else None

    def save_bay(self, bay: ServiceBay) -> ServiceBay:
        with self._lock:
            self._bays[bay.id] = bay.model_copy(deep=True)
            return bay

    # Stock

    def list_stock(self) -> list[StockItem]:
        with self._lock:
            return [item.model_copy(deep=True) for item in self._stock.values()]

    def get_stock_item(self, part_name: str) -> StockItem | None:
        with self._lock:
            item = self._stock.get(part_name)
            return item.model_copy(deep=True) if item else None

    def save_stock_item(self, item: StockItem) -> StockItem:
        with self._lock:
            self._stock[item.part_name] = item.model_copy(deep=True)
            return item

    def set_stock_quantity(self, part_name: str, quantity: int) -> StockItem | None:
        with self._lock:
            item = self._stock.get(part_name)
            if item is None:
                return None
            item.quantity = max(0, quantity)
            return item.model_copy(deep=True)

    def remove_stock_item(self, part_name: str) -> bool:
        with self._lock:
            return self._stock.pop(part_name, None) is not None

    # Task catalog

    def list_catalog(self) -> list[TaskCatalogEntry]:
        with self._lock:
            return list(self._catalog.values())

    def get_catalog_entry(self, name: str) -> TaskCatalogEntry | None:
        with self._lock:
            return self._catalog.get(name)

    def add_catalog_entry(self, entry: TaskCatalogEntry) -> None:
        with self._lock:
            self._catalog[entry.name] = entry

    # Work orders

    def list_work_orders(self) -> list[WorkOrder]:
        with self._lock:
            return [o.model_copy(deep=True) for o in self._work_orders.values()]

    def get_work_order(self, service_id: str) -> WorkOrder | None:
        with self._lock:
            order = self._work_orders.get(service_id)
            return order.model_copy(deep=True) if order else None

    def save_work_order(self, order: WorkOrder) -> WorkOrder:
        with self._lock:
            self._work_orders[order.service_id] = order.model_copy(deep=True)
            return order

    def remove_work_order(self, service_id: str) -> bool:
        with self._lock:
            return self._work_orders.pop(service_id, None) is not None

    def service_id_exists(self, service_id: str) -> bool:
        with self._lock:
            if service_id in self._work_orders:
                return True
            return any(r.service_id == service_id for r in self._receipts)

    # Completed history

    def add_receipt(self, receipt: Receipt) -> None:
        with self._lock:
            self._receipts.append(receipt)

    def list_receipts(self) -> list[Receipt]:
        with self._lock:
            return list(self._receipts)
