from .service_bay import ServiceBay
from .stock_item import StockItem
from .technician import Technician
from .work_order import QUEUED_BAY_LABEL, Receipt, WorkOrder

__all__ = [
    "QUEUED_BAY_LABEL",
    "Receipt",
    "ServiceBay",
    "StockItem",
    "Technician",
    "WorkOrder",
]
