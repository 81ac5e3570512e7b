"""
Data Transfer Objects for the application layer.

These DTOs define the HTTP contract independently of the domain model.
"""

from .resource_dtos import (
    AnalyticsResponse,
    BayResponse,
    CreateStockItemRequest,
    CreateTechnicianRequest,
    DashboardStatsResponse,
    ServiceTaskResponse,
    StockItemResponse,
    TechnicianResponse,
    UpdateStockItemRequest,
)
from .work_order_dtos import (
    CompleteWorkOrderResponse,
    ProgressUpdateRequest,
    ReceiptResponse,
    ServiceRequest,
    WorkOrderCreatedResponse,
    WorkOrderResponse,
)

__all__ = [
    "AnalyticsResponse",
    "BayResponse",
    "CompleteWorkOrderResponse",
    "CreateStockItemRequest",
    "CreateTechnicianRequest",
    "DashboardStatsResponse",
    "ProgressUpdateRequest",
    "ReceiptResponse",
    "ServiceRequest",
    "ServiceTaskResponse",
    "StockItemResponse",
    "TechnicianResponse",
    "UpdateStockItemRequest",
    "WorkOrderCreatedResponse",
    "WorkOrderResponse",
]
