"""
Shop resource Data Transfer Objects.

Technicians, bays, stock, the service catalog and the analytics views.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from ...domain.servicing.entities import ServiceBay, StockItem, Technician
from ...domain.servicing.services import DashboardStats, ShopAnalytics
from ...domain.servicing.value_objects import Skill, TaskCatalogEntry, TechnicianStatus
from .work_order_dtos import CamelModel


class CreateTechnicianRequest(CamelModel):
    """DTO for adding a technician to the roster."""

    name: str = Field(..., min_length=1, max_length=100)
    skill: Skill
    experience_level: int = Field(0, ge=0, description="Years in the trade")
    rating: float = Field(4.0, ge=0, le=5)
    certifications: list[str] = Field(default_factory=list)

    def to_entity(self, job_capacity: int) -> Technician:
        return Technician(
            name=self.name,
            skill=self.skill,
            experience_level=self.experience_level,
            rating=self.rating,
            certifications=list(self.certifications),
            job_capacity=job_capacity,
        )


class TechnicianResponse(CamelModel):
    id: UUID
    name: str
    skill: Skill
    experience_level: int
    rating: float
    certifications: list[str]
    load_percent: int
    active_jobs: list[str]
    status: TechnicianStatus

    @classmethod
    def from_entity(cls, technician: Technician) -> "TechnicianResponse":
        return cls(
            id=technician.id,
            name=technician.name,
            skill=technician.skill,
            experience_level=technician.experience_level,
            rating=technician.rating,
            certifications=list(technician.certifications),
            load_percent=technician.load_percent,
            active_jobs=list(technician.active_job_ids),
            status=technician.status,
        )


class BayResponse(CamelModel):
    id: UUID
    bay_number: int
    label: str
    bay_type: str
    is_available: bool
    assigned_technicians: list[UUID]
    current_load: int
    tools_present: list[str]

    @classmethod
    def from_entity(cls, bay: ServiceBay) -> "BayResponse":
        return cls(
            id=bay.id,
            bay_number=bay.bay_number,
            label=bay.label,
            bay_type=bay.bay_type,
            is_available=bay.is_available,
            assigned_technicians=bay.assigned_technician_ids,
            current_load=bay.current_load,
            tools_present=list(bay.tools_present),
        )


class CreateStockItemRequest(CamelModel):
    part_name: str = Field(..., min_length=1, max_length=100)
    quantity: int = Field(0, ge=0)
    minimum_stock: int = Field(5, ge=0)

    def to_entity(self) -> StockItem:
        return StockItem(
            part_name=self.part_name,
            quantity=self.quantity,
            minimum_stock=self.minimum_stock,
        )


class UpdateStockItemRequest(CamelModel):
    quantity: int | None = Field(None, ge=0)
    minimum_stock: int | None = Field(None, ge=0)


class StockItemResponse(CamelModel):
    id: UUID
    part_name: str
    quantity: int
    minimum_stock: int
    is_low: bool

    @classmethod
    def from_entity(cls, item: StockItem) -> "StockItemResponse":
        return cls(
            id=item.id,
            part_name=item.part_name,
            quantity=item.quantity,
            minimum_stock=item.minimum_stock,
            is_low=item.is_low,
        )


class ServiceTaskResponse(CamelModel):
    name: str
    base_time_hours: float
    category: Skill
    required_parts: list[str]

    @classmethod
    def from_entry(cls, entry: TaskCatalogEntry) -> "ServiceTaskResponse":
        return cls(
            name=entry.name,
            base_time_hours=entry.base_time_hours,
            category=entry.category,
            required_parts=list(entry.required_parts),
        )


class AnalyticsResponse(CamelModel):
    completed_services: int
    average_service_time: float
    total_revenue: float
    technician_utilization: float
    bay_utilization: float

    @classmethod
    def from_analytics(cls, analytics: ShopAnalytics) -> "AnalyticsResponse":
        return cls(**analytics.model_dump())


class DashboardStatsResponse(CamelModel):
    total_technicians: int
    active_jobs: int
    available_technicians: int
    queue_count: int
    capacity_used: int
    bays_active: int
    low_stock_items: int
    last_updated: datetime

    @classmethod
    def from_stats(cls, stats: DashboardStats) -> "DashboardStatsResponse":
        return cls(**stats.model_dump())
