from .workshop_repository import WorkshopRepository, WorkshopSnapshot

__all__ = ["WorkshopRepository", "WorkshopSnapshot"]
