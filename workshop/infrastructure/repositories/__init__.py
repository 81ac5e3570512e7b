from .in_memory_repository import InMemoryWorkshopRepository
from .seed_data import SERVICE_CATALOG, create_repository, seed_workshop

__all__ = [
    "InMemoryWorkshopRepository",
    "SERVICE_CATALOG",
    "create_repository",
    "seed_workshop",
]
