"""Demo shop: technicians, bays, stock and the service task catalog."""

import random
from uuid import UUID

from ...core.config import Settings
from ...core.observability import get_logger
from ...domain.servicing.entities import ServiceBay, StockItem, Technician
from ...domain.servicing.value_objects import Skill, TaskCatalogEntry
from .in_memory_repository import InMemoryWorkshopRepository

logger = get_logger(__name__)

TECHNICIAN_NAMES = [
    "Alex Johnson", "Maria Garcia", "James Smith", "Sofia Rodriguez", "Michael Chen",
    "Emma Wilson", "David Brown", "Isabella Martinez", "Robert Taylor", "Olivia Anderson",
    "William Thomas", "Ava Jackson", "John White", "Mia Harris", "Daniel Martin",
    "Charlotte Thompson", "Christopher Garcia", "Amelia Robinson", "Matthew Clark", "Harper Lewis",
]  # fmt: skip

SKILL_ROTATION = [Skill.ENGINE, Skill.BRAKE, Skill.AC, Skill.GENERAL]

SKILL_CERTIFICATIONS = {
    Skill.ENGINE: "Advanced Engine Diagnostics",
    Skill.BRAKE: "Brake System Specialist",
    Skill.AC: "HVAC Certified",
}

BAY_TOOLS = ["Hydraulic Lift", "Diagnostic Scanner", "Air Compressor", "Tool Set"]

STOCK = [
    ("AC Cleaner", 15, 5),
    ("Air Filter", 25, 10),
    ("Engine Oil (5W-30)", 30, 15),
    ("Spark Plugs", 40, 20),
    ("Brake Pads", 20, 8),
    ("Coolant", 18, 10),
    ("Transmission Fluid", 12, 8),
    ("Battery (12V)", 8, 5),
]

SERVICE_CATALOG = [
    TaskCatalogEntry(name="Oil Change", base_time_hours=0.5, category=Skill.GENERAL, required_parts=("Engine Oil (5W-30)",)),
    TaskCatalogEntry(name="Air Filter Replacement", base_time_hours=0.25, category=Skill.GENERAL, required_parts=("Air Filter",)),
    TaskCatalogEntry(name="Brake Inspection", base_time_hours=0.75, category=Skill.BRAKE),
    TaskCatalogEntry(name="Brake Pad Replacement", base_time_hours=2.0, category=Skill.BRAKE, required_parts=("Brake Pads",)),
    TaskCatalogEntry(name="Engine Diagnostic", base_time_hours=1.5, category=Skill.ENGINE),
    TaskCatalogEntry(name="Spark Plug Replacement", base_time_hours=1.0, category=Skill.ENGINE, required_parts=("Spark Plugs",)),
    TaskCatalogEntry(name="AC Service", base_time_hours=1.5, category=Skill.AC, required_parts=("AC Cleaner",)),
    TaskCatalogEntry(name="Coolant Flush", base_time_hours=1.0, category=Skill.GENERAL, required_parts=("Coolant",)),
    TaskCatalogEntry(name="Transmission Service", base_time_hours=2.5, category=Skill.GENERAL, required_parts=("Transmission Fluid",)),
    TaskCatalogEntry(name="Battery Replacement", base_time_hours=0.5, category=Skill.GENERAL, required_parts=("Battery (12V)",)),
    TaskCatalogEntry(name="Tire Rotation", base_time_hours=0.5, category=Skill.GENERAL),
    TaskCatalogEntry(name="Wheel Alignment", base_time_hours=1.0, category=Skill.GENERAL),
]  # fmt: skip


def _bay_type(bay_number: int) -> str:
    if bay_number <= 2:
        return "Diagnostic Bay"
    if bay_number <= 4:
        return "General Service Bay"
    return "Heavy Repair Bay"


def _seeded_uuid(rng: random.Random) -> UUID:
    return UUID(int=rng.getrandbits(128), version=4)


def create_repository(settings: Settings) -> InMemoryWorkshopRepository:
    """Build a repository with the service catalog, seeded when configured."""
    repository = InMemoryWorkshopRepository(catalog=SERVICE_CATALOG)
    if settings.SEED_DEMO_DATA:
        seed_workshop(repository, settings)
    return repository


def seed_workshop(repository: InMemoryWorkshopRepository, settings: Settings) -> None:
    """
    Populate an empty repository with the demo shop.

    Experience, rating and ids come from ``random.Random(settings.SEED)`` so
    the same seed always yields the same shop.
    """
    rng = random.Random(settings.SEED)

    with repository.transaction():
        for index, name in enumerate(TECHNICIAN_NAMES):
            skill = SKILL_ROTATION[index % len(SKILL_ROTATION)]
            certifications = [SKILL_CERTIFICATIONS[skill]] if skill in SKILL_CERTIFICATIONS else []
            certifications.append("Volvo Certified Technician")
            repository.save_technician(
                Technician(
                    id=_seeded_uuid(rng),
                    name=name,
                    skill=skill,
                    experience_level=rng.randint(3, 17),
                    rating=round(3.5 + rng.random() * 1.5, 1),
                    certifications=certifications,
                    job_capacity=settings.MAX_JOBS_PER_TECHNICIAN,
                )
            )

        for bay_number in range(1, 7):
            repository.save_bay(
                ServiceBay(
                    id=_seeded_uuid(rng),
                    bay_number=bay_number,
                    bay_type=_bay_type(bay_number),
                    tools_present=list(BAY_TOOLS),
                    technician_capacity=settings.MAX_TECHNICIANS_PER_BAY,
                    load_per_job=settings.BAY_LOAD_STEP,
                )
            )

        for part_name, quantity, minimum in STOCK:
            repository.save_stock_item(
                StockItem(
                    id=_seeded_uuid(rng),
                    part_name=part_name,
                    quantity=quantity,
                    minimum_stock=minimum,
                )
            )

    logger.info(
        "Seeded demo workshop",
        technicians=len(TECHNICIAN_NAMES),
        bays=6,
        stock_items=len(STOCK),
        catalog_tasks=len(SERVICE_CATALOG),
    )
