"""Catalog entry for a predefined service task."""

from pydantic import Field

from ...shared.base import ValueObject
from .enums import Skill


class TaskCatalogEntry(ValueObject):
    """A predefined task with its base time, required skill and parts."""

    name: str = Field(min_length=1)
    base_time_hours: float = Field(gt=0)
    category: Skill = Skill.GENERAL
    required_parts: tuple[str, ...] = ()
