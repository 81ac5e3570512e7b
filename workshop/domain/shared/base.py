"""Base classes for domain entities and value objects."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import BusinessRuleError


class ValueObject(BaseModel):
    """Base class for value objects (immutable, defined by their values)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class Entity(BaseModel, ABC):
    """Base class for entities (have identity, can change over time)."""

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    id: UUID = Field(default_factory=uuid4)

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and type."""
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash(self.id)

    @abstractmethod
    def is_valid(self) -> bool:
        """Validate business rules for this entity."""
        pass

    def validate_rules(self) -> None:
        """
        Raises:
            BusinessRuleError: If the entity breaks one of its invariants
        """
        if not self.is_valid():
            raise BusinessRuleError(
                "ENTITY_INVALID",
                f"{self.__class__.__name__} {self.id} violates its invariants",
                {"entity_id": str(self.id)},
            )


class DomainService(ABC):
    """Base class for domain services (business logic that doesn't belong to a single entity)."""

    pass
