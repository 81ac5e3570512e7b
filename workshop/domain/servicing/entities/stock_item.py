"""Stock item entity for parts consumed by service tasks."""

from pydantic import Field, computed_field

from ...shared.base import Entity


class StockItem(Entity):
    part_name: str = Field(min_length=1, max_length=100)
    quantity: int = Field(default=0, ge=0)
    minimum_stock: int = Field(default=5, ge=0)

    def is_valid(self) -> bool:
        return self.quantity >= 0 and bool(self.part_name)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_low(self) -> bool:
        return self.quantity < self.minimum_stock

    @property
    def is_out(self) -> bool:
        return self.quantity == 0

    def reserve_one(self) -> int:
        """Take one unit for a job, never going below zero."""
        self.quantity = max(0, self.quantity - 1)
        return self.quantity

    def restock(self, units: int) -> int:
        if units < 0:
            raise ValueError("Restock quantity cannot be negative")
        self.quantity = self.quantity + units
        return self.quantity
