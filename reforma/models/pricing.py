"""Price list models: per-m² unit prices and quantity-based fixed costs."""

from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, Field

from reforma.models.enums import CounterKey, PriceCategory


def _new_id() -> str:
    return uuid4().hex[:9]


class UnitPrice(BaseModel):
    """A priced per-m² service applied to rooms through a task flag.

    ``apply_to`` names a ``TaskFlag`` or a ``CounterKey``. It is kept as a
    plain string so price lists written for newer task types still load;
    such entries simply price nothing.
    """

    id: str = Field(default_factory=_new_id)
    category: PriceCategory
    item: str
    unit: str = "m²"
    labor_rate: float = 0.0
    material_rate: float = 0.0
    apply_to: str


class FixedCost(BaseModel):
    """A global line item priced by quantity rather than room geometry.

    When ``counter`` is set the item tracks a per-room count (switch or
    socket points) and its ``quantity`` is kept equal to the sum of that
    count across all rooms.
    """

    id: str = Field(default_factory=_new_id)
    item: str
    quantity: float = 0.0
    labor_rate_unit: float = 0.0
    material_rate_unit: float = 0.0
    counter: CounterKey | None = None

    @property
    def unit_rate(self) -> float:
        return self.labor_rate_unit + self.material_rate_unit
