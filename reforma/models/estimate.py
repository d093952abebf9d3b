"""Cost summary output models for the Reforma cost engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from reforma.models.enums import LevelTag


class CostSplit(BaseModel):
    """A labor/material pair with its total."""

    labor: float = 0.0
    material: float = 0.0
    total: float = 0.0

    @classmethod
    def from_parts(cls, labor: float, material: float) -> CostSplit:
        return cls(labor=labor, material=material, total=labor + material)


class RoomCost(BaseModel):
    """Cost attributed to one room, including its share of switch/socket points.

    ``demolition`` and ``refinishing`` split the room's priced tasks by price
    category; every category other than Demolition counts as refinishing.
    Points are not part of either, so the two can sum to less than ``total``.
    """

    room_id: str
    name: str
    level: LevelTag
    labor: float
    material: float
    total: float
    demolition: float = 0.0
    refinishing: float = 0.0


class QuantityTotals(BaseModel):
    """Measured quantities summed over every room, priced or not."""

    floor_area: float = 0.0
    wall_area_gross: float = 0.0
    wall_area_net: float = 0.0
    perimeter: float = 0.0
    switch_count: int = 0
    socket_count: int = 0


class FixedCostLine(BaseModel):
    """Subtotal of a single fixed cost item."""

    fixed_cost_id: str
    item: str
    quantity: float
    labor: float
    material: float
    total: float


class CostSummary(BaseModel):
    """Complete cost aggregation for a renovation.

    ``discipline_breakdown`` always carries every ``DisciplineGroup`` key,
    in group order, so charts get a stable shape.
    """

    total_labor: float
    total_material: float
    grand_total: float
    category_totals: dict[str, float] = Field(default_factory=dict)
    discipline_breakdown: dict[str, CostSplit] = Field(default_factory=dict)
    room_costs: list[RoomCost] = Field(default_factory=list)
    fixed_cost_lines: list[FixedCostLine] = Field(default_factory=list)
    fixed_cost_total: float = 0.0
    quantity_totals: QuantityTotals = Field(default_factory=QuantityTotals)

    @property
    def demolition_total(self) -> float:
        return sum(rc.demolition for rc in self.room_costs)

    @property
    def refinishing_total(self) -> float:
        return sum(rc.refinishing for rc in self.room_costs)

    def percent_of_total(self, amount: float) -> float:
        """Share of the grand total as a percentage, 0 when nothing is priced."""
        if self.grand_total <= 0:
            return 0.0
        return amount / self.grand_total * 100.0

    def nonzero_disciplines(self) -> dict[str, CostSplit]:
        return {
            name: split
            for name, split in self.discipline_breakdown.items()
            if split.total > 0
        }

    def top_rooms(self, n: int = 5) -> list[RoomCost]:
        """Most expensive rooms first; ties keep input order."""
        return sorted(self.room_costs, key=lambda rc: rc.total, reverse=True)[:n]

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict for dashboard consumption.

        Currency values come back pre-formatted in BRL.
        """
        from reforma.formatting import format_currency, format_percent

        return {
            "total_labor_formatted": format_currency(self.total_labor),
            "total_material_formatted": format_currency(self.total_material),
            "grand_total_formatted": format_currency(self.grand_total),
            "labor_share_formatted": format_percent(
                self.percent_of_total(self.total_labor)
            ),
            "num_rooms": len(self.room_costs),
            "categories": [
                {
                    "name": name,
                    "value": value,
                    "value_formatted": format_currency(value),
                }
                for name, value in self.category_totals.items()
            ],
            "disciplines": [
                {
                    "name": name,
                    "labor": split.labor,
                    "material": split.material,
                    "total": split.total,
                    "total_formatted": format_currency(split.total),
                    "percent_of_total": self.percent_of_total(split.total),
                }
                for name, split in self.nonzero_disciplines().items()
            ],
            "top_rooms": [
                {
                    "room_id": rc.room_id,
                    "name": rc.name,
                    "total_formatted": format_currency(rc.total),
                    "percent_of_total": self.percent_of_total(rc.total),
                }
                for rc in self.top_rooms()
            ],
            "synthesis": {
                "demolition_formatted": format_currency(self.demolition_total),
                "refinishing_formatted": format_currency(self.refinishing_total),
                "fixed_costs_formatted": format_currency(self.fixed_cost_total),
                "quantities": self.quantity_totals.model_dump(),
            },
        }

