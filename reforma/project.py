"""Mutable project state wrapped around the pure cost and schedule core.

``RenovationProject`` owns the four user-edited collections. Every edit
replaces the affected list and then resyncs the switch/socket fixed costs,
so their quantities always equal the room totals. Estimates and schedules
are recomputed from scratch on each call.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, model_validator

from reforma import scheduling
from reforma.data.seed import new_room
from reforma.engine import aggregate_costs, sync_point_quantities
from reforma.exceptions import ProjectDataError
from reforma.models.enums import Phase, TaskFlag
from reforma.models.pricing import FixedCost, UnitPrice
from reforma.models.room import Room
from reforma.models.schedule import (
    PhaseQuantities,
    ScheduleOverride,
    ScheduleResult,
)

if TYPE_CHECKING:
    from reforma.models.estimate import CostSummary

logger = logging.getLogger(__name__)


class RenovationProject(BaseModel):
    """Rooms, prices, fixed costs and schedule overrides of one renovation."""

    name: str = "Renovation"
    rooms: list[Room] = Field(default_factory=list)
    unit_prices: list[UnitPrice] = Field(default_factory=list)
    fixed_costs: list[FixedCost] = Field(default_factory=list)
    overrides: dict[Phase, ScheduleOverride] = Field(default_factory=dict)

    @model_validator(mode="after")
    def point_quantities_follow_rooms(self) -> RenovationProject:
        self._resync()
        return self

    def _resync(self) -> None:
        self.fixed_costs = sync_point_quantities(self.rooms, self.fixed_costs)

    # ------------------------------------------------------------------
    # Computations
    # ------------------------------------------------------------------

    def estimate(self) -> CostSummary:
        return aggregate_costs(self.rooms, self.unit_prices, self.fixed_costs)

    def phase_quantities(self) -> PhaseQuantities:
        return scheduling.extract_phase_quantities(self.rooms, self.fixed_costs)

    def schedule(self) -> ScheduleResult:
        return scheduling.resolve_schedule(self.phase_quantities(), self.overrides)

    # ------------------------------------------------------------------
    # Rooms
    # ------------------------------------------------------------------

    def room(self, room_id: str) -> Room:
        for room in self.rooms:
            if room.id == room_id:
                return room
        msg = f"No room with id {room_id!r}"
        raise ProjectDataError(msg)

    def add_room(self, room: Room | None = None) -> Room:
        """Append ``room``, or a default blank room when none is given."""
        if room is None:
            room = new_room(len(self.rooms) + 1)
        self.rooms = [*self.rooms, room]
        self._resync()
        return room

    def update_room(self, room_id: str, **changes: Any) -> Room:
        """Replace fields of a room; the result is validated as a new Room."""
        current = self.room(room_id)
        if "id" in changes and changes["id"] != room_id:
            msg = "Room ids cannot be changed"
            raise ProjectDataError(msg)
        updated = Room.model_validate({**current.model_dump(), **changes})
        self.rooms = [updated if r.id == room_id else r for r in self.rooms]
        self._resync()
        return updated

    def set_task(self, room_id: str, task: TaskFlag | str, active: bool) -> Room:
        flag = TaskFlag(task)
        current = self.room(room_id)
        tasks = current.tasks.model_copy(update={flag.value: active})
        return self.update_room(room_id, tasks=tasks.model_dump())

    def remove_room(self, room_id: str) -> None:
        self.room(room_id)
        self.rooms = [r for r in self.rooms if r.id != room_id]
        self._resync()

    # ------------------------------------------------------------------
    # Prices
    # ------------------------------------------------------------------

    def update_unit_price(
        self,
        price_id: str,
        labor_rate: float | None = None,
        material_rate: float | None = None,
    ) -> UnitPrice:
        """Edit the rates of a unit price; the rest of its shape is fixed."""
        changes: dict[str, float] = {}
        if labor_rate is not None:
            changes["labor_rate"] = labor_rate
        if material_rate is not None:
            changes["material_rate"] = material_rate

        for price in self.unit_prices:
            if price.id == price_id:
                updated = price.model_copy(update=changes)
                self.unit_prices = [
                    updated if p.id == price_id else p for p in self.unit_prices
                ]
                return updated
        msg = f"No unit price with id {price_id!r}"
        raise ProjectDataError(msg)

    def add_fixed_cost(self, fixed_cost: FixedCost | None = None) -> FixedCost:
        if fixed_cost is None:
            fixed_cost = FixedCost(item="New Item", quantity=1)
        self.fixed_costs = [*self.fixed_costs, fixed_cost]
        self._resync()
        return fixed_cost

    def update_fixed_cost(self, fixed_cost_id: str, **changes: Any) -> FixedCost:
        """Edit a fixed cost.

        Raises:
            ProjectDataError: If the item does not exist, or if the edit sets
                the quantity of a switch/socket item, which is derived from
                the rooms.
        """
        for fixed_cost in self.fixed_costs:
            if fixed_cost.id != fixed_cost_id:
                continue
            if fixed_cost.counter is not None and "quantity" in changes:
                msg = (
                    f"Quantity of {fixed_cost.item!r} is derived from room "
                    f"{fixed_cost.counter.value}"
                )
                raise ProjectDataError(msg)
            updated = FixedCost.model_validate({**fixed_cost.model_dump(), **changes})
            self.fixed_costs = [
                updated if fc.id == fixed_cost_id else fc for fc in self.fixed_costs
            ]
            self._resync()
            return updated
        msg = f"No fixed cost with id {fixed_cost_id!r}"
        raise ProjectDataError(msg)

    def remove_fixed_cost(self, fixed_cost_id: str) -> None:
        remaining = [fc for fc in self.fixed_costs if fc.id != fixed_cost_id]
        if len(remaining) == len(self.fixed_costs):
            msg = f"No fixed cost with id {fixed_cost_id!r}"
            raise ProjectDataError(msg)
        self.fixed_costs = remaining

    # ------------------------------------------------------------------
    # Schedule overrides
    # ------------------------------------------------------------------

    def set_override(self, phase_id: Phase | str, **fields: Any) -> ScheduleOverride:
        self.overrides = scheduling.apply_override(self.overrides, phase_id, **fields)
        logger.debug("Override for %s is now %s", phase_id, self.overrides[Phase(phase_id)])
        return self.overrides[Phase(phase_id)]

    def clear_override(self, phase_id: Phase | str, *fields: str) -> None:
        self.overrides = scheduling.clear_override(self.overrides, phase_id, *fields)
