"""Cost aggregation for the Reforma renovation estimator.

``aggregate_costs`` prices a renovation from three user-owned collections:

1. **Room tasks** — for each room, every unit price whose task flag is on is
   applied to the floor, net wall or ceiling area named by its ``apply_to``
   key. Cost is quantity × (labor rate + material rate).
2. **Category and discipline buckets** — each room-task cost is added to its
   price category and to exactly one discipline group picked by the ordered
   keyword rules in ``reforma.classification``.
3. **Fixed costs** — quantity × unit rates, always booked under
   Installations & Other. Their sum is also reported as that category.
4. **Point redistribution** — switch and socket points are priced globally
   but each room's subtotal is charged for its own points, so per-room
   rankings include electrical fixtures.
5. **Synthesis** — each room's task value is split into demolition and
   refinishing, and the measured areas and point counts of all rooms are
   summed alongside the fixed-cost total.

Nothing here raises or mutates its inputs: unpriced keys, disabled tasks and
non-positive areas simply contribute zero.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from reforma.classification import (
    area_for,
    classify_discipline,
    is_counter_key,
    surface_for,
)
from reforma.geometry import derive_geometry
from reforma.models.enums import CounterKey, DisciplineGroup, PriceCategory, Surface
from reforma.models.estimate import (
    CostSplit,
    CostSummary,
    FixedCostLine,
    QuantityTotals,
    RoomCost,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from reforma.models.pricing import FixedCost, UnitPrice
    from reforma.models.room import Room, RoomGeometry

logger = logging.getLogger(__name__)


@dataclass
class _Tally:
    labor: float = 0.0
    material: float = 0.0

    def add(self, labor: float, material: float) -> None:
        self.labor += labor
        self.material += material

    @property
    def total(self) -> float:
        return self.labor + self.material


@dataclass
class _RoomTally(_Tally):
    demolition: float = 0.0
    refinishing: float = 0.0

    def add_task(self, category: PriceCategory, labor: float, material: float) -> None:
        self.add(labor, material)
        if category is PriceCategory.DEMOLITION:
            self.demolition += labor + material
        else:
            self.refinishing += labor + material


@dataclass(frozen=True)
class _PricedTask:
    price: UnitPrice
    surface: Surface
    group: DisciplineGroup


def _priced_tasks(unit_prices: Sequence[UnitPrice]) -> list[_PricedTask]:
    """Resolve each room-task price once, keeping only the first per key."""
    seen: set[str] = set()
    priced: list[_PricedTask] = []
    for price in unit_prices:
        if is_counter_key(price.apply_to):
            # Points are priced through fixed costs
            continue
        if price.apply_to in seen:
            logger.debug(
                "Ignoring duplicate unit price %r for task key %r",
                price.item, price.apply_to,
            )
            continue
        seen.add(price.apply_to)

        surface = surface_for(price.apply_to)
        if surface is None:
            logger.debug(
                "Unit price %r applies to %r, which has no floor/wall/ceiling "
                "surface; it contributes nothing",
                price.item, price.apply_to,
            )
            continue
        priced.append(_PricedTask(price, surface, classify_discipline(price)))
    return priced


def aggregate_costs(
    rooms: Sequence[Room],
    unit_prices: Sequence[UnitPrice],
    fixed_costs: Sequence[FixedCost],
) -> CostSummary:
    """Total labor and material for a renovation, with its breakdowns.

    Returns:
        A CostSummary whose ``grand_total`` is always
        ``total_labor + total_material``.
    """
    totals = _Tally()
    category_totals: dict[str, float] = {}
    groups: dict[DisciplineGroup, _Tally] = {group: _Tally() for group in DisciplineGroup}
    room_tallies: list[tuple[Room, _RoomTally]] = []
    geometries: list[RoomGeometry] = []

    priced = _priced_tasks(unit_prices)

    # 1. Room-based variable costs
    for room in rooms:
        geometry = derive_geometry(room)
        geometries.append(geometry)
        room_tally = _RoomTally()

        for task in priced:
            if not room.tasks.is_active(task.price.apply_to):
                continue
            quantity = area_for(geometry, task.surface)
            if quantity <= 0:
                continue

            labor = quantity * task.price.labor_rate
            material = quantity * task.price.material_rate

            totals.add(labor, material)
            room_tally.add_task(task.price.category, labor, material)
            groups[task.group].add(labor, material)
            category = task.price.category.value
            category_totals[category] = category_totals.get(category, 0.0) + labor + material

        room_tallies.append((room, room_tally))

    # 2. Fixed costs
    fixed_tally = _Tally()
    fixed_lines: list[FixedCostLine] = []
    point_items: dict[CounterKey, FixedCost] = {}

    for fixed_cost in fixed_costs:
        labor = fixed_cost.quantity * fixed_cost.labor_rate_unit
        material = fixed_cost.quantity * fixed_cost.material_rate_unit

        totals.add(labor, material)
        fixed_tally.add(labor, material)
        groups[DisciplineGroup.INSTALLATIONS_OTHER].add(labor, material)
        fixed_lines.append(FixedCostLine(
            fixed_cost_id=fixed_cost.id,
            item=fixed_cost.item,
            quantity=fixed_cost.quantity,
            labor=labor,
            material=material,
            total=labor + material,
        ))

        if fixed_cost.counter is not None:
            point_items.setdefault(fixed_cost.counter, fixed_cost)

    category_totals[DisciplineGroup.INSTALLATIONS_OTHER.value] = fixed_tally.total

    # 3. Charge each room for its own switch/socket points
    for room, room_tally in room_tallies:
        for counter, fixed_cost in point_items.items():
            count = getattr(room, counter.value)
            room_tally.add(
                count * fixed_cost.labor_rate_unit,
                count * fixed_cost.material_rate_unit,
            )

    room_costs = [
        RoomCost(
            room_id=room.id,
            name=room.name,
            level=room.level,
            labor=tally.labor,
            material=tally.material,
            total=tally.total,
            demolition=tally.demolition,
            refinishing=tally.refinishing,
        )
        for room, tally in room_tallies
    ]

    return CostSummary(
        total_labor=totals.labor,
        total_material=totals.material,
        grand_total=totals.labor + totals.material,
        category_totals=category_totals,
        discipline_breakdown={
            group.value: CostSplit.from_parts(tally.labor, tally.material)
            for group, tally in groups.items()
        },
        room_costs=room_costs,
        fixed_cost_lines=fixed_lines,
        fixed_cost_total=fixed_tally.total,
        quantity_totals=_quantity_totals(rooms, geometries),
    )


def _quantity_totals(
    rooms: Sequence[Room],
    geometries: Sequence[RoomGeometry],
) -> QuantityTotals:
    points = point_totals(rooms)
    return QuantityTotals(
        floor_area=sum(g.floor_area for g in geometries),
        wall_area_gross=sum(g.wall_area_gross for g in geometries),
        wall_area_net=sum(g.wall_area_net for g in geometries),
        perimeter=sum(g.perimeter for g in geometries),
        switch_count=points[CounterKey.SWITCH_COUNT],
        socket_count=points[CounterKey.SOCKET_COUNT],
    )


def task_cost(
    room: Room,
    task_key: str,
    unit_prices: Sequence[UnitPrice],
    fixed_costs: Sequence[FixedCost],
) -> CostSplit | None:
    """Labor/material cost of one task in one room, for inline display.

    Counter keys fall back to the fixed cost tracking that counter when no
    unit price names them. Returns None when the task is off, unpriced, or
    has nothing to measure.
    """
    price = next((p for p in unit_prices if p.apply_to == task_key), None)

    if is_counter_key(task_key):
        quantity = float(getattr(room, task_key))
        if price is not None:
            labor_rate, material_rate = price.labor_rate, price.material_rate
        else:
            fixed = next((fc for fc in fixed_costs if fc.counter == task_key), None)
            if fixed is None:
                return None
            labor_rate, material_rate = fixed.labor_rate_unit, fixed.material_rate_unit
    else:
        if price is None or not room.tasks.is_active(task_key):
            return None
        quantity = area_for(derive_geometry(room), surface_for(task_key))
        labor_rate, material_rate = price.labor_rate, price.material_rate

    if quantity <= 0:
        return None
    return CostSplit.from_parts(quantity * labor_rate, quantity * material_rate)


def point_totals(rooms: Sequence[Room]) -> dict[CounterKey, int]:
    """Sum of switch and socket counts across all rooms."""
    return {
        counter: sum(getattr(room, counter.value) for room in rooms)
        for counter in CounterKey
    }


def sync_point_quantities(
    rooms: Sequence[Room],
    fixed_costs: Sequence[FixedCost],
) -> list[FixedCost]:
    """Return fixed costs with switch/socket quantities matching the rooms.

    Items that need no change are passed through as the same objects;
    changed ones are copies.
    """
    totals = point_totals(rooms)
    synced: list[FixedCost] = []
    for fixed_cost in fixed_costs:
        if fixed_cost.counter is not None:
            expected = float(totals[fixed_cost.counter])
            if fixed_cost.quantity != expected:
                logger.debug(
                    "Resyncing %r quantity %s -> %s",
                    fixed_cost.item, fixed_cost.quantity, expected,
                )
                fixed_cost = fixed_cost.model_copy(update={"quantity": expected})
        synced.append(fixed_cost)
    return synced
