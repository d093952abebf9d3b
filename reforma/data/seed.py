"""Seed data for the Reforma estimator.

Unit prices and fixed costs are typical 2025 rates for a residential
renovation in BRL. The sample rooms describe a three-level townhouse and
are what ``create_default_project`` loads.
"""

from __future__ import annotations

from reforma.models.enums import CounterKey, LevelTag, PriceCategory, TaskFlag
from reforma.models.pricing import FixedCost, UnitPrice
from reforma.models.room import Room, RoomTasks

SEED_UNIT_PRICES: list[UnitPrice] = [
    # --- Demolition ---
    UnitPrice(
        id="1", category=PriceCategory.DEMOLITION, item="Floor Removal",
        labor_rate=30.0, material_rate=0.0, apply_to=TaskFlag.DEMO_FLOOR,
    ),
    UnitPrice(
        id="2", category=PriceCategory.DEMOLITION, item="Wall Stripping",
        labor_rate=30.0, material_rate=0.0, apply_to=TaskFlag.DEMO_WALL,
    ),
    UnitPrice(
        id="3", category=PriceCategory.DEMOLITION, item="Ceiling Removal",
        labor_rate=30.0, material_rate=0.0, apply_to=TaskFlag.DEMO_CEILING,
    ),
    # --- Refinishing: floor ---
    UnitPrice(
        id="4", category=PriceCategory.REFINISHING, item="Floor Tile",
        labor_rate=50.0, material_rate=80.0, apply_to=TaskFlag.REF_FLOOR_CERAMIC,
    ),
    UnitPrice(
        id="5", category=PriceCategory.REFINISHING, item="Screed",
        labor_rate=30.0, material_rate=30.0, apply_to=TaskFlag.REF_FLOOR_SCREED,
    ),
    # --- Refinishing: wall ---
    UnitPrice(
        id="6", category=PriceCategory.REFINISHING, item="Wall Plaster & Render",
        labor_rate=30.0, material_rate=20.0, apply_to=TaskFlag.REF_WALL_PLASTER,
    ),
    UnitPrice(
        id="7", category=PriceCategory.REFINISHING, item="Wall Tile",
        labor_rate=50.0, material_rate=80.0, apply_to=TaskFlag.REF_WALL_CERAMIC,
    ),
    UnitPrice(
        id="8", category=PriceCategory.REFINISHING, item="Wall Paint",
        labor_rate=20.0, material_rate=20.0, apply_to=TaskFlag.REF_WALL_PAINT,
    ),
    # --- Refinishing: ceiling ---
    UnitPrice(
        id="9", category=PriceCategory.REFINISHING, item="Gypsum Ceiling",
        labor_rate=50.0, material_rate=70.0, apply_to=TaskFlag.REF_CEILING_GYPSUM,
    ),
    UnitPrice(
        id="12", category=PriceCategory.REFINISHING, item="Ceiling Plaster & Render",
        labor_rate=30.0, material_rate=20.0, apply_to=TaskFlag.REF_CEILING_PLASTER,
    ),
    UnitPrice(
        id="10", category=PriceCategory.REFINISHING, item="Ceiling Paint",
        labor_rate=20.0, material_rate=15.0, apply_to=TaskFlag.REF_CEILING_PAINT,
    ),
    UnitPrice(
        id="11", category=PriceCategory.REFINISHING, item="PVC Ceiling",
        labor_rate=45.0, material_rate=65.0, apply_to=TaskFlag.REF_CEILING_PVC,
    ),
]

SEED_FIXED_COSTS: list[FixedCost] = [
    FixedCost(
        id="f10", item="Switch Point", quantity=0,
        labor_rate_unit=50.0, material_rate_unit=40.0,
        counter=CounterKey.SWITCH_COUNT,
    ),
    FixedCost(
        id="f11", item="Socket Point", quantity=0,
        labor_rate_unit=50.0, material_rate_unit=45.0,
        counter=CounterKey.SOCKET_COUNT,
    ),
    FixedCost(
        id="f1", item="Doors", quantity=10,
        labor_rate_unit=100.0, material_rate_unit=400.0,
    ),
    FixedCost(
        id="f2", item="Windows", quantity=11,
        labor_rate_unit=100.0, material_rate_unit=550.0,
    ),
    FixedCost(
        id="f12", item="New Masonry Walls (m²)", quantity=0,
        labor_rate_unit=70.0, material_rate_unit=50.0,
    ),
    FixedCost(
        id="f13", item="Drywall Partitions (m²)", quantity=0,
        labor_rate_unit=45.0, material_rate_unit=65.0,
    ),
    FixedCost(
        id="f5", item="Waterproofing", quantity=21.75,
        labor_rate_unit=35.0, material_rate_unit=35.0,
    ),
    FixedCost(id="f6", item="Roof", quantity=52.0, labor_rate_unit=45.0, material_rate_unit=80.0),
    FixedCost(
        id="f7", item="Plumbing (General)", quantity=1,
        labor_rate_unit=2500.0, material_rate_unit=1500.0,
    ),
    FixedCost(
        id="f8", item="Water Tank", quantity=1,
        labor_rate_unit=300.0, material_rate_unit=800.0,
    ),
    FixedCost(
        id="f9", item="Electrical Infrastructure (Panel)", quantity=1,
        labor_rate_unit=3500.0, material_rate_unit=2500.0,
    ),
]


def _tasks(*flags: TaskFlag) -> RoomTasks:
    return RoomTasks(**{flag.value: True for flag in flags})


def _room(
    room_id: str,
    name: str,
    level: LevelTag,
    dims: tuple[float, float, float],
    deduction_area: float,
    points: tuple[int, int],
    *flags: TaskFlag,
) -> Room:
    width, length, height = dims
    switches, sockets = points
    return Room(
        id=room_id,
        name=name,
        level=level,
        width=width,
        length=length,
        height=height,
        deduction_area=deduction_area,
        switch_count=switches,
        socket_count=sockets,
        tasks=_tasks(*flags),
    )


_SS = LevelTag.SUBSOLO
_T = LevelTag.TERREO
_F = TaskFlag

SEED_ROOMS: list[Room] = [
    # --- Lower level ---
    _room("r1", "Garden (LL)", _SS, (4.35, 2.14, 2.60), 7.31, (0, 0),
          _F.REF_FLOOR_SCREED, _F.REF_WALL_PAINT),
    _room("r2", "Back Room (LL)", _SS, (4.35, 5.50, 2.60), 11.46, (0, 0),
          _F.REF_FLOOR_SCREED, _F.REF_WALL_PAINT, _F.REF_CEILING_PLASTER),
    _room("r3", "Kitchen (LL)", _SS, (3.26, 3.05, 2.67), 4.58, (1, 3),
          _F.DEMO_WALL, _F.DEMO_CEILING, _F.REF_WALL_CERAMIC,
          _F.REF_CEILING_PLASTER, _F.REF_CEILING_PAINT),
    _room("r4", "Hall (LL)", _SS, (2.56, 1.33, 2.15), 7.33, (0, 0),
          _F.DEMO_WALL, _F.REF_WALL_PAINT, _F.REF_CEILING_PAINT),
    _room("r5", "Bathroom (LL)", _SS, (1.65, 1.33, 2.15), 1.05, (1, 0),
          _F.DEMO_WALL, _F.REF_WALL_CERAMIC, _F.REF_CEILING_PAINT),
    _room("r6", "Bedroom (LL)", _SS, (3.23, 3.66, 2.00), 2.02, (1, 2),
          _F.REF_WALL_PAINT, _F.REF_CEILING_PAINT),
    _room("r7", "Corridor 1 (LL)", _SS, (0.90, 3.00, 2.65), 3.33, (0, 0),
          _F.REF_WALL_PAINT),
    _room("r8", "Corridor 2 (LL)", _SS, (1.00, 5.20, 4.50), 3.57, (0, 0),
          _F.DEMO_FLOOR, _F.REF_FLOOR_SCREED),
    # --- Ground level ---
    _room("r9", "Garage", _T, (4.35, 5.00, 2.90), 18.16, (0, 0),
          _F.DEMO_WALL, _F.DEMO_CEILING, _F.REF_WALL_PAINT, _F.REF_CEILING_PLASTER),
    _room("r10", "Living Room", _T, (3.25, 2.63, 2.40), 5.23, (1, 1),
          _F.REF_WALL_PAINT, _F.REF_CEILING_PVC),
    _room("r11", "Corridor", _T, (1.00, 3.80, 2.40), 4.67, (0, 0),
          _F.REF_WALL_PAINT, _F.REF_CEILING_PVC),
    _room("r12", "Bedroom 1", _T, (2.13, 3.80, 2.40), 3.63, (1, 2),
          _F.DEMO_FLOOR, _F.REF_FLOOR_CERAMIC, _F.REF_WALL_PAINT, _F.REF_CEILING_PVC),
    _room("r13", "Hall", _T, (2.15, 1.40, 2.60), 4.53, (1, 0),
          _F.DEMO_WALL, _F.DEMO_CEILING, _F.REF_WALL_PAINT, _F.REF_CEILING_PVC),
    _room("r14", "Bathroom 1", _T, (1.95, 1.40, 2.50), 2.01, (0, 0),
          _F.DEMO_WALL, _F.REF_WALL_CERAMIC),
    _room("r15", "Kitchen", _T, (3.12, 3.00, 2.73), 5.18, (1, 7),
          _F.DEMO_WALL, _F.DEMO_CEILING, _F.REF_WALL_CERAMIC),
    _room("r16", "Bedroom 2", _T, (3.22, 3.43, 2.55), 4.71, (2, 4),
          _F.REF_WALL_PAINT, _F.REF_CEILING_PVC),
    _room("r17", "Laundry", _T, (1.95, 2.04, 2.68), 5.55, (1, 1),
          _F.DEMO_WALL, _F.REF_WALL_CERAMIC, _F.REF_CEILING_PVC),
    _room("r18", "Bathroom 2", _T, (1.10, 2.04, 2.68), 1.82, (1, 0),
          _F.REF_WALL_CERAMIC, _F.REF_CEILING_PVC),
    _room("r19", "Service Area", _T, (1.00, 8.86, 3.50), 5.55, (0, 0),
          _F.REF_WALL_PLASTER, _F.REF_WALL_PAINT),
]


def new_room(index: int) -> Room:
    """A blank 3 × 3 m room with wall and ceiling paint switched on."""
    return Room(
        name=f"New Room {index}",
        level=LevelTag.TERREO,
        width=3.0,
        length=3.0,
        height=2.6,
        deduction_area=2.0,
        tasks=_tasks(TaskFlag.REF_WALL_PAINT, TaskFlag.REF_CEILING_PAINT),
    )
