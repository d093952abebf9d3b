"""Enums for the Reforma domain models.

Task-flag and counter keys are the names a unit price uses in ``apply_to``;
the remaining enums label the closed sets used for reporting and scheduling.
"""

from enum import StrEnum


class LevelTag(StrEnum):
    """Floor level a room sits on. Descriptive only, never priced."""

    SUBSOLO = "subsolo"
    TERREO = "terreo"
    SUPERIOR = "superior"
    EXTERNA = "externa"


class TaskFlag(StrEnum):
    """Per-room work toggles, one per priced surface task."""

    # Demolition
    DEMO_FLOOR = "demo_floor"
    DEMO_WALL = "demo_wall"
    DEMO_CEILING = "demo_ceiling"

    # Refinishing - floor
    REF_FLOOR_CERAMIC = "ref_floor_ceramic"
    REF_FLOOR_SCREED = "ref_floor_screed"

    # Refinishing - wall
    REF_WALL_PLASTER = "ref_wall_plaster"
    REF_WALL_CERAMIC = "ref_wall_ceramic"
    REF_WALL_PAINT = "ref_wall_paint"

    # Refinishing - ceiling
    REF_CEILING_GYPSUM = "ref_ceiling_gypsum"
    REF_CEILING_PLASTER = "ref_ceiling_plaster"
    REF_CEILING_PAINT = "ref_ceiling_paint"
    REF_CEILING_PVC = "ref_ceiling_pvc"


class CounterKey(StrEnum):
    """Per-room counts priced through a global fixed cost."""

    SWITCH_COUNT = "switch_count"
    SOCKET_COUNT = "socket_count"


class Surface(StrEnum):
    """Which derived area a task is measured on."""

    FLOOR = "floor"
    WALL = "wall"
    CEILING = "ceiling"


class PriceCategory(StrEnum):
    """Top-level category of a unit price."""

    DEMOLITION = "Demolition"
    REFINISHING = "Refinishing"
    OTHER = "Other"


class DisciplineGroup(StrEnum):
    """Human-facing buckets for the detailed cost breakdown."""

    DEMOLITION = "Demolition"
    PLASTER_SCREED = "Plaster & Screed"
    TILING = "Tiling"
    PAINTING = "Painting"
    GYPSUM_CEILINGS = "Gypsum & Ceilings"
    INSTALLATIONS_OTHER = "Installations & Other"


class Phase(StrEnum):
    """The nine construction phases of the schedule, in build order."""

    DEMOLITION = "demo"
    ROOFING = "roof"
    INFRASTRUCTURE = "infra"
    MASONRY = "masonry"
    CEILING_FINISH = "gypsum"
    TILING = "tiling"
    FIXTURE_INSTALL = "install"
    PAINTING = "painting"
    ELECTRICAL_FINISH = "finish"


class DependencyMode(StrEnum):
    """How a schedule override treats the phase's dependency."""

    INHERIT = "inherit"
    NONE = "none"
    PHASE = "phase"
