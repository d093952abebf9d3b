"""Keyword rules that bucket priced items for reporting and scheduling.

Item names are free text typed by the user, so grouping is a heuristic:
case-insensitive substring tests evaluated top to bottom. Rule order is
part of the behaviour. "Contrapiso" must land in Plaster & Screed before the
tiling rule sees its "piso", and "Ceiling Paint" must reach Painting before
the ceilings rule sees "ceiling".

Keywords cover both the Portuguese names of the original price sheets and
the English names of the bundled catalogue.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import TYPE_CHECKING

from reforma.models.enums import CounterKey, DisciplineGroup, PriceCategory, Surface

if TYPE_CHECKING:
    from reforma.models.pricing import FixedCost, UnitPrice
    from reforma.models.room import RoomGeometry

_COUNTER_KEYS = frozenset(CounterKey)


def _normalize(text: str) -> str:
    return unicodedata.normalize("NFC", text).lower()


# ---------------------------------------------------------------------------
# Surface of a task key
# ---------------------------------------------------------------------------

# Tested in this order against the ``apply_to`` name.
_SURFACE_ORDER: tuple[Surface, ...] = (Surface.FLOOR, Surface.WALL, Surface.CEILING)


def is_counter_key(key: str) -> bool:
    return key in _COUNTER_KEYS


def surface_for(task_key: str) -> Surface | None:
    """Which surface a task key is measured on, or None if unrecognised."""
    key = task_key.lower()
    for surface in _SURFACE_ORDER:
        if surface.value in key:
            return surface
    return None


def area_for(geometry: RoomGeometry, surface: Surface | None) -> float:
    if surface is Surface.FLOOR:
        return geometry.floor_area
    if surface is Surface.WALL:
        return geometry.wall_area_net
    if surface is Surface.CEILING:
        return geometry.ceiling_area
    return 0.0


# ---------------------------------------------------------------------------
# Discipline groups for the cost breakdown
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DisciplineRule:
    """Route a unit price to a discipline group.

    A rule with ``category`` set matches on the price category alone;
    otherwise it matches when the item name holds any keyword and none of
    the excluded words.
    """

    group: DisciplineGroup
    keywords: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()
    category: PriceCategory | None = None

    def matches(self, price: UnitPrice) -> bool:
        if self.category is not None:
            return price.category == self.category
        text = _normalize(price.item)
        if any(word in text for word in self.excludes):
            return False
        return any(word in text for word in self.keywords)


DISCIPLINE_RULES: list[DisciplineRule] = [
    DisciplineRule(DisciplineGroup.DEMOLITION, category=PriceCategory.DEMOLITION),
    DisciplineRule(
        DisciplineGroup.PLASTER_SCREED,
        keywords=("reboco", "chapisco", "contrapiso", "plaster", "render", "screed"),
    ),
    DisciplineRule(
        DisciplineGroup.TILING,
        keywords=("cerâmica", "ceramic", "tile", "piso", "floor"),
        excludes=("demoli",),
    ),
    DisciplineRule(DisciplineGroup.PAINTING, keywords=("pintura", "paint")),
    DisciplineRule(
        DisciplineGroup.GYPSUM_CEILINGS,
        keywords=("gesso", "forro", "gypsum", "ceiling", "pvc"),
    ),
]

DEFAULT_DISCIPLINE = DisciplineGroup.INSTALLATIONS_OTHER


def classify_discipline(price: UnitPrice) -> DisciplineGroup:
    """First matching rule wins; unmatched items fall into Installations & Other."""
    for rule in DISCIPLINE_RULES:
        if rule.matches(price):
            return rule.group
    return DEFAULT_DISCIPLINE


# ---------------------------------------------------------------------------
# Fixed costs feeding schedule phases
# ---------------------------------------------------------------------------


def _starts_word(text: str, word: str) -> bool:
    return re.search(r"\b" + re.escape(word), text) is not None


@dataclass(frozen=True)
class FixedCostPhaseRule:
    """Add a fixed cost to one ``PhaseQuantities`` field.

    Keywords only match at the start of a word, so "roof" picks up "Roof"
    and "Roofing" but not "Waterproofing".

    ``per_item`` rules count each matching item once instead of adding its
    quantity (one plumbing rough-in is one job, whatever it is priced in).
    """

    field: str
    keywords: tuple[str, ...]
    per_item: bool = False

    def matches(self, fixed_cost: FixedCost) -> bool:
        text = _normalize(fixed_cost.item)
        return any(_starts_word(text, word) for word in self.keywords)

    def contribution(self, fixed_cost: FixedCost) -> float:
        return 1.0 if self.per_item else fixed_cost.quantity


# Unlike the discipline rules these are not exclusive: every matching rule
# contributes.
FIXED_COST_PHASE_RULES: list[FixedCostPhaseRule] = [
    FixedCostPhaseRule("roofing_area", ("telhado", "roof")),
    FixedCostPhaseRule(
        "infrastructure_count",
        (
            "hidráulica", "elétrica (infra", "impermeabiliza",
            "plumbing", "electrical infra", "waterproofing",
        ),
        per_item=True,
    ),
    FixedCostPhaseRule("fixture_install_count", ("porta", "janela", "door", "window")),
    FixedCostPhaseRule(
        "electrical_finish_count", ("interruptor", "tomada", "switch", "socket"),
    ),
]


def phase_rules_for(fixed_cost: FixedCost) -> list[FixedCostPhaseRule]:
    return [rule for rule in FIXED_COST_PHASE_RULES if rule.matches(fixed_cost)]
