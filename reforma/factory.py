"""Factory functions for creating pre-loaded RenovationProject instances."""

from __future__ import annotations

from reforma.data.seed import SEED_FIXED_COSTS, SEED_ROOMS, SEED_UNIT_PRICES
from reforma.project import RenovationProject


def create_default_project(name: str = "Sample Townhouse") -> RenovationProject:
    """Create a RenovationProject loaded with the built-in sample data.

    The seed lists are deep-copied, so edits to the returned project never
    leak into the module-level defaults. Switch and socket quantities are
    synced to the sample rooms on construction.

    Example::

        from reforma import create_default_project

        project = create_default_project()
        summary = project.estimate()
        schedule = project.schedule()
    """
    return RenovationProject(
        name=name,
        rooms=[room.model_copy(deep=True) for room in SEED_ROOMS],
        unit_prices=[price.model_copy(deep=True) for price in SEED_UNIT_PRICES],
        fixed_costs=[fc.model_copy(deep=True) for fc in SEED_FIXED_COSTS],
    )


def create_empty_project(name: str = "Renovation") -> RenovationProject:
    """A project with the seed prices and fixed costs but no rooms."""
    return RenovationProject(
        name=name,
        unit_prices=[price.model_copy(deep=True) for price in SEED_UNIT_PRICES],
        fixed_costs=[fc.model_copy(deep=True) for fc in SEED_FIXED_COSTS],
    )
