"""Surface areas derived from a room's width, length and height."""

from __future__ import annotations

from typing import TYPE_CHECKING

from reforma.models.room import RoomGeometry

if TYPE_CHECKING:
    from reforma.models.room import Room


def derive_geometry(room: Room) -> RoomGeometry:
    """Compute floor, wall and ceiling areas for a room.

    Walls are the full perimeter times the ceiling height, minus the
    openings in ``deduction_area``; the net wall area is clamped at zero.
    The ceiling is assumed flat, so its area equals the floor's.
    """
    floor_area = room.width * room.length
    perimeter = 2 * (room.width + room.length)
    wall_area_gross = perimeter * room.height
    wall_area_net = max(0.0, wall_area_gross - room.deduction_area)

    return RoomGeometry(
        floor_area=floor_area,
        perimeter=perimeter,
        wall_area_gross=wall_area_gross,
        wall_area_net=wall_area_net,
        ceiling_area=floor_area,
    )
