"""Custom exception hierarchy for Reforma.

The cost and schedule computations never raise; these cover the mutation
helpers and the project facade.
"""

from __future__ import annotations


class ReformaError(Exception):
    """Base exception for all Reforma errors."""


class UnknownPhaseError(ReformaError, KeyError):
    """Raised when an override targets an id that is not a schedule phase."""

    def __init__(self, phase_id: object) -> None:
        super().__init__(phase_id)
        self.phase_id = phase_id

    def __str__(self) -> str:
        return f"Unknown schedule phase: {self.phase_id!r}"


class ProjectDataError(ReformaError):
    """Raised when project data lookups or edits reference missing entities."""
