"""Vertical write position and the page-break policy.

The surface owns the live position; ``RenderCursor`` is the value every
renderer hands back so callers (and tests) can see where writing stopped.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .pdf_surface import Surface


@dataclass(frozen=True)
class RenderCursor:
    page_index: int
    y: float

    def is_above(self, y: float) -> bool:
        return self.y < y


def remaining_space(surface: "Surface") -> float:
    return surface.theme.page.bottom_limit - surface.cursor.y


def needs_break(surface: "Surface", required: float) -> bool:
    return remaining_space(surface) < required


def ensure_space(surface: "Surface", required: float | None = None) -> RenderCursor:
    """Start a new page when less than ``required`` points remain.

    Defaults to the theme's minimum-remaining threshold (100pt). Called
    before section titles and before each experience/education entry so
    their first line is never stranded at the foot of a page.
    """
    if required is None:
        required = surface.theme.spacing.min_remaining
    if needs_break(surface, required):
        surface.add_page()
    return surface.cursor
