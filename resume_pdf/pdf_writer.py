"""PDF resume writer.

Owns the drawing surface for one render call and runs the section
renderers in their fixed order. Either the complete document bytes are
returned or a single ``RenderError`` is raised; nothing partial escapes.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional

from .cursor import RenderCursor
from .errors import RenderError
from .model import ResumeRecord
from .pdf_sections import SECTION_RENDERERS
from .pdf_surface import PdfSurface, Surface
from .style import DEFAULT_THEME, Theme


logger = logging.getLogger(__name__)

SurfaceFactory = Callable[[Theme], Surface]


class ResumePdfWriter:
    """Renders one ``ResumeRecord`` into PDF bytes."""

    def __init__(
        self,
        record: ResumeRecord,
        theme: Theme = DEFAULT_THEME,
        surface_factory: Optional[SurfaceFactory] = None,
    ):
        self.record = record
        self.theme = theme
        self.surface_factory = surface_factory or PdfSurface
        self.surface: Optional[Surface] = None
        self.cursors: List[RenderCursor] = []

    def write(self) -> bytes:
        """Render the record and return the finished document."""
        surface = self._open_surface()
        self.surface = surface
        try:
            self._render_content(surface)
            data = surface.output()
        except RenderError:
            raise
        except Exception as exc:
            logger.warning("PDF generation failed (%s)", type(exc).__name__)
            raise RenderError("PDF generation failed") from exc
        logger.debug("rendered %d page(s), %d bytes", surface.page_count, len(data))
        return data

    def _open_surface(self) -> Surface:
        try:
            return self.surface_factory(self.theme)
        except Exception as exc:
            logger.warning("PDF engine construction failed (%s)", type(exc).__name__)
            raise RenderError("could not initialise the PDF engine") from exc

    def _render_content(self, surface: Surface) -> None:
        for _key, renderer_class in SECTION_RENDERERS:
            renderer = renderer_class(surface)
            self.cursors.append(renderer.render(self.record))


def render_resume_pdf(record: ResumeRecord, theme: Theme = DEFAULT_THEME) -> bytes:
    """Render ``record`` to PDF bytes synchronously.

    Raises:
        RenderError: when the engine cannot be constructed or any write fails.
    """
    return ResumePdfWriter(record, theme).write()


async def render(record: ResumeRecord, theme: Theme = DEFAULT_THEME) -> bytes:
    """Single-shot async render: resolves once with the bytes or raises once."""
    return await asyncio.to_thread(render_resume_pdf, record, theme)
