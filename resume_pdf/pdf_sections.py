"""Section renderers for the PDF resume.

Each renderer reads one part of the record, writes it to a ``Surface`` and
returns the cursor where it stopped. A renderer whose data is empty draws
nothing and leaves the cursor where it was.
"""
from __future__ import annotations

import base64
import logging
from typing import Optional, Tuple, Type

from .cursor import RenderCursor, ensure_space
from .labels import (
    certificate_line,
    contact_line,
    degree_line,
    education_duration,
    experience_duration,
    full_name,
    is_blank,
    languages_line,
    link_line,
    skills_line,
)
from .model import EducationEntry, ExperienceEntry, Project, ResumeRecord
from .pdf_surface import BOLD, ITALIC, REGULAR, Surface
from .style import BULLET, Theme


logger = logging.getLogger(__name__)

__all__ = [
    "SectionRenderer",
    "HeaderSectionRenderer",
    "SummarySectionRenderer",
    "ExperienceSectionRenderer",
    "EducationSectionRenderer",
    "LanguagesSectionRenderer",
    "SkillsSectionRenderer",
    "CertificatesSectionRenderer",
    "SECTION_RENDERERS",
    "add_section_header",
    "section_header_height",
    "decode_photo_data_uri",
    "try_embed_photo",
]


# Spacing in line units (multiples of the current line height)
SECTION_GAP = 1.5
ENTRY_GAP = 1.0
LINE_GAP = 0.3
PROJECT_GAP = 0.25


# =============================================================================
# Shared helpers
# =============================================================================

def section_header_height(theme: Theme) -> float:
    """Height of the title line plus the gaps around its divider."""
    line = theme.fonts.section_header * theme.spacing.line_height_ratio
    return line * (1 + LINE_GAP + 0.5)


def add_section_header(surface: Surface, title: str) -> RenderCursor:
    """Title, divider rule, then spacing.

    No page-break check here: callers run ``ensure_space`` first so the
    title and its rule always land on the same page.
    """
    theme = surface.theme
    surface.set_font(BOLD, theme.fonts.section_header, theme.colors.black)
    surface.text(title, width=theme.page.content_width)
    surface.move_down(LINE_GAP)
    surface.hline(surface.cursor.y, theme.colors.light_gray, theme.spacing.divider_width)
    return surface.move_down(0.5)


def decode_photo_data_uri(photo: str) -> bytes:
    """Strip a ``data:image/...;base64,`` prefix and decode the body."""
    _, comma, body = photo.partition(",")
    payload = body if comma else photo
    data = base64.b64decode(payload.strip(), validate=True)
    if not data:
        raise ValueError("empty photo payload")
    return data


def try_embed_photo(surface: Surface, photo: Optional[str]) -> bool:
    """Place the photo in the top-right corner of the first page.

    Best-effort optional asset: any decoding or placement failure is
    swallowed and reported as ``False`` so the resume still renders.
    """
    if is_blank(photo):
        return False
    page = surface.theme.page
    size = surface.theme.spacing.photo_size
    try:
        data = decode_photo_data_uri(photo or "")
        surface.image(data, page.width - page.margin_right - size, page.margin_top, size)
    except Exception as exc:  # nosec B110 - photo is optional
        logger.info("photo skipped (%s)", type(exc).__name__)
        return False
    return True


# =============================================================================
# Base
# =============================================================================

class SectionRenderer:
    """Base class: one logical resume section."""

    title: str = ""

    def __init__(self, surface: Surface):
        self.surface = surface
        self.theme = surface.theme

    def is_empty(self, record: ResumeRecord) -> bool:
        return False

    def render(self, record: ResumeRecord) -> RenderCursor:
        if self.is_empty(record):
            return self.surface.cursor
        reserve = self.theme.spacing.min_remaining + section_header_height(self.theme)
        ensure_space(self.surface, reserve)
        add_section_header(self.surface, self.title)
        self.render_body(record)
        return self.surface.cursor

    def render_body(self, record: ResumeRecord) -> None:
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Paragraph helpers
    # -------------------------------------------------------------------------

    def paragraph(
        self,
        text: str,
        style: str,
        size: float,
        color: str,
        *,
        indent_x: float = 0.0,
        first_line_indent: float = 0.0,
    ) -> RenderCursor:
        page = self.theme.page
        self.surface.set_font(style, size, color)
        return self.surface.text(
            text,
            x=page.margin_left + indent_x,
            width=page.content_width - indent_x,
            indent=first_line_indent,
        )

    def dated_heading(self, name: str, duration: str) -> RenderCursor:
        """Bold name on the left, duration right-aligned on the same line."""
        s = self.surface
        page = self.theme.page
        s.set_font(BOLD, self.theme.fonts.company, self.theme.colors.black)
        top = s.cursor.y
        after_name = s.text(
            name,
            x=page.margin_left,
            y=top,
            width=page.content_width - self.theme.spacing.duration_column,
        )
        after_span = s.text(duration, x=page.margin_left, y=top, width=page.content_width, align="R")
        if after_name.page_index == after_span.page_index and after_name.y > after_span.y:
            return s.move_to(after_name.y)
        return after_span


# =============================================================================
# Header
# =============================================================================

class HeaderSectionRenderer(SectionRenderer):
    """Name, contact line, links and optional photo."""

    def render(self, record: ResumeRecord) -> RenderCursor:
        s = self.surface
        page = self.theme.page
        fonts = self.theme.fonts
        colors = self.theme.colors
        spacing = self.theme.spacing

        has_photo = try_embed_photo(s, record.photo)
        text_width = page.content_width
        if has_photo:
            text_width -= spacing.photo_size + spacing.photo_gap

        s.set_font(BOLD, fonts.name, colors.black)
        s.text(full_name(record), x=page.margin_left, y=page.margin_top, width=text_width)
        s.move_down(0.5)

        s.set_font(REGULAR, fonts.contact, colors.dark_gray)
        s.text(contact_line(record), x=page.margin_left, width=text_width)

        if record.links:
            s.move_down(LINE_GAP)
            s.set_font(REGULAR, fonts.contact, colors.link)
            last = len(record.links) - 1
            for idx, link in enumerate(record.links):
                s.text(link_line(link), x=page.margin_left, width=text_width, link=link.url)
                if idx < last:
                    s.move_down(0.2)

        if has_photo:
            photo_bottom = page.margin_top + spacing.photo_size + spacing.photo_clearance
            if s.cursor.page_index == 0 and s.cursor.is_above(photo_bottom):
                s.move_to(photo_bottom)

        return s.move_down(SECTION_GAP)


# =============================================================================
# Summary
# =============================================================================

class SummarySectionRenderer(SectionRenderer):
    title = "PROFESSIONAL SUMMARY"

    def is_empty(self, record: ResumeRecord) -> bool:
        return is_blank(record.summary)

    def render_body(self, record: ResumeRecord) -> None:
        self.paragraph(
            record.summary,
            REGULAR,
            self.theme.fonts.summary,
            self.theme.colors.dark_gray,
            first_line_indent=self.theme.spacing.summary_indent,
        )
        self.surface.move_down(SECTION_GAP)


# =============================================================================
# Experience
# =============================================================================

class ExperienceSectionRenderer(SectionRenderer):
    """Work history with nested projects."""

    title = "WORK EXPERIENCE"

    def is_empty(self, record: ResumeRecord) -> bool:
        return not record.experience

    def render_body(self, record: ResumeRecord) -> None:
        last = len(record.experience) - 1
        for idx, entry in enumerate(record.experience):
            # the first entry was reserved together with the title
            if idx:
                ensure_space(self.surface)
            self._render_entry(entry)
            if idx < last:
                self.surface.move_down(ENTRY_GAP)
        self.surface.move_down(SECTION_GAP)

    def _render_entry(self, entry: ExperienceEntry) -> None:
        fonts = self.theme.fonts
        colors = self.theme.colors

        self.dated_heading(entry.company, experience_duration(entry))
        self.surface.move_down(LINE_GAP)

        self.paragraph(entry.position, ITALIC, fonts.position, colors.dark_gray)
        self.surface.move_down(LINE_GAP)

        if not is_blank(entry.description):
            self.paragraph(entry.description, REGULAR, fonts.description, colors.dark_gray)

        if entry.projects:
            self._render_projects(entry.projects)

    def _render_projects(self, projects: Tuple[Project, ...]) -> None:
        fonts = self.theme.fonts
        colors = self.theme.colors
        spacing = self.theme.spacing

        self.surface.move_down(0.5)
        self.paragraph("Projects:", BOLD, fonts.project, colors.black)

        last = len(projects) - 1
        for idx, project in enumerate(projects):
            self.surface.move_down(PROJECT_GAP)
            self.paragraph(
                f"{BULLET} {project.name}",
                BOLD,
                fonts.project,
                colors.dark_gray,
                indent_x=spacing.project_indent,
            )
            if not is_blank(project.detail):
                self.paragraph(
                    (project.detail or "").strip(),
                    REGULAR,
                    fonts.project,
                    colors.dark_gray,
                    indent_x=spacing.detail_indent,
                )
            if idx < last:
                self.surface.move_down(PROJECT_GAP)


# =============================================================================
# Education
# =============================================================================

class EducationSectionRenderer(SectionRenderer):
    title = "EDUCATION"

    def is_empty(self, record: ResumeRecord) -> bool:
        return not record.education

    def render_body(self, record: ResumeRecord) -> None:
        last = len(record.education) - 1
        for idx, entry in enumerate(record.education):
            # the first entry was reserved together with the title
            if idx:
                ensure_space(self.surface)
            self._render_entry(entry)
            if idx < last:
                self.surface.move_down(ENTRY_GAP)
        self.surface.move_down(SECTION_GAP)

    def _render_entry(self, entry: EducationEntry) -> None:
        fonts = self.theme.fonts
        colors = self.theme.colors

        self.dated_heading(entry.institution, education_duration(entry))
        self.surface.move_down(LINE_GAP)

        self.paragraph(degree_line(entry), ITALIC, fonts.position, colors.dark_gray)

        if not is_blank(entry.description):
            self.surface.move_down(LINE_GAP)
            self.paragraph((entry.description or "").strip(), REGULAR, fonts.description, colors.dark_gray)


# =============================================================================
# Flowed lists
# =============================================================================

class LanguagesSectionRenderer(SectionRenderer):
    """All language/level pairs in one flowed block."""

    title = "LANGUAGES"

    def is_empty(self, record: ResumeRecord) -> bool:
        return not record.languages

    def render_body(self, record: ResumeRecord) -> None:
        self.paragraph(
            languages_line(record.languages),
            REGULAR,
            self.theme.fonts.languages,
            self.theme.colors.dark_gray,
        )
        self.surface.move_down(SECTION_GAP)


class SkillsSectionRenderer(SectionRenderer):
    title = "SKILLS"

    def _skills(self, record: ResumeRecord) -> Tuple[str, ...]:
        return tuple(s.strip() for s in record.skills if not is_blank(s))

    def is_empty(self, record: ResumeRecord) -> bool:
        return not self._skills(record)

    def render_body(self, record: ResumeRecord) -> None:
        self.paragraph(
            skills_line(self._skills(record)),
            REGULAR,
            self.theme.fonts.skills,
            self.theme.colors.dark_gray,
        )
        self.surface.move_down(SECTION_GAP)


class CertificatesSectionRenderer(SectionRenderer):
    title = "CERTIFICATES"

    def is_empty(self, record: ResumeRecord) -> bool:
        return not record.certificates

    def render_body(self, record: ResumeRecord) -> None:
        last = len(record.certificates) - 1
        for idx, cert in enumerate(record.certificates):
            self.paragraph(
                certificate_line(cert),
                REGULAR,
                self.theme.fonts.certificates,
                self.theme.colors.dark_gray,
            )
            if idx < last:
                self.surface.move_down(LINE_GAP)


# Fixed rendering order
SECTION_RENDERERS: Tuple[Tuple[str, Type[SectionRenderer]], ...] = (
    ("header", HeaderSectionRenderer),
    ("summary", SummarySectionRenderer),
    ("experience", ExperienceSectionRenderer),
    ("education", EducationSectionRenderer),
    ("languages", LanguagesSectionRenderer),
    ("skills", SkillsSectionRenderer),
    ("certificates", CertificatesSectionRenderer),
)
