"""Drawing surface used by the section renderers.

``Surface`` is the small set of primitives the renderers need (flowed text,
horizontal rules, images, page breaks). ``PdfSurface`` implements it on top
of fpdf2, whose ``multi_cell`` wraps text and continues it onto new pages
on its own when a block overflows the bottom margin.
"""
from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple

from fpdf import FPDF, XPos, YPos  # type: ignore[import-untyped]

from .cursor import RenderCursor
from .style import DEFAULT_THEME, Theme, parse_hex_color


REGULAR = ""
BOLD = "B"
ITALIC = "I"

CORE_FONT_ENCODING = "windows-1252"


def split_first_line(
    text: str, avail: float, measure: Callable[[str], float]
) -> Tuple[str, str]:
    """Split off the words that fit on a first line of ``avail`` points.

    Returns ``("", text)`` when not even the first word fits.
    """
    head, newline, tail = text.partition("\n")
    words = head.split(" ")
    line = words[0]
    if measure(line) > avail:
        return "", text
    for i in range(1, len(words)):
        candidate = f"{line} {words[i]}"
        if measure(candidate) > avail:
            return line, " ".join(words[i:]) + newline + tail
        line = candidate
    return line, tail


class Surface(ABC):
    """Primitive drawing operations with a tracked write position."""

    theme: Theme

    @property
    @abstractmethod
    def cursor(self) -> RenderCursor:
        """Current page index and y position."""

    @property
    @abstractmethod
    def page_count(self) -> int:
        ...

    @property
    @abstractmethod
    def line_height(self) -> float:
        ...

    @abstractmethod
    def add_page(self) -> RenderCursor:
        ...

    @abstractmethod
    def set_font(self, style: str, size: float, color: Optional[str] = None) -> None:
        ...

    @abstractmethod
    def text(
        self,
        text: str,
        *,
        x: Optional[float] = None,
        y: Optional[float] = None,
        width: Optional[float] = None,
        align: str = "L",
        indent: float = 0.0,
        link: Optional[str] = None,
    ) -> RenderCursor:
        """Flow ``text`` starting at (x, y) and leave the cursor below it."""

    @abstractmethod
    def move_down(self, lines: float = 1.0) -> RenderCursor:
        """Advance by ``lines`` times the current line height."""

    @abstractmethod
    def move_to(self, y: float) -> RenderCursor:
        ...

    @abstractmethod
    def hline(self, y: float, color: Optional[str] = None, width: float = 1.0) -> None:
        """Rule across the full content width."""

    @abstractmethod
    def image(self, data: bytes, x: float, y: float, size: float) -> None:
        """Fit ``data`` into a size x size box; the write position is unchanged."""

    @abstractmethod
    def output(self) -> bytes:
        ...


class PdfSurface(Surface):
    """fpdf2-backed surface in point units."""

    def __init__(self, theme: Theme = DEFAULT_THEME):
        self.theme = theme
        page = theme.page
        pdf = FPDF(orientation="P", unit="pt", format=(page.width, page.height))
        # Core fonts are WinAnsi encoded; this admits the dashes and bullet glyph.
        pdf.core_fonts_encoding = CORE_FONT_ENCODING
        pdf.set_margins(page.margin_left, page.margin_top, page.margin_right)
        pdf.set_auto_page_break(auto=True, margin=page.margin_bottom)
        pdf.set_creator("resume-pdf")
        pdf.add_page()
        self.pdf = pdf
        self._size = theme.fonts.description
        self.set_font(REGULAR, theme.fonts.description, theme.colors.black)

    # -------------------------------------------------------------------------
    # Position
    # -------------------------------------------------------------------------

    @property
    def cursor(self) -> RenderCursor:
        return RenderCursor(page_index=self.pdf.page - 1, y=self.pdf.get_y())

    @property
    def page_count(self) -> int:
        return self.pdf.pages_count

    @property
    def line_height(self) -> float:
        return self._size * self.theme.spacing.line_height_ratio

    def add_page(self) -> RenderCursor:
        self.pdf.add_page()
        return self.cursor

    def move_down(self, lines: float = 1.0) -> RenderCursor:
        self.pdf.set_y(self.pdf.get_y() + lines * self.line_height)
        return self.cursor

    def move_to(self, y: float) -> RenderCursor:
        self.pdf.set_y(y)
        return self.cursor

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------

    def set_font(self, style: str, size: float, color: Optional[str] = None) -> None:
        self.pdf.set_font(self.theme.font_family, style=style, size=size)
        self._size = size
        rgb = parse_hex_color(color)
        if rgb:
            self.pdf.set_text_color(*rgb)

    def text(
        self,
        text: str,
        *,
        x: Optional[float] = None,
        y: Optional[float] = None,
        width: Optional[float] = None,
        align: str = "L",
        indent: float = 0.0,
        link: Optional[str] = None,
    ) -> RenderCursor:
        page = self.theme.page
        left = page.margin_left if x is None else x
        if width is None:
            width = page.width - page.margin_right - left
        if y is not None:
            self.pdf.set_y(y)
        text = self._encodable(text)
        h = self.line_height

        if indent:
            first, text = split_first_line(text, width - indent, self.pdf.get_string_width)
            if first:
                self._cell_block(first, left + indent, width - indent, h, align, link)
        if text:
            self._cell_block(text, left, width, h, align, link)
        return self.cursor

    def _cell_block(
        self, text: str, x: float, width: float, h: float, align: str, link: Optional[str] = None
    ) -> None:
        # multi_cell attaches the link to every wrapped line, on whichever page it lands
        self.pdf.set_x(x)
        self.pdf.multi_cell(
            width, h, text, align=align, link=link or "", new_x=XPos.LMARGIN, new_y=YPos.NEXT
        )

    def hline(self, y: float, color: Optional[str] = None, width: float = 1.0) -> None:
        page = self.theme.page
        rgb = parse_hex_color(color)
        if rgb:
            self.pdf.set_draw_color(*rgb)
        self.pdf.set_line_width(width)
        self.pdf.line(page.margin_left, y, page.width - page.margin_right, y)

    def image(self, data: bytes, x: float, y: float, size: float) -> None:
        prev_x, prev_y = self.pdf.get_x(), self.pdf.get_y()
        self.pdf.image(io.BytesIO(data), x=x, y=y, w=size, h=size, keep_aspect_ratio=True)
        self.pdf.set_xy(prev_x, prev_y)

    def output(self) -> bytes:
        return bytes(self.pdf.output())

    @staticmethod
    def _encodable(text: str) -> str:
        """Replace characters the core fonts cannot encode with '?'."""
        return text.encode(CORE_FONT_ENCODING, errors="replace").decode(CORE_FONT_ENCODING)
