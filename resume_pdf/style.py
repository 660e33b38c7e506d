"""Geometry, typography and color settings for PDF rendering.

Groups the layout constants into small dataclasses so renderers take a
single ``Theme`` instead of a long parameter list. Page geometry is fixed;
fonts and colors can be overlaid from a YAML/JSON mapping.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from functools import lru_cache
from typing import Any, Mapping, Optional, Tuple

from .errors import ConfigError


# Type alias for RGB tuples
RGB = Tuple[int, int, int]

BULLET = "•"
EN_DASH = "–"
EM_DASH = "—"


@dataclass(frozen=True)
class PageGeometry:
    """A4 page in points with equal margins."""

    width: float = 595.28
    height: float = 841.89
    margin_top: float = 50.0
    margin_bottom: float = 50.0
    margin_left: float = 50.0
    margin_right: float = 50.0

    @property
    def content_width(self) -> float:
        return self.width - self.margin_left - self.margin_right

    @property
    def bottom_limit(self) -> float:
        return self.height - self.margin_bottom


@dataclass(frozen=True)
class FontSizes:
    name: float = 22
    contact: float = 10
    section_header: float = 14
    company: float = 12
    position: float = 11
    summary: float = 11
    description: float = 10
    project: float = 9
    languages: float = 11
    skills: float = 11
    certificates: float = 11


@dataclass(frozen=True)
class Palette:
    black: str = "#000000"
    dark_gray: str = "#333333"
    light_gray: str = "#CCCCCC"
    link: str = "#0066CC"


@dataclass(frozen=True)
class Spacing:
    """Fixed distances used by the page-break policy and section layout."""

    min_remaining: float = 100.0  # page-break threshold before titles/entries
    photo_size: float = 110.0
    photo_gap: float = 12.0
    photo_clearance: float = 10.0
    duration_column: float = 150.0
    summary_indent: float = 20.0
    project_indent: float = 10.0
    detail_indent: float = 20.0
    divider_width: float = 1.0
    line_height_ratio: float = 1.156  # Helvetica ascender - descender + gap


@dataclass(frozen=True)
class Theme:
    page: PageGeometry = field(default_factory=PageGeometry)
    fonts: FontSizes = field(default_factory=FontSizes)
    colors: Palette = field(default_factory=Palette)
    spacing: Spacing = field(default_factory=Spacing)
    font_family: str = "Helvetica"


DEFAULT_THEME = Theme()


@lru_cache(maxsize=256)
def parse_hex_color(hex_str: Optional[str]) -> Optional[RGB]:
    """Parse a hex color string to RGB tuple.

    Args:
        hex_str: Color string like "#RRGGBB" or "RRGGBB".

    Returns:
        Tuple of (r, g, b) or None if invalid.
    """
    if not hex_str:
        return None
    v = hex_str.strip().lstrip('#')
    if len(v) != 6:
        return None
    try:
        r = int(v[0:2], 16)
        g = int(v[2:4], 16)
        b = int(v[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None


def _overlay_fonts(base: FontSizes, cfg: Mapping[str, Any]) -> FontSizes:
    known = {f.name for f in fields(FontSizes)}
    updates = {}
    for key, val in cfg.items():
        if key not in known:
            continue
        try:
            size = float(val)
        except (TypeError, ValueError) as exc:
            raise ConfigError(
                f"Theme font size '{key}' must be a number", hint="sizes are in points, e.g. name: 22"
            ) from exc
        if size <= 0:
            raise ConfigError(f"Theme font size '{key}' must be positive", hint=f"got {val!r}")
        updates[key] = size
    return replace(base, **updates)


def _overlay_colors(base: Palette, cfg: Mapping[str, Any]) -> Palette:
    known = {f.name for f in fields(Palette)}
    updates = {}
    for key, val in cfg.items():
        if key not in known:
            continue
        if parse_hex_color(str(val)) is None:
            raise ConfigError(
                f"Theme color '{key}' must be a #RRGGBB hex value", hint=f"got {val!r}, e.g. link: '#0066CC'"
            )
        updates[key] = str(val)
    return replace(base, **updates)


def theme_from_config(cfg: Optional[Mapping[str, Any]], base: Theme = DEFAULT_THEME) -> Theme:
    """Overlay ``fonts`` and ``colors`` from a config mapping onto ``base``.

    Unknown keys are ignored. Page geometry and spacing are not configurable.
    """
    if not cfg:
        return base
    if not isinstance(cfg, Mapping):
        raise ConfigError("Theme file must hold a mapping", hint="top-level keys: fonts, colors")
    fonts_cfg = cfg.get("fonts") or {}
    colors_cfg = cfg.get("colors") or {}
    if not isinstance(fonts_cfg, Mapping) or not isinstance(colors_cfg, Mapping):
        raise ConfigError(
            "Theme 'fonts' and 'colors' must be mappings",
            hint=f"font keys: {', '.join(f.name for f in fields(FontSizes))}",
        )
    return replace(
        base,
        fonts=_overlay_fonts(base.fonts, fonts_cfg),
        colors=_overlay_colors(base.colors, colors_cfg),
    )
