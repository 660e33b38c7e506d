"""Shared fake/mock objects for testing.

Modules:
    pdf - FakeSurface recording text, rule, image and page calls
"""

from __future__ import annotations

from tests.fakes.pdf import FakeSurface, ImageOp, LineOp, TextOp

__all__ = [
    "FakeSurface",
    "ImageOp",
    "LineOp",
    "TextOp",
]
