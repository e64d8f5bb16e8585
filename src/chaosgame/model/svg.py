"""
SVG Drawing Surface
===================
Executes render commands into an SVG document, for headless export.
"""
from __future__ import annotations

import logging
import os
from xml.sax.saxutils import escape

from chaosgame import config
from chaosgame.model.geometry import Point, Triangle
from chaosgame.model.render import RenderCommand, Style, execute

logger = logging.getLogger(__name__)


def _fmt(x: float, precision: int) -> str:
    # Normalise -0.0 so it never produces "-0" in SVG output.
    if not x:
        x = 0.0
    s = f"{x:.{precision}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s or "0"


def _escape(text: str) -> str:
    # Safe for both text content and double-quoted attribute values
    return escape(text, {'"': "&quot;"})


class SvgSurface:
    """
    A `DrawingSurface` that collects SVG elements.

    Canvas pixel coordinates map 1:1 to the SVG viewBox (y down).
    """

    def __init__(
        self,
        width: float,
        height: float,
        *,
        precision: int = 3,
        background: str | None = config.BACKGROUND_COLOR,
        title: str | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"SVG size must be positive, got {width}x{height}.")
        if not 0 <= precision <= 10:
            raise ValueError(f"precision must be between 0 and 10, got {precision}.")
        self.width = width
        self.height = height
        self.precision = precision
        self.background = background
        self.title = title
        self._elements: list[str] = []

    def _f(self, x: float) -> str:
        return _fmt(x, self.precision)

    # ---- DrawingSurface ----

    def clear(self) -> None:
        self._elements.clear()

    def stroke_outline(self, corners: Triangle, style: Style) -> None:
        pts = " ".join(f"{self._f(c.x)},{self._f(c.y)}" for c in corners)
        self._elements.append(
            f'<polygon points="{pts}" fill="none" stroke="{_escape(style.color)}" '
            f'stroke-width="{self._f(style.width)}" />'
        )

    def draw_marker(self, point: Point, radius: float, style: Style) -> None:
        if radius <= config.PIXEL_RADIUS:
            # single pixel mark, anchored at its top-left corner like a canvas fillRect
            self._elements.append(
                f'<rect x="{self._f(point.x)}" y="{self._f(point.y)}" width="1" height="1" '
                f'fill="{_escape(style.color)}" />'
            )
            return
        fill = _escape(style.color) if style.fill else "none"
        self._elements.append(
            f'<circle cx="{self._f(point.x)}" cy="{self._f(point.y)}" r="{self._f(radius)}" '
            f'fill="{fill}" stroke="{_escape(style.color)}" stroke-width="{self._f(style.width)}" />'
        )

    def draw_line(self, start: Point, end: Point, style: Style) -> None:
        self._elements.append(
            f'<line x1="{self._f(start.x)}" y1="{self._f(start.y)}" '
            f'x2="{self._f(end.x)}" y2="{self._f(end.y)}" '
            f'stroke="{_escape(style.color)}" stroke-width="{self._f(style.width)}" />'
        )

    # ---- output ----

    def to_string(self) -> str:
        w, h = self._f(self.width), self._f(self.height)
        lines: list[str] = []
        lines.append('<?xml version="1.0" encoding="UTF-8"?>')
        lines.append(
            "<svg xmlns=\"http://www.w3.org/2000/svg\" version=\"1.1\" "
            f"viewBox=\"0 0 {w} {h}\" width=\"{w}\" height=\"{h}\">"
        )
        if self.title:
            lines.append(f"  <title>{_escape(self.title)}</title>")
        if self.background and self.background.lower() != "none":
            lines.append(f'  <rect x="0" y="0" width="{w}" height="{h}" fill="{_escape(self.background)}" />')
        lines.extend(f"  {el}" for el in self._elements)
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def save(self, path: str) -> None:
        os.makedirs(os.path.dirname(os.path.abspath(path)) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_string())
        logger.info(f"SVG written to: {path} ({len(self._elements)} elements)")


def export_svg(
    commands: list[RenderCommand],
    path: str,
    width: float,
    height: float,
    title: str | None = None,
) -> None:
    """Execute `commands` on a fresh SVG surface and write it to `path`."""
    surface = SvgSurface(width, height, title=title)
    execute(commands, surface)
    surface.save(path)
