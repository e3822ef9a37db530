"""Text made of styled fragments, with layout options."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable

from lightgame.color import Color

PxScale = tuple[float, float]

DEFAULT_FONT = "LiberationMono-Regular"
DEFAULT_SCALE = 16.0


def _px_scale(scale: float | Iterable[float]) -> PxScale:
    """Normalise a uniform or (x, y) pixel scale to a pair of floats."""
    if isinstance(scale, (int, float)):
        return (float(scale), float(scale))
    x, y = scale
    return (float(x), float(y))


def _color(color: Color | Iterable[float]) -> Color:
    return color if isinstance(color, Color) else Color(*color)


class TextAlign(Enum):
    """Alignment of text along one axis."""

    BEGIN = 0
    MIDDLE = 1
    END = 2


@dataclass(frozen=True)
class TextLayout:
    """Alignment of text along both axes."""

    h_align: TextAlign = TextAlign.BEGIN
    v_align: TextAlign = TextAlign.BEGIN

    @classmethod
    def top_left(cls) -> TextLayout:
        """Text aligned to the top-left."""
        return cls(TextAlign.BEGIN, TextAlign.BEGIN)

    @classmethod
    def center(cls) -> TextLayout:
        """Text aligned to the centre."""
        return cls(TextAlign.MIDDLE, TextAlign.MIDDLE)


@dataclass(frozen=True)
class TextFragment:
    """A piece of text; unset font, scale and colour fall back to the owning text's."""

    text: str = ""
    font: str | None = None
    scale: PxScale | None = None
    color: Color | None = None

    def __post_init__(self) -> None:
        if self.scale is not None:
            object.__setattr__(self, "scale", _px_scale(self.scale))
        if self.color is not None:
            object.__setattr__(self, "color", _color(self.color))

    def with_font(self, font: str) -> TextFragment:
        """A copy of this fragment using the given font."""
        return replace(self, font=font)

    def with_scale(self, scale: float | Iterable[float]) -> TextFragment:
        """A copy of this fragment using the given pixel scale."""
        return replace(self, scale=_px_scale(scale))

    def with_color(self, color: Color | Iterable[float]) -> TextFragment:
        """A copy of this fragment using the given colour."""
        return replace(self, color=_color(color))


class Text:
    """Drawable text: a list of fragments plus layout, wrapping, bounds, scale and font."""

    def __init__(
        self,
        *fragments: TextFragment | str,
        layout: TextLayout | None = None,
        wrap: bool = True,
        bounds: Iterable[float] = (math.inf, math.inf),
        scale: float | Iterable[float] = DEFAULT_SCALE,
        font: str = DEFAULT_FONT,
    ) -> None:
        self.fragments: list[TextFragment] = []
        self.layout = layout if layout is not None else TextLayout.top_left()
        self.wrap = wrap
        bx, by = bounds
        self.bounds = (float(bx), float(by))
        self.scale = _px_scale(scale)
        self.font = font
        for fragment in fragments:
            self.add(fragment)

    def add(self, fragment: TextFragment | str) -> Text:
        """Append a fragment; a plain string becomes an unstyled fragment."""
        if not isinstance(fragment, TextFragment):
            fragment = TextFragment(str(fragment))
        self.fragments.append(fragment)
        return self

    def contents(self) -> str:
        """The whole string the text represents."""
        return "".join(f.text for f in self.fragments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Text):
            return NotImplemented
        return (
            self.fragments == other.fragments
            and self.layout == other.layout
            and self.wrap == other.wrap
            and self.bounds == other.bounds
            and self.scale == other.scale
            and self.font == other.font
        )

    def __repr__(self) -> str:
        return (
            f"Text(fragments={self.fragments!r}, layout={self.layout!r}, "
            f"wrap={self.wrap!r}, bounds={self.bounds!r}, scale={self.scale!r}, "
            f"font={self.font!r})"
        )