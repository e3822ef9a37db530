"""RGBA colours in sRGB and linear colour space."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Iterator


def _f32(value: float) -> float:
    """Round a float to single precision, as the colour math is done in f32."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _to_u8(component: float) -> int:
    """Scale a [0.0, 1.0] component to a byte, saturating out-of-range values."""
    scaled = _f32(component * 255.0)
    if math.isnan(scaled):
        return 0
    if scaled <= 0.0:
        return 0
    if scaled >= 255.0:
        return 255
    return math.trunc(scaled)


def _check_byte(name: str, value: int) -> int:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in the range 0-255, got {value}")
    return value


def _check_u32(value: int) -> int:
    if not 0 <= value <= 0xFFFF_FFFF:
        raise ValueError(f"packed colour must fit in 32 bits, got {value:#x}")
    return value


def _srgb_to_linear(component: float) -> float:
    a = 0.055
    if component <= 0.04045:
        return _f32(component / 12.92)
    return _f32(((component + a) / (1.0 + a)) ** 2.4)


def _linear_to_srgb(component: float) -> float:
    a = 0.055
    if component <= 0.003_130_8:
        return _f32(component * 12.92)
    return _f32((1.0 + a) * component ** (1.0 / 2.4) - a)


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA colour in sRGB space, components in the range [0.0, 1.0]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, _f32(float(getattr(self, name))))

    def __iter__(self) -> Iterator[float]:
        yield from (self.r, self.g, self.b, self.a)

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        """Create a colour from four bytes in the range 0-255."""
        channels = [
            _check_byte(name, value)
            for name, value in (("r", r), ("g", g), ("b", b), ("a", a))
        ]
        return cls(*(_f32(float(c)) / _f32(255.0) for c in channels))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Create an opaque colour from three bytes in the range 0-255."""
        return cls.from_rgba(r, g, b, 255)

    def to_rgba(self) -> tuple[int, int, int, int]:
        """Return the components as four bytes."""
        return (_to_u8(self.r), _to_u8(self.g), _to_u8(self.b), _to_u8(self.a))

    def to_rgb(self) -> tuple[int, int, int]:
        """Return the colour components as three bytes, dropping alpha."""
        r, g, b, _ = self.to_rgba()
        return (r, g, b)

    @classmethod
    def from_rgba_u32(cls, c: int) -> Color:
        """Unpack a colour from an integer laid out as 0xRRGGBBAA."""
        return cls.from_rgba(*_check_u32(c).to_bytes(4, "big"))

    @classmethod
    def from_rgb_u32(cls, c: int) -> Color:
        """Unpack an opaque colour from an integer laid out as 0x00RRGGBB."""
        _, r, g, b = _check_u32(c).to_bytes(4, "big")
        return cls.from_rgb(r, g, b)

    def to_rgba_u32(self) -> int:
        """Pack the colour into an integer laid out as 0xRRGGBBAA."""
        return int.from_bytes(bytes(self.to_rgba()), "big")

    def to_rgb_u32(self) -> int:
        """Pack the colour into an integer laid out as 0x00RRGGBB."""
        return int.from_bytes(bytes((0, *self.to_rgb())), "big")

    def to_linear(self) -> LinearColor:
        """Convert to linear colour space; alpha is left unchanged."""
        return LinearColor(
            _srgb_to_linear(self.r),
            _srgb_to_linear(self.g),
            _srgb_to_linear(self.b),
            self.a,
        )


Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)
Color.RED = Color(1.0, 0.0, 0.0, 1.0)
Color.GREEN = Color(0.0, 1.0, 0.0, 1.0)
Color.BLUE = Color(0.0, 0.0, 1.0, 1.0)
Color.CYAN = Color(0.0, 1.0, 1.0, 1.0)
Color.MAGENTA = Color(1.0, 0.0, 1.0, 1.0)
Color.YELLOW = Color(1.0, 1.0, 0.0, 1.0)


@dataclass(frozen=True, slots=True)
class LinearColor:
    """An RGBA colour in linear colour space, suitable for shaders."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, _f32(float(getattr(self, name))))

    def __iter__(self) -> Iterator[float]:
        yield from (self.r, self.g, self.b, self.a)

    def to_srgb(self) -> Color:
        """Convert back to sRGB space; alpha is left unchanged."""
        return Color(
            _linear_to_srgb(self.r),
            _linear_to_srgb(self.g),
            _linear_to_srgb(self.b),
            self.a,
        )