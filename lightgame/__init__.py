"""Building blocks for small 2D games: colors, rectangles, text, timing and input state."""

__version__ = "0.8.1"

__all__ = ["color", "keyboard", "mouse", "rect", "text", "timer"]