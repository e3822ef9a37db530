"""Mouse input state: position, per-frame movement and button tracking."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

Point = tuple[float, float]


class MouseButton(Enum):
    """A mouse button; further buttons are identified by plain integers."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class CursorIcon(Enum):
    """Shapes the window's mouse cursor can take."""

    DEFAULT = "default"
    CROSSHAIR = "crosshair"
    HAND = "hand"
    ARROW = "arrow"
    MOVE = "move"
    TEXT = "text"
    WAIT = "wait"
    HELP = "help"
    PROGRESS = "progress"
    NOT_ALLOWED = "not_allowed"
    CONTEXT_MENU = "context_menu"
    CELL = "cell"
    VERTICAL_TEXT = "vertical_text"
    ALIAS = "alias"
    COPY = "copy"
    NO_DROP = "no_drop"
    GRAB = "grab"
    GRABBING = "grabbing"
    ALL_SCROLL = "all_scroll"
    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"
    E_RESIZE = "e_resize"
    N_RESIZE = "n_resize"
    NE_RESIZE = "ne_resize"
    NW_RESIZE = "nw_resize"
    S_RESIZE = "s_resize"
    SE_RESIZE = "se_resize"
    SW_RESIZE = "sw_resize"
    W_RESIZE = "w_resize"
    EW_RESIZE = "ew_resize"
    NS_RESIZE = "ns_resize"
    NESW_RESIZE = "nesw_resize"
    NWSE_RESIZE = "nwse_resize"
    COL_RESIZE = "col_resize"
    ROW_RESIZE = "row_resize"


Button = MouseButton | int


@dataclass
class MouseContext:
    """Tracks the cursor position, movement this frame and pressed buttons."""

    cursor_type: CursorIcon = CursorIcon.DEFAULT
    cursor_hidden: bool = False
    cursor_grabbed: bool = False
    _last_position: Point = (0.0, 0.0)
    _last_delta: Point = (0.0, 0.0)
    _delta: Point = (0.0, 0.0)
    _buttons_pressed: set[Button] = field(default_factory=set)
    _previous_buttons_pressed: set[Button] = field(default_factory=set)

    def position(self) -> Point:
        """Current cursor position in window pixels."""
        return self._last_position

    def delta(self) -> Point:
        """Total distance the cursor moved during the current frame."""
        return self._delta

    def last_delta(self) -> Point:
        """Distance moved between the latest two motion events."""
        return self._last_delta

    def button_pressed(self, button: Button) -> bool:
        """Whether the button is held down."""
        return button in self._buttons_pressed

    def button_just_pressed(self, button: Button) -> bool:
        """Whether the button went down this frame."""
        return (
            button in self._buttons_pressed
            and button not in self._previous_buttons_pressed
        )

    def button_just_released(self, button: Button) -> bool:
        """Whether the button was released this frame."""
        return (
            button not in self._buttons_pressed
            and button in self._previous_buttons_pressed
        )

    def handle_move(self, new_x: float, new_y: float) -> None:
        """Move the cursor to a new window position, accumulating the frame delta."""
        old_x, old_y = self._last_position
        diff = (new_x - old_x, new_y - old_y)
        dx, dy = self._delta
        self._delta = (dx + diff[0], dy + diff[1])
        self._last_delta = diff
        self._last_position = (float(new_x), float(new_y))

    def reset_delta(self) -> None:
        """Zero the per-frame movement; call at the end of each frame."""
        self._delta = (0.0, 0.0)

    def save_mouse_state(self) -> None:
        """Remember which buttons are held, for the just-pressed/released checks."""
        self._previous_buttons_pressed = set(self._buttons_pressed)

    def set_button(self, button: Button, pressed: bool) -> None:
        """Record a button going down or up."""
        if pressed:
            self._buttons_pressed.add(button)
        else:
            self._buttons_pressed.discard(button)