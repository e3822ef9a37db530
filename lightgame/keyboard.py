"""Keyboard input state: held keys and scancodes, modifiers and key repeat.

Key codes describe what a key means once the keyboard layout is applied;
scancodes are hardware-dependent numbers describing where the key sits.
Use key codes when the meaning matters and scancodes when the location does.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, Flag, auto

ScanCode = int


class KeyCode(Enum):
    """A key identified by its meaning under the current layout."""

    KEY1 = auto()
    KEY2 = auto()
    KEY3 = auto()
    KEY4 = auto()
    KEY5 = auto()
    KEY6 = auto()
    KEY7 = auto()
    KEY8 = auto()
    KEY9 = auto()
    KEY0 = auto()
    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    ESCAPE = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    F13 = auto()
    F14 = auto()
    F15 = auto()
    F16 = auto()
    F17 = auto()
    F18 = auto()
    F19 = auto()
    F20 = auto()
    F21 = auto()
    F22 = auto()
    F23 = auto()
    F24 = auto()
    SNAPSHOT = auto()
    SCROLL = auto()
    PAUSE = auto()
    INSERT = auto()
    HOME = auto()
    DELETE = auto()
    END = auto()
    PAGE_DOWN = auto()
    PAGE_UP = auto()
    LEFT = auto()
    UP = auto()
    RIGHT = auto()
    DOWN = auto()
    BACK = auto()
    RETURN = auto()
    SPACE = auto()
    COMPOSE = auto()
    CARET = auto()
    NUMLOCK = auto()
    NUMPAD0 = auto()
    NUMPAD1 = auto()
    NUMPAD2 = auto()
    NUMPAD3 = auto()
    NUMPAD4 = auto()
    NUMPAD5 = auto()
    NUMPAD6 = auto()
    NUMPAD7 = auto()
    NUMPAD8 = auto()
    NUMPAD9 = auto()
    NUMPAD_ADD = auto()
    NUMPAD_DIVIDE = auto()
    NUMPAD_DECIMAL = auto()
    NUMPAD_COMMA = auto()
    NUMPAD_ENTER = auto()
    NUMPAD_EQUALS = auto()
    NUMPAD_MULTIPLY = auto()
    NUMPAD_SUBTRACT = auto()
    ABNT_C1 = auto()
    ABNT_C2 = auto()
    APOSTROPHE = auto()
    APPS = auto()
    ASTERISK = auto()
    AT = auto()
    AX = auto()
    BACKSLASH = auto()
    CALCULATOR = auto()
    CAPITAL = auto()
    COLON = auto()
    COMMA = auto()
    CONVERT = auto()
    EQUALS = auto()
    GRAVE = auto()
    KANA = auto()
    KANJI = auto()
    LALT = auto()
    LBRACKET = auto()
    LCONTROL = auto()
    LSHIFT = auto()
    LWIN = auto()
    MAIL = auto()
    MEDIA_SELECT = auto()
    MEDIA_STOP = auto()
    MINUS = auto()
    MUTE = auto()
    MY_COMPUTER = auto()
    NAVIGATE_FORWARD = auto()
    NAVIGATE_BACKWARD = auto()
    NEXT_TRACK = auto()
    NO_CONVERT = auto()
    OEM102 = auto()
    PERIOD = auto()
    PLAY_PAUSE = auto()
    PLUS = auto()
    POWER = auto()
    PREV_TRACK = auto()
    RALT = auto()
    RBRACKET = auto()
    RCONTROL = auto()
    RSHIFT = auto()
    RWIN = auto()
    SEMICOLON = auto()
    SLASH = auto()
    SLEEP = auto()
    STOP = auto()
    SYSRQ = auto()
    TAB = auto()
    UNDERLINE = auto()
    UNLABELED = auto()
    VOLUME_DOWN = auto()
    VOLUME_UP = auto()
    WAKE = auto()
    WEB_BACK = auto()
    WEB_FAVORITES = auto()
    WEB_FORWARD = auto()
    WEB_HOME = auto()
    WEB_REFRESH = auto()
    WEB_SEARCH = auto()
    WEB_STOP = auto()
    YEN = auto()
    COPY = auto()
    PASTE = auto()
    CUT = auto()


class KeyMods(Flag):
    """Keyboard modifier state, such as Shift or Control."""

    NONE = 0
    SHIFT = 0b0001
    CTRL = 0b0010
    ALT = 0b0100
    LOGO = 0b1000

    @classmethod
    def from_state(
        cls,
        shift: bool = False,
        ctrl: bool = False,
        alt: bool = False,
        logo: bool = False,
    ) -> KeyMods:
        """Build the flags from individual modifier states."""
        mods = cls.NONE
        for active, flag in (
            (shift, cls.SHIFT),
            (ctrl, cls.CTRL),
            (alt, cls.ALT),
            (logo, cls.LOGO),
        ):
            if active:
                mods |= flag
        return mods


_MODIFIER_KEYS: dict[KeyCode, KeyMods] = {
    KeyCode.LSHIFT: KeyMods.SHIFT,
    KeyCode.RSHIFT: KeyMods.SHIFT,
    KeyCode.LCONTROL: KeyMods.CTRL,
    KeyCode.RCONTROL: KeyMods.CTRL,
    KeyCode.LALT: KeyMods.ALT,
    KeyCode.RALT: KeyMods.ALT,
    KeyCode.LWIN: KeyMods.LOGO,
    KeyCode.RWIN: KeyMods.LOGO,
}


@dataclass(frozen=True)
class KeyInput:
    """One keystroke: its scancode, key code if known, and active modifiers."""

    scancode: ScanCode
    keycode: KeyCode | None = None
    mods: KeyMods = KeyMods.NONE


@dataclass
class KeyboardContext:
    """Tracks held keys and scancodes, active modifiers and key repeat."""

    _active_modifiers: KeyMods = KeyMods.NONE
    _pressed_keys: set[KeyCode] = field(default_factory=set)
    _pressed_scancodes: set[ScanCode] = field(default_factory=set)
    _last_pressed: ScanCode | None = None
    _current_pressed: ScanCode | None = None
    _previously_pressed_keys: set[KeyCode] = field(default_factory=set)
    _previously_pressed_scancodes: set[ScanCode] = field(default_factory=set)

    def is_key_pressed(self, key: KeyCode) -> bool:
        """Whether the key is held down."""
        return key in self._pressed_keys

    def is_key_just_pressed(self, key: KeyCode) -> bool:
        """Whether the key went down this frame."""
        return key in self._pressed_keys and key not in self._previously_pressed_keys

    def is_key_just_released(self, key: KeyCode) -> bool:
        """Whether the key was released this frame."""
        return key not in self._pressed_keys and key in self._previously_pressed_keys

    def is_scancode_pressed(self, code: ScanCode) -> bool:
        """Whether the key with this scancode is held down."""
        return code in self._pressed_scancodes

    def is_scancode_just_pressed(self, code: ScanCode) -> bool:
        """Whether the key with this scancode went down this frame."""
        return (
            code in self._pressed_scancodes
            and code not in self._previously_pressed_scancodes
        )

    def is_scancode_just_released(self, code: ScanCode) -> bool:
        """Whether the key with this scancode was released this frame."""
        return (
            code not in self._pressed_scancodes
            and code in self._previously_pressed_scancodes
        )

    def is_key_repeated(self) -> bool:
        """Whether the last keystroke is a system repeat of a held key."""
        if self._last_pressed is None:
            return False
        return self._last_pressed == self._current_pressed

    def pressed_keys(self) -> frozenset[KeyCode]:
        """The keys currently held down."""
        return frozenset(self._pressed_keys)

    def pressed_scancodes(self) -> frozenset[ScanCode]:
        """The scancodes currently held down."""
        return frozenset(self._pressed_scancodes)

    def is_mod_active(self, keymods: KeyMods) -> bool:
        """Whether all the given modifiers are active."""
        return (self._active_modifiers & keymods) == keymods

    def active_mods(self) -> KeyMods:
        """The currently active modifiers."""
        return self._active_modifiers

    def save_keyboard_state(self) -> None:
        """Remember the held keys, for the just-pressed/released checks."""
        self._previously_pressed_keys = set(self._pressed_keys)
        self._previously_pressed_scancodes = set(self._pressed_scancodes)

    def set_key(self, key: KeyCode, pressed: bool) -> None:
        """Record a key going down or up, updating modifiers for modifier keys."""
        if pressed:
            self._pressed_keys.add(key)
        else:
            self._pressed_keys.discard(key)
        self._set_key_modifier(key, pressed)

    def set_scancode(self, code: ScanCode, pressed: bool) -> None:
        """Record a scancode going down or up, tracking key repeat."""
        if pressed:
            self._pressed_scancodes.add(code)
            self._last_pressed = self._current_pressed
            self._current_pressed = code
        else:
            self._pressed_scancodes.discard(code)
            self._current_pressed = None

    def set_modifiers(self, keymods: KeyMods) -> None:
        """Replace the active modifiers."""
        self._active_modifiers = keymods

    def _set_key_modifier(self, key: KeyCode, pressed: bool) -> None:
        flag = _MODIFIER_KEYS.get(key)
        if flag is None:
            return
        if pressed:
            self._active_modifiers |= flag
        else:
            self._active_modifiers &= ~flag