# lightgame

A small, dependency-free toolkit of building blocks for 2D games:

- `lightgame.color`: sRGB `Color` and `LinearColor`, with conversions to and
  from byte tuples, packed `0xRRGGBBAA` / `0x00RRGGBB` integers, and between
  sRGB and linear colour space (`to_linear`, `to_srgb`). Components are kept
  at single precision. Named colours such as `Color.WHITE` and `Color.RED`
  are provided.
- `lightgame.rect`: `Rect` with edges, centre, containment, overlap
  (including `overlaps_circle`), `translate`, `move_to`, `scale`, `rotate`,
  `combine_with` and an approximate comparison `isclose`.
- `lightgame.text`: `Text`, `TextFragment`, `TextLayout` and `TextAlign` for
  describing styled text: fragments with optional font, pixel scale and
  colour, plus layout, wrapping, bounds and default font and scale.
- `lightgame.timer`: `TimeContext` for frame timing, FPS averaging over the
  last 200 frames and fixed-timestep updates; also `fps_as_duration`,
  `sleep` and `yield_now`. Durations are float seconds.
- `lightgame.keyboard`: `KeyboardContext`, `KeyCode`, `KeyMods` and
  `KeyInput` for tracking held keys and scancodes, modifiers, keys pressed or
  released this frame, and key repeat.
- `lightgame.mouse`: `MouseContext`, `MouseButton` and `CursorIcon` for
  tracking cursor position, per-frame movement and buttons.

## Installation

```
pip install lightgame
```

## Examples

Colors:

```python
from lightgame.color import Color

puce = Color.from_rgb_u32(0xCC8899)
assert puce.to_rgba_u32() == 0xCC8899FF
assert Color.from_rgba(255, 255, 255, 255) == Color.WHITE
```

Rectangles:

```python
from lightgame.rect import Rect

r = Rect(0.0, 0.0, 128.0, 128.0)
assert r.contains((1.0, 1.0))
assert r.overlaps(Rect(100.0, 0.0, 128.0, 128.0))
assert r.overlaps_circle((64.0, 64.0), 2.0)
```

Text:

```python
from lightgame.color import Color
from lightgame.text import Text, TextFragment, TextLayout

text = Text("Score: ", layout=TextLayout.center())
text.add(TextFragment("42").with_color(Color.RED).with_scale(24.0))
assert text.contents() == "Score: 42"
```

Fixed-timestep updates:

```python
from lightgame.timer import TimeContext

time = TimeContext()
while running:
    time.tick()
    while time.check_update_time(60):
        update_game_logic()
    print(f"{time.fps():.1f} fps")
```

`check_update_time` returns `True`, and uses up one step of `1 / target_fps`
seconds, only while the time built up by `tick` exceeds that step. A
`TimeContext` can be given its own clock (a callable returning integer
nanoseconds), which is handy in tests.

Keyboard state:

```python
from lightgame.keyboard import KeyboardContext, KeyCode, KeyMods

keyboard = KeyboardContext()
keyboard.set_key(KeyCode.LSHIFT, True)
assert keyboard.is_mod_active(KeyMods.SHIFT)
assert keyboard.is_key_just_pressed(KeyCode.LSHIFT)
keyboard.save_keyboard_state()  # at the end of each frame
assert not keyboard.is_key_just_pressed(KeyCode.LSHIFT)
```

Mouse state:

```python
from lightgame.mouse import MouseButton, MouseContext

mouse = MouseContext()
mouse.handle_move(10.0, 5.0)
mouse.handle_move(12.0, 5.0)
assert mouse.delta() == (12.0, 5.0)
assert mouse.last_delta() == (2.0, 0.0)
mouse.set_button(MouseButton.LEFT, True)
assert mouse.button_just_pressed(MouseButton.LEFT)
mouse.save_mouse_state()
mouse.reset_delta()
```

## What it does not do

lightgame only holds state and does the arithmetic around it. It opens no
window, draws nothing, plays no sound and runs no event loop: input state is
updated by calling `set_key`, `set_scancode`, `handle_move` and `set_button`
yourself. `Text` describes text but does not load fonts or measure or render
glyphs. There is no resource loading or virtual filesystem; read game
resources with the standard library.

## Running the tests

```
pip install -e ".[test]"
pytest
```