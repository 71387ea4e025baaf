# silkengine

The engine-side building blocks of a small 2D side-scrolling game, in plain Python.

## What is inside

- `silkengine.collision`: the `CollisionType` enum and a `CollisionManager`, which
  holds the ordered pairs of collision types that interact. `initialize()` fills
  it with the game's pairs. `find_mapping` and `add_mapping` query and extend it.
- `silkengine.timer`: `Timer`, `TimerManager` and `TimerHandler`. These are callback
  timers driven by a clock you can supply. A timer is one-shot or repeating, can
  have its own first delay, and can be stopped, resumed, reset and closed.
  `TimerManager.tick()` fires every timer that is due and returns how many fired.
- `silkengine.files`: `create_folder`, `read_file` and `write_file`, which are small
  UTF-8 text and folder helpers. Failures raise `OSError`.
- `silkengine.levels`: `LevelManager` registers level factories by name.
  `set_default_level` schedules a switch, `start()` creates the first level, and
  `refresh_level()` performs the switch. A level's `begin_play`, `on_level_load`
  and `on_level_delete` are called when it defines them.
- `silkengine.imaging`: an ARGB `Image` (pixels as `0xAARRGGBB`) and pure functions
  that return new images: `flip_image`, `rotate_image`, `sector_image`,
  `mean_filter`, `gaussian_filter`, and `apply_filters` with `FilterInfo` colour
  layers. It also has `get_pixel` and `normalize_degree`.
- `silkengine.resources`: `ResourceManager` loads images, numbered animation frames,
  sprite sheets (cut with `slice_sheet`), audio paths and font paths under a root
  directory, and fetches them by name. Images are read through Pillow by default,
  and another loader can be passed in.
- `silkengine.sprites`: the game's animation and particle catalogue.
  `register_animations(manager)` and `register_particles(manager)` load them into a
  `ResourceManager`.
- `silkengine.text`: `Characters` is a multi-line text block with inline `$x` colour
  codes. It measures `width()` and `height()`, and `layout()` gives the lines to
  draw, each with its position and colour, for `CharactersPattern` left, middle or
  right alignment.
- `silkengine.widgets`: the widget tree. It has `Widget`, with parent-relative
  position, rotation and scale, `LayoutPattern` anchors and `UIPattern`
  visibility, and the `HorizontalPanel`, `VerticalPanel` and `GridPanel` panels.
- `silkengine.controls`: the `Text`, `Bar` (with `BarDirection`) and `Sector` widgets.
- `silkengine.ui`: `UserInterface`, a container of widgets and attached interfaces
  that are shown, hidden and removed together.

## Installing

```
pip install .
pip install ".[test]"
pytest
```

## A taste

```python
from silkengine.collision import CollisionManager, CollisionType

table = CollisionManager()
table.initialize()
table.find_mapping(CollisionType.HURT_BOX, CollisionType.ENEMY)  # True
```

```python
from silkengine.timer import Timer, TimerManager

now = [0.0]
manager = TimerManager(lambda: now[0])
timer = Timer(manager)
timer.bind(1.0, lambda: print("fired"))
now[0] = 1.0
manager.tick()  # prints "fired", returns 1
```

```python
from silkengine.imaging import Image, flip_image

img = Image(2, 1, [0xFF000001, 0xFF000002])
flip_image(img, True).pixels  # [0xFF000002, 0xFF000001]
```

```python
from silkengine.text import Characters

text = Characters()
text.set_characters("ab\ncde")
text.width(), text.height()  # (27, 36)
```

## What it does not do

- There is no window, no drawing to the screen and no input handling. Widgets and
  text compute sizes, positions and the lines or image regions to draw, and
  leaving the drawing to the caller.
- There is no damage or health handling.
- Besides the animation and particle sets in `silkengine.sprites`, there is no
  ready-made catalogue of the game's still images and sounds. Register those with
  `ResourceManager.load_image` and `load_audio` yourself.
- Audio is only registered by path. Nothing is played.