# fishcore

Core building blocks for a 2D side-scrolling arcade game: configuration,
input bindings, geometry, Perlin noise, JSON/TOML helpers and the data types
exchanged with an online lobby service.

## Installation

```
pip install fishcore
```

With the test dependencies:

```
pip install "fishcore[test]"
```

## What is in the package

- `fishcore.config`: `Config` and `WindowConfig`. `Config.load(path)` reads a
  TOML file (or uses the defaults when the file does not exist, a 955×600
  window) and then calls `InputMapping.verify()`. Both classes have
  `to_dict()` / `from_dict()`.
- `fishcore.input_mapping`: the `KeyCode` and `Button` enums, `KeyMapping`,
  `KeyboardMapping` (`default_primary()` around the arrow keys,
  `default_secondary()` around WASD), `GamepadMapping` (`from_id()` gives the
  default buttons) and `InputMapping`. `InputMapping.verify()` raises a
  config error when a key is bound twice across both keyboards, or a button
  twice across all gamepads.
- `fishcore.player_input`: `PlayerInput`, the per-frame state of the player
  actions, and `GameInputScheme`, one half of the keyboard or a gamepad by id.
- `fishcore.geometry`: `Vec2`, `IVec2`, `UVec2`, `Rect`, `URect`, `Color` and
  `Transform`, with `color_from_hex_string`, `rotate_vector`, `deg_to_rad`,
  `rad_to_deg` and `is_zero`.
- `fishcore.noise`: `NoiseGenerator`, seeded 2D Perlin noise
  (`perlin_2d(x, y)`).
- `fishcore.text`: `HorizontalAlignment`, `VerticalAlignment`,
  `aligned_text_position()` (where to draw text of a given measured size) and
  `to_string_helper()` for paths and byte strings.
- `fishcore.json_math`: JSON forms of vectors, rects, colours and
  `FilterMode` (`vec2_to_json`, `rect_from_json`, `color_opt_to_json`, …).
  Rects accept `w`/`h` for `width`/`height`; colours accept `r`/`g`/`b`/`a`.
- `fishcore.json_helpers`: `default_true`, `is_true`, `is_false`,
  `one_or_many`, and `GenericParam`, a JSON value classified by its shape
  into a `ParamKind`.
- `fishcore.data`: `serialize_json_string` / `_bytes`,
  `deserialize_json_string` / `_bytes`, the same for TOML, and the async
  `deserialize_json_file` / `deserialize_toml_file`. Bad file content raises a
  parsing `GameError` wrapping a `DataError` that names the path.
- `fishcore.network`: `Server`, `Lobby`, `Player`, `LobbyPrivacy`,
  `LobbyState`, `ClientState`, `NetworkEvent` and `NetworkMessage`, each with
  `to_dict()` / `from_dict()`.
- `fishcore.status`: `RequestStatus`, with `as_code()`, `as_str()` and
  `from_code()`.
- `fishcore.api`: the abstract `ApiBackend` and `Api`, which holds one running
  backend (`Api.init(backend_class)`, `Api.close()`, `Api.instance()`,
  `Api.is_initialized()`).
- `fishcore.ecs`: `Scheduler` and `SchedulerBuilder` run systems over a world
  in the order they were added; `Owner` marks the owning entity.
- `fishcore.channel`: `Channel` and `channel_pair()`, two queue-backed
  endpoints wired to each other.
- `fishcore.debug`: the process-wide debug-draw switch
  (`is_debug_draw_enabled`, `enable_debug_draw`, `disable_debug_draw`,
  `toggle_debug_draw`).
- `fishcore.errors`: `GameError`, carrying an `ErrorKind`, and
  `format_error()`.

## Examples

```python
from fishcore.config import Config

config = Config.load("config.toml")
print(config.window.width, config.window.height)   # 955 600 when the file is missing
```

```python
from fishcore.geometry import color_from_hex_string

tint = color_from_hex_string("#12ab6f")       # Color(r=18/255, g=171/255, b=111/255, a=1.0)
```

```python
from fishcore.noise import NoiseGenerator

noise = NoiseGenerator(42)
height = noise.perlin_2d(1.5, 3.25)
```

```python
from fishcore.ecs import Scheduler

def gravity(world):
    world["vy"] += 1

def move(world):
    world["y"] += world["vy"]

world = {"y": 0, "vy": 0}
scheduler = Scheduler.builder().with_system(gravity).with_system(move).build()
scheduler.execute(world)   # world == {"y": 1, "vy": 1}
```

A configuration that cannot be read, parsed or verified raises
`fishcore.errors.GameError`; its `kind` is `ErrorKind.FILE`,
`ErrorKind.PARSING` or `ErrorKind.CONFIG`.

## What the package does not do

It has no window, renderer, sprites or text drawing, and it does not read
keyboards or gamepads: `PlayerInput` and `GameInputScheme` only describe
input. `ApiBackend` is an abstract interface; no backend that talks to an
online service is included. There is no command-line program.