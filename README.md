# wither

Building blocks for a block-game server, written in plain Python with no
third-party dependencies.

## What is inside

- `wither.math.vector`: frozen `Vector2` (`x`, `z`) and `Vector3` (`x`, `y`,
  `z`) with addition, scalar multiplication, lengths, normalisation and
  distances. `Vector3.pack(kind)` encodes the components big-endian as
  `"f32"`, `"f64"` or `"i16"`; `Vector3.from_sequence` reads three numbers.
- `wither.math.position`: `WorldPosition(x, y, z)` with its packed signed
  64-bit form (`to_long` / `from_long`: 26 bits x, 26 bits z, 12 bits y) and
  `chunk_and_chunk_relative_position()`.
- `wither.math.boundingbox`: axis-aligned `BoundingBox` built with
  `from_size`, `from_pos`, `from_vectors` or `from_block`, with `intersects`
  and `squared_magnitude` (squared distance from a point to the box).
- `wither.math.functions`: `wrap_degrees`, `squared_magnitude`, `magnitude`,
  `get_section_cord`, `ceil_log2`, `floor_log2`,
  `smallest_encompassing_power_of_two`, `floor_div`, `floor_mod` and
  `assert_eq_delta`.
- `wither.text.click`: `ClickEvent` and `ClickAction`.
- `wither.text.color`: `NamedColor`, `RGBColor`, `ARGBColor` and `Color`,
  which parses `"reset"`, `"#RRGGBB"` or a colour name and renders text with
  ANSI escape sequences via `console_color`.
- `wither.text.component`: `TextComponent` with `Text`, `Translate`,
  `EntityNames` and `Keybind` content, `Style`, and the hover events
  `ShowText`, `ShowItem` and `ShowEntity`. Components convert to and from
  dictionaries (`to_dict` / `from_dict`) and render to a terminal with
  `to_pretty_console()`, including OSC 8 hyperlinks for `open_url` clicks.
- `wither.world.coordinates`: world height constants, `Height`,
  `ChunkRelativeOffset` and block coordinates in world and chunk space.
- `wither.world.cylindrical`: `Cylindrical`, the chunks within a view
  distance, and `changed_chunks(old, new)`.
- `wither.world.block`: `BlockFace` with `from_int` and `to_offset`.
- `wither.world.item`: `ItemStack` with `is_sword`, `is_helmet`,
  `is_chestplate`, `is_leggings`, `is_boots`, and `Rarity`.
- `wither.world.biome`: `Biome`, `BiomeSupplier` and `DebugBiomeSupplier`
  (plains everywhere).
- `wither.gamemode`, `wither.permission`, `wither.difficulty`: `GameMode`,
  `PermissionLevel`, `Difficulty` and `ProfileAction`.

## Installing

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Examples

```python
from wither.math.position import WorldPosition

pos = WorldPosition(-17, 64, 35)
packed = pos.to_long()
assert WorldPosition.from_long(packed) == pos
chunk, relative = pos.chunk_and_chunk_relative_position()
# chunk == Vector2(-2, 2), relative == Vector3(15, 64, 3)
```

```python
from wither.text.color import NamedColor
from wither.text.component import TextComponent

message = (
    TextComponent.text("Hello ")
    .with_named_color(NamedColor.GOLD)
    .with_bold()
    .add_child(TextComponent.text("world"))
)
print(message.to_pretty_console())
data = message.to_dict()
assert TextComponent.from_dict(data) == message
```

```python
from wither.math.vector import Vector2
from wither.world.cylindrical import Cylindrical, changed_chunks

old = Cylindrical(Vector2(0, 0), 4)
new = Cylindrical(Vector2(1, 0), 4)
added, removed = changed_chunks(old, new)
```

```python
from wither.gamemode import GameMode
from wither.permission import PermissionLevel

GameMode.parse("creative")       # GameMode.CREATIVE
GameMode.from_int(7)             # GameMode.UNDEFINED
PermissionLevel.from_value(4)    # PermissionLevel.FOUR
```

## What it does not do

- `wither.random` holds no generators: there is no seeded random number
  generator, block-position hash or string hash in this package.
- There are no block, item or entity registries; items and blocks are known
  only by their numeric ids.
- Text components convert to dictionaries only; there is no binary (NBT)
  encoding.
- There is no server, network protocol, command or storage.