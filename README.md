# spookyrun

Building blocks for a side-scrolling Halloween platformer, written in plain
Python. Pillow is used to read image files.

## Modules

- `spookyrun.util`: small numeric helpers for games.
  - `is_real_close`, `is_real_close_or_less` and `is_real_close_or_greater`
    compare floats loosely and integers exactly.
  - `map_range`, `map_ratio_to`, `map_to_ratio` and
    `map_ratio_to_color_value` map values between ranges.
  - `degrees_to_radians`, `radians_to_degrees`, `is_abs_tiny` and
    `make_even` are small arithmetic helpers.
  - `is_bit_set`, `set_bit`, `count_high_bits`, `is_power_of_two` and
    `find_power_of_two_greater_than` work on bits.
  - `sort_then_unique`, `swap_and_pop` and `container_to_string` work on
    collections.
  - `make_stats` returns a `Stats` record with count, min, max, sum, mean and
    population standard deviation. `Stats.to_string` formats it.
  - `calc_percent` and `make_percent_string` produce percentages, for
    example `(50%)`.
- `spookyrun.texture_loader`: `TextureLoader.load` reads an image file into
  a `Texture`, which is an RGBA Pillow image with a `smooth` flag and the
  path it came from. When a file cannot be read, it logs a warning and
  returns a solid red 64x64 texture. The loader keeps `file_count` and
  `byte_count` totals. `dump_info` writes them to stderr and also returns
  the line.
- `spookyrun.tileset`: `TileImage` (ground, object-1 to object-3),
  `TileLayer` and `TileSet`. `TileSet.reset` clears a tile set.
- `spookyrun.color_range`: the immutable 8-bit RGBA `Color`.
  - Channel and whole-color differences: `diff`, `diff_abs`, `diff_ratio`,
    `diff_magnitude*`, `diff_euclid`, `diff_euclid_opaque` and
    `diff_weighted_euclid_opaque`.
  - Blends: `blend_value`, `blend` and `blend_sequence`.
  - `Hsla` converts colors with `Hsla.from_color` and `Hsla.to_color`.
  - Brightness estimates: `brightness_hsl`, `brightness_weighted_mean`,
    `brightness_w3_perceived` and `brightness_luminosity`.
- `spookyrun.color_fill`: gradients and color stops.
  - `ColorAtRatio` is a color stop. `normalize` sorts the stops, removes
    duplicates and stretches them to cover 0 to 1.
  - `ratio_from_clamped` and `ratio_from_rotation` look up a color by ratio.
  - `random_color` and `random_vibrant` take a `random.Random`.
  - `blend_fill`, `blend_fill_colors` and `blend_fill_non_linear` return
    lists of colors.
  - `BlendCache` holds a precomputed gradient. Build one with
    `BlendCache.from_colors` or `BlendCache.from_colors_non_linear`. It has
    `at_ratio_clamped`, `at_ratio_rotation`, `first` and `last`.
- `spookyrun.avatar_anim`: `AvatarAnim` steps through a list of textures at
  a fixed frame time. It either loops or stops on its last frame and sets
  `is_finished`. `AvatarAnim.load` reads the files `<name>-0.png` up to
  `<name>-<n-1>.png`. `update` returns `True` when the frame changes.
- `spookyrun.blood`: `Blood` is a one-shot splat animation. It uses one of
  two nine-frame rows of a 128-pixel sprite sheet, with frame positions
  given by `TextureRect`. `Blood.load` reads `image/blood.png` under a
  media folder. `start` picks a row at random unless `use_first_anim` is
  given, and flips the splat horizontally when it should splash left.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from spookyrun.color_range import Color, blend
from spookyrun.color_fill import BlendCache
from spookyrun.util import make_stats

mid = blend(0.5, Color(0, 0, 0), Color(255, 255, 255))

cache = BlendCache.from_colors(256, [Color(255, 0, 0), Color(0, 0, 255)])
print(cache.first(), cache.last(), cache.at_ratio_clamped(0.5))

stats = make_stats([58, 60, 61, 60])
print(stats.to_string(5))
```

Animations load their frames through a `TextureLoader`:

```python
from spookyrun.texture_loader import TextureLoader
from spookyrun.avatar_anim import AvatarAnim

loader = TextureLoader()
run = AvatarAnim.load(loader, "media/image/avatar", "Run", 10, 0.045, True)
if run.update(1 / 60):
    frame = run.texture
```

## What this package does not do

This package is a set of pieces, not a playable game. It does not provide:

- a command to run
- a window or drawing
- sound or music
- keyboard input
- level files
- the player, enemies or collision handling
- a game loop

Textures are loaded into memory as Pillow images. Animations only track
which frame or sprite-sheet rectangle is current. Showing them on screen is
up to the code that uses them.