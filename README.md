# pixelsim

A small falling-sand simulator. The board is a grid of materials framed by
stone, and each step applies a few simple rules to every interior cell:

- **Sand** falls through air, smoke and fire, and now and then sinks through
  water.
- **Water** falls through air and smoke, and spreads sideways into air or
  smoke when the cell below that spot is stone, sand or water.
- **Smoke** rises through air and fire.
- **Wood** next to fire catches fire, and sometimes turns straight to smoke.
- **Fire** next to water goes out. Fire surrounded mostly by fire, air,
  smoke, stone or sand usually dies down to air.
- **Stone** and **air** stay where they are.

Randomness decides the sideways direction a cell looks first, whether sand
sinks, and how wood and fire change. The rows are swept with alternating
left-to-right and right-to-left passes, using two buffers that swap each
step.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
pixelsim
```

This reads the desktop resolution, builds a board half as wide and half as
high, fills it with wood, places two spots of fire and blocks of sand, smoke
and water on it, and shows it in a scaled full-screen window until you quit.

### Controls

| Input                     | Effect                                              |
|---------------------------|-----------------------------------------------------|
| `q` / `Q`                 | quit                                                |
| `p` / `P`                 | pause or resume the simulation                      |
| `+` / `-`                 | lengthen or shorten the delay between frames by 5 ms|
| `0` – `6`                 | choose the paint material                           |
| hold left mouse button    | paint with the chosen material                      |
| right click, right click  | fill the rectangle between the two corners          |

Material numbers: `0` air, `1` wood, `2` water, `3` sand, `4` stone,
`5` fire, `6` smoke. The paint material starts as air. Painting never
touches the stone frame.

## Using the board from Python

```python
import io
from pixelsim.board import Pixel, PixelBoard

board = PixelBoard(20, 30, Pixel.AIR)   # height, width
board.draw_cube(2, 5, 4, Pixel.SAND)
board.set_at(10, 10, Pixel.FIRE)

for _ in range(10):
    board.update()

print(board.get_at(18, 7))

out = io.StringIO()
board.dump(out)
```

- `PixelBoard(height, width, base_pixel=Pixel.AIR, rng=None)` takes an
  optional `random.Random` for repeatable runs.
- `get_at(y, x)` raises `IndexError` outside the board; `set_at`,
  `draw_cube` and `draw_square` silently skip cells on the frame or outside.
- `dump(stream)` writes one character per cell, whose code is the pixel's
  number, and a newline after each row.
- `pixelsim.board.reaction(pixel, neighbour)` returns the `Action` a
  material takes next to another.

`pixelsim.presenter.BoardPresenter(width, height, material)` wraps a board
with an RGB frame (`frame`, shaped height × width × 3, filled by
`update_visual()`), steps it with `update_math()`, and takes input through
`handle_key(key)` and `handle_mouse(event, x, y)`, where `event` is one of
`"left_down"`, `"left_up"`, `"right_down"` or `"move"`. `show()` runs the
window. `pixelsim.presenter.pixel_color(pixel, y, x)` gives the colour drawn
for a material at a given cell.

## Limitations

Boards cannot be saved or loaded, and the starting scene of the `pixelsim`
command is fixed.