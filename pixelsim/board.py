"""A falling-sand pixel board with a double-buffered cellular update."""

from __future__ import annotations

import enum
import random
from typing import Optional, TextIO


class Pixel(enum.IntEnum):
    """Materials a board cell can hold."""

    AIR = 0
    WOOD = 1
    WATER = 2
    SAND = 3
    STONE = 4
    FIRE = 5
    SMOKE = 6


class Action(enum.IntEnum):
    """What a pixel does when it meets a given neighbour."""

    NONE = 0
    BURN = 1
    SOLIDIFY = 2
    GO_UP = 3
    FALL_DOWN = 4
    FIRETICK = 5
    EXTINGUISH = 6
    FLOW = 7
    SINK = 8
    ATOP = 9


_REACTIONS = {
    (Pixel.WOOD, Pixel.FIRE): Action.BURN,
    (Pixel.FIRE, Pixel.FIRE): Action.FIRETICK,
    (Pixel.FIRE, Pixel.AIR): Action.FIRETICK,
    (Pixel.FIRE, Pixel.SMOKE): Action.FIRETICK,
    (Pixel.FIRE, Pixel.STONE): Action.FIRETICK,
    (Pixel.FIRE, Pixel.SAND): Action.FIRETICK,
    (Pixel.FIRE, Pixel.WATER): Action.EXTINGUISH,
    (Pixel.SAND, Pixel.SMOKE): Action.FALL_DOWN,
    (Pixel.SAND, Pixel.AIR): Action.FALL_DOWN,
    (Pixel.SAND, Pixel.FIRE): Action.FALL_DOWN,
    (Pixel.WATER, Pixel.AIR): Action.FLOW,
    (Pixel.WATER, Pixel.SMOKE): Action.FLOW,
    (Pixel.SMOKE, Pixel.AIR): Action.GO_UP,
    (Pixel.SMOKE, Pixel.FIRE): Action.GO_UP,
    (Pixel.SAND, Pixel.WATER): Action.SINK,
    (Pixel.WATER, Pixel.STONE): Action.ATOP,
    (Pixel.WATER, Pixel.SAND): Action.ATOP,
    (Pixel.WATER, Pixel.WATER): Action.ATOP,
}

_TABLE = tuple(
    tuple(_REACTIONS.get((own, other), Action.NONE) for other in Pixel)
    for own in Pixel
)

# Actions that do not count as the "last active" reaction of a pixel.
_PASSIVE = frozenset(
    {Action.NONE, Action.FALL_DOWN, Action.GO_UP, Action.FLOW, Action.ATOP}
)

_ROW_OFFSETS = (0, -1, 1)


def reaction(pixel, neighbour) -> Action:
    """Return the action ``pixel`` takes when next to ``neighbour``."""
    return _TABLE[Pixel(pixel)][Pixel(neighbour)]


class PixelBoard:
    """A rectangular grid of pixels framed by stone, advanced step by step."""

    def __init__(
        self,
        height: int,
        width: int,
        base_pixel: Pixel = Pixel.AIR,
        rng: Optional[random.Random] = None,
    ) -> None:
        if height < 1 or width < 1:
            raise ValueError("board dimensions must be positive")
        self._height = height
        self._width = width
        base = Pixel(base_pixel)
        grid = [[base] * width for _ in range(height)]
        grid[0] = [Pixel.STONE] * width
        grid[-1] = [Pixel.STONE] * width
        for row in grid:
            row[0] = Pixel.STONE
            row[-1] = Pixel.STONE
        self._boards = (grid, [row.copy() for row in grid])
        self._flipped = False
        self._rng = rng if rng is not None else random.Random()

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def _current(self) -> list:
        return self._boards[1 if self._flipped else 0]

    def get_at(self, y: int, x: int) -> Pixel:
        """Return the pixel at row ``y``, column ``x``."""
        if not (0 <= y < self._height and 0 <= x < self._width):
            raise IndexError(f"position ({y}, {x}) is outside the board")
        return self._current[y][x]

    def set_at(self, y: int, x: int, material: Pixel) -> None:
        """Set an interior pixel; writes to the frame or outside are ignored."""
        if 0 < y < self._height - 1 and 0 < x < self._width - 1:
            self._current[y][x] = Pixel(material)

    def draw_cube(self, y: int, x: int, size: int, material: Pixel) -> None:
        """Fill the block from (y, x) to (y + size, x + size) inclusive."""
        for row in range(y, y + size + 1):
            for col in range(x, x + size + 1):
                self.set_at(row, col, material)

    def draw_square(
        self, start_y: int, start_x: int, end_y: int, end_x: int, material: Pixel
    ) -> None:
        """Fill the rectangle spanned by two opposite corners, inclusive."""
        top, bottom = sorted((start_y, end_y))
        left, right = sorted((start_x, end_x))
        for row in range(top, bottom + 1):
            for col in range(left, right + 1):
                self.set_at(row, col, material)

    def update(self) -> None:
        """Advance the simulation by one step."""
        rng = self._rng
        table = _TABLE
        height, width = self._height, self._width
        moved = [[False] * width for _ in range(height)]
        column_offsets = [0, -1, 1]
        src, dst = self._boards if not self._flipped else self._boards[::-1]
        columns = (
            range(0, width - 1) if self._flipped else range(width - 1, 0, -1)
        )

        for y in range(1, height - 1):
            for x in columns:
                cur = src[y][x]
                if not moved[y][x] and cur in (Pixel.AIR, Pixel.STONE):
                    dst[y][x] = cur
                    continue

                if rng.randint(0, 1):
                    column_offsets = [-dx for dx in column_offsets]

                last = Action.NONE
                fireticks = 0
                flow_direction = 0

                for dy in _ROW_OFFSETS:
                    ny = y + dy
                    for dx in column_offsets:
                        nx = x + dx
                        action = table[cur][src[ny][nx]]

                        if action not in _PASSIVE:
                            last = action

                        if action is Action.FIRETICK:
                            fireticks += 1
                            continue

                        if action is Action.SINK:
                            if rng.randint(0, 1):
                                action = Action.FALL_DOWN
                            else:
                                continue

                        if moved[y][x] or moved[ny][nx]:
                            continue

                        if (
                            action in (Action.FALL_DOWN, Action.FLOW) and dy > 0
                        ) or (action is Action.GO_UP and dy < 0):
                            dst[y][x] = src[ny][nx]
                            dst[ny][nx] = cur
                            last = action
                            moved[y][x] = True
                            moved[ny][nx] = True
                            break
                        if action is Action.FLOW and dy == 0:
                            if table[cur][src[y + 1][nx]] is Action.ATOP:
                                last = Action.FLOW
                                flow_direction = dx
                            break

                if moved[y][x]:
                    continue

                if last is Action.BURN:
                    dst[y][x] = Pixel.SMOKE if rng.randint(0, 10) >= 9 else Pixel.FIRE
                elif last is Action.SOLIDIFY:
                    dst[y][x] = Pixel.STONE
                elif last is Action.EXTINGUISH:
                    dst[y][x] = Pixel.AIR
                elif last is Action.FLOW:
                    side = x + flow_direction
                    dst[y][x] = dst[y][side] if moved[y][side] else src[y][side]
                    dst[y][side] = cur
                    moved[y][side] = True
                elif fireticks >= 5 and rng.randint(0, 10) >= 3:
                    dst[y][x] = Pixel.AIR
                else:
                    dst[y][x] = cur
                moved[y][x] = True

        self._flipped = not self._flipped

    def dump(self, stream: TextIO) -> None:
        """Write each row as one character per pixel code, then a newline."""
        for row in self._current:
            stream.write("".join(chr(pixel) for pixel in row))
            stream.write("\n")