"""Rendering and interactive control of a pixel board."""

from __future__ import annotations

import io
from typing import Optional, Tuple, Union

import numpy as np
import pygame

from pixelsim.board import Pixel, PixelBoard

WINDOW_TITLE = "PixelSimulator"

# Base colour of every material as (red, green, blue).
_BASE = np.array(
    [
        (254, 254, 254),  # AIR
        (150, 75, 0),  # WOOD
        (10, 10, 250),  # WATER
        (194, 178, 128),  # SAND
        (100, 100, 100),  # STONE
        (250, 10, 10),  # FIRE
        (175, 175, 175),  # SMOKE
    ],
    dtype=np.int32,
)

# Which channels of each material take the positional shading.
_SHADED = np.array(
    [
        (0, 0, 0),
        (1, 1, 0),
        (1, 1, 1),
        (1, 1, 1),
        (1, 1, 1),
        (1, 1, 1),
        (1, 1, 1),
    ],
    dtype=np.int32,
)

_MOUSE_EVENTS = frozenset({"left_down", "left_up", "right_down", "move"})


def _shade(y: int, x: int) -> int:
    amount = (y + x) % 10
    return -amount if (y + x % 2) else amount


def pixel_color(pixel, y: int, x: int) -> Tuple[int, int, int]:
    """Return the (red, green, blue) colour of ``pixel`` drawn at row ``y``, column ``x``."""
    code = int(Pixel(pixel))
    shade = _shade(y, x)
    return tuple(
        (int(base) + int(shaded) * shade) & 0xFF
        for base, shaded in zip(_BASE[code], _SHADED[code])
    )


class BoardPresenter:
    """Owns a pixel board, renders it to an RGB frame and reacts to input."""

    def __init__(self, width: int, height: int, material: Pixel = Pixel.AIR) -> None:
        self._width = width
        self._height = height
        self.board = PixelBoard(height, width, material)
        self._frame = np.zeros((height, width, 3), dtype=np.uint8)
        rows = np.arange(height)[:, None]
        cols = np.arange(width)[None, :]
        shade = (rows + cols) % 10
        self._shade = np.where((rows + cols % 2) != 0, -shade, shade).astype(np.int32)
        self.paint_material = Pixel.AIR
        self.mouse_up = True
        self.first_corner: Optional[Tuple[int, int]] = None
        self.delay = 1
        self.paused = False

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def frame(self) -> np.ndarray:
        """The last rendered frame, shaped (height, width, 3), in RGB order."""
        return self._frame

    def update_visual(self) -> None:
        """Render the board's current state into the frame."""
        buffer = io.StringIO()
        self.board.dump(buffer)
        raw = np.frombuffer(buffer.getvalue().encode("latin-1"), dtype=np.uint8)
        codes = raw.reshape(self._height, self._width + 1)[:, : self._width]
        colors = _BASE[codes] + _SHADED[codes] * self._shade[..., None]
        self._frame[...] = (colors & 0xFF).astype(np.uint8)

    def update_math(self) -> None:
        """Advance the simulation by one step."""
        self.board.update()

    def get_at(self, y: int, x: int) -> Pixel:
        return self.board.get_at(y, x)

    def set_at(self, y: int, x: int, material: Pixel) -> None:
        self.board.set_at(y, x, material)

    def draw_cube(self, y: int, x: int, size: int, material: Pixel) -> None:
        self.board.draw_cube(y, x, size, material)

    def draw_square(
        self, start_y: int, start_x: int, end_y: int, end_x: int, material: Pixel
    ) -> None:
        self.board.draw_square(start_y, start_x, end_y, end_x, material)

    def handle_key(self, key: Union[str, int]) -> bool:
        """Apply a key press; return False when the user asked to quit."""
        if isinstance(key, int):
            if not 0 <= key < 0x110000:
                return True
            key = chr(key)
        if len(key) != 1:
            return True
        if key in "qQ":
            return False
        if key in "pP":
            self.paused = not self.paused
        elif key == "-":
            if self.delay - 5 > 0:
                self.delay -= 5
        elif key == "+":
            self.delay += 5
        elif "0" <= key <= str(len(Pixel) - 1):
            self.paint_material = Pixel(int(key))
        return True

    def handle_mouse(self, event: str, x: int, y: int) -> None:
        """React to a mouse event at window column ``x``, row ``y``.

        ``event`` is one of "left_down", "left_up", "right_down" or "move".
        """
        if event not in _MOUSE_EVENTS:
            raise ValueError(f"unknown mouse event: {event!r}")
        if event == "left_down":
            self.mouse_up = False
        elif event == "left_up":
            self.mouse_up = True
        elif event == "right_down":
            if self.first_corner is None:
                self.first_corner = (y, x)
            else:
                start_y, start_x = self.first_corner
                self.draw_square(start_y, start_x, y, x, self.paint_material)
                self.first_corner = None
        if not self.mouse_up:
            self.set_at(y, x, self.paint_material)

    def _dispatch(self, event) -> bool:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            return self.handle_key(event.unicode)
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                self.handle_mouse("left_down", *event.pos)
            elif event.button == 3:
                self.handle_mouse("right_down", *event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.handle_mouse("left_up", *event.pos)
        elif event.type == pygame.MOUSEMOTION:
            self.handle_mouse("move", *event.pos)
        return True

    def show(self) -> None:
        """Run the interactive window until the user quits."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(
                (self._width, self._height), pygame.FULLSCREEN | pygame.SCALED
            )
            pygame.display.set_caption(WINDOW_TITLE)
            while True:
                if not self.paused:
                    self.update_visual()
                    self.update_math()
                pygame.surfarray.blit_array(screen, self._frame.swapaxes(0, 1))
                pygame.display.flip()
                pygame.time.wait(self.delay)
                for event in pygame.event.get():
                    if not self._dispatch(event):
                        return
        finally:
            pygame.quit()