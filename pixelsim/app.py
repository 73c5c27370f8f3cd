"""Command-line entry point that opens the simulator on a prepared scene."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence, Tuple

import pygame

from pixelsim.board import Pixel
from pixelsim.presenter import BoardPresenter


def screen_resolution() -> Tuple[int, int]:
    """Return the desktop resolution as (width, height)."""
    pygame.display.init()
    info = pygame.display.Info()
    width, height = info.current_w, info.current_h
    if width <= 0 or height <= 0:
        raise RuntimeError("cannot determine the screen resolution")
    return width, height


def build_scene(width: int, height: int) -> BoardPresenter:
    """Create a wooden board of the given size with the starting materials."""
    presenter = BoardPresenter(width, height, Pixel.WOOD)
    presenter.set_at(220, 220, Pixel.FIRE)
    presenter.set_at(100, 20, Pixel.FIRE)
    presenter.draw_cube(40, 40, 100, Pixel.SAND)
    presenter.draw_cube(240, 240, 100, Pixel.SMOKE)
    presenter.draw_cube(540, 40, 100, Pixel.WATER)
    return presenter


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pixelsim",
        description="Interactive falling-sand simulator. Keys: q quit, p pause, "
        "+/- speed, 0-6 choose material; left drag paints, two right clicks "
        "fill a rectangle.",
    )
    parser.parse_args(argv)
    width, height = screen_resolution()
    presenter = build_scene(width // 2, height // 2)
    presenter.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())