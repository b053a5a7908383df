from dataclasses import dataclass
from typing import Tuple

import numpy as np

Coordinate = Tuple[int, int]  # (x, y) = (col, row)

OPEN = 0
WALL = 1

# Marker colours in OpenCV's BGR channel order
ENTRY_COLOR = (0, 255, 0)   # pure green
EXIT_COLOR = (0, 0, 255)    # pure red


class InvalidGrid(ValueError):
    pass


class OutOfBounds(IndexError):
    pass


@dataclass(frozen=True, eq=False)
class Grid:
    cells: np.ndarray       # [row][col], OPEN or WALL
    entry: Coordinate
    exit: Coordinate

    def __post_init__(self):
        cells = np.asarray(self.cells)
        if not np.isin(cells, (OPEN, WALL)).all():
            raise InvalidGrid("Grid cells must be OPEN or WALL")
        object.__setattr__(self, "cells", np.array(cells, dtype=np.uint8))
        object.__setattr__(self, "entry", tuple(int(v) for v in self.entry))
        object.__setattr__(self, "exit", tuple(int(v) for v in self.exit))
        if self.cells.ndim != 2 or self.height < 1 or self.width < 1:
            raise InvalidGrid(f"Grid must be at least 1x1, got shape {self.cells.shape}")
        for name, c in (("entry", self.entry), ("exit", self.exit)):
            if not self.in_bounds(c):
                raise InvalidGrid(f"{name} {c} is outside the {self.width}x{self.height} grid")
            if self.classification_at(c) != OPEN:
                raise InvalidGrid(f"{name} {c} is not an open cell")
        # read-only for the rest of the run
        self.cells.setflags(write=False)

    @property
    def width(self) -> int:
        return self.cells.shape[1]

    @property
    def height(self) -> int:
        return self.cells.shape[0]

    def in_bounds(self, c: Coordinate) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def classification_at(self, c: Coordinate) -> int:
        if not self.in_bounds(c):
            raise OutOfBounds(f"{c} is outside the {self.width}x{self.height} grid")
        x, y = c
        return int(self.cells[y, x])


def classify(pixel) -> int:
    """A BGR pixel with zero green and zero red is a wall, anything else is open."""
    g, r = int(pixel[1]), int(pixel[2])
    return WALL if g == 0 and r == 0 else OPEN


def classify_image(image: np.ndarray) -> np.ndarray:
    walls = (image[:, :, 1] == 0) & (image[:, :, 2] == 0)
    return np.where(walls, WALL, OPEN).astype(np.uint8)


def _last_match(image, color, name, strict):
    mask = np.all(image == np.array(color, dtype=image.dtype), axis=2)
    ys, xs = np.nonzero(mask)
    if len(xs) == 0:
        raise InvalidGrid(f"No {name} marker found")
    if strict and len(xs) > 1:
        raise InvalidGrid(f"{name.capitalize()} marker found {len(xs)} times")
    # image is scanned column by column, the last hit wins
    last = np.lexsort((ys, xs))[-1]
    return int(xs[last]), int(ys[last])


def locate_markers(image: np.ndarray, strict: bool = False) -> Tuple[Coordinate, Coordinate]:
    """Find the entry (green) and exit (red) marker pixels.

    If a marker colour appears more than once the last pixel in column-major
    scan order is used, unless ``strict`` is set, in which case the
    duplicate is an ``InvalidGrid``.
    """
    entry = _last_match(image, ENTRY_COLOR, "entry", strict)
    exit_ = _last_match(image, EXIT_COLOR, "exit", strict)
    return entry, exit_


def build_grid(image: np.ndarray, strict: bool = False) -> Grid:
    if image is None or image.ndim != 3 or image.shape[2] < 3:
        raise InvalidGrid("Expected a 3-channel colour image")
    image = image[:, :, :3]
    entry, exit_ = locate_markers(image, strict=strict)
    return Grid(classify_image(image), entry, exit_)
