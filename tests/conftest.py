import numpy as np
import pytest

from grid_builder import OPEN, WALL, Grid

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREEN = (0, 255, 0)
RED = (0, 0, 255)


def grid_from_rows(rows, entry, exit_):
    """'#' is a wall, anything else is open."""
    cells = [[WALL if ch == "#" else OPEN for ch in row] for row in rows]
    return Grid(np.array(cells, dtype=np.uint8), entry, exit_)


def maze_image(rows):
    """'#' black wall, 'S' green entry, 'E' red exit, anything else white."""
    colors = {"#": BLACK, "S": GREEN, "E": RED}
    h, w = len(rows), len(rows[0])
    img = np.zeros((h, w, 3), dtype=np.uint8)
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            img[y, x] = colors.get(ch, WHITE)
    return img


@pytest.fixture
def center_blocked():
    return grid_from_rows(["...", ".#.", "..."], (0, 0), (2, 2))
