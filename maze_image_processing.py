import os

import cv2

import grid_builder as gb


def resolve_maze_path(name, maze_dir):
    if os.path.isfile(name):
        return name
    return os.path.join(maze_dir, name)


def load_image(image_path):
    image = cv2.imread(image_path, cv2.IMREAD_COLOR)
    if image is None:
        raise FileNotFoundError(f"Could not load image: {image_path}")
    return image


def grid_from_image(image, strict=False):
    grid = gb.build_grid(image, strict=strict)
    print(f"Found entry at {grid.entry[0]}, {grid.entry[1]}")
    print(f"Found exit at {grid.exit[0]}, {grid.exit[1]}")
    return grid
