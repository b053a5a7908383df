import argparse
import sys

import grid_builder as gb
import maze_image_processing as mip
import pathfinder as pf
import visualize

# === CONFIG ===
maze_dir = "mazes"
window_size = (1000, 1000)
frame_delay_ms = 1


def _ask_yes_no(prompt):
    answer = input(prompt).strip().lower()
    return answer in ("y", "yes", "1", "true")


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Find the shortest path through a maze image (green entry, red exit).")
    ap.add_argument("maze", nargs="?", help="Maze image file name; looked up in --maze-dir if not a path.")
    ap.add_argument("--maze-dir", default=maze_dir, help="Directory holding maze images.")
    vis = ap.add_mutually_exclusive_group()
    vis.add_argument("--visualize", dest="visualize", action="store_true", default=None,
                     help="Replay the path in a window.")
    vis.add_argument("--no-visualize", dest="visualize", action="store_false",
                     help="Skip the replay window.")
    ap.add_argument("--output", help="Save the image with the path drawn on it.")
    ap.add_argument("--strict-markers", action="store_true",
                    help="Fail if the entry or exit colour appears more than once.")
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # === Load image ===
    name = args.maze or input("Enter name of maze file and extension: ").strip()
    try:
        image = mip.load_image(mip.resolve_maze_path(name, args.maze_dir))
    except FileNotFoundError:
        print("Could not open or find the image")
        return 1

    # === Build Grid ===
    print("Reading image...")
    try:
        grid = mip.grid_from_image(image, strict=args.strict_markers)
    except gb.InvalidGrid as e:
        print(f"Invalid maze: {e}")
        return 1

    # === Find Path ===
    result = pf.search(grid)
    if not result.found:
        print(f"No path found ({result.expanded} cells expanded)")
        return 0
    path = pf.reconstruct_path(result.visited, result.node)
    path.reverse()
    print(f"Path length {len(path)} found in {result.elapsed_us} microseconds "
          f"({result.expanded} cells expanded)")

    # === Show / save ===
    if args.output:
        try:
            visualize.save_overlay(image, path, args.output)
        except OSError as e:
            print(f"Could not save overlay: {e}")
            return 1
        print(f"Saved overlay -> {args.output}")
    show = args.visualize
    if show is None:
        show = _ask_yes_no("Visualize path? [y/N] ")
    if show:
        visualize.animate_path(image, path, window_size, frame_delay_ms)
    return 0


if __name__ == "__main__":
    sys.exit(main())
