import cv2

PATH_COLOR = (255, 0, 0)  # BGR blue


def _paint(image, cell, color):
    x, y = cell
    image[y, x] = color


def draw_path(image, path, color=PATH_COLOR):
    overlay = image.copy()
    for cell in path or []:
        _paint(overlay, cell, color)
    return overlay


def save_overlay(image, path, out_path, color=PATH_COLOR):
    overlay = draw_path(image, path, color)
    try:
        ok = cv2.imwrite(out_path, overlay)
    except cv2.error as e:
        raise OSError(f"Could not write image: {out_path}") from e
    if not ok:
        raise OSError(f"Could not write image: {out_path}")
    return overlay


def animate_path(image, path, window_size=(1000, 1000), delay_ms=1, color=PATH_COLOR):
    # Replay one cell per frame on a scaled-up copy of the maze
    frame = image.copy()
    cv2.namedWindow("Maze", cv2.WINDOW_AUTOSIZE)
    for cell in path or []:
        _paint(frame, cell, color)
        render = cv2.resize(frame, window_size, interpolation=cv2.INTER_LINEAR)
        cv2.imshow("Maze", render)
        cv2.waitKey(delay_ms)

    # Hold the last frame until a key is pressed
    cv2.imshow("Maze", cv2.resize(frame, window_size, interpolation=cv2.INTER_LINEAR))
    cv2.waitKey(0)
    cv2.destroyAllWindows()
    return frame
