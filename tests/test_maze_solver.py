import cv2
import pytest

import maze_solver
from conftest import maze_image


@pytest.fixture
def maze_dir(tmp_path):
    d = tmp_path / "mazes"
    d.mkdir()
    cv2.imwrite(str(d / "small.png"), maze_image(["S..", ".#.", "..E"]))
    cv2.imwrite(str(d / "blocked.png"), maze_image(["S#.", "##.", "..E"]))
    cv2.imwrite(str(d / "nomarkers.png"), maze_image(["...", "..."]))
    return d


def run(maze_dir, *args):
    return maze_solver.main([*args, "--maze-dir", str(maze_dir)])


def test_solves_and_saves_overlay(maze_dir, tmp_path, capsys):
    out = tmp_path / "solution.png"
    assert run(maze_dir, "small.png", "--no-visualize", "--output", str(out)) == 0
    text = capsys.readouterr().out
    assert "Reading image..." in text
    assert "Path length 4 found in" in text
    assert out.exists()


def test_no_path_is_not_an_error(maze_dir, capsys):
    assert run(maze_dir, "blocked.png", "--no-visualize") == 0
    assert "No path found" in capsys.readouterr().out


def test_missing_image(maze_dir, capsys):
    assert run(maze_dir, "missing.png", "--no-visualize") == 1
    assert "Could not open or find the image" in capsys.readouterr().out


def test_invalid_maze(maze_dir, capsys):
    assert run(maze_dir, "nomarkers.png", "--no-visualize") == 1
    assert "Invalid maze" in capsys.readouterr().out


def test_prompts_when_arguments_missing(maze_dir, monkeypatch, capsys):
    answers = iter(["small.png", "n"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert run(maze_dir) == 0
    assert "Path length 4" in capsys.readouterr().out


def test_visualize_flag_runs_animation(maze_dir, monkeypatch):
    calls = []
    monkeypatch.setattr(maze_solver.visualize, "animate_path",
                        lambda image, path, *a: calls.append(path))
    assert run(maze_dir, "small.png", "--visualize") == 0
    assert calls == [[(1, 0), (2, 0), (2, 1), (2, 2)]]


def test_unwritable_output(maze_dir, tmp_path, capsys):
    out = tmp_path / "no_such_dir" / "solution.png"
    assert run(maze_dir, "small.png", "--no-visualize", "--output", str(out)) == 1
    assert "Could not save overlay" in capsys.readouterr().out


def test_strict_markers_rejects_duplicate_exit(maze_dir, capsys):
    cv2.imwrite(str(maze_dir / "twoexits.png"), maze_image(["S.E", "...", "..E"]))
    assert run(maze_dir, "twoexits.png", "--no-visualize") == 0
    capsys.readouterr()
    assert run(maze_dir, "twoexits.png", "--no-visualize", "--strict-markers") == 1
    assert "Invalid maze" in capsys.readouterr().out
