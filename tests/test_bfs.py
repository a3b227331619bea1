"""Tests for breadth-first and depth-first path search."""

import pytest
from pydantic import ValidationError

from gridwalk import BfsBuilder, Bounds

# S..###
# .#....
# .#.###
# .#.#.E
# .#...#
SINGLE_PATH_OBSTACLES = {
    (3, 0), (4, 0), (5, 0),
    (1, 1),
    (1, 2), (3, 2), (4, 2), (5, 2),
    (1, 3), (3, 3),
    (1, 4), (5, 4),
}
SINGLE_PATH = [
    (0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (2, 3),
    (2, 4), (3, 4), (4, 4), (4, 3), (5, 3),
]

# S..###
# .#....
# .#.##.
# .#.#.E
# .....#
MULTIPLE_PATH_OBSTACLES = {
    (3, 0), (4, 0), (5, 0),
    (1, 1),
    (1, 2), (3, 2), (4, 2),
    (1, 3), (3, 3),
    (5, 4),
}
SHORTEST_OF_MULTIPLE = [
    (0, 0), (1, 0), (2, 0), (2, 1), (3, 1), (4, 1), (5, 1), (5, 2), (5, 3),
]


def test_bfs_single_path():
    result = BfsBuilder((0, 0), (5, 3)).with_obstacles(SINGLE_PATH_OBSTACLES).run()
    assert result is not None
    assert result.path == SINGLE_PATH
    assert len(result) == 11
    assert result.steps == 10


def test_dfs_single_path():
    result = BfsBuilder((0, 0), (5, 3)).with_obstacles(SINGLE_PATH_OBSTACLES).use_dfs().run()
    assert result is not None
    assert result.path == SINGLE_PATH


def test_bfs_picks_shortest_of_multiple_routes():
    result = BfsBuilder((0, 0), (5, 3)).with_obstacles(MULTIPLE_PATH_OBSTACLES).run()
    assert result is not None
    assert result.path == SHORTEST_OF_MULTIPLE


def test_dfs_finds_a_valid_path():
    result = BfsBuilder((0, 0), (5, 3)).with_obstacles(MULTIPLE_PATH_OBSTACLES).use_dfs().run()
    assert result is not None
    path = result.path
    assert path[0] == (0, 0)
    assert path[-1] == (5, 3)
    assert not MULTIPLE_PATH_OBSTACLES.intersection(path)
    for (x1, y1), (x2, y2) in zip(path, path[1:]):
        assert abs(x1 - x2) + abs(y1 - y2) == 1
    assert len(path) >= len(SHORTEST_OF_MULTIPLE)


def test_obstacles_accumulate_across_calls():
    obstacles = sorted(SINGLE_PATH_OBSTACLES)
    builder = BfsBuilder((0, 0), (5, 3))
    builder.with_obstacles(obstacles[:5]).with_obstacles(obstacles[5:])
    assert builder.obstacles == SINGLE_PATH_OBSTACLES
    assert builder.run().path == SINGLE_PATH


def test_no_path_is_none():
    result = BfsBuilder((0, 0), (2, 0)).with_obstacles({(1, 0)}).run()
    assert result is None


def test_start_equals_end():
    result = BfsBuilder((3, 3), (3, 3)).run()
    assert result is not None
    assert result.path == [(3, 3)]
    assert len(result) == 1
    assert result.steps == 0
    assert not result.is_empty()


def test_explicit_bounds_allow_detour():
    result = (
        BfsBuilder((0, 0), (2, 0))
        .with_obstacles({(1, 0)})
        .with_bounds((0, 0), (2, 1))
        .run()
    )
    assert result is not None
    assert result.path == [(0, 0), (0, 1), (1, 1), (2, 1), (2, 0)]


def test_inferred_bounds_are_cached():
    builder = BfsBuilder((0, 0), (5, 3)).with_obstacles(SINGLE_PATH_OBSTACLES)
    assert builder.bounds is None
    builder.run()
    assert builder.bounds == Bounds(top_left=(0, 0), bottom_right=(5, 4))


def test_negative_coordinates_are_rejected():
    with pytest.raises(ValidationError):
        BfsBuilder((-1, 0), (2, 2)).run()


def test_inverted_bounds_are_rejected():
    with pytest.raises(ValidationError):
        BfsBuilder((0, 0), (1, 1)).with_bounds((3, 3), (0, 0))


def test_debug_summary(monkeypatch, capsys):
    monkeypatch.setenv("DEBUG_SEARCH", "1")
    monkeypatch.setenv("GRIDWALK_NO_COLOR", "1")
    BfsBuilder((0, 0), (5, 3)).with_obstacles(SINGLE_PATH_OBSTACLES).run()
    out = capsys.readouterr().out
    assert "[•] [BFS] expanded" in out
    assert "path of 11 found" in out


def test_no_debug_output_by_default(monkeypatch, capsys):
    monkeypatch.delenv("DEBUG_SEARCH", raising=False)
    BfsBuilder((0, 0), (1, 0)).run()
    assert capsys.readouterr().out == ""
