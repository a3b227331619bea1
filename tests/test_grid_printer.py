"""Tests for grid text rendering."""

import pytest
from pydantic import ValidationError

from gridwalk import Config, Grid


def test_round_trip_of_parsed_text():
    grid = Grid.from_text("123\n456\n789")
    assert grid.printer().render() == "123\n456\n789"
    assert str(grid) == "123\n456\n789"


def test_empty_cells_render_blank():
    grid = Grid.from_cells({(0, 0): "a", (2, 1): "b"})
    assert str(grid) == "a  \n  b"


def test_legend():
    grid = Grid.from_text("ab\ncd")
    assert grid.printer().with_legend().render() == " 01\n0ab\n1cd"


def test_legend_labels_are_centered_in_wide_cells():
    grid = Grid.from_cells({(9, 0): "a", (10, 0): "b"})
    rendered = grid.printer().with_legend().with_cell_width(2).render()
    assert rendered == "  9 10\n0 a b "


def test_cell_width_centers_content():
    grid = Grid.from_text("ab\ncd")
    assert grid.printer().with_cell_width(3).render() == " a  b \n c  d "


def test_odd_padding_goes_to_the_right():
    grid = Grid.from_cells({(0, 0): "ab"})
    assert grid.printer().with_cell_width(5).render() == " ab  "


def test_overlong_content_keeps_trailing_characters():
    grid = Grid.from_cells({(0, 0): 1234})
    assert grid.printer().with_cell_width(2).render() == "34"


def test_cell_fill_repeats_value_across_width():
    grid = Grid.from_text("#.\n.#")
    rendered = grid.printer().with_cell_width(3).with_cell_fill("#").render()
    assert rendered == "### . \n . ###"


def test_override_wins_even_for_empty_cells():
    grid = Grid.from_cells({(0, 0): "a", (2, 0): "c"})
    assert str(grid) == "a c"
    rendered = grid.printer().with_cell_override_fn(
        lambda coord: "*" if coord in {(1, 0), (2, 0)} else None
    ).render()
    assert rendered == "a**"


def test_default_cell_width_comes_from_config(monkeypatch):
    monkeypatch.setattr(Config, "DEFAULT_CELL_WIDTH", 2)
    grid = Grid.from_text("ab")
    assert grid.printer().render() == "a b "


def test_zero_cell_width_is_rejected():
    grid = Grid.from_text("ab")
    with pytest.raises(ValidationError):
        grid.printer().with_cell_width(0).render()


def test_print_writes_to_stdout(capsys):
    Grid.from_text("xy\nzw").printer().print()
    assert capsys.readouterr().out == "xy\nzw\n"


def test_empty_grid_renders_single_blank():
    assert str(Grid()) == " "
