import pytest

from healthy_products.config import GameRules
from healthy_products.errors import ConfigurationError
from healthy_products.game.grid import Grid
from healthy_products.game.tiles import Tile


def test_border_is_wall_except_gate():
    grid = Grid(20, 15)

    assert grid.gate == (0, 7)
    assert grid.is_gate(0, 7) is True
    assert grid.is_wall(0, 7) is False

    # Corners and every border side
    for cell in [(0, 0), (19, 0), (0, 14), (19, 14), (10, 0), (10, 14), (0, 3), (19, 7)]:
        assert grid.is_wall(*cell) is True, cell

    # Interior
    assert grid.is_wall(1, 1) is False
    assert grid.is_wall(18, 13) is False
    assert grid.is_gate(1, 7) is False


def test_start_cell_is_right_edge_center():
    grid = Grid(20, 15)
    assert grid.start == (19, 7)
    assert grid.is_interior(*grid.start) is False


def test_out_of_bounds_is_neither_wall_nor_gate():
    grid = Grid(20, 15)
    assert grid.is_wall(-1, 0) is False
    assert grid.is_wall(20, 7) is False
    assert grid.is_gate(-1, 7) is False
    assert grid.in_bounds(20, 7) is False

    with pytest.raises(IndexError):
        grid.tile_at(20, 7)


def test_cell_counts():
    grid = Grid(20, 15)
    assert grid.interior_size == 18 * 13
    assert len(list(grid.interior_cells())) == grid.interior_size
    # Whole border minus the gate
    assert len(list(grid.wall_cells())) == 2 * 20 + 2 * 13 - 1


def test_tiles_and_ascii_dump():
    grid = Grid(5, 5)
    assert grid.tile_at(0, 2) is Tile.GATE
    assert grid.tile_at(0, 0) is Tile.WALL
    assert grid.tile_at(2, 2) is Tile.FLOOR
    assert grid.to_lines() == [
        "#####",
        "#...#",
        "G...#",
        "#...#",
        "#####",
    ]


def test_from_rules():
    grid = Grid.from_rules(GameRules(grid_width=8, grid_height=6, items_per_level=3))
    assert (grid.width, grid.height) == (8, 6)
    assert grid.gate == (0, 3)


def test_too_small_grid_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        Grid(2, 5)
