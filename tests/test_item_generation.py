import pytest

from healthy_products.config import GameRules
from healthy_products.core.rng import RNG
from healthy_products.errors import ConfigurationError
from healthy_products.game.grid import Grid
from healthy_products.game.items import ItemPlacementGenerator, items_at


def test_generated_levels_have_distinct_interior_items():
    grid = Grid(20, 15)
    gen = ItemPlacementGenerator()

    for seed in range(50):
        items = gen.generate(RNG(seed), 10, grid)
        assert len(items) == 10
        positions = {i.pos for i in items}
        assert len(positions) == 10, "items must not share a cell"
        for item in items:
            assert grid.is_interior(*item.pos)
            assert not grid.is_wall(*item.pos)
            assert not grid.is_gate(*item.pos)
            assert item.pos != grid.start


def test_point_ranges_follow_health_flag():
    grid = Grid(20, 15)
    gen = ItemPlacementGenerator()
    seen_healthy = seen_unhealthy = False

    for seed in range(30):
        for item in gen.generate(RNG(seed), 10, grid):
            if item.is_healthy:
                seen_healthy = True
                assert 10 <= item.points <= 19
            else:
                seen_unhealthy = True
                assert -5 <= item.points <= -1

    assert seen_healthy and seen_unhealthy


def test_same_seed_same_items():
    grid = Grid(20, 15)
    gen = ItemPlacementGenerator()
    assert gen.generate(RNG(99), 10, grid) == gen.generate(RNG(99), 10, grid)


def test_shared_rng_gives_fresh_items_per_call():
    grid = Grid(20, 15)
    gen = ItemPlacementGenerator()
    rng = RNG(5)
    first = gen.generate(rng, 10, grid)
    second = gen.generate(rng, 10, grid)
    assert first != second


def test_count_must_fit_eligible_cells():
    grid = Grid(4, 4)  # 4 interior cells
    gen = ItemPlacementGenerator(GameRules(grid_width=4, grid_height=4, items_per_level=3))

    assert len(gen.generate(RNG(1), 3, grid)) == 3
    with pytest.raises(ConfigurationError):
        gen.generate(RNG(1), 4, grid)


class StuckRNG:
    """Always draws the lowest value, so every candidate cell is (1, 1)."""

    def coin(self) -> bool:
        return True

    def randint(self, a: int, b: int) -> int:
        return a

    def choice(self, seq):
        return seq[0]


def test_capped_sampling_falls_back_to_free_cells():
    rules = GameRules(grid_width=5, grid_height=5, items_per_level=2, max_attempts_per_item=3)
    gen = ItemPlacementGenerator(rules)

    items = gen.generate(StuckRNG(), 2, Grid(5, 5))

    # (1, 1) from sampling, then the smallest remaining free cell
    assert sorted(i.pos for i in items) == [(1, 1), (1, 2)]


def test_tiny_attempt_cap_still_fills_a_crowded_level():
    rules = GameRules(items_per_level=150, max_attempts_per_item=2)
    grid = Grid.from_rules(rules)

    items = ItemPlacementGenerator(rules).generate(RNG(1), 150, grid)

    assert len({i.pos for i in items}) == 150
    assert all(grid.is_interior(*i.pos) and i.pos != grid.start for i in items)


def test_items_at_returns_every_item_on_cell():
    items = ItemPlacementGenerator().generate(RNG(3), 10, Grid(20, 15))
    target = next(iter(items))
    assert items_at(items, target.pos) == (target,)
    assert items_at(items, (0, 0)) == ()
