from aockit.tools.bfs import BfsBuilder, BfsResult

# S..###
# .#....
# .#.###
# .#.#.E
# .#...#
OBSTACLES = {
    (3, 0),
    (4, 0),
    (5, 0),
    (1, 1),
    (1, 2),
    (3, 2),
    (4, 2),
    (5, 2),
    (1, 3),
    (3, 3),
    (1, 4),
    (5, 4),
}

EXPECTED_PATH = [
    (0, 0),
    (1, 0),
    (2, 0),
    (2, 1),
    (2, 2),
    (2, 3),
    (2, 4),
    (3, 4),
    (4, 4),
    (4, 3),
    (5, 3),
]


def create_with_testcase():
    return BfsBuilder((0, 0), (5, 3)).with_obstacles(OBSTACLES)


def test_bfs():
    result = create_with_testcase().run()
    assert result is not None
    assert result.path == EXPECTED_PATH


def test_dfs():
    result = create_with_testcase().use_dfs().run()
    assert result is not None
    assert result.path == EXPECTED_PATH


def test_result_length_counts_cells():
    result = create_with_testcase().run()
    assert len(result) == 11


def test_unreachable_end_gives_none():
    builder = BfsBuilder((0, 0), (2, 0)).with_obstacles({(1, 0), (0, 1)})
    assert builder.run() is None


def test_obstacles_accumulate():
    builder = BfsBuilder((0, 0), (2, 0)).with_obstacles({(1, 0)}).with_obstacles({(0, 1)})
    assert builder.obstacles == {(1, 0), (0, 1)}
    assert builder.run() is None


def test_start_is_end():
    result = BfsBuilder((3, 3), (3, 3)).run()
    assert result == BfsResult([(3, 3)])


def test_computed_bounds_block_detour():
    assert BfsBuilder((0, 0), (2, 0)).with_obstacles({(1, 0)}).run() is None


def test_explicit_bounds_allow_detour():
    result = (
        BfsBuilder((0, 0), (2, 0))
        .with_obstacles({(1, 0)})
        .with_bounds((0, 0), (2, 1))
        .run()
    )
    assert result.path == [(0, 0), (0, 1), (1, 1), (2, 1), (2, 0)]


def test_path_steps_are_adjacent_and_avoid_obstacles():
    result = create_with_testcase().use_dfs().run()
    for (ax, ay), (bx, by) in zip(result.path, result.path[1:]):
        assert abs(ax - bx) + abs(ay - by) == 1
    assert not set(result.path) & OBSTACLES