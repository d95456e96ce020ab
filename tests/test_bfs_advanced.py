import pytest

from drillbook.bfs_advanced import (
    break_wall_path,
    escape_fire,
    housing_complexes,
    safe_areas,
    separated_areas,
    shortest_bridge,
)

BRIDGE_SAMPLE = [
    [1, 1, 1, 0, 0, 0, 0, 1, 1, 1],
    [1, 1, 1, 1, 0, 0, 0, 0, 1, 1],
    [1, 0, 1, 1, 0, 0, 0, 0, 1, 1],
    [0, 0, 1, 1, 1, 0, 0, 0, 0, 1],
    [0, 0, 0, 1, 0, 0, 0, 0, 0, 1],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 1],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 1, 1, 0, 0, 0, 0],
    [0, 0, 0, 0, 1, 1, 1, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
]

WALL_SAMPLE = ["0100", "1110", "1000", "0000", "0111", "0000"]

HOUSING_SAMPLE = [
    "0110100",
    "0110101",
    "1110101",
    "0000111",
    "0100000",
    "0111110",
    "0111000",
]


def test_shortest_bridge_sample():
    assert shortest_bridge(BRIDGE_SAMPLE) == 3


@pytest.mark.parametrize("gap", [1, 2, 5])
def test_shortest_bridge_counts_water_between_islands(gap):
    row = [1] + [0] * gap + [1]
    assert shortest_bridge([row, row]) == gap


def test_shortest_bridge_needs_two_islands():
    with pytest.raises(ValueError):
        shortest_bridge([[1, 1], [0, 0]])


def test_break_wall_path_sample():
    assert break_wall_path(WALL_SAMPLE) == 15


def test_break_wall_path_impossible():
    assert break_wall_path(["0111", "1111", "1111", "1110"]) is None


@pytest.mark.parametrize("length", [1, 2, 6])
def test_break_wall_path_open_row(length):
    assert break_wall_path(["0" * length]) == length


def test_break_wall_path_breaks_single_wall():
    row = "00100"
    assert break_wall_path([row]) == len(row)


def test_break_wall_path_two_walls_in_a_row_block():
    assert break_wall_path(["01100"]) is None


def test_safe_areas_sample():
    heights = [
        [6, 8, 2, 6, 2],
        [3, 2, 3, 4, 6],
        [6, 7, 3, 3, 2],
        [7, 2, 5, 3, 6],
        [8, 9, 5, 2, 7],
    ]
    assert safe_areas(heights) == 5


def test_safe_areas_checkerboard_isolates_peaks():
    size = 5
    heights = [[2 if (r + c) % 2 else 1 for c in range(size)] for r in range(size)]
    peaks = sum(row.count(2) for row in heights)
    assert safe_areas(heights) == peaks


def test_safe_areas_flat_ground_is_one_region():
    flat = [[4, 4], [4, 4]]
    assert safe_areas(flat) == safe_areas([[7]])


def test_separated_areas_without_rectangles():
    rows, cols = 3, 4
    assert separated_areas(rows, cols, []) == [rows * cols]


def test_separated_areas_fully_covered():
    assert separated_areas(2, 3, [(0, 0, 3, 2)]) == []


def test_separated_areas_sample_invariants():
    rows, cols = 5, 7
    rectangles = [(0, 2, 4, 4), (1, 1, 2, 5), (4, 0, 6, 2)]
    covered = {
        (y, x)
        for x1, y1, x2, y2 in rectangles
        for y in range(y1, y2)
        for x in range(x1, x2)
    }
    areas = separated_areas(rows, cols, rectangles)
    assert areas == sorted(areas)
    assert sum(areas) == rows * cols - len(covered)
    assert len(areas) > 1


def test_separated_areas_split_by_stripe():
    rows, cols = 4, 5
    areas = separated_areas(rows, cols, [(2, 0, 3, rows)])
    assert areas == [2 * rows, 2 * rows]


def test_separated_areas_rejects_outside_rectangle():
    with pytest.raises(ValueError):
        separated_areas(2, 2, [(0, 0, 3, 1)])


def test_housing_complexes_sample():
    assert housing_complexes(HOUSING_SAMPLE) == [7, 8, 9]


def test_housing_complexes_counts_every_house():
    complexes = housing_complexes(HOUSING_SAMPLE)
    assert sum(complexes) == sum(line.count("1") for line in HOUSING_SAMPLE)
    assert complexes == sorted(complexes)


def test_housing_complexes_none():
    assert housing_complexes(["000", "000", "000"]) == []


def test_escape_fire_sample_corridor():
    assert escape_fire(["####", "#*@.", "####"]) == 2


def test_escape_fire_sample_impossible():
    board = ["###.###", "#....*#", "#@....#", ".######"]
    assert escape_fire(board) is None


@pytest.mark.parametrize("length", [1, 3, 4])
def test_escape_fire_open_corridor(length):
    board = ["#" * (length + 2), "#@" + "." * length, "#" * (length + 2)]
    assert escape_fire(board) == length + 1


def test_escape_fire_blocked_by_fire_at_exit():
    board = ["#####", "#@..*", "#####"]
    assert escape_fire(board) is None


def test_escape_fire_enclosed():
    assert escape_fire(["###", "#@#", "###"]) is None


def test_escape_fire_requires_start():
    with pytest.raises(ValueError):
        escape_fire(["...", ".*.", "..."])
    with pytest.raises(ValueError):
        escape_fire(["@.@"])