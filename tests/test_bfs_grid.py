import pytest

from drillbook.bfs_grid import (
    color_regions,
    count_cabbage_groups,
    paintings,
    ripen_tomatoes_3d,
)


def test_cabbage_isolated_cells_each_form_a_group():
    positions = [(0, 0), (2, 0), (4, 4), (0, 2), (3, 2)]
    assert count_cabbage_groups(5, 5, positions) == len(positions)


def test_cabbage_connected_line_is_one_group():
    line = [(x, 1) for x in range(6)]
    single = count_cabbage_groups(6, 3, line)
    assert single == count_cabbage_groups(6, 3, line[:1])


def test_cabbage_no_positions():
    assert count_cabbage_groups(4, 4, []) == 0


def test_cabbage_out_of_field_raises():
    with pytest.raises(ValueError):
        count_cabbage_groups(3, 3, [(3, 0)])


def test_paintings_full_board():
    board = [[1] * 4 for _ in range(3)]
    assert paintings(board) == (1, 12)


def test_paintings_empty_board():
    assert paintings([[0, 0], [0, 0]]) == (0, 0)


def test_paintings_largest_not_above_total():
    board = [
        [1, 1, 0, 1, 1],
        [0, 1, 1, 0, 0],
        [0, 0, 0, 0, 0],
        [1, 0, 1, 1, 1],
        [0, 0, 1, 1, 1],
        [0, 0, 1, 1, 1],
    ]
    count, largest = paintings(board)
    ones = sum(map(sum, board))
    assert count >= 1
    assert largest <= ones
    assert largest >= ones / count


def test_color_regions_sample():
    board = ["RRRBB", "GGBBB", "BBBRR", "BBRRR", "RRRRR"]
    assert color_regions(board) == (4, 3)


def test_color_regions_without_green_are_equal():
    board = ["RRB", "BRB", "BBR"]
    normal, blind = color_regions(board)
    assert normal == blind


def test_color_regions_blind_never_exceeds_normal():
    board = ["RGRG", "GRGR", "BBRG", "GBBR"]
    normal, blind = color_regions(board)
    assert blind <= normal


def test_color_regions_ragged_rows_raise():
    with pytest.raises(ValueError):
        color_regions(["RG", "R"])


def test_ripen_tomatoes_sample():
    boxes = [
        [[0, 0, 0, 0, 0], [0, 0, 0, 0, 0], [0, 0, 0, 0, 0]],
        [[0, 0, 0, 0, 0], [0, 0, 1, 0, 0], [0, 0, 0, 0, 0]],
    ]
    assert ripen_tomatoes_3d(boxes) == 4


def test_ripen_tomatoes_all_ripe():
    assert ripen_tomatoes_3d([[[1, 1], [1, -1]]]) == 0


def test_ripen_tomatoes_unreachable():
    boxes = [[[1, -1, 0]]]
    assert ripen_tomatoes_3d(boxes) == -1


def test_ripen_tomatoes_does_not_modify_input():
    boxes = [[[1, 0, 0]]]
    ripen_tomatoes_3d(boxes)
    assert boxes == [[[1, 0, 0]]]