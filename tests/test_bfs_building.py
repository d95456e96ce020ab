import pytest

from drillbook.bfs_building import describe_escape, escape_building


def test_adjacent_exit_takes_one_minute():
    assert escape_building([["SE"]]) == 1


def test_exit_directly_above():
    assert escape_building([["S"], ["E"]]) == 1


def test_straight_corridor():
    assert escape_building([["S..E"]]) == 3


def test_wall_traps_walker():
    assert escape_building([["S#E"]]) is None


def test_sealed_floors_trap_walker():
    levels = [["S#", "##"], ["##", "#E"]]
    assert escape_building(levels) is None


def test_swapping_start_and_exit_keeps_distance():
    levels = [["S.#", "#..", "##."], ["###", "###", "..E"]]
    swapped = [[line.translate(str.maketrans("SE", "ES")) for line in level] for level in levels]
    forward = escape_building(levels)
    assert forward is not None
    assert escape_building(swapped) == forward


def test_extra_floor_can_be_a_shortcut():
    flat = [["S#E", "...", "..."]]
    layered = [["S#E", "...", "..."], ["...", "...", "..."]]
    assert escape_building(layered) <= escape_building(flat)


def test_missing_start_is_rejected():
    with pytest.raises(ValueError):
        escape_building([["..E"]])


def test_two_exits_are_rejected():
    with pytest.raises(ValueError):
        escape_building([["SEE"]])


def test_ragged_levels_are_rejected():
    with pytest.raises(ValueError):
        escape_building([["S.", "E"]])


def test_describe_escaped():
    assert describe_escape(11) == "Escaped in 11 minute(s)."


def test_describe_trapped():
    assert describe_escape(None) == "Trapped!"


def test_describe_round_trip_with_search():
    assert describe_escape(escape_building([["S#E"]])) == "Trapped!"