import pytest

from drillbook.backtracking import (
    count_subsequence_sums,
    max_bishops,
    max_broken_eggs,
    max_consulting_profit,
    n_queens,
    seven_princesses,
)

SAMPLE_PRINCESSES = ["YYYYY", "SYSYS", "YYYYY", "YSYYS", "YYYYY"]


def test_subsequence_counts_cover_every_nonempty_subset():
    values = [1, 2, 4, 8]
    total = sum(count_subsequence_sums(values, t) for t in range(1, sum(values) + 1))
    assert total == 2 ** len(values) - 1


def test_subsequence_distinct_powers_of_two_each_sum_once():
    values = [1, 2, 4]
    assert all(count_subsequence_sums(values, t) == 1 for t in range(1, 8))


def test_subsequence_empty_set_not_counted():
    assert count_subsequence_sums([5, 6], 0) == 0
    assert count_subsequence_sums([0], 0) == 1


def test_consulting_sample():
    schedule = [(3, 10), (5, 20), (1, 10), (1, 20), (2, 15), (4, 40), (2, 200)]
    assert max_consulting_profit(schedule) == 45


def test_consulting_one_day_jobs_take_everything():
    schedule = [(1, 7), (1, 3), (1, 11)]
    assert max_consulting_profit(schedule) == sum(pay for _, pay in schedule)


def test_consulting_job_running_past_the_end_is_dropped():
    assert max_consulting_profit([(1, 4), (2, 50)]) == 4


def test_consulting_rejects_zero_duration():
    with pytest.raises(ValueError):
        max_consulting_profit([(0, 5)])


def test_eggs_weak_pair_both_break():
    eggs = [(1, 5), (1, 5)]
    assert max_broken_eggs(eggs) == len(eggs)


def test_eggs_single_egg_cannot_break():
    assert max_broken_eggs([(1, 100)]) == 0


def test_eggs_never_more_than_count():
    eggs = [(8, 5), (1, 100), (3, 5), (4, 4)]
    assert 0 <= max_broken_eggs(eggs) <= len(eggs)


def test_bishops_single_cell():
    assert max_bishops([[1]]) == 1


def test_bishops_no_free_cells():
    assert max_bishops([[0, 0], [0, 0]]) == 0


def test_bishops_symmetry_and_bound():
    board = [
        [1, 1, 0, 1, 1],
        [0, 1, 0, 0, 0],
        [1, 0, 1, 0, 1],
        [1, 0, 0, 0, 0],
        [1, 0, 1, 0, 1],
    ]
    result = max_bishops(board)
    transposed = [list(row) for row in zip(*board)]
    mirrored = [list(reversed(row)) for row in board]
    assert result == max_bishops(transposed) == max_bishops(mirrored)
    assert result <= sum(map(sum, board))


def test_bishops_rejects_non_square():
    with pytest.raises(ValueError):
        max_bishops([[1, 1]])


def test_princesses_sample():
    assert seven_princesses(SAMPLE_PRINCESSES) == 2


def test_princesses_more_s_never_fewer_groups():
    all_s = ["SSSSS"] * 5
    assert seven_princesses(all_s) > seven_princesses(SAMPLE_PRINCESSES)


def test_princesses_transpose_invariant():
    transposed = ["".join(col) for col in zip(*SAMPLE_PRINCESSES)]
    assert seven_princesses(transposed) == seven_princesses(SAMPLE_PRINCESSES)


def test_princesses_all_y_has_no_groups():
    assert seven_princesses(["YYYYY"] * 5) == 0


@pytest.mark.parametrize(
    "board",
    [["SSSSS"] * 4, ["SSSS"] * 5, ["SSSSS"] * 4 + ["SSSSX"]],
)
def test_princesses_rejects_bad_boards(board):
    with pytest.raises(ValueError):
        seven_princesses(board)


def test_queens_eight():
    assert n_queens(8) == 92


def test_queens_one():
    assert n_queens(1) == 1


def test_queens_rejects_negative():
    with pytest.raises(ValueError):
        n_queens(-1)