# drillbook

A library of solutions to classic algorithm drills. Each function takes plain
Python values, such as integers, lists, tuples and strings, and returns its
answer. Invalid input raises `ValueError` (or `IndexError` where a stack is
popped while empty); searches that may fail return `None`.

## Modules

- `drillbook.basics`: warm-up problems.
  - `sum_multiples_of_3_or_5`
  - `has_pair_summing_to_100`
  - `is_perfect_square`
  - `largest_power_of_two`
  - `first_two_chars`
  - `count_pairs_with_sum`
- `drillbook.linked`: linked-list drills.
  - `josephus` and `format_josephus`
  - `keylogger`
  - `edit_text`
- `drillbook.stacks_queues`: stack, queue and deque drills.
  - `stack_sequence`
  - `zero_sum`
  - `last_card`
  - `rotating_queue_moves`
  - `count_good_words`
  - `is_balanced`
- `drillbook.bfs_search`: breadth-first search on a line, in a lift and on a chessboard.
  - `hide_and_seek`
  - `start_link`
  - `knight_moves`
- `drillbook.bfs_grid`: flood fills on grids and boxes.
  - `count_cabbage_groups`
  - `paintings`
  - `color_regions`
  - `ripen_tomatoes_3d`
- `drillbook.bfs_advanced`: harder grid searches.
  - `shortest_bridge`
  - `break_wall_path`
  - `safe_areas`
  - `separated_areas`
  - `housing_complexes`
  - `escape_fire`
- `drillbook.bfs_building`: three-dimensional maze escape.
  - `escape_building` and `describe_escape`
- `drillbook.recursion`: divide-and-conquer drills.
  - `mod_pow`
  - `z_order`
  - `hanoi_moves`
  - `philosopher_walk`
  - `recursion_story`
  - `count_papers`
  - `quad_tree`
  - `star_pattern`
  - `triangle_stars`
  - `color_paper`
  - `count_sums_123`
- `drillbook.sequences`: sequences of length `m`, returned in lexicographic order.
  - from `1..n`: `permutations_of_range`, `combinations_of_range`,
    `products_of_range`, `nondecreasing_of_range`
  - from given values: `permutations_of`, `combinations_of`, `products_of`,
    `nondecreasing_of`
  - without repeated sequences: `distinct_permutations`,
    `distinct_combinations`, `distinct_products`, `distinct_nondecreasing`
  - `lotto` (picks of six) and `passwords` (ascending letters with at least one
    vowel and two consonants)
- `drillbook.backtracking`: exhaustive search drills.
  - `count_subsequence_sums`
  - `max_consulting_profit`
  - `max_broken_eggs`
  - `max_bishops`
  - `seven_princesses`
  - `n_queens`

## Example

```python
from drillbook.recursion import hanoi_moves, z_order
from drillbook.backtracking import n_queens
from drillbook.linked import format_josephus, josephus

z_order(2, 3, 1)                    # position of row 3, column 1 in a 4x4 Z-order walk
hanoi_moves(2)                      # [(1, 2), (1, 3), (2, 3)]
n_queens(8)                         # 92
format_josephus(josephus(7, 3))     # "<3, 6, 2, 7, 5, 1, 4>"
```

## What it does not do

There is no command-line program. The functions do not read problem input
from standard input or print answers in a judge's output format; parsing
input and formatting output is left to the caller (apart from
`format_josephus` and `describe_escape`, which render their results as text).

## Testing

```
pip install -e .[test]
pytest
```