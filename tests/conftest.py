import itertools

import pytest

from nonogram import build_board

# 5x5 diamond: the only solution is
#   ..#..
#   .###.
#   #####
#   .###.
#   ..#..
DIAMOND_ROWS = [[1], [3], [5], [3], [1]]
DIAMOND_COLS = [[1], [3], [5], [3], [1]]
DIAMOND_SOLUTION = [
    [-1, -1, 1, -1, -1],
    [-1, 1, 1, 1, -1],
    [1, 1, 1, 1, 1],
    [-1, 1, 1, 1, -1],
    [-1, -1, 1, -1, -1],
]

# "5x5-heart" preset of the web app: 14 filled cells by rows, 13 by columns
HEART_ROWS = [[1, 1], [3], [5], [3], [1]]
HEART_COLS = [[1], [3], [5], [3], [1]]


SMALL_PUZZLES = [
    # #.#
    # .#.
    # #.#
    ([[1, 1], [1], [1, 1]], [[1, 1], [1], [1, 1]]),
    # ##..
    # .##.
    # ..##
    ([[2], [2], [2]], [[1], [2], [2], [1]]),
    # #..#
    # .##.
    # .##.
    # #..#
    ([[1, 1], [2], [2], [1, 1]], [[1, 1], [2], [2], [1, 1]]),
    # ###
    # #..
    # ##.
    # #..
    ([[3], [1], [2], [1]], [[4], [1, 1], [1]]),
    # two diagonal solutions
    ([[1], [1]], [[1], [1]]),
]


def _runs(cells):
    runs = []
    run = 0
    for v in cells:
        if v == 1:
            run += 1
        elif run:
            runs.append(run)
            run = 0
    if run:
        runs.append(run)
    return runs


def brute_force_solutions(row_clues, col_clues):
    """Every -1/1 grid matching the clues, by exhaustive enumeration."""
    h, w = len(row_clues), len(col_clues)
    rows = [[b for b in c if b] for c in row_clues]
    cols = [[b for b in c if b] for c in col_clues]
    found = []
    for bits in itertools.product((-1, 1), repeat=w * h):
        grid = [list(bits[r * w:(r + 1) * w]) for r in range(h)]
        if any(_runs(grid[r]) != rows[r] for r in range(h)):
            continue
        if any(_runs([grid[r][c] for r in range(h)]) != cols[c] for c in range(w)):
            continue
        found.append(grid)
    return found


@pytest.fixture
def diamond():
    return build_board(DIAMOND_ROWS, DIAMOND_COLS)


@pytest.fixture
def brute_force():
    return brute_force_solutions

