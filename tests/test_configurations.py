import itertools

import pytest

from nonogram import CellState, count_line_configurations, deduce_line, line_configurations

F = CellState.FILLED
B = CellState.BLOCKED
U = CellState.UNKNOWN


def as_text(configs):
    return ["".join("#" if c is F else "." for c in conf) for conf in configs]


def brute_force_count(length, blocks):
    count = 0
    for bits in itertools.product((0, 1), repeat=length):
        runs = [len(list(g)) for k, g in itertools.groupby(bits) if k == 1]
        if runs == list(blocks):
            count += 1
    return count


def test_full_block_has_single_configuration():
    assert line_configurations(3, [3], [U, U, U]) == [(F, F, F)]


def test_two_single_blocks_on_five_cells():
    configs = line_configurations(5, [1, 1], [U] * 5)
    assert as_text(configs) == ["#.#..", "#..#.", "#...#", ".#.#.", ".#..#", "..#.#"]

    deduction = deduce_line(5, [1, 1], [U] * 5)
    assert deduction.result == (U,) * 5
    assert not deduction.changed
    assert deduction.config_count == 6


def test_blocked_cell_inside_only_placement_is_a_contradiction():
    assert line_configurations(3, [3], [U, B, U]) == []
    deduction = deduce_line(3, [3], [U, B, U])
    assert deduction.contradiction
    assert deduction.result is None


@pytest.mark.parametrize(
    "length, blocks",
    [(5, [1, 1]), (5, [3]), (6, [2, 1]), (8, [1, 2, 1]), (7, [1, 1, 1, 1]), (4, [4]), (9, [2, 3])],
)
def test_generator_count_matches_closed_form(length, blocks):
    configs = line_configurations(length, blocks)
    assert len(configs) == count_line_configurations(length, blocks)
    assert len(configs) == brute_force_count(length, blocks)
    assert len(set(configs)) == len(configs)


@pytest.mark.parametrize("clue", [[], [0]])
def test_empty_clue_yields_all_blocked_line(clue):
    assert line_configurations(4, clue, [U, B, U, U]) == [(B, B, B, B)]
    assert line_configurations(4, clue, [U, F, U, U]) == []
    assert count_line_configurations(4, clue) == 1


def test_clue_exactly_filling_the_line():
    assert as_text(line_configurations(5, [2, 2])) == ["##.##"]
    assert as_text(line_configurations(7, [1, 1, 1, 1])) == ["#.#.#.#"]
    assert line_configurations(5, [2, 2], [U, U, F, U, U]) == []


def test_clue_longer_than_line_has_no_configuration():
    assert line_configurations(6, [3, 3]) == []
    assert count_line_configurations(6, [3, 3]) == 0


def test_filled_cells_restrict_placements():
    assert as_text(line_configurations(5, [2], [U, U, F, U, U])) == [".##..", "..##."]
    assert as_text(line_configurations(5, [1], [F, U, U, U, U])) == ["#...."]
    assert as_text(line_configurations(3, [1], [U, U, F])) == ["..#"]
    assert line_configurations(5, [1], [F, U, U, U, F]) == []


def test_partial_accepts_exchange_values():
    assert as_text(line_configurations(4, [2], [0, 1, 0, -1])) == ["##..", ".##."]


def test_partial_length_mismatch_is_an_error():
    with pytest.raises(ValueError):
        line_configurations(4, [1], [U, U])


def test_generator_is_deterministic():
    partial = [U, U, U, F, U, U, U, U]
    assert line_configurations(8, [2, 3], partial) == line_configurations(8, [2, 3], partial)


def test_every_configuration_respects_fixed_cells():
    partial = [U, U, B, U, F, U, U, U, B, U]
    configs = line_configurations(10, [2, 1, 2], partial)
    assert configs
    for conf in configs:
        for cell, fixed in zip(conf, partial):
            if fixed is not U:
                assert cell is fixed
        runs = [len(list(g)) for k, g in itertools.groupby(conf) if k is F]
        assert runs == [2, 1, 2]
