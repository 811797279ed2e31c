import pytest

from nonogram import CellState, ContradictionError, LineRef, deduce_line

F = CellState.FILLED
B = CellState.BLOCKED
U = CellState.UNKNOWN


def test_overlap_forces_middle_cells():
    deduction = deduce_line(5, [4], [U] * 5)
    assert deduction.result == (U, F, F, F, U)
    assert deduction.changed
    assert deduction.config_count == 2


def test_fixed_cell_forces_both_ends_empty():
    deduction = deduce_line(5, [2], [U, U, F, U, U])
    assert deduction.result == (B, U, F, U, B)
    assert deduction.changed


@pytest.mark.parametrize("clue", [[], [0]])
def test_empty_clue_blocks_whole_line(clue):
    deduction = deduce_line(3, clue, [U, U, U])
    assert deduction.result == (B, B, B)
    assert deduction.changed


def test_fully_fixed_line_is_unchanged():
    line = [B, F, F, B, F]
    deduction = deduce_line(5, [2, 1], line)
    assert deduction.result == tuple(line)
    assert not deduction.changed
    assert not deduction.contradiction
    assert deduction.config_count == 1


def test_fixed_values_are_preserved_when_ambiguous():
    deduction = deduce_line(6, [1, 1], [B, U, U, U, U, U])
    assert deduction.result[0] is B
    assert not deduction.changed


def test_contradiction_can_be_raised():
    deduction = deduce_line(3, [3], [U, B, U])
    assert deduction.contradiction
    assert not deduction.changed

    with pytest.raises(ContradictionError) as excinfo:
        deduction.raise_for_contradiction(LineRef.row(4))
    assert excinfo.value.line == LineRef.row(4)


def test_no_contradiction_does_not_raise():
    deduce_line(3, [1], [U, U, U]).raise_for_contradiction(LineRef.col(0))
