from nonogram import solve
from nonogram.postprocess.render_result import build_result, grid_to_frame, render_text

from conftest import DIAMOND_SOLUTION


def test_render_text(diamond):
    assert render_text(diamond.grid) == "\n".join(["....."] * 5)

    solution = solve(diamond)[0]
    assert render_text(solution) == "xx#xx\nx###x\n#####\nx###x\nxx#xx"


def test_grid_to_frame(diamond):
    frame = grid_to_frame(solve(diamond)[0])
    assert frame.shape == (5, 5)
    assert frame.iat[0, 2] == "#"
    assert frame.iat[0, 0] == "x"
    assert list(frame.iloc[2]) == ["#"] * 5


def test_build_result_with_solution(diamond):
    result = build_result(diamond, solve(diamond))
    assert result["found"]
    assert not result["aborted"]
    assert result["grid"] == DIAMOND_SOLUTION
    assert result["solutions"] == [DIAMOND_SOLUTION]
    assert result["shape"] == (5, 5)
    assert result["rowClues"] == [[1], [3], [5], [3], [1]]
    # describes the returned grid, not the unsolved input
    assert result["consistent"]
    assert result["solved"]
    assert not diamond.is_complete()


def test_build_result_without_solution(diamond):
    result = build_result(diamond, [])
    assert not result["found"]
    assert result["solutions"] == []
    assert result["grid"] is None
    assert not result["solved"]
    assert result["consistent"]
