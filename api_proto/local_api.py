from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from nonogram import (
    MalformedPuzzleInput,
    backtracking_search,
    check_consistency,
    hint,
    is_solved,
    load_puzzle,
)
from nonogram.config import MAX_SEARCH_NODES, SEARCH_TIME_LIMIT_SEC
from nonogram.logging_utils import get_logger
from nonogram.postprocess.render_result import build_result

logger = get_logger()

app = FastAPI()


class PuzzleRequest(BaseModel):
    width: Optional[int] = None
    height: Optional[int] = None
    rowClues: List[List[int]]
    colClues: List[List[int]]
    grid: Optional[List[List[int]]] = None  # -1 = X, 0 = unknown, 1 = filled


class SolveRequest(PuzzleRequest):
    limit: int = Field(default=1, ge=1, le=10)
    max_nodes: Optional[int] = Field(default=MAX_SEARCH_NODES, ge=1)
    time_limit: Optional[float] = Field(default=SEARCH_TIME_LIMIT_SEC, gt=0)


def _load(request: PuzzleRequest):
    """Builds a Board from the request body; malformed puzzles become HTTP 422."""
    try:
        return load_puzzle(request.model_dump(include={"width", "height", "rowClues", "colClues", "grid"}))
    except MalformedPuzzleInput as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/api/check")
async def api_check(request: PuzzleRequest) -> Dict[str, Any]:
    """
    Consistency endpoint.
    Cheap check usable on every cell edit; does not try to solve.
    """
    board = _load(request)
    return {"consistent": check_consistency(board), "solved": is_solved(board)}


@app.post("/api/hint")
def api_hint(request: PuzzleRequest) -> Dict[str, Any]:
    """
    Hint endpoint.
    Runs propagation once and returns the deduced grid.
    Plain def: FastAPI runs it in the threadpool, off the event loop.
    """
    board = _load(request)
    try:
        result = hint(board)
    except Exception as e:
        logger.exception("hint failed")
        raise HTTPException(status_code=500, detail=str(e))

    return {
        "success": result.success,
        "changed": result.changed,
        "changed_cells": result.changed_cells,
        "status": result.status,
        "contradiction": str(result.contradiction) if result.contradiction else None,
        "grid": board.to_int_grid(),
    }


@app.post("/api/solve")
def api_solve(request: SolveRequest) -> Dict[str, Any]:
    """
    Solver API endpoint.
    Receives the puzzle definition, runs propagation + backtracking,
    and returns up to `limit` solutions (the first one also as `grid`).
    Plain def so a long search runs in the threadpool, not on the event loop.
    """
    board = _load(request)
    try:
        result = backtracking_search(
            board,
            limit=request.limit,
            max_nodes=request.max_nodes,
            time_limit=request.time_limit,
        )
    except Exception as e:
        logger.exception("solve failed")
        raise HTTPException(status_code=500, detail=str(e))

    return build_result(board, result.solutions, aborted=result.aborted)
