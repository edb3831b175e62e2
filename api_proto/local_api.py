from typing import Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from sudoku_solver import solve
from sudoku_solver.errors import InconsistentStateError, MalformedInputError
from sudoku_solver.grid.loader import board_from_rows
from sudoku_solver.logging_utils import get_logger
from sudoku_solver.postprocess.render_result import build_result

logger = get_logger()

app = FastAPI()


class SolveRequest(BaseModel):
    board: list[list[Union[int, str, None]]]  # 9x9, digits or blank markers
    strict: bool = False


@app.post("/api/solve")
async def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives grid data (2D array), converts to DataFrame, and calls solver logic.
    """
    try:
        # 2D配列をDataFrameに変換
        df = board_from_rows(request.board)
        result = solve(df, strict=request.strict)
    except MalformedInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InconsistentStateError as e:
        logger.exception("Solver error")
        raise HTTPException(status_code=500, detail=str(e))

    return build_result(result)


@app.get("/api/health")
async def api_health():
    return {"status": "ok"}
