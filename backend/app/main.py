import io
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel

from solver import EquationError, solve_polynomial
from solver.config import get_settings
from solver.graph import build_figure

logger = logging.getLogger(__name__)

app = FastAPI(title="PolySolver API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class EquationRequest(BaseModel):
    equation: str


class StepInfo(BaseModel):
    step_number: int
    description: str
    expression: str
    explanation: str


class VerificationInfo(BaseModel):
    root: str
    residual: float
    ok: bool


class SolveResponse(BaseModel):
    equation: str
    reduced_form: str
    degree: int
    coefficients: dict[int, float]
    status: str
    solutions: list[str]
    discriminant: Optional[float] = None
    final_answer: str
    steps: list[StepInfo]
    verification_steps: list[VerificationInfo]


def _solve(req: EquationRequest) -> dict:
    equation = req.equation.strip()
    if not equation:
        raise HTTPException(status_code=400, detail="Equation cannot be empty.")

    try:
        return solve_polynomial(equation)
    except EquationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected failure solving %r", equation)
        raise HTTPException(status_code=500, detail=f"Solver error: {str(e)}")


@app.post("/api/solve", response_model=SolveResponse)
def solve(req: EquationRequest):
    return _solve(req)


@app.post("/api/graph")
def graph(req: EquationRequest):
    result = _solve(req)
    fig = build_figure(result, points=get_settings()["graph_points"])
    if fig is None:
        raise HTTPException(status_code=400, detail="Every term cancels; there is nothing to plot.")

    buf = io.BytesIO()
    fig.savefig(buf, format="png")
    return Response(content=buf.getvalue(), media_type="image/png")
