"""FastAPI-based RESTful service for board scoring.

This module exposes three routes:
 - ``/score`` accepts POST requests with a flat list of content codes and
   optional dead stone coordinates, enters scoring mode and returns the
   territory, the dead groups and a per-cell snapshot.
 - ``/groups`` returns the group decomposition of a position with liberties.
 - ``/health`` is a simple GET route for health checks.

Every request builds its own :class:`core.board.Board`, so no board is shared
between requests.  It also enables CORS and can be run directly with Uvicorn.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from core.board import Board, InvalidInputError, OutOfRangeError
from core.content import Content
from core.liberty import group_summary

logger = logging.getLogger(__name__)


class BoardRequest(BaseModel):
    """Request model describing a square position.

    ``content`` lists one code per cell, row by row: 0 empty, 1 black,
    2 white.  ``dead`` lists ``[x, y]`` pairs whose group should have its
    dead flag toggled after automatic inference.
    """

    content: List[int]
    dead: List[List[int]] = Field(default_factory=list)


class ScoreResponse(BaseModel):
    """Response model returned by the ``/score`` endpoint."""

    size: int
    territory: Dict[str, int]
    dead: List[Dict[str, Any]]
    cells: List[Dict[str, Any]]
    hash: int


class GroupsResponse(BaseModel):
    """Response model returned by the ``/groups`` endpoint."""

    size: int
    groups: List[Dict[str, Any]]


app = FastAPI(title="Goban Scoring REST API")

# Configure very permissive CORS by default
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _build_board(content: List[int]) -> Board:
    try:
        return Board.from_content(content)
    except InvalidInputError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.post("/score", response_model=ScoreResponse)
async def score(req: BoardRequest) -> ScoreResponse:
    """Score the submitted position.

    Parameters
    ----------
    req:
        Parsed request payload containing the board content.

    Returns
    -------
    ScoreResponse
        Territory per color, dead groups and the per-cell snapshot.
    """

    board = _build_board(req.content)
    board.is_scoring = True
    try:
        for pair in req.dead:
            if len(pair) != 2:
                raise HTTPException(status_code=422, detail=f"Invalid coordinate: {pair}")
            board.set_dead_group(pair[0], pair[1])
    except OutOfRangeError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    territory = board.territory
    logger.debug("Scored %dx%d board: %s", board.size_x, board.size_y, territory)
    return ScoreResponse(
        size=board.size_x,
        territory={
            "black": territory[Content.BLACK],
            "white": territory[Content.WHITE],
        },
        dead=[g for g in group_summary(board) if g["dead"]],
        cells=[cell._asdict() for cell in board.all_cells()],
        hash=board.content_hash(),
    )


@app.post("/groups", response_model=GroupsResponse)
async def groups(req: BoardRequest) -> GroupsResponse:
    """Return every stone group of the submitted position."""

    board = _build_board(req.content)
    return GroupsResponse(size=board.size_x, groups=group_summary(board))


@app.get("/health")
async def health() -> Dict[str, str]:
    """Simple liveness probe."""

    return {"status": "ok"}


if __name__ == "__main__":  # pragma: no cover - manual start
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
