"""HTTP routes for the hexpath API."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel, Field

from hexpath import __version__
from hexpath.domain.grid import SUPPORTED_REQUESTS, dispatch

router = APIRouter()


class PathRequest(BaseModel):
    source: tuple[int, int] = Field(description="Offset (row, column) of the start cell")
    target: tuple[int, int] = Field(description="Offset (row, column) of the end cell")
    grid: list[list[str]] = Field(description="Rows of single characters drawn from b/o/s/e")


class PathResponse(BaseModel):
    path: list[str]


@router.get("/")
async def index() -> dict[str, str]:
    return {"message": "hexpath"}


@router.get("/health")
async def health() -> dict[str, object]:
    return {
        "status": "ok",
        "version": __version__,
        "supported_requests": list(SUPPORTED_REQUESTS),
    }


@router.post("/api/{request_kind}", response_model=PathResponse)
def find_path(request_kind: str, request: PathRequest) -> PathResponse:
    # Diagnostics such as "No path found" are ordinary results, not HTTP errors.
    path = dispatch(request_kind, request.source, request.target, request.grid)
    return PathResponse(path=path)
