"""
JSON wire format for the path service.

Request:  {"start": {"row", "col"}, "end": {"row", "col"}, "obstacles": [...]}
Response: {"path": [{"row", "col"}, ...]}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from gridroute.grid.model import Cell
from gridroute.search.base import SearchResult


class MalformedRequestError(ValueError):
    """The request body does not match the wire format."""


@dataclass
class PathRequest:
    """
    Decoded path request.

    Attributes:
        start: Start cell
        end: End cell
        obstacles: Blocked cells
    """

    start: Cell
    end: Cell
    obstacles: list[Cell] = field(default_factory=list)


def _decode_cell(value: Any, label: str) -> Cell:
    if not isinstance(value, Mapping):
        raise MalformedRequestError(f"'{label}' must be an object with 'row' and 'col'")
    try:
        row, col = value["row"], value["col"]
    except KeyError as e:
        raise MalformedRequestError(f"'{label}' is missing {e}") from None
    # bool is an int subclass but never a valid coordinate
    for name, coord in (("row", row), ("col", col)):
        if not isinstance(coord, int) or isinstance(coord, bool):
            raise MalformedRequestError(f"'{label}.{name}' must be an integer")
    return Cell(row, col)


def decode_request(payload: Any) -> PathRequest:
    """
    Decode a JSON request body.

    Raises:
        MalformedRequestError: If the payload does not match the wire format
    """
    if not isinstance(payload, Mapping):
        raise MalformedRequestError("Request body must be a JSON object")

    for key in ("start", "end"):
        if key not in payload:
            raise MalformedRequestError(f"Missing '{key}'")

    raw_obstacles = payload.get("obstacles")
    if raw_obstacles is None:
        raw_obstacles = []
    if not isinstance(raw_obstacles, list):
        raise MalformedRequestError("'obstacles' must be a list")

    return PathRequest(
        start=_decode_cell(payload["start"], "start"),
        end=_decode_cell(payload["end"], "end"),
        obstacles=[_decode_cell(o, f"obstacles[{i}]") for i, o in enumerate(raw_obstacles)],
    )


def encode_path(path: list[Cell]) -> list[dict[str, int]]:
    return [cell.to_dict() for cell in path]


def encode_result(result: SearchResult) -> dict[str, Any]:
    """Response body for a finished search."""
    return {
        "path": encode_path(result.path),
        "expansions": result.expansions,
        "elapsed_ms": round(result.elapsed_ms, 3),
    }
