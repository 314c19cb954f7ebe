"""Where: src/infinibrowser/domain/types.py
What: Payload shapes exchanged with the Infinibrowser API.
Why: Give endpoint methods precise result types while leaving element data opaque.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Literal, TypeAlias, TypedDict

# Element payloads are passed through as decoded JSON.
ItemData: TypeAlias = dict[str, Any]
RecipesData: TypeAlias = dict[str, Any]
UsesData: TypeAlias = dict[str, Any]
LineageData: TypeAlias = dict[str, Any]
CustomLineageData: TypeAlias = dict[str, Any]


class UnknownElement(TypedDict):
    """404 body returned for ids the service does not know."""

    code: Literal[404]
    message: Literal["Unknown element"]


class InvalidElementId(TypedDict):
    """400 body returned for malformed custom element ids."""

    code: Literal[400]
    message: Literal["Invalid element ID"]


class OptimizedLineage(TypedDict):
    id: str
    before: int
    after: int


class SharedLineage(TypedDict):
    id: str


class ResultElement(TypedDict):
    """Output element of a single combination step."""

    id: str
    emoji: str


# (first input, second input, result element)
LineageStep: TypeAlias = tuple[Any, Any, ResultElement]
ShareLineageSteps: TypeAlias = Sequence[LineageStep]


class ShareLineagePayload(TypedDict):
    id: str
    emoji: str
    steps: list[list[Any]]


__all__ = [
    "CustomLineageData",
    "InvalidElementId",
    "ItemData",
    "LineageData",
    "LineageStep",
    "OptimizedLineage",
    "RecipesData",
    "ResultElement",
    "ShareLineagePayload",
    "ShareLineageSteps",
    "SharedLineage",
    "UnknownElement",
    "UsesData",
]
