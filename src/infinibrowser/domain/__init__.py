"""Domain types, payload helpers and exceptions for the Infinibrowser client."""

from __future__ import annotations

from .errors import ConfigError, EmptyLineageError, InfinibrowserError, ResultError
from .lineage import build_share_payload, final_element
from .types import (
    CustomLineageData,
    InvalidElementId,
    ItemData,
    LineageData,
    LineageStep,
    OptimizedLineage,
    RecipesData,
    ResultElement,
    ShareLineageSteps,
    SharedLineage,
    UnknownElement,
    UsesData,
)

__all__ = [
    "ConfigError",
    "CustomLineageData",
    "EmptyLineageError",
    "InfinibrowserError",
    "InvalidElementId",
    "ItemData",
    "LineageData",
    "LineageStep",
    "OptimizedLineage",
    "RecipesData",
    "ResultElement",
    "ResultError",
    "ShareLineageSteps",
    "SharedLineage",
    "UnknownElement",
    "UsesData",
    "build_share_payload",
    "final_element",
]
