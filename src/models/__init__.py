"""
Models package for cssmodjump

Contains data structures and type definitions for the resolution pipeline.
"""

from .location import (
    ORIGIN,
    ClickInfo,
    ImportLineMatch,
    Keyword,
    Location,
    Position,
    TextDocument,
)
from .resolution import CamelCaseMode, CancellationToken, ResolutionStatus
from .state import ResolveState, pipeline_run

__all__ = [
    "ORIGIN",
    "ClickInfo",
    "ImportLineMatch",
    "Keyword",
    "Location",
    "Position",
    "TextDocument",
    "CamelCaseMode",
    "CancellationToken",
    "ResolutionStatus",
    "ResolveState",
    "pipeline_run",
]
