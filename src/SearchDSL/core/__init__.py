"""Immutable value model shared by every query variant."""

from __future__ import annotations

__all__ = ["Operation", "Query", "QueryMetadata", "QueryRef"]

from SearchDSL.core.query import Query
from SearchDSL.core.types import Operation, QueryMetadata, QueryRef
