"""Exception types raised by SearchDSL."""

from __future__ import annotations


class SearchDSLError(Exception):
    """Base class for all SearchDSL errors."""


class RangeValidationError(SearchDSLError, ValueError):
    """A bounded ratio parameter was set outside its allowed range."""


class UnknownQueryKindError(SearchDSLError, ValueError):
    """A query body does not map to any registered query variant."""
