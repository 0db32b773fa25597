"""Comparison engines behind the assertion functions."""

from be.compare.base import ComparisonResult
from be.compare.equality import equal
from be.compare.errors import Want, WantKind, match_any, match_error

__all__ = ["ComparisonResult", "Want", "WantKind", "equal", "match_any", "match_error"]
