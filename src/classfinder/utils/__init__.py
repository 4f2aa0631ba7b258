"""Name splitting and wildcard matching helpers."""

from __future__ import annotations

from classfinder.utils.names import SEPARATOR, FullName, split_name
from classfinder.utils.pattern import match_wildcard

__all__ = ["SEPARATOR", "FullName", "split_name", "match_wildcard"]
