"""classfinder - camelCase-aware fuzzy lookup of fully-qualified class names."""

from __future__ import annotations

# Core
from classfinder.compiler import CompiledPattern, compile_pattern
from classfinder.finder import ClassFinder, find_classes, read_names
from classfinder.utils import FullName, match_wildcard, split_name

# Config
from classfinder.config import Config, FinderSettings

# Errors
from classfinder.errors import (
    ClassFinderError,
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    InvalidPatternError,
    NamesSourceError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "compile_pattern",
    "CompiledPattern",
    "ClassFinder",
    "find_classes",
    "read_names",
    "FullName",
    "split_name",
    "match_wildcard",
    # Config
    "Config",
    "FinderSettings",
    # Errors
    "ErrorCodes",
    "ClassFinderError",
    "InvalidPatternError",
    "ConfigError",
    "ConfigNotFoundError",
    "NamesSourceError",
]
