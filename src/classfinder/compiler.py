"""Search pattern compilation.

Turns an abbreviated, camelCase-aware search pattern such as ``FBar`` or
``util.HaMa`` into a pair of wildcard expressions (package part and class
part) that :func:`classfinder.utils.pattern.match_wildcard` evaluates.

Rules:
    * A pattern containing an ASCII upper-case letter is case-sensitive;
      otherwise the whole search ignores case.
    * Upper-case letters and separators (every character, when the search
      ignores case) are anchors: any run of characters may precede them.
    * Every expression may match an arbitrary prefix.
    * A ``*`` typed by the user stands for one arbitrary character.
    * A trailing space pins the end of the name; otherwise any suffix is
      allowed. Spaces never match anything themselves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from classfinder.errors import InvalidPatternError
from classfinder.utils.names import SEPARATOR, split_name
from classfinder.utils.pattern import ANY_CHAR, ANY_SEQUENCE, match_wildcard

__all__ = ["CompiledPattern", "compile_pattern", "is_case_sensitive", "to_wildcard"]

_logger = logging.getLogger("classfinder.compiler")

_END_MARKER = " "


@dataclass(frozen=True)
class CompiledPattern:
    """An immutable compiled search pattern.

    Safe to share between threads: ``match`` reads but never mutates it.
    """

    case_sensitive: bool
    package_wildcard: str
    class_wildcard: str

    def match(self, full_name: str) -> bool:
        """Return True if ``full_name`` matches both package and class parts."""
        if not self.case_sensitive:
            full_name = full_name.lower()
        package_name, class_name = split_name(full_name)
        return match_wildcard(self.package_wildcard, package_name) and match_wildcard(
            self.class_wildcard, class_name
        )


def _is_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def is_case_sensitive(pattern: str) -> bool:
    """A pattern is case-sensitive iff it has an ASCII upper-case letter."""
    return any(_is_upper(c) for c in pattern)


def to_wildcard(part: str, case_sensitive: bool) -> str:
    """Build the wildcard expression for one part of a pattern."""
    wc: list[str] = []
    for p in part:
        if _is_upper(p) or p == SEPARATOR or not case_sensitive:
            wc.append(ANY_SEQUENCE)
        if not wc:
            wc.append(ANY_SEQUENCE)
        if p == ANY_SEQUENCE:
            wc.append(ANY_CHAR)
        if p != _END_MARKER:
            wc.append(p)
    if not part.endswith(_END_MARKER):
        wc.append(ANY_SEQUENCE)
    return "".join(wc)


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile a raw search pattern.

    Args:
        pattern: The user-typed pattern, e.g. ``"FBar"``, ``"a.u.Hash"``
            or ``"FBar "``.

    Returns:
        The compiled pattern.

    Raises:
        InvalidPatternError: If the pattern is empty or a single space.
    """
    if len(pattern) < 1 or pattern == _END_MARKER:
        raise InvalidPatternError(pattern)

    case_sensitive = is_case_sensitive(pattern)
    if not case_sensitive:
        pattern = pattern.lower()

    package_part, class_part = split_name(pattern)
    compiled = CompiledPattern(
        case_sensitive=case_sensitive,
        package_wildcard=to_wildcard(package_part, case_sensitive),
        class_wildcard=to_wildcard(class_part, case_sensitive),
    )
    _logger.debug(
        "Compiled pattern %r: package=%r class=%r case_sensitive=%s",
        pattern,
        compiled.package_wildcard,
        compiled.class_wildcard,
        case_sensitive,
    )
    return compiled
