"""Wildcard pattern matching for class and package names."""

from __future__ import annotations

__all__ = ["ANY_CHAR", "ANY_SEQUENCE", "match_wildcard"]

ANY_CHAR = "?"
ANY_SEQUENCE = "*"


def match_wildcard(pattern: str, text: str) -> bool:
    """Match the whole of ``text`` against a wildcard pattern.

    Supports '*' (any sequence, including empty) and '?' (exactly one
    character). Scans left to right, remembering only the most recent '*';
    on a mismatch that star absorbs one more character of text and the
    scan resumes just after it. Runs iteratively in constant extra space.

    Args:
        pattern: The wildcard expression. Every other character is literal.
        text: The text to test; must already be case-normalized.

    Returns:
        True if the pattern matches the entire text, False otherwise.
    """
    p_len = len(pattern)
    t_len = len(text)
    p = 0
    t = 0
    star_at = -1
    star_text = 0

    while t < t_len:
        if p < p_len and (pattern[p] == ANY_CHAR or pattern[p] == text[t]):
            p += 1
            t += 1
        elif p < p_len and pattern[p] == ANY_SEQUENCE:
            star_at = p
            star_text = t
            p += 1
        elif star_at != -1:
            p = star_at + 1
            star_text += 1
            t = star_text
        else:
            return False

    # Trailing stars match the empty remainder
    while p < p_len and pattern[p] == ANY_SEQUENCE:
        p += 1
    return p == p_len
