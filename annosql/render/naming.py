"""Identifier → label conversion for generated discriminators."""
from __future__ import annotations


def pascal_case(identifier: str) -> str:
    """Convert a snake_case identifier to PascalCase.

    Underscores are dropped and the character after each underscore (and
    the first character) is upper-cased; every other character is kept as
    is, so ``fetch_HTTP_log`` becomes ``FetchHTTPLog``.

    Args:
        identifier: A query name or condition identifier.

    Returns:
        The PascalCase label.
    """
    parts: list[str] = []
    capitalize_next = True
    for ch in identifier:
        if ch == "_":
            capitalize_next = True
        elif capitalize_next:
            parts.append(ch.upper())
            capitalize_next = False
        else:
            parts.append(ch)
    return "".join(parts)
