"""Token tables and ``:name`` signature parsing for annotation files.

A name declaration looks like::

    -- :name fetch_user_by_id :<> :1

The identifier comes first; the optional kind token and method token follow
it, separated by whitespace.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from annosql.errors import AnnotationError
from annosql.schema.query import IDENTIFIER_PATTERN, Kind, Method

# ---------------------------------------------------------------------------
# Token tables
# ---------------------------------------------------------------------------

KIND_TOKENS: dict[str, Kind] = {
    ":<>": Kind.TYPED,
    ":typed": Kind.TYPED,
    ":||": Kind.MAPPED,
    ":mapped": Kind.MAPPED,
    ":untyped": Kind.UNTYPED,
}

METHOD_TOKENS: dict[str, Method] = {
    ":!": Method.EXECUTE,
    ":1": Method.FETCH_ONE,
    ":?": Method.FETCH_OPTIONAL,
    ":*": Method.FETCH_ALL,
    ":^": Method.FETCH_MANY,
}

#: Comment lines that open a signature element; ``tag`` is ``name`` or ``doc``.
DECLARATION_RE = re.compile(r"^--\s*:(?P<tag>name|doc)(?:\s+(?P<rest>.*))?$")

_IDENTIFIER_RE = re.compile(IDENTIFIER_PATTERN)


# ---------------------------------------------------------------------------
# Signature
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Signature:
    """The parsed content of a ``:name`` declaration."""

    name: str
    kind: Kind = Kind.UNTYPED
    method: Method = Method.EXECUTE


def parse_signature(rest: str, strict_order: bool = False) -> Signature:
    """Parse the text following ``:name``.

    Args:
        rest: Everything after ``-- :name`` on the declaration line.
        strict_order: Reject a method token that precedes the kind token.

    Returns:
        The parsed :class:`Signature`.

    Raises:
        AnnotationError: ``INVALID_NAME``, ``INVALID_TOKEN``,
            ``DUPLICATE_TOKEN`` or ``TOKEN_ORDER``.  ``sql`` and ``line`` are
            left empty; the caller knows the unit context.
    """
    tokens = rest.split()
    if not tokens:
        raise AnnotationError(
            ":name attribute is missing an identifier.",
            code="INVALID_NAME",
        )

    name = tokens[0]
    if not _IDENTIFIER_RE.match(name):
        raise AnnotationError(
            f":name '{name}' is not a valid identifier.",
            code="INVALID_NAME",
            details={"name": name},
        )

    kind: Kind | None = None
    method: Method | None = None
    for token in tokens[1:]:
        if token in KIND_TOKENS:
            if kind is not None:
                raise AnnotationError(
                    f"Query '{name}' declares more than one kind token.",
                    code="DUPLICATE_TOKEN",
                    details={"name": name, "token": token},
                )
            if strict_order and method is not None:
                raise AnnotationError(
                    f"Query '{name}': kind token '{token}' must precede the method token.",
                    code="TOKEN_ORDER",
                    details={"name": name, "token": token},
                )
            kind = KIND_TOKENS[token]
        elif token in METHOD_TOKENS:
            if method is not None:
                raise AnnotationError(
                    f"Query '{name}' declares more than one method token.",
                    code="DUPLICATE_TOKEN",
                    details={"name": name, "token": token},
                )
            method = METHOD_TOKENS[token]
        else:
            raise AnnotationError(
                f"Query '{name}': unknown token '{token}'.",
                code="INVALID_TOKEN",
                details={
                    "name": name,
                    "token": token,
                    "allowed_tokens": sorted([*KIND_TOKENS, *METHOD_TOKENS]),
                },
            )

    return Signature(
        name=name,
        kind=kind if kind is not None else Kind.UNTYPED,
        method=method if method is not None else Method.EXECUTE,
    )
