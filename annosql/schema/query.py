"""Pydantic models for parsed query annotations.

A ``Query`` is produced once per annotation unit by the annotation parser
and handed to code generators unchanged.  ``Kind`` and ``Method`` are small
closed enumerations; consumers are expected to dispatch on them exhaustively.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from annosql.schema.blocks import ConditionalBlock, SqlBlock

#: Identifier syntax for query names (ASCII letters, digits, underscore).
IDENTIFIER_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*$"


class Kind(str, Enum):
    """How returned rows are handed to the caller."""

    TYPED = "typed"
    UNTYPED = "untyped"
    MAPPED = "mapped"


class Method(str, Enum):
    """Result cardinality / call shape of a query."""

    FETCH_ALL = "fetch_all"
    FETCH_ONE = "fetch_one"
    FETCH_OPTIONAL = "fetch_optional"
    FETCH_MANY = "fetch_many"
    EXECUTE = "execute"


class Query(BaseModel):
    """One annotated SQL statement.

    Attributes:
        name: Query identifier taken from the ``:name`` declaration.
        kind: Row handling; defaults to ``Kind.UNTYPED``.
        method: Result shape; defaults to ``Method.EXECUTE``.
        doc: Documentation from the ``:doc`` declaration, lines joined
            with ``\\n``.
        sql: Trimmed SQL body, possibly containing conditional markers.
        line: 1-based line of the ``:name`` declaration, for diagnostics.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1, pattern=IDENTIFIER_PATTERN)
    kind: Kind = Kind.UNTYPED
    method: Method = Method.EXECUTE
    doc: str | None = None
    sql: str = ""
    line: int | None = Field(default=None, ge=1)

    @property
    def has_conditions(self) -> bool:
        """Whether the body contains at least one conditional block."""
        return any(isinstance(b, ConditionalBlock) for b in self.blocks())

    def blocks(self) -> list[SqlBlock]:
        """Split ``sql`` into literal and conditional blocks."""
        from annosql.parse.blocks import parse_sql_blocks  # avoid circular import

        return parse_sql_blocks(self.sql)
