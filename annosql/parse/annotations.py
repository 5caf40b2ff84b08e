"""Annotation parser: annotation file text → ``Query`` records.

An annotation file is a sequence of query units::

    -- :name fetch_users :<> :*
    -- :doc Returns all the users from DB
    SELECT user_id, email FROM users

Each unit starts with one or two signature elements (a ``:name`` line and
optionally a ``:doc`` block, in either order) and owns all following text up
to the next signature element.

Malformed units do not stop the parse.  Every problem is collected as an
:class:`~annosql.errors.AnnotationError` so one pass reports the whole file;
a failing unit never contributes a partial ``Query``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

import pydantic

from annosql.errors import AnnotationError, AnnotationParseError
from annosql.parse.blocks import BLOCK_OPEN
from annosql.parse.tokens import DECLARATION_RE, parse_signature
from annosql.schema.config import ParserConfig
from annosql.schema.query import Query

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """The outcome of parsing one annotation file.

    Attributes:
        queries: Successfully parsed queries, in source order.
        errors: One error per malformed unit, in source order.
    """

    queries: list[Query] = field(default_factory=list)
    errors: list[AnnotationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> list[Query]:
        """Return ``queries``, or raise if any unit failed.

        Raises:
            AnnotationParseError: Carrying every collected error.
        """
        if self.errors:
            raise AnnotationParseError(self.errors)
        return self.queries


@dataclass
class _Unit:
    """Raw elements of a single query unit, before folding."""

    line: int
    signature: str | None = None
    signature_line: int | None = None
    doc_lines: list[str] | None = None
    sql_lines: list[str] = field(default_factory=list)

    @property
    def has_sql(self) -> bool:
        return any(line.strip() for line in self.sql_lines)

    def accepts(self, tag: str) -> bool:
        """Whether a ``tag`` declaration still belongs to this unit."""
        if self.has_sql:
            return False
        if tag == "name":
            return self.signature is None
        return self.doc_lines is None


class AnnotationParser:
    """Splits annotation file text into :class:`Query` records.

    The parser keeps no state between calls, so one instance may be shared.

    Args:
        config: Parser options; defaults to ``ParserConfig()``.
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self._config = config or ParserConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, text: str) -> ParseResult:
        """Parse ``text`` and collect queries and per-unit errors."""
        result = ParseResult()
        seen: dict[str, int | None] = {}

        for unit in self._split_units(text):
            try:
                query = self._fold(unit)
            except AnnotationError as exc:
                logger.warning("rejected query unit: %s", exc)
                result.errors.append(exc)
                continue

            if query.name in seen and self._config.reject_duplicate_names:
                exc = AnnotationError(
                    f"Query '{query.name}' is already defined.",
                    code="DUPLICATE_NAME",
                    sql=query.sql,
                    line=query.line,
                    details={"name": query.name, "first_line": seen[query.name]},
                )
                logger.warning("rejected query unit: %s", exc)
                result.errors.append(exc)
                continue

            seen.setdefault(query.name, query.line)
            result.queries.append(query)

        logger.debug(
            "parsed %d query(ies), %d error(s)", len(result.queries), len(result.errors)
        )
        return result

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _split_units(self, text: str) -> list[_Unit]:
        """Group input lines into raw query units."""
        units: list[_Unit] = []
        current: _Unit | None = None
        in_doc = False

        for lineno, raw in enumerate(text.split("\n"), start=1):
            stripped = raw.strip()
            match = DECLARATION_RE.match(stripped)

            if match:
                tag = match["tag"]
                if current is None or not current.accepts(tag):
                    current = _Unit(line=lineno)
                    units.append(current)
                rest = (match["rest"] or "").strip()
                if tag == "name":
                    current.signature = rest
                    current.signature_line = lineno
                    in_doc = False
                else:
                    current.doc_lines = [rest]
                    in_doc = True
                continue

            if in_doc and stripped.startswith("--") and not raw.startswith(BLOCK_OPEN):
                current.doc_lines.append(stripped[2:].strip())
                continue
            in_doc = False

            if current is None:
                if not stripped:
                    continue
                # Text ahead of the first declaration: a unit with no signature.
                current = _Unit(line=lineno)
                units.append(current)
            current.sql_lines.append(raw)

        return units

    # ------------------------------------------------------------------
    # Folding
    # ------------------------------------------------------------------

    def _fold(self, unit: _Unit) -> Query:
        """Build a :class:`Query` from a unit's elements.

        Raises:
            AnnotationError: If the unit has no usable ``:name`` declaration.
        """
        sql = "\n".join(unit.sql_lines).strip()

        if unit.signature is None:
            raise AnnotationError(
                ":name attribute is missing.",
                code="MISSING_NAME",
                sql=sql,
                line=unit.line,
            )

        try:
            signature = parse_signature(
                unit.signature, strict_order=self._config.strict_token_order
            )
        except AnnotationError as exc:
            raise AnnotationError(
                exc.args[0],
                code=exc.code,
                sql=sql,
                line=unit.signature_line,
                details=exc.details,
            ) from exc

        doc = "\n".join(unit.doc_lines) if unit.doc_lines is not None else None
        try:
            return Query(
                name=signature.name,
                kind=signature.kind,
                method=signature.method,
                doc=doc,
                sql=sql,
                line=unit.signature_line,
            )
        except pydantic.ValidationError as exc:
            raise AnnotationError(
                f"Query structure is invalid: {exc}",
                code="INVALID_NAME",
                sql=sql,
                line=unit.signature_line,
                details={"name": signature.name},
            ) from exc


# ---------------------------------------------------------------------------
# Module-level shortcuts
# ---------------------------------------------------------------------------


def parse_annotations(text: str, config: ParserConfig | None = None) -> ParseResult:
    """Parse an annotation file without raising.

    Args:
        text: Full annotation file content.
        config: Optional parser options.

    Returns:
        A :class:`ParseResult` with the parsed queries and collected errors.
    """
    return AnnotationParser(config).parse(text)


def parse_queries(text: str, config: ParserConfig | None = None) -> list[Query]:
    """Parse an annotation file and return its queries.

    Raises:
        AnnotationParseError: If any query unit is malformed; the exception
            lists every malformed unit, not just the first one.
    """
    return parse_annotations(text, config).raise_for_errors()
