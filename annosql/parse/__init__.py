"""annosql parsers: annotation files and conditional SQL blocks."""
from annosql.parse.annotations import (
    AnnotationParser,
    ParseResult,
    parse_annotations,
    parse_queries,
)
from annosql.parse.blocks import BLOCK_CLOSE, BLOCK_OPEN, parse_sql_blocks

__all__ = [
    "AnnotationParser",
    "ParseResult",
    "parse_annotations",
    "parse_queries",
    "BLOCK_CLOSE",
    "BLOCK_OPEN",
    "parse_sql_blocks",
]
