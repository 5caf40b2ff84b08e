"""annosql schema models: Query, SqlBlock, ParserConfig."""
from annosql.schema.blocks import (
    SQL_BLOCKS_ADAPTER,
    ConditionalBlock,
    LiteralBlock,
    SqlBlock,
)
from annosql.schema.config import ParserConfig
from annosql.schema.query import IDENTIFIER_PATTERN, Kind, Method, Query

__all__ = [
    "SQL_BLOCKS_ADAPTER",
    "ConditionalBlock",
    "LiteralBlock",
    "SqlBlock",
    "ParserConfig",
    "IDENTIFIER_PATTERN",
    "Kind",
    "Method",
    "Query",
]
