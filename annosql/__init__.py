"""annosql – annotated SQL files and conditional SQL blocks.

Public API
----------
``parse_queries``
    Parse an annotation file into ``Query`` records, raising
    ``AnnotationParseError`` with every malformed unit.

``parse_annotations``
    Same parse, returning a ``ParseResult`` with queries and errors instead
    of raising.

``parse_sql_blocks``
    Split one SQL body into literal and conditional blocks.

``SqlTemplate``
    Assemble SQL from a block sequence with a per-condition decision.

Example::

    import annosql

    queries = annosql.parse_queries(text)
    for query in queries:
        template = annosql.SqlTemplate.from_query(query)
        sql = template.render(lambda cond: True)
"""

from __future__ import annotations

import logging

from annosql.errors import (
    AnnoSQLError,
    AnnotationError,
    AnnotationParseError,
    ConditionLabelError,
    ConditionResolutionError,
    TemplateError,
)
from annosql.log import LOGGER_NAME, configure_logging
from annosql.parse.annotations import (
    AnnotationParser,
    ParseResult,
    parse_annotations,
    parse_queries,
)
from annosql.parse.blocks import parse_sql_blocks
from annosql.render.naming import pascal_case
from annosql.render.template import SqlTemplate
from annosql.schema.blocks import (
    SQL_BLOCKS_ADAPTER,
    ConditionalBlock,
    LiteralBlock,
    SqlBlock,
)
from annosql.schema.config import ParserConfig
from annosql.schema.query import Kind, Method, Query

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = [
    # Parsing
    "parse_queries",
    "parse_annotations",
    "parse_sql_blocks",
    "AnnotationParser",
    "ParseResult",
    "ParserConfig",
    # Models
    "Query",
    "Kind",
    "Method",
    "SqlBlock",
    "LiteralBlock",
    "ConditionalBlock",
    "SQL_BLOCKS_ADAPTER",
    # Rendering
    "SqlTemplate",
    "pascal_case",
    # Logging
    "configure_logging",
    # Errors
    "AnnoSQLError",
    "AnnotationError",
    "AnnotationParseError",
    "TemplateError",
    "ConditionLabelError",
    "ConditionResolutionError",
]
