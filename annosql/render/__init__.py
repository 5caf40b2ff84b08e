"""annosql rendering layer: SQL blocks → executable SQL text."""
from annosql.render.naming import pascal_case
from annosql.render.template import SqlTemplate

__all__ = [
    "pascal_case",
    "SqlTemplate",
]
