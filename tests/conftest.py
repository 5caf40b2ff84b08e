"""Shared pytest fixtures for annosql unit and integration tests."""
from __future__ import annotations

import pytest

from annosql.parse.annotations import AnnotationParser
from annosql.schema.config import ParserConfig
from annosql.schema.query import Query
from tests.fixtures import load_queries_file


@pytest.fixture(scope="session")
def parser() -> AnnotationParser:
    """Parser with default options."""
    return AnnotationParser()


@pytest.fixture(scope="session")
def strict_parser() -> AnnotationParser:
    """Parser that requires the kind token before the method token."""
    return AnnotationParser(ParserConfig(strict_token_order=True))


@pytest.fixture(scope="session")
def users_queries(parser: AnnotationParser) -> dict[str, Query]:
    """Queries from users.sql keyed by name."""
    result = parser.parse(load_queries_file("users.sql"))
    assert result.ok, result.errors
    return {q.name: q for q in result.queries}


@pytest.fixture(scope="session")
def search_queries(parser: AnnotationParser) -> dict[str, Query]:
    """Queries from search.sql keyed by name."""
    return {q.name: q for q in parser.parse(load_queries_file("search.sql")).raise_for_errors()}
