"""Unit tests for the schema models, parser config and logging setup."""
from __future__ import annotations

import logging

import pydantic
import pytest

from annosql.log import LOGGER_NAME, configure_logging
from annosql.parse.annotations import parse_annotations
from annosql.parse.blocks import parse_sql_blocks
from annosql.schema.config import ParserConfig
from annosql.schema.query import Kind, Method, Query


class TestQueryModel:
    def test_defaults(self):
        q = Query(name="q")
        assert q.kind == Kind.UNTYPED
        assert q.method == Method.EXECUTE
        assert q.doc is None
        assert q.sql == ""

    @pytest.mark.parametrize("name", ["", "1abc", "has space", "dash-ed", "ünï"])
    def test_invalid_names_rejected(self, name):
        with pytest.raises(pydantic.ValidationError):
            Query(name=name)

    def test_frozen(self):
        q = Query(name="q", sql="SELECT 1")
        with pytest.raises(pydantic.ValidationError):
            q.sql = "SELECT 2"

    def test_extra_fields_forbidden(self):
        with pytest.raises(pydantic.ValidationError):
            Query(name="q", arity="*")

    def test_enums_serialise_as_strings(self):
        data = Query(name="q", kind=Kind.MAPPED, method=Method.FETCH_MANY).model_dump(mode="json")
        assert data["kind"] == "mapped"
        assert data["method"] == "fetch_many"

    def test_blocks_delegate_to_block_parser(self):
        q = Query(name="q", sql="SELECT 1\n--~{ a\nAND 2\n--~}")
        assert q.blocks() == parse_sql_blocks(q.sql)
        assert q.has_conditions
        assert not Query(name="q", sql="SELECT 1").has_conditions


class TestParserConfig:
    def test_defaults(self):
        config = ParserConfig()
        assert config.strict_token_order is False
        assert config.reject_duplicate_names is False

    def test_unknown_option_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            ParserConfig(lenient=True)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


class TestLogging:
    def test_rejected_units_are_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            parse_annotations("-- :doc orphan\nSELECT 1")
        messages = [r.getMessage() for r in caplog.records]
        assert any(
            "rejected query unit" in m and ":name attribute is missing" in m for m in messages
        )

    def test_unterminated_block_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            parse_sql_blocks("SELECT 1\n--~{ open\nAND 2")
        assert any("unterminated conditional block" in r.getMessage() for r in caplog.records)

    def test_configure_logging_level_from_env(self, monkeypatch):
        logger = logging.getLogger(LOGGER_NAME)
        previous_level, previous_handlers = logger.level, list(logger.handlers)
        monkeypatch.setenv("ANNOSQL_LOG_LEVEL", "debug")
        try:
            configure_logging()
            assert logger.level == logging.DEBUG
            configure_logging("error")
            assert logger.level == logging.ERROR
            stream_handlers = [
                h for h in logger.handlers if isinstance(h, logging.StreamHandler)
            ]
            assert len(stream_handlers) == 1
        finally:
            logger.setLevel(previous_level)
            logger.handlers[:] = previous_handlers
