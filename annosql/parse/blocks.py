"""Conditional block parser: SQL body → ordered literal / conditional blocks.

Syntax::

    SELECT * FROM t
    WHERE 1=1
    --~{ active_only
    AND active = true
    --~}

An opening marker is only recognised at the very start of the text or right
after a newline.  An opener without a matching closer is not an error; it is
left inside the surrounding literal text.  The parser never raises.
"""
from __future__ import annotations

import logging

from annosql.schema.blocks import ConditionalBlock, LiteralBlock, SqlBlock

logger = logging.getLogger(__name__)

BLOCK_OPEN = "--~{"
BLOCK_CLOSE = "--~}"


def _at_line_start(text: str, pos: int) -> bool:
    return pos == 0 or text[pos - 1] == "\n"


def _line_end(text: str, pos: int) -> int:
    """Index of the next ``\\n`` at or after ``pos``, or ``len(text)``."""
    end = text.find("\n", pos)
    return len(text) if end == -1 else end


def _find_close(text: str, start: int) -> int:
    """Index of the first recognised closing marker at or after ``start``."""
    pos = text.find(BLOCK_CLOSE, start)
    while pos != -1 and not _at_line_start(text, pos):
        pos = text.find(BLOCK_CLOSE, pos + 1)
    return pos


def _parse_conditional(text: str, start: int) -> tuple[ConditionalBlock, int] | None:
    """Parse one conditional block whose opener sits at ``start``.

    Returns:
        The block and the position right after its closing line, or ``None``
        when the block is unterminated.
    """
    id_end = _line_end(text, start + len(BLOCK_OPEN))
    if id_end >= len(text):
        return None

    condition = text[start + len(BLOCK_OPEN):id_end].strip()
    close = _find_close(text, id_end)
    if close == -1:
        return None

    body = text[id_end:close].strip()
    end = _line_end(text, close + len(BLOCK_CLOSE))
    return ConditionalBlock(condition=condition, text=body), min(end + 1, len(text))


def _flush_literal(blocks: list[SqlBlock], fragment: str) -> None:
    literal = fragment.strip()
    if literal:
        blocks.append(LiteralBlock(text=literal))


def parse_sql_blocks(text: str) -> list[SqlBlock]:
    """Split ``text`` into an ordered list of SQL blocks.

    Text without markers yields a single :class:`LiteralBlock` holding the
    whole trimmed input; an empty or blank input yields ``[]``.  Literal
    blocks that trim to nothing are dropped.

    Args:
        text: A raw SQL body.

    Returns:
        Blocks in source order.
    """
    blocks: list[SqlBlock] = []
    pos = 0
    literal_start = 0
    size = len(text)

    while pos < size:
        if _at_line_start(text, pos) and text.startswith(BLOCK_OPEN, pos):
            parsed = _parse_conditional(text, pos)
            if parsed is not None:
                _flush_literal(blocks, text[literal_start:pos])
                block, pos = parsed
                blocks.append(block)
                literal_start = pos
                continue
            # No closer after this opener means none after any later one either.
            logger.warning(
                "unterminated conditional block at offset %d, kept as literal text",
                pos,
            )
            break
        # Jump straight to the next line start; no marker can begin mid-line.
        next_line = text.find("\n", pos)
        pos = size if next_line == -1 else next_line + 1

    _flush_literal(blocks, text[literal_start:])
    logger.debug("parsed %d SQL block(s)", len(blocks))
    return blocks
