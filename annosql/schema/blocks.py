"""Typed SQL block models.

A SQL body is split into an ordered list of blocks.  ``LiteralBlock`` text is
always part of the final statement; a ``ConditionalBlock`` body is included
only when the caller's decision for its condition identifier is true.

Block lists serialise with ``model_dump`` and come back through
``SQL_BLOCKS_ADAPTER``::

    data = [b.model_dump() for b in blocks]
    assert SQL_BLOCKS_ADAPTER.validate_python(data) == blocks
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Tag, TypeAdapter

_FROZEN = ConfigDict(extra="forbid", frozen=True)


class LiteralBlock(BaseModel):
    """SQL text that is always included."""

    model_config = _FROZEN

    type: Literal["literal"] = "literal"
    text: str


class ConditionalBlock(BaseModel):
    """SQL text guarded by a condition identifier."""

    model_config = _FROZEN

    type: Literal["conditional"] = "conditional"
    condition: str
    text: str


def _block_discriminator(v: Any) -> str | None:
    """Return the tag for the Pydantic discriminated union."""
    if isinstance(v, dict):
        if "type" in v:
            return v["type"]
        return "conditional" if "condition" in v else "literal"
    if isinstance(v, LiteralBlock):
        return "literal"
    if isinstance(v, ConditionalBlock):
        return "conditional"
    return None


SqlBlock = Annotated[
    Annotated[LiteralBlock, Tag("literal")]
    | Annotated[ConditionalBlock, Tag("conditional")],
    Discriminator(_block_discriminator),
]

#: Parse a list of raw dicts into typed blocks.
SQL_BLOCKS_ADAPTER: TypeAdapter[list[SqlBlock]] = TypeAdapter(list[SqlBlock])
