"""SQL templates: assembling a statement from conditional blocks.

A template pairs a query name with the block sequence of its body.  Each
distinct condition identifier becomes one member of a generated ``Enum``
whose value is the identifier itself; the caller decides per member whether
the guarded fragment is included::

    template = SqlTemplate.from_query(query)
    Cond = template.condition_enum()
    sql = template.render(lambda c: c is Cond.ActiveOnly)
"""
from __future__ import annotations

import keyword
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from functools import cached_property

from annosql.errors import ConditionLabelError, ConditionResolutionError
from annosql.parse.blocks import BLOCK_CLOSE, BLOCK_OPEN, parse_sql_blocks
from annosql.render.naming import pascal_case
from annosql.schema.blocks import ConditionalBlock, LiteralBlock, SqlBlock
from annosql.schema.query import Query

logger = logging.getLogger(__name__)

#: Decision callable: receives a condition enum member, returns "include".
BlockResolver = Callable[[Enum], bool]


@dataclass(frozen=True)
class SqlTemplate:
    """An ordered block sequence ready to be rendered into SQL.

    Attributes:
        name: Query name; the generated enum is named after it.
        blocks: Blocks in source order.
    """

    name: str
    blocks: tuple[SqlBlock, ...]

    @classmethod
    def from_query(cls, query: Query) -> SqlTemplate:
        return cls(name=query.name, blocks=tuple(query.blocks()))

    @classmethod
    def from_sql(cls, name: str, sql: str) -> SqlTemplate:
        return cls(name=name, blocks=tuple(parse_sql_blocks(sql)))

    # ------------------------------------------------------------------
    # Conditions
    # ------------------------------------------------------------------

    @property
    def conditions(self) -> tuple[str, ...]:
        """Distinct condition identifiers in first-occurrence order."""
        seen: dict[str, None] = {}
        for block in self.blocks:
            if isinstance(block, ConditionalBlock):
                seen.setdefault(block.condition, None)
        return tuple(seen)

    @property
    def is_conditional(self) -> bool:
        return any(isinstance(b, ConditionalBlock) for b in self.blocks)

    def condition_enum(self) -> type[Enum]:
        """Return the discriminator enum for this template's conditions.

        Repeated identifiers share one member.  The enum is built once per
        template instance.

        Raises:
            ConditionLabelError: If an identifier does not yield a usable
                member name, or two identifiers yield the same one.
        """
        return self._condition_enum

    @cached_property
    def _condition_enum(self) -> type[Enum]:
        members: dict[str, str] = {}
        for condition in self.conditions:
            label = pascal_case(condition)
            if not label.isidentifier() or keyword.iskeyword(label):
                raise ConditionLabelError(
                    f"Condition '{condition}' in query '{self.name}' does not "
                    f"produce a valid label (got '{label}').",
                    label=label,
                    conditions=[condition],
                )
            if label in members:
                raise ConditionLabelError(
                    f"Conditions '{members[label]}' and '{condition}' in query "
                    f"'{self.name}' both map to label '{label}'.",
                    label=label,
                    conditions=[members[label], condition],
                )
            members[label] = condition

        enum_name = pascal_case(self.name) or "Conditions"
        return Enum(enum_name, list(members.items()), type=str)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def render(self, include: BlockResolver | None = None) -> str:
        """Assemble the final SQL text.

        Literal text is always kept; a conditional body is kept when
        ``include`` returns true for its condition member.  Kept fragments
        are joined with newlines.

        Args:
            include: Decision callable; may be omitted when the template has
                no conditional blocks.

        Raises:
            ConditionResolutionError: If the template has conditional blocks
                and ``include`` is ``None``.
        """
        if not self.is_conditional:
            return "\n".join(b.text for b in self.blocks)

        if include is None:
            raise ConditionResolutionError(
                f"Query '{self.name}' has conditional blocks "
                f"{list(self.conditions)}; a decision callable is required."
            )

        cond = self.condition_enum()
        fragments: list[str] = []
        for block in self.blocks:
            if isinstance(block, LiteralBlock):
                fragments.append(block.text)
            elif include(cond(block.condition)) and block.text:
                fragments.append(block.text)

        logger.debug(
            "rendered %s with %d of %d block(s)",
            self.name,
            len(fragments),
            len(self.blocks),
        )
        return "\n".join(fragments)

    def format(self) -> str:
        """Re-serialise the blocks into conditional block syntax.

        ``parse_sql_blocks(template.format())`` returns the same blocks.
        """
        parts: list[str] = []
        for block in self.blocks:
            if isinstance(block, ConditionalBlock):
                parts.append(
                    f"{BLOCK_OPEN} {block.condition}\n"
                    f"{_shield_marker(block.text)}\n{BLOCK_CLOSE}"
                )
            else:
                parts.append(_shield_marker(block.text))
        return "\n".join(parts)


def _shield_marker(text: str) -> str:
    # Block text is trimmed on parse, so a marker it starts with was indented
    # in the source; keep it off the line start or it would parse as a marker.
    if text.startswith((BLOCK_OPEN, BLOCK_CLOSE)):
        return " " + text
    return text
