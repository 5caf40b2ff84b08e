"""Parser configuration."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ParserConfig(BaseModel):
    """Options for the annotation parser.

    Attributes:
        strict_token_order: Require the kind token to precede the method
            token on a ``:name`` line.  By default either order is accepted.
        reject_duplicate_names: Report a query whose name was already used
            earlier in the same input as a ``DUPLICATE_NAME`` error.  By
            default every name declaration yields its own query.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    strict_token_order: bool = False
    reject_duplicate_names: bool = False
