# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tagged record backing an object node.

A tagged record exposes two things independently: the record kind (its tag),
which identifies what is being scoped, and the field value map the scope value
is read from.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field


class ModelTaggedRecord(BaseModel):
    """Data instance with an explicit record kind.

    Attributes:
        tag: Record kind, e.g. ``"user"`` or ``"wallet"``.
        values: Materialized field values of the instance.

    Example:
        >>> record = ModelTaggedRecord(tag="user", values={"id": 1})
        >>> record.get("id")
        1
        >>> record.get("email") is None
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    tag: str = Field(min_length=1, description="Record kind")
    values: Mapping[str, object] = Field(
        default_factory=dict,
        description="Materialized field values",
    )

    def get(self, field: str) -> object | None:
        """Return the value of ``field``, or None when it is absent."""
        return self.values.get(field)


__all__ = ["ModelTaggedRecord"]
