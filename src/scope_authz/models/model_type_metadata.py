# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scope metadata declared on an object type.

Contradictory declarations (both ``scope_by`` and ``scope_object_by``) and
missing declarations are representable here. They are rejected by
``resolve_scope_by`` when the type is visited, or eagerly by ``RegistryScopeMetadata.validate``.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Field names must be non-empty.
_FieldName = Annotated[str, Field(min_length=1)]


class ModelTypeMetadata(BaseModel):
    """Scope declarations of one object type.

    Attributes:
        scope_by: Name of the field holding the scope value, or ``False`` to
            exempt the type from scoping.
        scope_object_by: Per-object override of the scope field.
        rule: Authorization rule; the context default applies when None.

    Example:
        >>> ModelTypeMetadata(scope_by="id", rule="default")
        >>> ModelTypeMetadata(scope_by=False)
        >>> ModelTypeMetadata(scope_object_by="owner_id")
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    scope_by: Union[Literal[False], _FieldName, None] = Field(
        default=None,
        description="Scope field name, or False when the type is never scoped",
    )
    scope_object_by: Optional[_FieldName] = Field(
        default=None,
        description="Per-object scope field override",
    )
    rule: Optional[str] = Field(
        default=None,
        description="Authorization rule; falls back to the context default rule",
    )


__all__ = ["ModelTypeMetadata"]
