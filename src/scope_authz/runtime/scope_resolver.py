# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scope resolution for object types.

Determines which field scopes an object type from its declared metadata.
The general declaration (``scope_by``) and the per-object override
(``scope_object_by``) are mutually exclusive:

    | scope_by | scope_object_by | outcome                       |
    |----------|-----------------|-------------------------------|
    | absent   | absent          | ScopeConfigurationError       |
    | absent   | present         | scope_object_by               |
    | present  | absent          | scope_by (may be False)       |
    | present  | present         | ScopeConfigurationError       |

``False`` is a declaration, not an absence: it exempts the type from scoping.
"""

from __future__ import annotations

from typing import Literal, Union
from uuid import UUID

from scope_authz.errors import ModelScopeErrorContext, ScopeConfigurationError
from scope_authz.models import ModelTypeMetadata


def resolve_scope_by(
    type_identifier: str,
    metadata: ModelTypeMetadata,
    correlation_id: UUID | None = None,
) -> Union[str, Literal[False]]:
    """Resolve the scope field of an object type.

    Args:
        type_identifier: Object type the metadata belongs to.
        metadata: Declared scope metadata of the type.
        correlation_id: Correlation ID propagated into raised errors.

    Returns:
        The scope field name, or False when the type is exempt from scoping.

    Raises:
        ScopeConfigurationError: If neither or both of scope_by and
            scope_object_by are declared.

    Example:
        >>> resolve_scope_by("user", ModelTypeMetadata(scope_by="id"))
        'id'
        >>> resolve_scope_by("stats", ModelTypeMetadata(scope_by=False))
        False
    """
    general_scope_by = metadata.scope_by
    object_scope_by = metadata.scope_object_by

    if general_scope_by is None and object_scope_by is None:
        raise ScopeConfigurationError(
            f"No scope_by or scope_object_by declared for type '{type_identifier}'",
            context=ModelScopeErrorContext(
                operation="resolve_scope_by",
                type_identifier=type_identifier,
                correlation_id=correlation_id,
            ),
        )

    if general_scope_by is None:
        return object_scope_by

    if object_scope_by is None:
        return general_scope_by

    raise ScopeConfigurationError(
        "scope_object_by and scope_by must not both be declared "
        f"for type '{type_identifier}'",
        context=ModelScopeErrorContext(
            operation="resolve_scope_by",
            type_identifier=type_identifier,
            correlation_id=correlation_id,
        ),
    )


__all__: list[str] = ["resolve_scope_by"]
