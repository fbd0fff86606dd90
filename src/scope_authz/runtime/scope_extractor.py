# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scope extraction from backing data instances.

Two values are extracted from the instance backing an object node:

- the scope subject: the record kind, which tells the authorizer what is
  being accessed;
- the scope field value: the value of the resolved scope field, read from
  the instance's field map.

Tag-identifiable instances are ``ModelTaggedRecord`` (tag = ``record.tag``)
and pydantic models (tag = the model class). Any other value means the
resolver output does not match the declared schema, which is a fatal
ScopeInstanceError rather than an authorization denial.
"""

from __future__ import annotations

from typing import Literal, Union
from uuid import UUID

from pydantic import BaseModel

from scope_authz.errors import ModelScopeErrorContext, ScopeInstanceError
from scope_authz.models import ModelTaggedRecord

# Longest instance representation included in error messages.
_MAX_REPR_LENGTH = 200


def extract_scope(
    scope_by: Union[str, Literal[False]],
    type_identifier: str,
    root_value: object,
    correlation_id: UUID | None = None,
) -> object:
    """Return the scope subject of a backing instance.

    Args:
        scope_by: Resolved scope field, or False for unscoped types.
        type_identifier: Object type of the node, for error reporting.
        root_value: Backing data instance of the node.
        correlation_id: Correlation ID propagated into raised errors.

    Returns:
        False for unscoped types (the instance is not inspected), the tag
        of a ModelTaggedRecord, or the class of a pydantic model.

    Raises:
        ScopeInstanceError: If scoping applies and the instance is not
            tag-identifiable.
    """
    if scope_by is False:
        return False

    if isinstance(root_value, ModelTaggedRecord):
        return root_value.tag

    if isinstance(root_value, BaseModel):
        return type(root_value)

    raise ScopeInstanceError(
        f"Expected a tagged record for type '{type_identifier}', "
        f"got {_describe(root_value)}",
        context=ModelScopeErrorContext(
            operation="extract_scope",
            type_identifier=type_identifier,
            correlation_id=correlation_id,
        ),
        instance_type=type(root_value).__name__,
    )


def extract_field_value(root_value: object, field: str) -> object | None:
    """Return the value of ``field`` on a backing instance.

    An absent field yields None; it is passed on to the authorizer, never
    defaulted or rejected here.
    """
    if isinstance(root_value, ModelTaggedRecord):
        return root_value.get(field)

    if isinstance(root_value, BaseModel):
        if field in type(root_value).model_fields:
            return getattr(root_value, field)
        return (root_value.model_extra or {}).get(field)

    return None


def _describe(value: object) -> str:
    text = repr(value)
    if len(text) > _MAX_REPR_LENGTH:
        return text[:_MAX_REPR_LENGTH] + "..."
    return text


__all__: list[str] = ["extract_field_value", "extract_scope"]
