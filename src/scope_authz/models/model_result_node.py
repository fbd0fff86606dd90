# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Execution result tree.

The result tree is produced by the query execution engine and consumed once by
the object scope authorizer. Nodes form a tagged union discriminated by
``kind``:

    ModelRootOperationNode   kind="root"           fields
    ModelIntrospectionNode   kind="introspection"  opaque payload
    ModelObjectNode          kind="object"         fields, backing root_value, errors
    ModelListNode            kind="list"           values
    ModelLeafNode            kind="leaf"           scalar value

Nodes are frozen. Rewriting a node means building a copy with
``model_copy(update=...)``; untouched branches keep their identity.

Example:
    >>> user = ModelObjectNode(
    ...     name="currentUser",
    ...     type_ref="user!",
    ...     root_value=ModelTaggedRecord(tag="user", values={"id": 1}),
    ...     source_location=ModelSourceLocation(line=2, column=3),
    ...     fields=(ModelLeafNode(name="id", value=1),),
    ... )
    >>> root = ModelRootOperationNode(operation=EnumOperationType.QUERY, fields=(user,))
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from scope_authz.enums import (
    EnumIntrospectionIdentifier,
    EnumOperationType,
    EnumResultNodeKind,
)
from scope_authz.models.model_node_error import ModelNodeError
from scope_authz.models.model_source_location import ModelSourceLocation


class ModelRootOperationNode(BaseModel):
    """Root of a query, mutation or subscription result."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal[EnumResultNodeKind.ROOT] = EnumResultNodeKind.ROOT
    operation: EnumOperationType = EnumOperationType.QUERY
    fields: tuple[ModelResultNode, ...] = Field(default=())


class ModelIntrospectionNode(BaseModel):
    """Introspection result, passed through without scoping."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal[EnumResultNodeKind.INTROSPECTION] = EnumResultNodeKind.INTROSPECTION
    identifier: Optional[EnumIntrospectionIdentifier] = None
    payload: object = None


class ModelObjectNode(BaseModel):
    """Composite node backed by a data instance.

    Attributes:
        name: Response key of the selection.
        type_ref: Schema type reference, possibly wrapped (``[user!]!``).
        root_value: Backing data instance returned by the resolver.
        source_location: Location of the selection for error reporting.
        fields: One child node per requested subfield.
        errors: Errors attached to this node.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal[EnumResultNodeKind.OBJECT] = EnumResultNodeKind.OBJECT
    name: Optional[str] = None
    type_ref: str = Field(min_length=1)
    root_value: object = None
    source_location: Optional[ModelSourceLocation] = None
    fields: tuple[ModelResultNode, ...] = Field(default=())
    errors: tuple[ModelNodeError, ...] = Field(default=())


class ModelListNode(BaseModel):
    """Ordered sequence of nodes of one element type."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal[EnumResultNodeKind.LIST] = EnumResultNodeKind.LIST
    name: Optional[str] = None
    values: tuple[ModelResultNode, ...] = Field(default=())


class ModelLeafNode(BaseModel):
    """Scalar value."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal[EnumResultNodeKind.LEAF] = EnumResultNodeKind.LEAF
    name: Optional[str] = None
    value: object = None


ModelResultNode = Annotated[
    Union[
        ModelRootOperationNode,
        ModelIntrospectionNode,
        ModelObjectNode,
        ModelListNode,
        ModelLeafNode,
    ],
    Field(discriminator="kind"),
]

ModelRootOperationNode.model_rebuild()
ModelObjectNode.model_rebuild()
ModelListNode.model_rebuild()


__all__ = [
    "ModelIntrospectionNode",
    "ModelLeafNode",
    "ModelListNode",
    "ModelObjectNode",
    "ModelResultNode",
    "ModelRootOperationNode",
]
