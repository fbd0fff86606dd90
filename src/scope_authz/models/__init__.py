# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Object Scope Authorization Models.

Exports:
    ModelExecution: Result tree plus upstream validation errors
    ModelIntrospectionNode: Introspection result node
    ModelLeafNode: Scalar result node
    ModelListNode: List result node
    ModelNodeError: Client-facing error record
    ModelObjectNode: Composite result node backed by a data instance
    ModelResultNode: Discriminated union of all result node variants
    ModelRootOperationNode: Root operation result node
    ModelScopeMetadataContract: Parsed scope metadata contract
    ModelSourceLocation: Line/column of a selection
    ModelTaggedRecord: Data instance with an explicit record kind
    ModelTypeMetadata: Scope declarations of one object type
"""

from scope_authz.models.model_execution import ModelExecution
from scope_authz.models.model_node_error import ModelNodeError
from scope_authz.models.model_result_node import (
    ModelIntrospectionNode,
    ModelLeafNode,
    ModelListNode,
    ModelObjectNode,
    ModelResultNode,
    ModelRootOperationNode,
)
from scope_authz.models.model_scope_metadata_contract import (
    ModelScopeMetadataContract,
)
from scope_authz.models.model_source_location import ModelSourceLocation
from scope_authz.models.model_tagged_record import ModelTaggedRecord
from scope_authz.models.model_type_metadata import ModelTypeMetadata

__all__: list[str] = [
    "ModelExecution",
    "ModelIntrospectionNode",
    "ModelLeafNode",
    "ModelListNode",
    "ModelNodeError",
    "ModelObjectNode",
    "ModelResultNode",
    "ModelRootOperationNode",
    "ModelScopeMetadataContract",
    "ModelSourceLocation",
    "ModelTaggedRecord",
    "ModelTypeMetadata",
]
