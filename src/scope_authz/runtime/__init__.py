# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Object Scope Authorization Runtime.

Exports:
    ObjectScopeAuthorizer: Result tree walker performing object scoping
    authorize_execution: One-shot authorization pass over an execution
    ModelAuthorizationContext: Actor, authorizer and metadata of a pass
    ProtocolScopeAuthorizer: Host-supplied decision point protocol
    RegistryScopeMetadata: Type identifier to scope metadata lookup table
    load_scope_metadata_contract: Load type metadata from a YAML contract
    registry_from_contract: Build a registry from a parsed contract
    resolve_scope_by: Resolve the scope field of an object type
    extract_scope: Scope subject (record kind) of a backing instance
    extract_field_value: Scope field value of a backing instance
    authorize: Authorization gate
    build_denial_error: Error recorded on denied object nodes
"""

from scope_authz.runtime.authorization_gate import authorize
from scope_authz.runtime.constants_scope import (
    DEFAULT_RULE,
    MAX_METADATA_CONTRACT_SIZE_BYTES,
    PHASE_OBJECT_SCOPE_AUTHORIZATION,
)
from scope_authz.runtime.model_authorization_context import ModelAuthorizationContext
from scope_authz.runtime.object_scope_authorizer import (
    ObjectScopeAuthorizer,
    authorize_execution,
)
from scope_authz.runtime.protocol_scope_authorizer import ProtocolScopeAuthorizer
from scope_authz.runtime.registry_scope_metadata import RegistryScopeMetadata
from scope_authz.runtime.scope_denial import build_denial_error
from scope_authz.runtime.scope_extractor import extract_field_value, extract_scope
from scope_authz.runtime.scope_metadata_contract_loader import (
    load_scope_metadata_contract,
    registry_from_contract,
)
from scope_authz.runtime.scope_resolver import resolve_scope_by

__all__: list[str] = [
    "DEFAULT_RULE",
    "MAX_METADATA_CONTRACT_SIZE_BYTES",
    "PHASE_OBJECT_SCOPE_AUTHORIZATION",
    "ModelAuthorizationContext",
    "ObjectScopeAuthorizer",
    "ProtocolScopeAuthorizer",
    "RegistryScopeMetadata",
    "authorize",
    "authorize_execution",
    "build_denial_error",
    "extract_field_value",
    "extract_scope",
    "load_scope_metadata_contract",
    "registry_from_contract",
    "resolve_scope_by",
]
