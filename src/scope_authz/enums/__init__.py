# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Object Scope Authorization Enumerations Module.

Exports:
    EnumIntrospectionIdentifier: Introspection node identifiers (QUERY_TYPE)
    EnumOperationType: Root operation types (QUERY, MUTATION, SUBSCRIPTION)
    EnumResultNodeKind: Result tree node variants (ROOT, INTROSPECTION, OBJECT, LIST, LEAF)
    EnumScopeErrorCode: Fatal error classification for the authorization pass
"""

from scope_authz.enums.enum_introspection_identifier import (
    EnumIntrospectionIdentifier,
)
from scope_authz.enums.enum_operation_type import EnumOperationType
from scope_authz.enums.enum_result_node_kind import EnumResultNodeKind
from scope_authz.enums.enum_scope_error_code import EnumScopeErrorCode

__all__: list[str] = [
    "EnumIntrospectionIdentifier",
    "EnumOperationType",
    "EnumResultNodeKind",
    "EnumScopeErrorCode",
]
