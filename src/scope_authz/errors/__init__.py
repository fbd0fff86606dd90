# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Object Scope Authorization Errors Module.

Exports:
    ModelScopeErrorContext: Configuration model for bundled error context
    ScopeRuntimeError: Base error class for fatal authorization pass errors
    ScopeConfigurationError: Invalid or contradictory type scope metadata
    ScopeInstanceError: Backing data instance is not a tagged record
    ScopeResultError: Scope authorizer returned a non-bool decision

Correlation ID Assignment:
    Every authorization pass carries the correlation_id of its
    ModelAuthorizationContext. Errors raised during the pass propagate it:

        from scope_authz.errors import ModelScopeErrorContext, ScopeConfigurationError

        context = ModelScopeErrorContext(
            operation="resolve_scope_by",
            type_identifier="user",
            correlation_id=auth_context.correlation_id,
        )
        raise ScopeConfigurationError("No scope declared", context=context)

The actor is never included in error messages or context.
"""

from scope_authz.errors.error_scope import (
    ScopeConfigurationError,
    ScopeInstanceError,
    ScopeResultError,
    ScopeRuntimeError,
)
from scope_authz.errors.model_scope_error_context import ModelScopeErrorContext

__all__: list[str] = [
    "ModelScopeErrorContext",
    "ScopeConfigurationError",
    "ScopeInstanceError",
    "ScopeResultError",
    "ScopeRuntimeError",
]
