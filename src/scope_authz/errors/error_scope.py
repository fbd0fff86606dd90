# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scope Authorization Error Classes.

Error Hierarchy:
    Exception
    └── ScopeRuntimeError (base scope authorization error)
        ├── ScopeConfigurationError
        ├── ScopeInstanceError
        └── ScopeResultError

These errors are fatal: they abort the authorization pass and surface to the
caller. An authorization denial is never raised; it is recorded as a
ModelNodeError on the denied object node.

All errors:
    - Use EnumScopeErrorCode for error classification
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Accept ModelScopeErrorContext for bundled context parameters
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from scope_authz.enums import EnumScopeErrorCode
from scope_authz.errors.model_scope_error_context import ModelScopeErrorContext


class ScopeRuntimeError(Exception):
    """Base error class for fatal scope authorization errors.

    Attributes:
        message: Human-readable error message.
        error_code: Classification of the failure.
        correlation_id: Correlation ID of the authorization pass, if known.
        context: Structured context assembled from the context model and
            any extra keyword arguments.

    Example:
        >>> context = ModelScopeErrorContext(
        ...     operation="resolve_scope_by",
        ...     type_identifier="user",
        ... )
        >>> raise ScopeRuntimeError("Operation failed", context=context, depth=3)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumScopeErrorCode] = None,
        context: Optional[ModelScopeErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize ScopeRuntimeError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled context (operation, type_identifier, ...)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id: Optional[UUID] = None
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.type_identifier is not None:
                structured_context["type_identifier"] = context.type_identifier
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            correlation_id = context.correlation_id

        self.message = message
        self.error_code = error_code or EnumScopeErrorCode.OPERATION_FAILED
        self.correlation_id = correlation_id
        self.context = structured_context
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string including the error code."""
        return f"[{self.error_code}] {self.message}"


class ScopeConfigurationError(ScopeRuntimeError):
    """Raised when object type scope metadata is invalid.

    Used when a type declares neither scope_by nor scope_object_by, declares
    both, references a malformed type, or when a metadata contract cannot be
    loaded.

    Example:
        >>> raise ScopeConfigurationError(
        ...     "No scope_by or scope_object_by declared for type 'user'",
        ...     context=ModelScopeErrorContext(type_identifier="user"),
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelScopeErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize ScopeConfigurationError.

        Args:
            message: Human-readable error message
            context: Bundled context
            **extra_context: Additional context information
        """
        super().__init__(
            message=message,
            error_code=EnumScopeErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class ScopeInstanceError(ScopeRuntimeError):
    """Raised when a backing data instance cannot be tag-identified.

    This indicates a mismatch between the declared schema and what the
    resolvers actually returned. It is not an authorization failure and is
    never folded into the result tree.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelScopeErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize ScopeInstanceError.

        Args:
            message: Human-readable error message
            context: Bundled context
            **extra_context: Additional context information (e.g. instance_type)
        """
        super().__init__(
            message=message,
            error_code=EnumScopeErrorCode.INVALID_INSTANCE,
            context=context,
            **extra_context,
        )


class ScopeResultError(ScopeRuntimeError):
    """Raised when the scope authorizer returns a non-bool decision.

    Only ``True`` grants access and only ``False`` denies it. Any other
    value aborts the pass instead of being read as truthy or falsy.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelScopeErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize ScopeResultError.

        Args:
            message: Human-readable error message
            context: Bundled context
            **extra_context: Additional context information (e.g. result_type)
        """
        super().__init__(
            message=message,
            error_code=EnumScopeErrorCode.INVALID_RESULT,
            context=context,
            **extra_context,
        )


__all__ = [
    "ScopeConfigurationError",
    "ScopeInstanceError",
    "ScopeResultError",
    "ScopeRuntimeError",
]
