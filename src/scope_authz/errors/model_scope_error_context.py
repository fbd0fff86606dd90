# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scope Authorization Error Context Configuration Model.

This module defines the configuration model for scope authorization error
context, bundling the structured fields shared by every fatal error so that
error constructors keep a short parameter list.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelScopeErrorContext(BaseModel):
    """Configuration model for scope authorization error context.

    Attributes:
        operation: Operation being performed (resolve_scope_by, extract_scope, ...)
        type_identifier: Object type the failure relates to
        target_name: Other resource involved (e.g. a metadata contract path)
        correlation_id: Correlation ID of the authorization pass

    Example:
        >>> context = ModelScopeErrorContext(
        ...     operation="resolve_scope_by",
        ...     type_identifier="user",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise ScopeConfigurationError("No scope declared", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (resolve_scope_by, extract_scope, etc.)",
    )
    type_identifier: Optional[str] = Field(
        default=None,
        description="Object type identifier the error relates to",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Other resource involved, such as a metadata contract path",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Correlation ID of the authorization pass",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: Optional[UUID] = None,
        **kwargs: object,
    ) -> ModelScopeErrorContext:
        """Create a context, generating a correlation ID when none is given.

        Args:
            correlation_id: Existing correlation ID to propagate, if any.
            **kwargs: Remaining context fields.

        Returns:
            A new context with a non-null correlation_id.
        """
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelScopeErrorContext"]
