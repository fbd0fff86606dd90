# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Execution handed to the object scope authorizer by the surrounding pipeline."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from scope_authz.models.model_node_error import ModelNodeError
from scope_authz.models.model_result_node import ModelResultNode


class ModelExecution(BaseModel):
    """Result of a query execution together with upstream validation errors.

    When ``validation_errors`` is non-empty the result is already invalid and
    the authorization pass leaves the execution untouched.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    result: Optional[ModelResultNode] = None
    validation_errors: tuple[ModelNodeError, ...] = Field(default=())

    @property
    def has_validation_errors(self) -> bool:
        """Return True if upstream stages reported validation errors."""
        return len(self.validation_errors) > 0


__all__ = ["ModelExecution"]
