# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error record attached to a result tree node."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from scope_authz.models.model_source_location import ModelSourceLocation


class ModelNodeError(BaseModel):
    """Client-facing error carried by a result node or an execution.

    Attributes:
        message: Human-readable message.
        locations: Source locations of the selections the error refers to.
        phase: Identifier of the pipeline phase that produced the error.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    message: str = Field(min_length=1)
    locations: tuple[ModelSourceLocation, ...] = Field(default=())
    phase: str = Field(min_length=1)


__all__ = ["ModelNodeError"]
