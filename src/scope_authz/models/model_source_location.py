# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Source location of a selection in the query document."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelSourceLocation(BaseModel):
    """Line and column of a field selection, reported back to clients."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    line: int = Field(ge=1, description="1-based line in the query document")
    column: int = Field(ge=1, description="1-based column in the query document")


__all__ = ["ModelSourceLocation"]
