# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Parsed scope metadata contract.

A metadata contract declares the scope metadata of every object type of a
schema in one YAML document:

    ```yaml
    default_rule: default
    types:
      user:
        scope_by: id
        rule: default
      company:
        scope_by: user_id
      wallet:
        scope_by: id
        rule: read_only
      public_stats:
        scope_by: false
    ```
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from scope_authz.models.model_type_metadata import ModelTypeMetadata


class ModelScopeMetadataContract(BaseModel):
    """Default rule and per-type scope metadata of a schema."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_rule: str = Field(default="default", min_length=1)
    types: dict[str, ModelTypeMetadata] = Field(default_factory=dict)


__all__ = ["ModelScopeMetadataContract"]
