# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Identifiers of introspection nodes."""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumIntrospectionIdentifier(str, Enum):
    """Identifier of an introspection node.

    An introspection node may also carry no identifier at all; both cases
    pass through the object scope authorizer unchanged.
    """

    QUERY_TYPE = "query_type"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumIntrospectionIdentifier"]
