# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Root operation types of an execution result."""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumOperationType(str, Enum):
    """Operation type carried by a root operation node."""

    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumOperationType"]
