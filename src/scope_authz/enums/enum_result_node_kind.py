# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Result tree node kinds.

Each node of an execution result tree declares its variant through the
``kind`` discriminator. The object scope authorizer dispatches on this value.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumResultNodeKind(str, Enum):
    """Variant tag of a result tree node.

    Attributes:
        ROOT: Root operation node (query, mutation or subscription).
        INTROSPECTION: Introspection node, never scoped.
        OBJECT: Composite node backed by a data instance.
        LIST: Ordered sequence of homogeneous nodes.
        LEAF: Scalar value.
    """

    ROOT = "root"
    INTROSPECTION = "introspection"
    OBJECT = "object"
    LIST = "list"
    LEAF = "leaf"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumResultNodeKind"]
