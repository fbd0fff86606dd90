# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error codes for fatal object scope authorization errors.

Authorization denials are not errors in this sense: they are recorded on the
result tree and never raised. These codes classify the failures that abort
an authorization pass.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumScopeErrorCode(str, Enum):
    """Classification of fatal scope authorization errors.

    Attributes:
        OPERATION_FAILED: Generic failure, used when nothing more specific applies.
        INVALID_CONFIGURATION: Type metadata or a metadata contract is invalid.
        INVALID_INSTANCE: A backing data instance is not a tagged record.
        INVALID_RESULT: The scope authorizer returned something other than a bool.
    """

    OPERATION_FAILED = "OPERATION_FAILED"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    INVALID_INSTANCE = "INVALID_INSTANCE"
    INVALID_RESULT = "INVALID_RESULT"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumScopeErrorCode"]
