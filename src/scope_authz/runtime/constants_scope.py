# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Constants of the object scope authorization pass.

Example:
    >>> from scope_authz.runtime.constants_scope import (
    ...     PHASE_OBJECT_SCOPE_AUTHORIZATION,
    ... )
    >>> error.phase == PHASE_OBJECT_SCOPE_AUTHORIZATION
    True
"""

from __future__ import annotations

from typing import Final

# Phase tag carried by every denial error, identifying this pass as its origin.
PHASE_OBJECT_SCOPE_AUTHORIZATION: Final[str] = "object_scope_authorization"

# Rule applied when neither the type nor the context names one.
DEFAULT_RULE: Final[str] = "default"

# Maximum metadata contract file size (1 MiB).
MAX_METADATA_CONTRACT_SIZE_BYTES: Final[int] = 1024 * 1024

__all__: list[str] = [
    "DEFAULT_RULE",
    "MAX_METADATA_CONTRACT_SIZE_BYTES",
    "PHASE_OBJECT_SCOPE_AUTHORIZATION",
]
