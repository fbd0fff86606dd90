# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Object Scope Authorization Utilities."""

from scope_authz.utils.util_type_ref import unwrap_type_ref

__all__: list[str] = ["unwrap_type_ref"]
