# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Schema type reference utilities.

Object nodes reference their schema type the way the schema declares the
field, including non-null (``!``) and list (``[...]``) wrappers. Scope
metadata is declared on the named object type, so wrappers are stripped
before lookup.

Example:
    >>> unwrap_type_ref("[user!]!")
    'user'
    >>> unwrap_type_ref("wallet")
    'wallet'
"""

from __future__ import annotations

from uuid import UUID

from scope_authz.errors import ModelScopeErrorContext, ScopeConfigurationError

_WRAPPER_CHARS = frozenset("[]!")


def unwrap_type_ref(type_ref: str, correlation_id: UUID | None = None) -> str:
    """Return the named type of a possibly wrapped type reference.

    Args:
        type_ref: Type reference such as ``user``, ``user!`` or ``[user!]!``.
        correlation_id: Correlation ID propagated into raised errors.

    Returns:
        The innermost named type identifier.

    Raises:
        ScopeConfigurationError: If the reference is empty or its wrappers
            are unbalanced.
    """
    current = type_ref.strip()
    while current:
        if current.endswith("!"):
            current = current[:-1]
        elif current.startswith("[") and current.endswith("]"):
            current = current[1:-1]
        else:
            break

    if not current or any(char in _WRAPPER_CHARS for char in current):
        raise ScopeConfigurationError(
            f"Malformed type reference '{type_ref}'",
            context=ModelScopeErrorContext(
                operation="unwrap_type_ref",
                correlation_id=correlation_id,
            ),
        )

    return current


__all__ = ["unwrap_type_ref"]
