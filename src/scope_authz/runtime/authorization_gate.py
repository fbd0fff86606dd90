# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Authorization gate of the object scope authorization pass.

The gate is the only place the host-supplied authorizer is invoked. Unscoped
types (``scope_by`` is False) are authorized without consulting it. The
authorizer must answer with a bool; anything else aborts the pass rather
than being read as truthy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Union

from scope_authz.errors import ModelScopeErrorContext, ScopeResultError

if TYPE_CHECKING:
    from scope_authz.runtime.model_authorization_context import (
        ModelAuthorizationContext,
    )


def authorize(
    scope: object,
    scope_by: Union[str, Literal[False]],
    field_value: object | None,
    context: ModelAuthorizationContext,
    rule: str,
    *,
    type_identifier: str | None = None,
) -> bool:
    """Decide whether the context's actor may access a scoped instance.

    Args:
        scope: Scope subject returned by ``extract_scope``.
        scope_by: Resolved scope field, or False for unscoped types.
        field_value: Value of the scope field on the instance; may be None.
        context: Authorization context of the pass.
        rule: Effective rule of the object type.
        type_identifier: Object type being checked, for error reporting.

    Returns:
        True for unscoped types; otherwise the authorizer's decision.

    Raises:
        ScopeResultError: If the authorizer returns anything but a bool.
    """
    if scope_by is False:
        return True

    decision = context.authorizer.has_context_access(
        context.actor,
        scope,
        (scope_by, field_value),
        rule,
    )

    if not isinstance(decision, bool):
        raise ScopeResultError(
            f"Scope authorizer returned {type(decision).__name__} instead of "
            f"bool for rule '{rule}'",
            context=ModelScopeErrorContext(
                operation="authorize",
                type_identifier=type_identifier,
                correlation_id=context.correlation_id,
            ),
            result_type=type(decision).__name__,
        )

    return decision


__all__: list[str] = ["authorize"]
