# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol interface for host-supplied scope authorizers.

The scope authorizer is the decision point of object scope authorization: it
answers whether an actor may see a data instance of a given kind whose scope
field holds a given value, under a given rule. The object scope authorizer
makes no assumption about its internals beyond the boolean it returns.

Implementations decide how to treat a ``None`` field value; it is passed
through as-is when the scope field is absent on the instance.

Example Usage:
    ```python
    class TenantScopeAuthorizer:
        '''Grants access to records owned by the actor.'''

        def has_context_access(
            self,
            actor: object,
            scope: object,
            scope_field: tuple[str, object],
            rule: str,
        ) -> bool:
            if actor.role == "admin":
                return True
            if scope == "wallet" and rule == "read_only":
                return True
            _field, value = scope_field
            return value is not None and value == actor.id

    context = ModelAuthorizationContext(
        actor=current_user,
        authorizer=TenantScopeAuthorizer(),
        metadata=registry,
    )
    ```

Errors:
    Exceptions raised inside ``has_context_access`` are not recovered by the
    object scope authorizer; they propagate to the caller of the pass. A
    return value that is not a bool aborts the pass with ScopeResultError.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolScopeAuthorizer(Protocol):
    """Host-supplied decision point for object scope authorization.

    Implementations SHOULD be synchronous and free of side effects. The pass
    calls ``has_context_access`` once per scoped object node and never caches
    its result.
    """

    def has_context_access(
        self,
        actor: object,
        scope: object,
        scope_field: tuple[str, object],
        rule: str,
    ) -> bool:
        """Decide whether ``actor`` may access the scoped instance.

        Args:
            actor: Current principal taken from the authorization context.
            scope: Record kind of the backing instance (a tag string, or the
                model class for pydantic model instances).
            scope_field: ``(field_name, field_value)`` pair; the value may be
                None.
            rule: Effective rule of the object type.

        Returns:
            True if access is granted, False otherwise. Truthy or falsy
            values of other types are rejected.
        """
        ...


__all__: list[str] = ["ProtocolScopeAuthorizer"]
