# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Object Scope Authorizer.

Authorization pass that walks an execution result tree and checks, for every
object node, that the current actor may see the data instance backing it.
Each object type declares in its scope metadata which field scopes its
instances (``scope_by`` / ``scope_object_by``) and which rule applies
(``rule``, defaulting to the context default rule).

Per object node:

    resolve scope field -> extract scope subject and field value -> gate
        authorized: walk the children
        denied:     drop the children, append one ModelNodeError

Traversal:
    - Introspection nodes are returned unchanged.
    - Root operation fields and list elements are walked independently and
      in order. A denial never affects siblings.
    - A denied object's subtree is pruned before any of it is inspected.
    - The walk uses an explicit stack; arbitrarily deep trees are supported.
    - Leaves are returned unchanged.

Failure Policy:
    Authorization denials are local and recorded on the tree. Configuration
    and data errors (ScopeConfigurationError, ScopeInstanceError,
    ScopeResultError) abort the whole pass; no partial tree is returned.
    Exceptions raised by the authorizer propagate unchanged.

Thread Safety:
    ObjectScopeAuthorizer holds only its immutable context. A single
    instance may run passes concurrently.

Example:
    >>> context = ModelAuthorizationContext(
    ...     actor=current_user,
    ...     authorizer=TenantScopeAuthorizer(),
    ...     metadata=registry,
    ... )
    >>> authorizer = ObjectScopeAuthorizer(context)
    >>> execution = authorizer.run(execution)
"""

from __future__ import annotations

import logging

from scope_authz.enums import EnumResultNodeKind
from scope_authz.models import ModelExecution, ModelObjectNode, ModelResultNode
from scope_authz.runtime.authorization_gate import authorize
from scope_authz.runtime.model_authorization_context import ModelAuthorizationContext
from scope_authz.runtime.scope_denial import build_denial_error
from scope_authz.runtime.scope_extractor import extract_field_value, extract_scope
from scope_authz.runtime.scope_resolver import resolve_scope_by
from scope_authz.utils import unwrap_type_ref

logger = logging.getLogger(__name__)


class ObjectScopeAuthorizer:
    """Walks a result tree once and prunes objects the actor may not see.

    Attributes:
        _context: Authorization context shared by every node visit.
    """

    def __init__(self, context: ModelAuthorizationContext) -> None:
        self._context = context

    @property
    def context(self) -> ModelAuthorizationContext:
        return self._context

    def run(self, execution: ModelExecution) -> ModelExecution:
        """Authorize the result of an execution.

        Executions that already carry validation errors, or have no result,
        are returned unchanged without walking.

        Args:
            execution: Execution produced by the upstream pipeline.

        Returns:
            Execution whose result has been walked.

        Raises:
            ScopeConfigurationError: If an object type's scope metadata is
                missing, contradictory or references a malformed type.
            ScopeInstanceError: If a scoped object is not backed by a
                tagged record.
            ScopeResultError: If the scope authorizer returns a non-bool
                decision.
        """
        if execution.has_validation_errors or execution.result is None:
            return execution

        return execution.model_copy(update={"result": self.walk(execution.result)})

    def walk(self, node: ModelResultNode) -> ModelResultNode:
        """Return ``node`` with every object below it authorized.

        Nodes are visited depth-first in document order with an explicit
        stack, so tree depth is not bounded by the interpreter recursion
        limit. Containers are rebuilt once all of their children are done.

        Args:
            node: Any result tree node.

        Returns:
            Node of the same shape; unaffected nodes are returned as-is.
        """
        entered = self._enter(node)
        if not isinstance(entered, _PendingNode):
            return entered

        stack = [entered]
        while True:
            pending = stack[-1]
            if pending.index < len(pending.children):
                child = pending.children[pending.index]
                pending.index += 1
                entered = self._enter(child)
                if isinstance(entered, _PendingNode):
                    stack.append(entered)
                else:
                    pending.walked.append(entered)
                continue

            stack.pop()
            rebuilt = pending.rebuild()
            if not stack:
                return rebuilt
            stack[-1].walked.append(rebuilt)

    def _enter(self, node: ModelResultNode) -> ModelResultNode | _PendingNode:
        """Visit ``node`` and return it finished, or pending its children."""
        kind = node.kind

        if kind == EnumResultNodeKind.INTROSPECTION:
            return node

        if kind == EnumResultNodeKind.ROOT:
            return _PendingNode(node, "fields", node.fields)

        if kind == EnumResultNodeKind.OBJECT:
            return self._enter_object(node)

        if kind == EnumResultNodeKind.LIST:
            return _PendingNode(node, "values", node.values)

        return node

    def _enter_object(
        self, node: ModelObjectNode
    ) -> ModelObjectNode | _PendingNode:
        context = self._context
        correlation_id = context.correlation_id

        type_identifier = unwrap_type_ref(node.type_ref, correlation_id)
        metadata = context.metadata.get(type_identifier)
        scope_by = resolve_scope_by(type_identifier, metadata, correlation_id)
        scope = extract_scope(scope_by, type_identifier, node.root_value, correlation_id)
        rule = metadata.rule or context.default_rule

        field_value = (
            None if scope_by is False else extract_field_value(node.root_value, scope_by)
        )

        if authorize(
            scope,
            scope_by,
            field_value,
            context,
            rule,
            type_identifier=type_identifier,
        ):
            return _PendingNode(node, "fields", node.fields)

        logger.debug(
            "Denied access to object",
            extra={
                "type_identifier": type_identifier,
                "scope_by": scope_by,
                "rule": rule,
                "correlation_id": str(correlation_id),
            },
        )

        denial = build_denial_error(type_identifier, node.source_location)
        return node.model_copy(
            update={"fields": (), "errors": (*node.errors, denial)},
        )


class _PendingNode:
    """Container node whose children are still being walked."""

    __slots__ = ("node", "attribute", "children", "walked", "index")

    def __init__(
        self,
        node: ModelResultNode,
        attribute: str,
        children: tuple[ModelResultNode, ...],
    ) -> None:
        self.node = node
        self.attribute = attribute
        self.children = children
        self.walked: list[ModelResultNode] = []
        self.index = 0

    def rebuild(self) -> ModelResultNode:
        return self.node.model_copy(update={self.attribute: tuple(self.walked)})


def authorize_execution(
    execution: ModelExecution,
    context: ModelAuthorizationContext,
) -> ModelExecution:
    """Run one object scope authorization pass over ``execution``.

    Convenience wrapper around ``ObjectScopeAuthorizer(context).run(execution)``.
    """
    return ObjectScopeAuthorizer(context).run(execution)


__all__: list[str] = ["ObjectScopeAuthorizer", "authorize_execution"]
