# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for scope_authz tests."""

from __future__ import annotations

from collections.abc import Callable
from uuid import uuid4

import pytest

from scope_authz.models import ModelTypeMetadata
from scope_authz.runtime import ModelAuthorizationContext, RegistryScopeMetadata
from tests.helpers.util_scope import RecordingScopeAuthorizer, owner_decision


@pytest.fixture
def registry() -> RegistryScopeMetadata:
    """Registry with the user / company / wallet / public_stats schema."""
    registry = RegistryScopeMetadata()
    registry.register("user", ModelTypeMetadata(scope_by="id", rule="default"))
    registry.register("company", ModelTypeMetadata(scope_by="user_id"))
    registry.register("wallet", ModelTypeMetadata(scope_by="id", rule="read_only"))
    registry.register("public_stats", ModelTypeMetadata(scope_by=False))
    return registry


@pytest.fixture
def owner_authorizer() -> RecordingScopeAuthorizer:
    return RecordingScopeAuthorizer(owner_decision)


@pytest.fixture
def make_context(
    registry: RegistryScopeMetadata,
    owner_authorizer: RecordingScopeAuthorizer,
) -> Callable[..., ModelAuthorizationContext]:
    """Factory building contexts over the shared registry and authorizer."""

    def _make_context(
        actor: object,
        *,
        authorizer: object | None = None,
        metadata: RegistryScopeMetadata | None = None,
        default_rule: str = "default",
    ) -> ModelAuthorizationContext:
        return ModelAuthorizationContext(
            actor=actor,
            authorizer=owner_authorizer if authorizer is None else authorizer,
            metadata=registry if metadata is None else metadata,
            default_rule=default_rule,
            correlation_id=uuid4(),
        )

    return _make_context
