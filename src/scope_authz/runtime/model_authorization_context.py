# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Authorization context of one object scope authorization pass.

The context is built once per query execution and is read-only during the
pass. It carries no per-node state.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from scope_authz.models import ModelScopeMetadataContract
from scope_authz.runtime.constants_scope import DEFAULT_RULE
from scope_authz.runtime.protocol_scope_authorizer import ProtocolScopeAuthorizer
from scope_authz.runtime.registry_scope_metadata import RegistryScopeMetadata
from scope_authz.runtime.scope_metadata_contract_loader import registry_from_contract


class ModelAuthorizationContext(BaseModel):
    """Actor, decision point and type metadata for an authorization pass.

    Attributes:
        actor: Current principal, handed to the authorizer unchanged.
        authorizer: Host-supplied decision point.
        metadata: Scope metadata of the schema's object types.
        default_rule: Rule applied to types that declare none.
        correlation_id: Correlation ID for error context and log records.

    Example:
        >>> context = ModelAuthorizationContext(
        ...     actor=current_user,
        ...     authorizer=TenantScopeAuthorizer(),
        ...     metadata=registry,
        ... )
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    actor: object = None
    authorizer: ProtocolScopeAuthorizer
    metadata: RegistryScopeMetadata
    default_rule: str = Field(default=DEFAULT_RULE, min_length=1)
    correlation_id: UUID = Field(default_factory=uuid4)

    @classmethod
    def from_contract(
        cls,
        contract: ModelScopeMetadataContract,
        *,
        actor: object,
        authorizer: ProtocolScopeAuthorizer,
        correlation_id: UUID | None = None,
    ) -> ModelAuthorizationContext:
        """Build a context from a metadata contract.

        The contract's types are registered in a fresh, validated registry
        and its default rule becomes the context default.

        Raises:
            ScopeConfigurationError: If a contract type is misconfigured.
        """
        return cls(
            actor=actor,
            authorizer=authorizer,
            metadata=registry_from_contract(contract),
            default_rule=contract.default_rule,
            correlation_id=correlation_id or uuid4(),
        )


__all__: list[str] = ["ModelAuthorizationContext"]
