# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for scope metadata contract loading.

Tests cover:
    - Loading a valid contract and building a registry from it
    - Missing, oversized, malformed and mis-shaped contract files
    - Per-type metadata validation
    - Building an authorization context from a contract
"""

from __future__ import annotations

from pathlib import Path
from uuid import uuid4

import pytest

from scope_authz.enums import EnumScopeErrorCode
from scope_authz.errors import ScopeConfigurationError
from scope_authz.models import ModelScopeMetadataContract, ModelTypeMetadata
from scope_authz.runtime import (
    MAX_METADATA_CONTRACT_SIZE_BYTES,
    ModelAuthorizationContext,
    load_scope_metadata_contract,
    registry_from_contract,
)
from tests.helpers.util_scope import RecordingScopeAuthorizer, owner_decision

pytestmark = [pytest.mark.unit]

VALID_CONTRACT = """\
default_rule: tenant
types:
  user:
    scope_by: id
    rule: default
  company:
    scope_object_by: user_id
  wallet:
    scope_by: id
    rule: read_only
  public_stats:
    scope_by: false
"""


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "scope_metadata.yaml"
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadScopeMetadataContract:
    """Contract file parsing and validation."""

    def test_valid_contract(self, tmp_path: Path) -> None:
        contract = load_scope_metadata_contract(_write(tmp_path, VALID_CONTRACT))

        assert contract.default_rule == "tenant"
        assert contract.types["user"] == ModelTypeMetadata(scope_by="id", rule="default")
        assert contract.types["company"].scope_object_by == "user_id"
        assert contract.types["public_stats"].scope_by is False

    def test_default_rule_defaults(self, tmp_path: Path) -> None:
        contract = load_scope_metadata_contract(
            _write(tmp_path, "types:\n  user:\n    scope_by: id\n")
        )

        assert contract.default_rule == "default"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ScopeConfigurationError, match="not found") as exc_info:
            load_scope_metadata_contract(tmp_path / "missing.yaml")

        assert exc_info.value.error_code == EnumScopeErrorCode.INVALID_CONFIGURATION
        assert exc_info.value.correlation_id is not None

    def test_oversized_file(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "#" * (MAX_METADATA_CONTRACT_SIZE_BYTES + 1))

        with pytest.raises(ScopeConfigurationError, match="too large"):
            load_scope_metadata_contract(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "types: [unclosed\n")

        with pytest.raises(ScopeConfigurationError, match="Invalid YAML") as exc_info:
            load_scope_metadata_contract(path)

        assert exc_info.value.__cause__ is not None

    def test_non_mapping_contract(self, tmp_path: Path) -> None:
        with pytest.raises(ScopeConfigurationError, match="must be a dict, got list"):
            load_scope_metadata_contract(_write(tmp_path, "- user\n- wallet\n"))

    def test_empty_contract(self, tmp_path: Path) -> None:
        with pytest.raises(ScopeConfigurationError, match="got NoneType"):
            load_scope_metadata_contract(_write(tmp_path, ""))

    def test_unknown_metadata_key(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "types:\n  user:\n    scope: id\n")

        with pytest.raises(ScopeConfigurationError) as exc_info:
            load_scope_metadata_contract(path)

        assert exc_info.value.context["validation_errors"][0]["loc"] == [
            "types",
            "user",
            "scope",
        ]

    def test_scope_by_true_is_rejected(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "types:\n  user:\n    scope_by: true\n")

        with pytest.raises(ScopeConfigurationError, match="Invalid scope metadata"):
            load_scope_metadata_contract(path)


class TestRegistryFromContract:
    """Registry construction from parsed contracts."""

    def test_registers_every_type(self, tmp_path: Path) -> None:
        contract = load_scope_metadata_contract(_write(tmp_path, VALID_CONTRACT))

        registry = registry_from_contract(contract)

        assert registry.list_type_identifiers() == [
            "company",
            "public_stats",
            "user",
            "wallet",
        ]

    def test_validation_rejects_contradictory_types(self) -> None:
        contract = ModelScopeMetadataContract(
            types={"user": ModelTypeMetadata(scope_by="id", scope_object_by="owner")}
        )

        with pytest.raises(ScopeConfigurationError):
            registry_from_contract(contract)

    def test_validation_can_be_deferred(self) -> None:
        contract = ModelScopeMetadataContract(types={"user": ModelTypeMetadata()})

        registry = registry_from_contract(contract, validate=False)

        assert "user" in registry


class TestContextFromContract:
    """ModelAuthorizationContext.from_contract."""

    def test_context_uses_contract_default_rule(self, tmp_path: Path) -> None:
        contract = load_scope_metadata_contract(_write(tmp_path, VALID_CONTRACT))
        correlation_id = uuid4()

        context = ModelAuthorizationContext.from_contract(
            contract,
            actor={"id": 1},
            authorizer=RecordingScopeAuthorizer(owner_decision),
            correlation_id=correlation_id,
        )

        assert context.default_rule == "tenant"
        assert context.correlation_id == correlation_id
        assert context.metadata.get("wallet").rule == "read_only"

    def test_context_generates_correlation_id(self) -> None:
        context = ModelAuthorizationContext.from_contract(
            ModelScopeMetadataContract(),
            actor=None,
            authorizer=RecordingScopeAuthorizer(owner_decision),
        )

        assert context.correlation_id is not None
        assert len(context.metadata) == 0
