# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scope Metadata Contract Loader.

Loads object type scope metadata from a contract YAML file and builds a
RegistryScopeMetadata from it.

The loader validates:
- Contract file existence
- Contract file size
- YAML syntax validity
- Contract structure (must be a dict with ``default_rule`` and ``types``)
- Per-type metadata fields

Contract File Structure:
    ```yaml
    default_rule: default
    types:
      user:
        scope_by: id
        rule: default
      company:
        scope_object_by: user_id
      public_stats:
        scope_by: false
    ```

Security:
    - Uses yaml.safe_load() to prevent arbitrary code execution
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from scope_authz.errors import ModelScopeErrorContext, ScopeConfigurationError
from scope_authz.models import ModelScopeMetadataContract
from scope_authz.runtime.constants_scope import MAX_METADATA_CONTRACT_SIZE_BYTES
from scope_authz.runtime.registry_scope_metadata import RegistryScopeMetadata

logger = logging.getLogger(__name__)


def load_scope_metadata_contract(
    contract_path: str | Path,
) -> ModelScopeMetadataContract:
    """Load a scope metadata contract from a YAML file.

    Args:
        contract_path: Path to the contract YAML file.

    Returns:
        The parsed and validated contract.

    Raises:
        ScopeConfigurationError: If the file is missing, too large, not
            valid YAML, not a mapping, or declares invalid type metadata.

    Example:
        >>> contract = load_scope_metadata_contract("contracts/scope_metadata.yaml")
        >>> contract.types["user"].scope_by
        'id'
    """
    path = Path(contract_path)
    error_context = ModelScopeErrorContext.with_correlation(
        operation="load_scope_metadata_contract",
        target_name=str(path),
    )

    if not path.is_file():
        raise ScopeConfigurationError(
            f"Scope metadata contract not found: {contract_path}",
            context=error_context,
        )

    file_size = path.stat().st_size
    if file_size > MAX_METADATA_CONTRACT_SIZE_BYTES:
        raise ScopeConfigurationError(
            f"Scope metadata contract too large: {file_size} bytes "
            f"(max {MAX_METADATA_CONTRACT_SIZE_BYTES})",
            context=error_context,
        )

    try:
        with path.open(encoding="utf-8") as f:
            raw_contract = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ScopeConfigurationError(
            f"Invalid YAML in scope metadata contract: {e}",
            context=error_context,
        ) from e

    if not isinstance(raw_contract, dict):
        raise ScopeConfigurationError(
            f"Scope metadata contract must be a dict, got {type(raw_contract).__name__}",
            context=error_context,
        )

    try:
        contract = ModelScopeMetadataContract.model_validate(raw_contract)
    except ValidationError as e:
        raise ScopeConfigurationError(
            f"Invalid scope metadata contract: {e.error_count()} validation error(s)",
            context=error_context,
            validation_errors=[
                {"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()
            ],
        ) from e

    logger.debug(
        "Loaded scope metadata contract",
        extra={
            "contract_path": str(path),
            "default_rule": contract.default_rule,
            "type_count": len(contract.types),
        },
    )

    return contract


def registry_from_contract(
    contract: ModelScopeMetadataContract,
    *,
    validate: bool = True,
) -> RegistryScopeMetadata:
    """Build a metadata registry from a parsed contract.

    Args:
        contract: Parsed scope metadata contract.
        validate: Resolve every type eagerly so configuration errors surface
            at startup instead of during the first query.

    Returns:
        Registry holding one entry per contract type.

    Raises:
        ScopeConfigurationError: If ``validate`` is set and a type declares
            neither or both of scope_by and scope_object_by.
    """
    registry = RegistryScopeMetadata()
    for type_identifier, metadata in contract.types.items():
        registry.register(type_identifier, metadata)

    if validate:
        registry.validate()

    return registry


__all__: list[str] = [
    "load_scope_metadata_contract",
    "registry_from_contract",
]
