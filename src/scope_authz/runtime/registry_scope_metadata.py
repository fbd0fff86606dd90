# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scope Metadata Registry.

Lookup table of object type scope metadata keyed by type identifier. The
registry is populated once when the schema is built, either in code or from
a metadata contract, and is then read by every authorization pass.

Thread Safety:
    Registration and lookup are protected by a threading.Lock. The registry
    is read-mostly; lookups during a pass do not block each other for longer
    than a dict access.

Example:
    >>> registry = RegistryScopeMetadata()
    >>> registry.register("user", ModelTypeMetadata(scope_by="id"))
    >>> registry.register("wallet", ModelTypeMetadata(scope_by="id", rule="read_only"))
    >>> registry.get("user").scope_by
    'id'
    >>> registry.validate()  # raises ScopeConfigurationError on bad entries
"""

from __future__ import annotations

import logging
import threading

from scope_authz.models import ModelTypeMetadata
from scope_authz.runtime.scope_resolver import resolve_scope_by

logger = logging.getLogger(__name__)

_EMPTY_METADATA = ModelTypeMetadata()


class RegistryScopeMetadata:
    """Registry of scope metadata for object types.

    Unknown types resolve to empty metadata, which the scope resolver
    rejects with "No scope_by or scope_object_by declared". A type that
    should never be scoped must say so with ``scope_by=False``.

    Attributes:
        _entries: Type identifier to metadata mapping.
        _lock: Lock guarding ``_entries``.
    """

    def __init__(self) -> None:
        self._entries: dict[str, ModelTypeMetadata] = {}
        self._lock: threading.Lock = threading.Lock()

    def register(self, type_identifier: str, metadata: ModelTypeMetadata) -> None:
        """Register the scope metadata of an object type.

        Registering a type twice replaces the previous metadata.

        Args:
            type_identifier: Named object type (unwrapped).
            metadata: Scope declarations of the type.
        """
        with self._lock:
            replaced = type_identifier in self._entries
            self._entries[type_identifier] = metadata

        if replaced:
            logger.warning(
                "Replaced scope metadata of type",
                extra={"type_identifier": type_identifier},
            )
        else:
            logger.debug(
                "Registered scope metadata of type",
                extra={
                    "type_identifier": type_identifier,
                    "scope_by": metadata.scope_by,
                    "scope_object_by": metadata.scope_object_by,
                    "rule": metadata.rule,
                },
            )

    def get(self, type_identifier: str) -> ModelTypeMetadata:
        """Return the metadata of a type, or empty metadata if unregistered."""
        with self._lock:
            return self._entries.get(type_identifier, _EMPTY_METADATA)

    def is_registered(self, type_identifier: str) -> bool:
        with self._lock:
            return type_identifier in self._entries

    def list_type_identifiers(self) -> list[str]:
        """Return registered type identifiers in sorted order."""
        with self._lock:
            return sorted(self._entries)

    def unregister(self, type_identifier: str) -> bool:
        """Remove a type; return True if it was registered."""
        with self._lock:
            return self._entries.pop(type_identifier, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def validate(self) -> None:
        """Resolve every registered type, raising on the first bad declaration.

        Surfaces the same configuration errors an authorization pass would
        raise, before any query is executed.

        Raises:
            ScopeConfigurationError: If a type declares neither or both of
                scope_by and scope_object_by.
        """
        with self._lock:
            entries = sorted(self._entries.items())

        for type_identifier, metadata in entries:
            resolve_scope_by(type_identifier, metadata)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, type_identifier: str) -> bool:
        return self.is_registered(type_identifier)


__all__: list[str] = ["RegistryScopeMetadata"]
