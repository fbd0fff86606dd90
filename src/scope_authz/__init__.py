# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Object Scope Authorization - result tree scoping for query executions.

This package authorizes every object of a query execution result against the
current actor, using scope metadata declared per object type:

- scope_by / scope_object_by: field holding an instance's owner or tenant key
  (scope_by=False exempts a type)
- rule: authorization rule handed to the host-supplied authorizer

Key Components:
    - ObjectScopeAuthorizer: walks the result tree once, pruning denied objects
    - RegistryScopeMetadata: per-type scope metadata lookup table
    - ProtocolScopeAuthorizer: host-supplied decision point
    - ScopeConfigurationError / ScopeInstanceError / ScopeResultError: fatal pass errors
"""

__all__: list[str] = []
