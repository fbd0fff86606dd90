# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Construction of the error recorded on a denied object node."""

from __future__ import annotations

from scope_authz.models import ModelNodeError, ModelSourceLocation
from scope_authz.runtime.constants_scope import PHASE_OBJECT_SCOPE_AUTHORIZATION


def build_denial_error(
    type_identifier: str,
    source_location: ModelSourceLocation | None,
) -> ModelNodeError:
    """Build the error attached to an object node the actor may not access.

    The message starts with a capital letter:
    ``Not authorized to access object <type_identifier>``. Hosts matching on
    the text should compare case-insensitively or use ``phase``.

    Args:
        type_identifier: Object type of the denied node.
        source_location: Location of the denied selection, if known.

    Returns:
        Error carrying the message, the node location and the phase tag.
    """
    locations = (source_location,) if source_location is not None else ()
    return ModelNodeError(
        message=f"Not authorized to access object {type_identifier}",
        locations=locations,
        phase=PHASE_OBJECT_SCOPE_AUTHORIZATION,
    )


__all__: list[str] = ["build_denial_error"]
