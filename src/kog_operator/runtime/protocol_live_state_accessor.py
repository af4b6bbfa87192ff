# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol interface for reading and mutating live cluster state.

The reconcilers never talk to the Kubernetes API directly; they go through a
ProtocolLiveStateAccessor. Objects cross the boundary as plain dicts in
Kubernetes API (camelCase) form.

Contract:
    - ``read`` returns None when the object does not exist
    - ``create`` and ``replace`` return the object as stored by the platform
    - Any rejected call raises PlatformApiError with component-independent
      context (operation, kind, name); callers add their own context
    - No retries: retry policy belongs to the dispatcher

See Also:
    - KubernetesLiveStateAccessor: implementation on the kubernetes client
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional, Protocol, runtime_checkable

from kog_operator.enums import EnumResourceKind


@runtime_checkable
class ProtocolLiveStateAccessor(Protocol):
    """Blocking access to the orchestration platform's state store."""

    def read(
        self,
        kind: EnumResourceKind,
        namespace: str,
        name: str,
    ) -> Optional[dict[str, object]]:
        """Read a live object, or None when it does not exist."""
        ...

    def create(
        self,
        kind: EnumResourceKind,
        namespace: str,
        body: Mapping[str, object],
    ) -> dict[str, object]:
        """Create an object from ``body``."""
        ...

    def replace(
        self,
        kind: EnumResourceKind,
        namespace: str,
        name: str,
        body: Mapping[str, object],
    ) -> dict[str, object]:
        """Replace an existing object with ``body``."""
        ...

    def read_control_plane(
        self,
        namespace: str,
        name: str,
    ) -> Optional[dict[str, object]]:
        """Read the Kog custom resource, or None when it no longer exists."""
        ...


__all__ = ["ProtocolLiveStateAccessor"]
