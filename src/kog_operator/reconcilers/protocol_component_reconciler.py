# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol interface for managed-component reconcilers.

Each reconciler owns exactly one managed component. It builds the
component's bundle from the spec, converges live state onto it and returns
the derived values later stages need. Derived values only flow forward:
a reconciler may read values produced by earlier stages of the same pass,
never values from a previous pass.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from kog_operator.enums import EnumComponentName
from kog_operator.models import ModelControlPlaneSpec, ModelDerivedValues

if TYPE_CHECKING:
    from kog_operator.reconcilers.reconcile_context import ReconcileContext


@runtime_checkable
class ProtocolComponentReconciler(Protocol):
    """Shared capability of the four component reconcilers."""

    @property
    def component(self) -> EnumComponentName:
        """Managed component this reconciler owns."""
        ...

    def reconcile(
        self,
        spec: ModelControlPlaneSpec,
        context: ReconcileContext,
        derived: ModelDerivedValues,
    ) -> ModelDerivedValues:
        """Converge the component and return the (possibly extended) derived values.

        Raises:
            KogOperatorError: On any failure; the orchestrator aborts the pass.
        """
        ...


__all__ = ["ProtocolComponentReconciler"]
