# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Component reconcilers and the control plane orchestrator."""

from kog_operator.reconcilers.orchestrator_control_plane import (
    ControlPlaneOrchestrator,
    default_reconcilers,
)
from kog_operator.reconcilers.protocol_component_reconciler import (
    ProtocolComponentReconciler,
)
from kog_operator.reconcilers.reconcile_context import ReconcileContext
from kog_operator.reconcilers.reconciler_base import ComponentReconcilerBase
from kog_operator.reconcilers.reconciler_controller import ControllerReconciler
from kog_operator.reconcilers.reconciler_kubelet import (
    KubeletReconciler,
    extract_kubelet_token,
)
from kog_operator.reconcilers.reconciler_port_manager import PortManagerReconciler
from kog_operator.reconcilers.reconciler_skupper import SkupperReconciler

__all__ = [
    "ComponentReconcilerBase",
    "ControlPlaneOrchestrator",
    "ControllerReconciler",
    "KubeletReconciler",
    "PortManagerReconciler",
    "ProtocolComponentReconciler",
    "ReconcileContext",
    "SkupperReconciler",
    "default_reconcilers",
    "extract_kubelet_token",
]
