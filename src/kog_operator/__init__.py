# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Kog Operator - Edge control plane reconciler.

This package drives a Kubernetes cluster into the state described by a Kog
custom resource and keeps it there. A Kog resource describes four managed
components, reconciled strictly in this order:

- controller: ioFog Controller REST service
- kubelet: ioFog virtual kubelet, bound to the controller by a token
- port-manager: ioFog port manager
- skupper: Skupper router for the secure overlay network

Key Components:
    - ControlPlaneOrchestrator: one reconciliation pass per observed change
    - Component reconcilers: idempotent create/update per component
    - Bundle builders: pure construction of each component's objects
    - KubernetesLiveStateAccessor: live state through the kubernetes client
    - kopf handlers: event delivery and retry
"""

__all__: list[str] = []
