# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Managed Component Name Enumeration.

Defines the four managed components of the edge control plane. The enum
values double as the Kubernetes object names used for each component's
workload, service and access-policy objects.
"""

from enum import Enum


class EnumComponentName(str, Enum):
    """Managed components reconciled by the control-plane orchestrator.

    Attributes:
        CONTROLLER: ioFog Controller (coordinator REST service)
        KUBELET: ioFog virtual kubelet (agent bridge)
        PORT_MANAGER: ioFog port manager (policy manager)
        SKUPPER: Skupper router (secure overlay network)
    """

    CONTROLLER = "controller"
    KUBELET = "kubelet"
    PORT_MANAGER = "port-manager"
    SKUPPER = "skupper"


__all__ = ["EnumComponentName"]
