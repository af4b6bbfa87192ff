# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Kubernetes Service Exposure Enumerations.

Service types and external traffic policies as accepted by the
Kubernetes Service API.
"""

from enum import Enum


class EnumServiceType(str, Enum):
    """Kubernetes Service types."""

    CLUSTER_IP = "ClusterIP"
    NODE_PORT = "NodePort"
    LOAD_BALANCER = "LoadBalancer"


class EnumTrafficPolicy(str, Enum):
    """Kubernetes external traffic policies.

    Attributes:
        LOCAL: Route external traffic only to endpoints on the receiving node
        CLUSTER: Load-balance external traffic across the whole cluster
    """

    LOCAL = "Local"
    CLUSTER = "Cluster"


# Service types that accept externalTrafficPolicy on the Kubernetes API.
EXTERNALLY_ROUTED_SERVICE_TYPES: frozenset[str] = frozenset(
    {EnumServiceType.NODE_PORT.value, EnumServiceType.LOAD_BALANCER.value}
)


__all__ = [
    "EXTERNALLY_ROUTED_SERVICE_TYPES",
    "EnumServiceType",
    "EnumTrafficPolicy",
]
