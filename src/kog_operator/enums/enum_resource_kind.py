# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Kubernetes Resource Kind Enumeration.

Defines the Kubernetes object kinds the operator reads and mutates.
Used for live-state access routing and error context.
"""

from enum import Enum


class EnumResourceKind(str, Enum):
    """Kubernetes kinds managed by the convergence layer.

    Attributes:
        DEPLOYMENT: apps/v1 Deployment (component workload)
        SERVICE: v1 Service (network exposure)
        SERVICE_ACCOUNT: v1 ServiceAccount (pod identity)
        ROLE: rbac.authorization.k8s.io/v1 Role (access-policy rules)
        ROLE_BINDING: rbac.authorization.k8s.io/v1 RoleBinding
        SECRET: v1 Secret (credentials and certificates)
    """

    DEPLOYMENT = "Deployment"
    SERVICE = "Service"
    SERVICE_ACCOUNT = "ServiceAccount"
    ROLE = "Role"
    ROLE_BINDING = "RoleBinding"
    SECRET = "Secret"

    @property
    def api_version(self) -> str:
        """Return the apiVersion string used when rendering this kind."""
        if self is EnumResourceKind.DEPLOYMENT:
            return "apps/v1"
        if self in (EnumResourceKind.ROLE, EnumResourceKind.ROLE_BINDING):
            return "rbac.authorization.k8s.io/v1"
        return "v1"


__all__ = ["EnumResourceKind"]
