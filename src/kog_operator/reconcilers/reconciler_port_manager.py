# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Port manager (policy manager) reconciler."""

from __future__ import annotations

from kog_operator.enums import EnumComponentName
from kog_operator.microservices import build_port_manager_microservice
from kog_operator.models import ModelControlPlaneSpec, ModelDerivedValues
from kog_operator.reconcilers.reconcile_context import ReconcileContext
from kog_operator.reconcilers.reconciler_base import ComponentReconcilerBase


class PortManagerReconciler(ComponentReconcilerBase):
    """Reconciles the port manager with the decoded controller credentials."""

    component = EnumComponentName.PORT_MANAGER

    def reconcile(
        self,
        spec: ModelControlPlaneSpec,
        context: ReconcileContext,
        derived: ModelDerivedValues,
    ) -> ModelDerivedValues:
        microservice = build_port_manager_microservice(
            image=spec.port_manager_image,
            watch_namespace=spec.resolve_watch_namespace(context.namespace),
            user_email=spec.iofog_user.email,
            user_password=spec.iofog_user.password.get_secret_value(),
        )
        self._converge_microservice(microservice, context)
        return derived


__all__ = ["PortManagerReconciler"]
