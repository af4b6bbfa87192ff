# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Controller (coordinator) reconciler.

Converges the controller and derives its in-cluster endpoint from the live
Service, for the kubelet stage to consume.
"""

from __future__ import annotations

from collections.abc import Mapping

from kog_operator.enums import EnumComponentName, EnumResourceKind
from kog_operator.errors import MalformedLiveStateError, MissingLiveResourceError
from kog_operator.microservices import build_controller_microservice
from kog_operator.models import ModelControlPlaneSpec, ModelDerivedValues
from kog_operator.models.model_operator_config import DEFAULT_CLUSTER_DOMAIN
from kog_operator.reconcilers.reconcile_context import ReconcileContext
from kog_operator.reconcilers.reconciler_base import ComponentReconcilerBase


class ControllerReconciler(ComponentReconcilerBase):
    """Reconciles the controller and returns its reachable endpoint."""

    component = EnumComponentName.CONTROLLER

    def __init__(self, cluster_domain: str = DEFAULT_CLUSTER_DOMAIN) -> None:
        self._cluster_domain = cluster_domain

    def reconcile(
        self,
        spec: ModelControlPlaneSpec,
        context: ReconcileContext,
        derived: ModelDerivedValues,
    ) -> ModelDerivedValues:
        microservice = build_controller_microservice(
            replicas=spec.controller_replica_count,
            image=spec.controller_image,
            image_pull_secret=spec.image_pull_secret,
            database=spec.database,
            service_type=spec.service_type,
            load_balancer_ip=spec.load_balancer_ip,
        )
        self._converge_microservice(microservice, context)
        endpoint = self._read_endpoint(context, microservice.name)
        context.logger.debug("Controller endpoint is %s", endpoint)
        return derived.model_copy(update={"controller_endpoint": endpoint})

    def _read_endpoint(self, context: ReconcileContext, service_name: str) -> str:
        """Derive ``<service>.<namespace>.svc.<domain>:<port>`` from the live Service."""
        service = self._read(context, EnumResourceKind.SERVICE, service_name)
        error_context = self._error_context(
            context, "read_endpoint", EnumResourceKind.SERVICE, service_name
        )
        if service is None:
            raise MissingLiveResourceError(
                "Controller Service not found after convergence",
                context=error_context,
            )
        spec = service.get("spec")
        ports = spec.get("ports") if isinstance(spec, Mapping) else None
        if not isinstance(ports, list) or not ports or not isinstance(ports[0], Mapping):
            raise MalformedLiveStateError(
                "Controller Service exposes no ports",
                context=error_context,
            )
        port = ports[0].get("port")
        if not isinstance(port, int):
            raise MalformedLiveStateError(
                "Controller Service port is not an integer",
                context=error_context,
            )
        return f"{service_name}.{context.namespace}.svc.{self._cluster_domain}:{port}"


__all__ = ["ControllerReconciler"]
