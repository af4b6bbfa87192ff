# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Control Plane Specification Model.

This module defines the desired-state root read from a Kog custom resource.
The model is immutable: a reconciliation pass works on one validated
snapshot of the resource and derives a decoded copy from it.

Custom resource shape (camelCase, under ``spec.controlPlane``)::

    spec:
      controlPlane:
        iofogUser: {name, surname, email, password}
        controllerReplicaCount: 1
        controllerImage: iofog/controller:1.3.0
        imagePullSecret: ""
        serviceType: LoadBalancer
        loadBalancerIp: ""
        database: {provider, databaseName, user, password, host, port}
        kubeletImage: iofog/iofog-kubelet:1.3.0
        portManagerImage: iofog/port-manager:1.3.0
        watchNamespace: ""
        skupperImage: quay.io/skupper/qdrouterd:0.1.0
        skupperVolumeMountPath: /etc/qpid-dispatch-certs
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError
from pydantic.alias_generators import to_camel

from kog_operator.errors import ControlPlaneSpecError, ModelReconcileErrorContext
from kog_operator.models.model_database import ModelDatabase
from kog_operator.models.model_iofog_user import ModelIofogUser

DEFAULT_SERVICE_TYPE = "LoadBalancer"
DEFAULT_SKUPPER_VOLUME_MOUNT_PATH = "/etc/qpid-dispatch-certs"


class ModelControlPlaneSpec(BaseModel):
    """Desired state of the edge control plane.

    Attributes:
        iofog_user: Controller user credential pair
        controller_replica_count: Requested controller replicas (0 means 1)
        controller_image: Controller container image
        image_pull_secret: Pull secret for the controller image
        service_type: Controller Service type
        load_balancer_ip: Load-balancer IP hint for the controller Service
        database: Controller database connection parameters
        kubelet_image: Virtual kubelet container image
        port_manager_image: Port manager container image
        watch_namespace: Namespace watched by the port manager (empty: own namespace)
        skupper_image: Skupper router container image
        skupper_volume_mount_path: Base path for the router's certificate volumes
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    iofog_user: ModelIofogUser
    controller_replica_count: int = Field(default=1, ge=0)
    controller_image: str = Field(min_length=1)
    image_pull_secret: str = ""
    service_type: str = DEFAULT_SERVICE_TYPE
    load_balancer_ip: str = ""
    database: ModelDatabase
    kubelet_image: str = Field(min_length=1)
    port_manager_image: str = Field(min_length=1)
    watch_namespace: str = ""
    skupper_image: str = Field(min_length=1)
    skupper_volume_mount_path: str = DEFAULT_SKUPPER_VOLUME_MOUNT_PATH

    @classmethod
    def from_custom_resource(
        cls,
        body: Mapping[str, object],
        context: Optional[ModelReconcileErrorContext] = None,
    ) -> ModelControlPlaneSpec:
        """Validate the ``spec.controlPlane`` section of a Kog custom resource.

        Raises:
            ControlPlaneSpecError: If the section is missing or fails validation.
        """
        spec = body.get("spec")
        control_plane = spec.get("controlPlane") if isinstance(spec, Mapping) else None
        if not isinstance(control_plane, Mapping):
            raise ControlPlaneSpecError(
                "Custom resource has no spec.controlPlane section",
                context=context,
            )
        try:
            return cls.model_validate(control_plane)
        except ValidationError as e:
            validation_errors = [
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise ControlPlaneSpecError(
                f"Control plane spec validation failed: {e.error_count()} error(s). "
                f"First errors: {'; '.join(validation_errors[:3])}",
                context=context,
                validation_errors=validation_errors,
            ) from e

    def with_user_password(self, password: str) -> ModelControlPlaneSpec:
        """Return a copy whose controller user carries ``password``."""
        user = self.iofog_user.model_copy(update={"password": SecretStr(password)})
        return self.model_copy(update={"iofog_user": user})

    def resolve_watch_namespace(self, namespace: str) -> str:
        """Namespace the port manager watches; defaults to the resource's own."""
        return self.watch_namespace or namespace


__all__ = [
    "DEFAULT_SERVICE_TYPE",
    "DEFAULT_SKUPPER_VOLUME_MOUNT_PATH",
    "ModelControlPlaneSpec",
]
