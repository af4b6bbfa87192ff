# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Managed Component Bundle Model.

A ModelMicroservice is the full declarative description needed to run one
managed component: workload, network exposure, secrets, volumes and access
policy rules. Bundles are recomputed on every pass and never persisted.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from kog_operator.enums import EnumServiceType, EnumTrafficPolicy
from kog_operator.models.model_container import ModelContainer
from kog_operator.models.model_policy_rule import ModelPolicyRule
from kog_operator.models.model_secret import ModelSecret
from kog_operator.models.model_service_port import ModelServicePort
from kog_operator.models.model_volume import ModelSecretVolume


class ModelMicroservice(BaseModel):
    """Declarative bundle for one managed component.

    Attributes:
        name: Component name, also the name of every object rendered for it
        labels: Pod and selector labels
        annotations: Pod template annotations
        ports: Ports exposed by the container and the Service (empty: no Service)
        replicas: Workload replica count
        service_type: Kubernetes Service type
        traffic_policy: External traffic policy for the Service
        load_balancer_ip: Load-balancer IP hint (empty: none)
        image_pull_secret: Image pull secret name (empty: none)
        containers: Workload containers
        secrets: Secrets created and converged with the component
        volumes: Secret-backed pod volumes (secrets must already exist)
        rbac_rules: Access-policy rules granted to the component's service account
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)
    ports: tuple[ModelServicePort, ...] = ()
    replicas: int = Field(default=1, ge=1)
    service_type: str = EnumServiceType.CLUSTER_IP.value
    traffic_policy: str = EnumTrafficPolicy.CLUSTER.value
    load_balancer_ip: str = ""
    image_pull_secret: str = ""
    containers: tuple[ModelContainer, ...] = Field(min_length=1)
    secrets: tuple[ModelSecret, ...] = ()
    volumes: tuple[ModelSecretVolume, ...] = ()
    rbac_rules: tuple[ModelPolicyRule, ...] = ()


__all__ = ["ModelMicroservice"]
