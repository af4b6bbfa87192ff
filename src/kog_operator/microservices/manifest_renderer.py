# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Kubernetes manifest rendering for component bundles.

Turns a ModelMicroservice into the ordered list of Kubernetes manifests
(plain dicts in API camelCase form) that run the component:

    ServiceAccount -> Role -> RoleBinding -> Secrets -> Deployment -> Service

Role and RoleBinding are rendered only when the bundle carries access-policy
rules, the Service only when the bundle exposes ports.

Rendering rules:
    - Every object carries the owner reference to the Kog resource
    - List-valued fields the bundle controls (args, env, ports, volume mounts,
      volumes) are always rendered, even when empty; a missing live field
      compares equal to an empty desired one
    - Unset probes and optional scalars are omitted
    - ``externalTrafficPolicy`` and ``loadBalancerIP`` are only rendered for
      Service types the API accepts them on

Rendering is pure: identical inputs yield equal manifests.
"""

from __future__ import annotations

import base64
from typing import Optional

from kog_operator.enums import (
    EXTERNALLY_ROUTED_SERVICE_TYPES,
    EnumResourceKind,
    EnumServiceType,
)
from kog_operator.models import (
    ModelContainer,
    ModelEnvVar,
    ModelMicroservice,
    ModelOwnerReference,
    ModelPolicyRule,
    ModelProbe,
    ModelSecret,
)

RBAC_API_GROUP = "rbac.authorization.k8s.io"


def _metadata(
    name: str,
    namespace: str,
    owner_reference: ModelOwnerReference,
    labels: Optional[dict[str, str]] = None,
) -> dict[str, object]:
    metadata: dict[str, object] = {
        "name": name,
        "namespace": namespace,
        "ownerReferences": [owner_reference.to_manifest()],
    }
    if labels:
        metadata["labels"] = dict(labels)
    return metadata


def _render_probe(probe: ModelProbe) -> dict[str, object]:
    rendered: dict[str, object] = {}
    if probe.http_get is not None:
        rendered["httpGet"] = {"path": probe.http_get.path, "port": probe.http_get.port}
    else:
        rendered["exec"] = {"command": list(probe.exec_command)}
    if probe.initial_delay_seconds is not None:
        rendered["initialDelaySeconds"] = probe.initial_delay_seconds
    if probe.period_seconds is not None:
        rendered["periodSeconds"] = probe.period_seconds
    if probe.failure_threshold is not None:
        rendered["failureThreshold"] = probe.failure_threshold
    return rendered


def _render_env_var(env_var: ModelEnvVar) -> dict[str, object]:
    if env_var.field_path is not None:
        return {
            "name": env_var.name,
            "valueFrom": {"fieldRef": {"fieldPath": env_var.field_path}},
        }
    return {"name": env_var.name, "value": env_var.value}


def _render_container(
    container: ModelContainer,
    microservice: ModelMicroservice,
) -> dict[str, object]:
    rendered: dict[str, object] = {
        "name": container.name,
        "image": container.image,
        "imagePullPolicy": container.image_pull_policy,
        "args": list(container.args),
        "env": [_render_env_var(env_var) for env_var in container.env],
        "ports": [
            {"name": port.name, "containerPort": port.port}
            for port in microservice.ports
        ],
        "resources": {
            "limits": {
                "cpu": container.resources.limits.cpu,
                "memory": container.resources.limits.memory,
            },
            "requests": {
                "cpu": container.resources.requests.cpu,
                "memory": container.resources.requests.memory,
            },
        },
        "volumeMounts": [
            {"name": mount.name, "mountPath": mount.mount_path}
            for mount in container.volume_mounts
        ],
    }
    if container.command:
        rendered["command"] = list(container.command)
    if container.liveness_probe is not None:
        rendered["livenessProbe"] = _render_probe(container.liveness_probe)
    if container.readiness_probe is not None:
        rendered["readinessProbe"] = _render_probe(container.readiness_probe)
    return rendered


def render_service_account(
    microservice: ModelMicroservice,
    namespace: str,
    owner_reference: ModelOwnerReference,
) -> dict[str, object]:
    kind = EnumResourceKind.SERVICE_ACCOUNT
    return {
        "apiVersion": kind.api_version,
        "kind": kind.value,
        "metadata": _metadata(
            microservice.name, namespace, owner_reference, microservice.labels
        ),
    }


def _render_rule(rule: ModelPolicyRule) -> dict[str, object]:
    return {
        "apiGroups": list(rule.api_groups),
        "resources": list(rule.resources),
        "verbs": list(rule.verbs),
    }


def render_role(
    microservice: ModelMicroservice,
    namespace: str,
    owner_reference: ModelOwnerReference,
) -> dict[str, object]:
    kind = EnumResourceKind.ROLE
    return {
        "apiVersion": kind.api_version,
        "kind": kind.value,
        "metadata": _metadata(
            microservice.name, namespace, owner_reference, microservice.labels
        ),
        "rules": [_render_rule(rule) for rule in microservice.rbac_rules],
    }


def render_role_binding(
    microservice: ModelMicroservice,
    namespace: str,
    owner_reference: ModelOwnerReference,
) -> dict[str, object]:
    kind = EnumResourceKind.ROLE_BINDING
    return {
        "apiVersion": kind.api_version,
        "kind": kind.value,
        "metadata": _metadata(
            microservice.name, namespace, owner_reference, microservice.labels
        ),
        "subjects": [
            {
                "kind": EnumResourceKind.SERVICE_ACCOUNT.value,
                "name": microservice.name,
                "namespace": namespace,
            }
        ],
        "roleRef": {
            "apiGroup": RBAC_API_GROUP,
            "kind": EnumResourceKind.ROLE.value,
            "name": microservice.name,
        },
    }


def render_secret(
    secret: ModelSecret,
    microservice: ModelMicroservice,
    namespace: str,
    owner_reference: ModelOwnerReference,
) -> dict[str, object]:
    kind = EnumResourceKind.SECRET
    return {
        "apiVersion": kind.api_version,
        "kind": kind.value,
        "metadata": _metadata(
            secret.name, namespace, owner_reference, microservice.labels
        ),
        "type": secret.secret_type,
        "data": {
            key: base64.b64encode(value.encode("utf-8")).decode("ascii")
            for key, value in sorted(secret.string_data.items())
        },
    }


def render_deployment(
    microservice: ModelMicroservice,
    namespace: str,
    owner_reference: ModelOwnerReference,
) -> dict[str, object]:
    kind = EnumResourceKind.DEPLOYMENT
    template_metadata: dict[str, object] = {"labels": dict(microservice.labels)}
    if microservice.annotations:
        template_metadata["annotations"] = dict(microservice.annotations)

    pod_spec: dict[str, object] = {
        "serviceAccountName": microservice.name,
        "containers": [
            _render_container(container, microservice)
            for container in microservice.containers
        ],
        "volumes": [
            {"name": volume.name, "secret": {"secretName": volume.secret_name}}
            for volume in microservice.volumes
        ],
    }
    if microservice.image_pull_secret:
        pod_spec["imagePullSecrets"] = [{"name": microservice.image_pull_secret}]

    return {
        "apiVersion": kind.api_version,
        "kind": kind.value,
        "metadata": _metadata(
            microservice.name, namespace, owner_reference, microservice.labels
        ),
        "spec": {
            "replicas": microservice.replicas,
            "selector": {"matchLabels": dict(microservice.labels)},
            "template": {"metadata": template_metadata, "spec": pod_spec},
        },
    }


def render_service(
    microservice: ModelMicroservice,
    namespace: str,
    owner_reference: ModelOwnerReference,
) -> dict[str, object]:
    kind = EnumResourceKind.SERVICE
    spec: dict[str, object] = {
        "type": microservice.service_type,
        "selector": dict(microservice.labels),
        "ports": [
            {"name": port.name, "port": port.port, "targetPort": port.port}
            for port in microservice.ports
        ],
    }
    if microservice.service_type in EXTERNALLY_ROUTED_SERVICE_TYPES:
        spec["externalTrafficPolicy"] = microservice.traffic_policy
    if (
        microservice.service_type == EnumServiceType.LOAD_BALANCER.value
        and microservice.load_balancer_ip
    ):
        spec["loadBalancerIP"] = microservice.load_balancer_ip
    return {
        "apiVersion": kind.api_version,
        "kind": kind.value,
        "metadata": _metadata(
            microservice.name, namespace, owner_reference, microservice.labels
        ),
        "spec": spec,
    }


def render_manifests(
    microservice: ModelMicroservice,
    namespace: str,
    owner_reference: ModelOwnerReference,
) -> list[dict[str, object]]:
    """Render every Kubernetes object needed to run ``microservice``.

    Args:
        microservice: Component bundle
        namespace: Namespace the component runs in
        owner_reference: Reference to the owning Kog resource

    Returns:
        Manifests in apply order.
    """
    manifests = [render_service_account(microservice, namespace, owner_reference)]
    if microservice.rbac_rules:
        manifests.append(render_role(microservice, namespace, owner_reference))
        manifests.append(render_role_binding(microservice, namespace, owner_reference))
    manifests.extend(
        render_secret(secret, microservice, namespace, owner_reference)
        for secret in microservice.secrets
    )
    manifests.append(render_deployment(microservice, namespace, owner_reference))
    if microservice.ports:
        manifests.append(render_service(microservice, namespace, owner_reference))
    return manifests


__all__ = [
    "render_deployment",
    "render_manifests",
    "render_role",
    "render_role_binding",
    "render_secret",
    "render_service",
    "render_service_account",
]
