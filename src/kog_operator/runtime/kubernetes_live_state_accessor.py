# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Live state accessor backed by the official Kubernetes Python client.

Each EnumResourceKind is routed to the typed API group that serves it.
Responses are serialized to plain dicts with the client's own serializer so
that the convergence layer compares like with like.

Example:
    >>> accessor = KubernetesLiveStateAccessor.from_environment(config)
    >>> accessor.read(EnumResourceKind.DEPLOYMENT, "iofog", "controller")
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import NamedTuple, Optional

import kubernetes
import urllib3
from kubernetes import client
from kubernetes.client.rest import ApiException

from kog_operator.enums import EnumResourceKind
from kog_operator.errors import ModelReconcileErrorContext, PlatformApiError
from kog_operator.models import ModelOperatorConfig
from kog_operator.utils import sanitize_error_string

logger = logging.getLogger(__name__)

HTTP_NOT_FOUND = 404


class _KindRoute(NamedTuple):
    api: str
    suffix: str


_ROUTES: dict[EnumResourceKind, _KindRoute] = {
    EnumResourceKind.DEPLOYMENT: _KindRoute("apps", "namespaced_deployment"),
    EnumResourceKind.SERVICE: _KindRoute("core", "namespaced_service"),
    EnumResourceKind.SERVICE_ACCOUNT: _KindRoute("core", "namespaced_service_account"),
    EnumResourceKind.SECRET: _KindRoute("core", "namespaced_secret"),
    EnumResourceKind.ROLE: _KindRoute("rbac", "namespaced_role"),
    EnumResourceKind.ROLE_BINDING: _KindRoute("rbac", "namespaced_role_binding"),
}


def load_kubernetes_configuration() -> None:
    """Load in-cluster configuration, falling back to the local kubeconfig."""
    try:
        kubernetes.config.load_incluster_config()
    except kubernetes.config.ConfigException:
        kubernetes.config.load_kube_config()


class KubernetesLiveStateAccessor:
    """ProtocolLiveStateAccessor implementation on the kubernetes client."""

    def __init__(
        self,
        config: ModelOperatorConfig,
        api_client: Optional[client.ApiClient] = None,
    ) -> None:
        """Initialize the accessor.

        Args:
            config: Operator configuration (CRD coordinates)
            api_client: Pre-configured API client; a default one is created if None
        """
        self._config = config
        self._api_client = api_client or client.ApiClient()
        self._apis: dict[str, object] = {
            "apps": client.AppsV1Api(self._api_client),
            "core": client.CoreV1Api(self._api_client),
            "rbac": client.RbacAuthorizationV1Api(self._api_client),
        }
        self._custom = client.CustomObjectsApi(self._api_client)

    @classmethod
    def from_environment(cls, config: ModelOperatorConfig) -> KubernetesLiveStateAccessor:
        """Create an accessor using in-cluster or kubeconfig credentials."""
        load_kubernetes_configuration()
        return cls(config)

    def _method(self, kind: EnumResourceKind, verb: str) -> Callable[..., object]:
        route = _ROUTES[kind]
        return getattr(self._apis[route.api], f"{verb}_{route.suffix}")

    def _serialize(self, obj: object) -> dict[str, object]:
        serialized = self._api_client.sanitize_for_serialization(obj)
        return serialized if isinstance(serialized, dict) else {}

    def _call(
        self,
        operation: str,
        kind: Optional[EnumResourceKind],
        namespace: str,
        name: str,
        method: Callable[..., object],
        *args: object,
        missing_ok: bool = False,
    ) -> Optional[object]:
        """Invoke one API method, mapping failures to PlatformApiError."""
        context = ModelReconcileErrorContext(
            operation=operation,
            resource_kind=kind,
            target_name=f"{namespace}/{name}",
        )
        try:
            return method(*args)
        except ApiException as e:
            if missing_ok and e.status == HTTP_NOT_FOUND:
                return None
            raise PlatformApiError(
                f"Kubernetes API rejected {operation}: {e.status} {e.reason}",
                context=context,
                status=e.status,
                reason=e.reason,
                body=sanitize_error_string(str(e.body or "")),
            ) from e
        except urllib3.exceptions.HTTPError as e:
            raise PlatformApiError(
                f"Kubernetes API unreachable during {operation}: {type(e).__name__}",
                context=context,
            ) from e

    def read(
        self,
        kind: EnumResourceKind,
        namespace: str,
        name: str,
    ) -> Optional[dict[str, object]]:
        obj = self._call(
            "read",
            kind,
            namespace,
            name,
            self._method(kind, "read"),
            name,
            namespace,
            missing_ok=True,
        )
        return None if obj is None else self._serialize(obj)

    def create(
        self,
        kind: EnumResourceKind,
        namespace: str,
        body: Mapping[str, object],
    ) -> dict[str, object]:
        name = _object_name(body)
        logger.debug("Creating %s %s/%s", kind.value, namespace, name)
        obj = self._call(
            "create",
            kind,
            namespace,
            name,
            self._method(kind, "create"),
            namespace,
            dict(body),
        )
        return self._serialize(obj)

    def replace(
        self,
        kind: EnumResourceKind,
        namespace: str,
        name: str,
        body: Mapping[str, object],
    ) -> dict[str, object]:
        logger.debug("Replacing %s %s/%s", kind.value, namespace, name)
        obj = self._call(
            "replace",
            kind,
            namespace,
            name,
            self._method(kind, "replace"),
            name,
            namespace,
            dict(body),
        )
        return self._serialize(obj)

    def read_control_plane(
        self,
        namespace: str,
        name: str,
    ) -> Optional[dict[str, object]]:
        obj = self._call(
            "read_control_plane",
            None,
            namespace,
            name,
            self._custom.get_namespaced_custom_object,
            self._config.crd_group,
            self._config.crd_version,
            namespace,
            self._config.crd_plural,
            name,
            missing_ok=True,
        )
        return dict(obj) if isinstance(obj, Mapping) else None


def _object_name(body: Mapping[str, object]) -> str:
    metadata = body.get("metadata")
    if isinstance(metadata, Mapping):
        return str(metadata.get("name", ""))
    return ""


__all__ = [
    "KubernetesLiveStateAccessor",
    "load_kubernetes_configuration",
]
