# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Skupper router (secure overlay network) bundle builder.

The router's TLS material lives in two Secrets created by an out-of-band
bootstrap step. The bundle mounts them; it never creates their contents.
"""

from __future__ import annotations

from kog_operator.enums import EnumComponentName, EnumServiceType, EnumTrafficPolicy
from kog_operator.models import (
    ModelContainer,
    ModelEnvVar,
    ModelHttpGetAction,
    ModelMicroservice,
    ModelPolicyRule,
    ModelProbe,
    ModelResourceQuantities,
    ModelResourceRequirements,
    ModelSecretVolume,
    ModelServicePort,
    ModelVolumeMount,
)

SKUPPER_NAME = EnumComponentName.SKUPPER.value
SKUPPER_AMQPS_PORT = 5671
SKUPPER_HTTP_PORT = 9090
SKUPPER_INTERIOR_PORT = 55671
SKUPPER_EDGE_PORT = 45671
SKUPPER_HEALTH_PATH = "/healthz"
SKUPPER_LIVENESS_INITIAL_DELAY_SECONDS = 60
SKUPPER_INTERNAL_SECRET = "skupper-internal"
SKUPPER_AMQPS_SECRET = "skupper-amqps"
SKUPPER_VOLUME_SECRETS: tuple[str, ...] = (SKUPPER_INTERNAL_SECRET, SKUPPER_AMQPS_SECRET)
SKUPPER_LIMITS = ModelResourceQuantities(cpu="200m", memory="1Gi")
SKUPPER_REQUESTS = ModelResourceQuantities(cpu="50m", memory="200Mi")
SKUPPER_DEFAULT_CERT_DIR = "/etc/qpid-dispatch-certs"

SKUPPER_ROUTER_CONFIG = """
router {
    mode: interior
    id: ${HOSTNAME}
}

listener {
    host: localhost
    port: 5672
    role: normal
}

sslProfile {
    name: skupper-amqps
    certFile: /etc/qpid-dispatch-certs/skupper-amqps/tls.crt
    privateKeyFile: /etc/qpid-dispatch-certs/skupper-amqps/tls.key
    caCertFile: /etc/qpid-dispatch-certs/skupper-amqps/ca.crt
}

listener {
    host: 0.0.0.0
    port: 5671
    role: normal
    sslProfile: skupper-amqps
    saslMechanisms: EXTERNAL
    authenticatePeer: true
}

listener {
    host: 0.0.0.0
    port: 9090
    role: normal
    http: true
    httpRootDir: disabled
    websockets: false
    healthz: true
    metrics: true
}

sslProfile {
    name: skupper-internal
    certFile: /etc/qpid-dispatch-certs/skupper-internal/tls.crt
    privateKeyFile: /etc/qpid-dispatch-certs/skupper-internal/tls.key
    caCertFile: /etc/qpid-dispatch-certs/skupper-internal/ca.crt
}

listener {
    role: inter-router
    host: 0.0.0.0
    port: 55671
    sslProfile: skupper-internal
    saslMechanisms: EXTERNAL
    authenticatePeer: true
}

listener {
    role: edge
    host: 0.0.0.0
    port: 45671
    sslProfile: skupper-internal
    saslMechanisms: EXTERNAL
    authenticatePeer: true
}
"""


def build_router_config(cert_dir: str) -> str:
    """Router configuration with its sslProfile files under ``cert_dir``."""
    return SKUPPER_ROUTER_CONFIG.replace(f"{SKUPPER_DEFAULT_CERT_DIR}/", f"{cert_dir}/")


def build_skupper_microservice(image: str, volume_mount_path: str) -> ModelMicroservice:
    """Build the Skupper router bundle.

    The Service is always load-balanced with a local traffic policy so that
    peers reach the router on the node that hosts it.
    """
    mount_base = volume_mount_path.rstrip("/")
    return ModelMicroservice(
        name=SKUPPER_NAME,
        labels={
            "name": SKUPPER_NAME,
            "application": "skupper-router",
            "skupper.io/component": "router",
        },
        annotations={
            "prometheus.io/port": str(SKUPPER_HTTP_PORT),
            "prometheus.io/scrape": "true",
        },
        ports=(
            ModelServicePort(name="amqps", port=SKUPPER_AMQPS_PORT),
            ModelServicePort(name="http", port=SKUPPER_HTTP_PORT),
            ModelServicePort(name="interior", port=SKUPPER_INTERIOR_PORT),
            ModelServicePort(name="edge", port=SKUPPER_EDGE_PORT),
        ),
        replicas=1,
        service_type=EnumServiceType.LOAD_BALANCER.value,
        traffic_policy=EnumTrafficPolicy.LOCAL.value,
        rbac_rules=(
            ModelPolicyRule(
                api_groups=("",),
                resources=("pods",),
                verbs=("get", "list", "watch"),
            ),
        ),
        volumes=tuple(
            ModelSecretVolume(name=secret, secret_name=secret)
            for secret in SKUPPER_VOLUME_SECRETS
        ),
        containers=(
            ModelContainer(
                name=SKUPPER_NAME,
                image=image,
                image_pull_policy="Always",
                liveness_probe=ModelProbe(
                    http_get=ModelHttpGetAction(
                        path=SKUPPER_HEALTH_PATH,
                        port=SKUPPER_HTTP_PORT,
                    ),
                    initial_delay_seconds=SKUPPER_LIVENESS_INITIAL_DELAY_SECONDS,
                ),
                env=(
                    ModelEnvVar(name="APPLICATION_NAME", value="skupper-router"),
                    ModelEnvVar(name="QDROUTERD_AUTO_MESH_DISCOVERY", value="QUERY"),
                    ModelEnvVar(
                        name="QDROUTERD_CONF",
                        value=build_router_config(mount_base),
                    ),
                    ModelEnvVar(name="POD_NAMESPACE", field_path="metadata.namespace"),
                    ModelEnvVar(name="POD_IP", field_path="status.podIP"),
                ),
                volume_mounts=tuple(
                    ModelVolumeMount(name=secret, mount_path=f"{mount_base}/{secret}")
                    for secret in SKUPPER_VOLUME_SECRETS
                ),
                resources=ModelResourceRequirements(
                    limits=SKUPPER_LIMITS,
                    requests=SKUPPER_REQUESTS,
                ),
            ),
        ),
    )


__all__ = [
    "SKUPPER_DEFAULT_CERT_DIR",
    "SKUPPER_NAME",
    "SKUPPER_ROUTER_CONFIG",
    "SKUPPER_VOLUME_SECRETS",
    "build_router_config",
    "build_skupper_microservice",
]
