# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Component bundle builders and manifest rendering.

Builders are pure: no I/O, no hidden state. Each builder keeps the ports,
probe timings and resource quantities of its component as module constants.
"""

from kog_operator.microservices.builder_controller import (
    CONTROLLER_CONTROL_PORT,
    CONTROLLER_HTTP_PORT,
    build_controller_microservice,
)
from kog_operator.microservices.builder_kubelet import (
    KUBELET_ARG_COUNT,
    KUBELET_TOKEN_ARG_INDEX,
    build_kubelet_microservice,
)
from kog_operator.microservices.builder_port_manager import (
    build_port_manager_microservice,
)
from kog_operator.microservices.builder_skupper import (
    SKUPPER_DEFAULT_CERT_DIR,
    SKUPPER_ROUTER_CONFIG,
    SKUPPER_VOLUME_SECRETS,
    build_router_config,
    build_skupper_microservice,
)
from kog_operator.microservices.manifest_renderer import render_manifests
from kog_operator.microservices.util_traffic_policy import get_traffic_policy

__all__ = [
    "CONTROLLER_CONTROL_PORT",
    "CONTROLLER_HTTP_PORT",
    "KUBELET_ARG_COUNT",
    "KUBELET_TOKEN_ARG_INDEX",
    "SKUPPER_DEFAULT_CERT_DIR",
    "SKUPPER_ROUTER_CONFIG",
    "SKUPPER_VOLUME_SECRETS",
    "build_controller_microservice",
    "build_kubelet_microservice",
    "build_port_manager_microservice",
    "build_router_config",
    "build_skupper_microservice",
    "get_traffic_policy",
    "render_manifests",
]
