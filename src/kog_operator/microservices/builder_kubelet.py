# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Virtual kubelet (agent bridge) bundle builder.

The kubelet's argument vector is a contract: the token is read back out of
the live workload's arguments on later passes, so the order and count of
arguments here must match ``KUBELET_ARG_COUNT`` and ``KUBELET_TOKEN_ARG_INDEX``.
"""

from __future__ import annotations

from kog_operator.enums import EnumComponentName
from kog_operator.models import (
    ModelContainer,
    ModelMicroservice,
    ModelResourceQuantities,
    ModelResourceRequirements,
    ModelServicePort,
)

KUBELET_NAME = EnumComponentName.KUBELET.value
KUBELET_PORT = 60000
KUBELET_NAMESPACE_FLAG = "--namespace"
KUBELET_TOKEN_FLAG = "--iofog-token"
KUBELET_URL_FLAG = "--iofog-url"
KUBELET_ARG_COUNT = 6
KUBELET_TOKEN_ARG_INDEX = 3
KUBELET_LIMITS = ModelResourceQuantities(cpu="200m", memory="1Gi")
KUBELET_REQUESTS = ModelResourceQuantities(cpu="50m", memory="200Mi")


def build_kubelet_microservice(
    image: str,
    namespace: str,
    token: str,
    controller_endpoint: str,
) -> ModelMicroservice:
    """Build the kubelet bundle pointing at ``controller_endpoint`` (host:port)."""
    return ModelMicroservice(
        name=KUBELET_NAME,
        labels={"name": KUBELET_NAME},
        ports=(ModelServicePort(name="api", port=KUBELET_PORT),),
        replicas=1,
        containers=(
            ModelContainer(
                name=KUBELET_NAME,
                image=image,
                image_pull_policy="Always",
                args=(
                    KUBELET_NAMESPACE_FLAG,
                    namespace,
                    KUBELET_TOKEN_FLAG,
                    token,
                    KUBELET_URL_FLAG,
                    f"http://{controller_endpoint}",
                ),
                resources=ModelResourceRequirements(
                    limits=KUBELET_LIMITS,
                    requests=KUBELET_REQUESTS,
                ),
            ),
        ),
    )


__all__ = [
    "KUBELET_ARG_COUNT",
    "KUBELET_NAME",
    "KUBELET_PORT",
    "KUBELET_TOKEN_ARG_INDEX",
    "build_kubelet_microservice",
]
