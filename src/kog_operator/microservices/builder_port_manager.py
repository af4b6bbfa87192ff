# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Port manager (policy manager) bundle builder."""

from __future__ import annotations

from kog_operator.enums import EnumComponentName
from kog_operator.models import (
    ModelContainer,
    ModelEnvVar,
    ModelMicroservice,
    ModelProbe,
    ModelResourceQuantities,
    ModelResourceRequirements,
)

PORT_MANAGER_NAME = EnumComponentName.PORT_MANAGER.value
PORT_MANAGER_READY_SENTINEL = "/tmp/operator-sdk-ready"
PORT_MANAGER_READINESS_INITIAL_DELAY_SECONDS = 4
PORT_MANAGER_READINESS_PERIOD_SECONDS = 10
PORT_MANAGER_READINESS_FAILURE_THRESHOLD = 1
PORT_MANAGER_LIMITS = ModelResourceQuantities(cpu="200m", memory="1Gi")
PORT_MANAGER_REQUESTS = ModelResourceQuantities(cpu="50m", memory="200Mi")


def build_port_manager_microservice(
    image: str,
    watch_namespace: str,
    user_email: str,
    user_password: str,
) -> ModelMicroservice:
    """Build the port manager bundle.

    ``user_password`` must already be decoded; it is handed to the container
    in plaintext.
    """
    return ModelMicroservice(
        name=PORT_MANAGER_NAME,
        labels={"name": PORT_MANAGER_NAME},
        replicas=1,
        containers=(
            ModelContainer(
                name=PORT_MANAGER_NAME,
                image=image,
                image_pull_policy="Always",
                readiness_probe=ModelProbe(
                    exec_command=("stat", PORT_MANAGER_READY_SENTINEL),
                    initial_delay_seconds=PORT_MANAGER_READINESS_INITIAL_DELAY_SECONDS,
                    period_seconds=PORT_MANAGER_READINESS_PERIOD_SECONDS,
                    failure_threshold=PORT_MANAGER_READINESS_FAILURE_THRESHOLD,
                ),
                resources=ModelResourceRequirements(
                    limits=PORT_MANAGER_LIMITS,
                    requests=PORT_MANAGER_REQUESTS,
                ),
                env=(
                    ModelEnvVar(name="WATCH_NAMESPACE", value=watch_namespace),
                    ModelEnvVar(name="IOFOG_USER_EMAIL", value=user_email),
                    ModelEnvVar(name="IOFOG_USER_PASS", value=user_password),
                ),
            ),
        ),
    )


__all__ = ["PORT_MANAGER_NAME", "build_port_manager_microservice"]
