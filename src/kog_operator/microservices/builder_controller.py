# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Controller (coordinator) bundle builder."""

from __future__ import annotations

from kog_operator.enums import EnumComponentName
from kog_operator.microservices.util_traffic_policy import get_traffic_policy
from kog_operator.models import (
    ModelContainer,
    ModelDatabase,
    ModelEnvVar,
    ModelHttpGetAction,
    ModelMicroservice,
    ModelProbe,
    ModelResourceQuantities,
    ModelResourceRequirements,
    ModelServicePort,
)

CONTROLLER_NAME = EnumComponentName.CONTROLLER.value
CONTROLLER_CONTROL_PORT = 51121
CONTROLLER_HTTP_PORT = 80
CONTROLLER_STATUS_PATH = "/api/v3/status"
CONTROLLER_READINESS_INITIAL_DELAY_SECONDS = 1
CONTROLLER_READINESS_PERIOD_SECONDS = 4
CONTROLLER_READINESS_FAILURE_THRESHOLD = 3
CONTROLLER_LIMITS = ModelResourceQuantities(cpu="1800m", memory="3Gi")
CONTROLLER_REQUESTS = ModelResourceQuantities(cpu="400m", memory="1Gi")


def build_controller_microservice(
    replicas: int,
    image: str,
    image_pull_secret: str,
    database: ModelDatabase,
    service_type: str,
    load_balancer_ip: str,
) -> ModelMicroservice:
    """Build the controller bundle.

    A requested replica count of 0 yields a single replica; the controller
    never runs with zero instances. Database parameters are passed verbatim
    through the environment, the port rendered as a decimal string.
    """
    if replicas == 0:
        replicas = 1
    return ModelMicroservice(
        name=CONTROLLER_NAME,
        labels={"name": CONTROLLER_NAME},
        ports=(
            ModelServicePort(name="control", port=CONTROLLER_CONTROL_PORT),
            ModelServicePort(name="http", port=CONTROLLER_HTTP_PORT),
        ),
        image_pull_secret=image_pull_secret,
        replicas=replicas,
        service_type=service_type,
        traffic_policy=get_traffic_policy(service_type),
        load_balancer_ip=load_balancer_ip,
        containers=(
            ModelContainer(
                name=CONTROLLER_NAME,
                image=image,
                image_pull_policy="Always",
                readiness_probe=ModelProbe(
                    http_get=ModelHttpGetAction(
                        path=CONTROLLER_STATUS_PATH,
                        port=CONTROLLER_CONTROL_PORT,
                    ),
                    initial_delay_seconds=CONTROLLER_READINESS_INITIAL_DELAY_SECONDS,
                    period_seconds=CONTROLLER_READINESS_PERIOD_SECONDS,
                    failure_threshold=CONTROLLER_READINESS_FAILURE_THRESHOLD,
                ),
                env=(
                    ModelEnvVar(name="DB_PROVIDER", value=database.provider),
                    ModelEnvVar(name="DB_NAME", value=database.database_name),
                    ModelEnvVar(name="DB_USERNAME", value=database.user),
                    ModelEnvVar(
                        name="DB_PASSWORD",
                        value=database.password.get_secret_value(),
                    ),
                    ModelEnvVar(name="DB_HOST", value=database.host),
                    ModelEnvVar(name="DB_PORT", value=str(database.port)),
                ),
                resources=ModelResourceRequirements(
                    limits=CONTROLLER_LIMITS,
                    requests=CONTROLLER_REQUESTS,
                ),
            ),
        ),
    )


__all__ = [
    "CONTROLLER_CONTROL_PORT",
    "CONTROLLER_HTTP_PORT",
    "CONTROLLER_NAME",
    "build_controller_microservice",
]
