# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Component Container Model."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from kog_operator.models.model_env_var import ModelEnvVar
from kog_operator.models.model_probe import ModelProbe
from kog_operator.models.model_resource_requirements import ModelResourceRequirements
from kog_operator.models.model_volume import ModelVolumeMount


class ModelContainer(BaseModel):
    """Workload container descriptor.

    Container ports are not listed here; they are taken from the owning
    microservice so that the workload and its Service cannot drift apart.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    image: str = Field(min_length=1)
    image_pull_policy: str = "Always"
    command: tuple[str, ...] = ()
    args: tuple[str, ...] = ()
    env: tuple[ModelEnvVar, ...] = ()
    resources: ModelResourceRequirements
    liveness_probe: Optional[ModelProbe] = None
    readiness_probe: Optional[ModelProbe] = None
    volume_mounts: tuple[ModelVolumeMount, ...] = ()


__all__ = ["ModelContainer"]
