# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Container Probe Models.

A probe is either an HTTP GET against a container port or an exec command.
Timing fields left as None are not rendered and keep the Kubernetes defaults.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ModelHttpGetAction(BaseModel):
    """HTTP GET probe target."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str
    port: int = Field(ge=1, le=65535)


class ModelProbe(BaseModel):
    """Liveness or readiness probe.

    Attributes:
        http_get: HTTP GET action (mutually exclusive with exec_command)
        exec_command: Command executed inside the container
        initial_delay_seconds: Delay before the first probe
        period_seconds: Interval between probes
        failure_threshold: Consecutive failures before the probe fails
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    http_get: Optional[ModelHttpGetAction] = None
    exec_command: tuple[str, ...] = ()
    initial_delay_seconds: Optional[int] = Field(default=None, ge=0)
    period_seconds: Optional[int] = Field(default=None, ge=1)
    failure_threshold: Optional[int] = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _exactly_one_handler(self) -> ModelProbe:
        if (self.http_get is None) == (not self.exec_command):
            raise ValueError("probe needs exactly one of http_get or exec_command")
        return self


__all__ = ["ModelHttpGetAction", "ModelProbe"]
