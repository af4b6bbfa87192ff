# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Container Resource Requirement Models.

Quantities are kept as Kubernetes quantity strings ("1800m", "3Gi") in their
canonical form, so the rendered manifest equals the API server's echo.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ModelResourceQuantities(BaseModel):
    """CPU and memory quantity pair."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    cpu: str
    memory: str


class ModelResourceRequirements(BaseModel):
    """Container resource limits and requests."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    limits: ModelResourceQuantities
    requests: ModelResourceQuantities


__all__ = ["ModelResourceQuantities", "ModelResourceRequirements"]
