# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Named Network Port Model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelServicePort(BaseModel):
    """A port exposed by a component's container and its Service.

    Kubernetes requires every port of a multi-port Service to be named.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1, max_length=15)
    port: int = Field(ge=1, le=65535)


__all__ = ["ModelServicePort"]
