# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Secret-backed Volume and Volume Mount Models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelSecretVolume(BaseModel):
    """A pod volume backed by an existing Secret."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    secret_name: str = Field(min_length=1)


class ModelVolumeMount(BaseModel):
    """Mount of a pod volume into a container."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    mount_path: str = Field(min_length=1)


__all__ = ["ModelSecretVolume", "ModelVolumeMount"]
