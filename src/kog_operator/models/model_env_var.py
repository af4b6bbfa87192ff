# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Container Environment Variable Model."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ModelEnvVar(BaseModel):
    """A container environment variable.

    Either a literal ``value`` or a ``field_path`` resolved by the kubelet from
    the hosting pod's own object (e.g. ``metadata.namespace``, ``status.podIP``).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    value: str = ""
    field_path: Optional[str] = Field(
        default=None,
        description="Pod field resolved at runtime instead of a static value",
    )


__all__ = ["ModelEnvVar"]
