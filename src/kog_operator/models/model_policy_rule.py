# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Access Policy Rule Model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ModelPolicyRule(BaseModel):
    """An RBAC rule granted to a component's service account."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_groups: tuple[str, ...] = ("",)
    resources: tuple[str, ...]
    verbs: tuple[str, ...]


__all__ = ["ModelPolicyRule"]
