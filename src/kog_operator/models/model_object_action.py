# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Per-object Convergence Record Model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from kog_operator.enums import (
    EnumComponentName,
    EnumConvergenceAction,
    EnumResourceKind,
)


class ModelObjectAction(BaseModel):
    """What the convergence algorithm did to one object during a pass."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    component: EnumComponentName
    kind: EnumResourceKind
    name: str
    action: EnumConvergenceAction


__all__ = ["ModelObjectAction"]
