# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Derived Values Model.

Values that only exist once a component is live. They are read from live
state during a pass and passed forward to later stages as an explicit
argument; a fresh instance is created for every pass.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ModelDerivedValues(BaseModel):
    """Runtime-derived values flowing between reconciliation stages.

    Attributes:
        controller_endpoint: Controller address ("host:port") once its Service is live
        kubelet_token: Authentication token assigned to the kubelet
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    controller_endpoint: Optional[str] = None
    kubelet_token: Optional[str] = Field(default=None, repr=False)


__all__ = ["ModelDerivedValues"]
