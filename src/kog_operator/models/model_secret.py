# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Managed Secret Model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelSecret(BaseModel):
    """A Secret the operator creates and keeps converged for a component.

    Values are stored in ``string_data`` and rendered as base64 ``data`` so
    the desired manifest compares equal to the live object.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    string_data: dict[str, str] = Field(default_factory=dict, repr=False)
    secret_type: str = "Opaque"


__all__ = ["ModelSecret"]
