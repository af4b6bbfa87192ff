# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Reconciliation Error Context Model.

This module defines the model bundling the structured fields every operator
error carries, so that a failure can be diagnosed (which component, which
operation, which object) without re-running the pass.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from kog_operator.enums import EnumComponentName, EnumResourceKind


class ModelReconcileErrorContext(BaseModel):
    """Structured context for reconciliation errors.

    Attributes:
        component: Managed component being reconciled when the error occurred
        operation: Operation being performed (read, create, replace, mint_token, ...)
        resource_kind: Kubernetes kind of the object involved
        target_name: Name of the object or endpoint involved
        correlation_id: Reconciliation pass correlation ID

    Example:
        >>> context = ModelReconcileErrorContext(
        ...     component=EnumComponentName.KUBELET,
        ...     operation="extract_token",
        ...     resource_kind=EnumResourceKind.DEPLOYMENT,
        ...     target_name="kubelet",
        ... )
        >>> raise MalformedLiveStateError("Expected 1 container", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    component: Optional[EnumComponentName] = Field(
        default=None,
        description="Managed component being reconciled",
    )
    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed",
    )
    resource_kind: Optional[EnumResourceKind] = Field(
        default=None,
        description="Kubernetes kind of the object involved",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Object or endpoint name",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Reconciliation pass correlation ID",
    )


__all__ = ["ModelReconcileErrorContext"]
