# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Reconciliation Pass Result Model."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from kog_operator.enums import EnumComponentName
from kog_operator.errors import KogOperatorError
from kog_operator.models.model_object_action import ModelObjectAction


class ModelReconcileResult(BaseModel):
    """Outcome of one reconciliation pass, returned to the dispatcher.

    Attributes:
        namespace: Namespace of the reconciled Kog resource
        name: Name of the reconciled Kog resource
        correlation_id: Pass correlation ID
        success: True when every stage completed (or the pass was skipped)
        skipped: True when the resource no longer exists (clean no-op)
        failed_component: Component whose stage failed, if any
        error: The error that aborted the pass, if any
        actions: Per-object convergence actions in execution order
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    namespace: str
    name: str
    correlation_id: UUID
    success: bool
    skipped: bool = False
    failed_component: Optional[EnumComponentName] = None
    error: Optional[KogOperatorError] = Field(default=None, exclude=True)
    actions: tuple[ModelObjectAction, ...] = ()

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    @property
    def mutation_count(self) -> int:
        """Number of create/replace calls issued during the pass."""
        return sum(1 for action in self.actions if action.action.is_mutation)

    def raise_for_error(self) -> None:
        """Re-raise the error that aborted the pass, if any."""
        if self.error is not None:
            raise self.error


__all__ = ["ModelReconcileResult"]
