# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Per-pass reconciliation context."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union
from uuid import UUID

from kog_operator.models import ModelObjectAction, ModelOwnerReference
from kog_operator.runtime.protocol_live_state_accessor import (
    ProtocolLiveStateAccessor,
)


@dataclass
class ReconcileContext:
    """State shared by the component reconcilers during one pass.

    Created by the orchestrator for every pass and discarded afterwards.
    ``actions`` accumulates what convergence did, in execution order.
    """

    namespace: str
    owner_reference: ModelOwnerReference
    accessor: ProtocolLiveStateAccessor
    logger: Union[logging.Logger, logging.LoggerAdapter]  # type: ignore[type-arg]
    correlation_id: UUID
    actions: list[ModelObjectAction] = field(default_factory=list)

    def record(self, action: ModelObjectAction) -> None:
        self.actions.append(action)


__all__ = ["ReconcileContext"]
