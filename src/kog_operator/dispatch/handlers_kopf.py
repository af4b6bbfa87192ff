# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""kopf dispatcher adapter.

Registers create/update/resume handlers for the Kog resource, plus a resync
timer that re-runs the pass every ``resync_interval_seconds`` so that managed
objects changed or deleted out of band are restored without a Kog change.
kopf owns the watch, the event queue and the retry backoff; each delivered
event runs one orchestrator pass with kopf's per-object logger injected.

Error mapping:
    - ControlPlaneInputError -> kopf.PermanentError (same spec, same failure;
      kopf waits for the next spec change)
    - any other failed pass   -> kopf.TemporaryError (kopf re-delivers)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Union

import kopf

from kog_operator.errors import ControlPlaneInputError
from kog_operator.models import ModelOperatorConfig, ModelReconcileResult
from kog_operator.reconcilers import ControlPlaneOrchestrator
from kog_operator.runtime.protocol_live_state_accessor import (
    ProtocolLiveStateAccessor,
)
from kog_operator.runtime.protocol_token_minter import ProtocolTokenMinter

RETRY_DELAY_SECONDS = 30
RESYNC_HANDLER_ID = "resync"

OrchestratorFactory = Callable[
    [Union[logging.Logger, logging.LoggerAdapter]],  # type: ignore[type-arg]
    ControlPlaneOrchestrator,
]


def raise_for_dispatch(result: ModelReconcileResult) -> None:
    """Translate a failed pass into the kopf error that drives re-delivery."""
    if result.success or result.error is None:
        return
    message = str(result.error)
    if isinstance(result.error, ControlPlaneInputError):
        raise kopf.PermanentError(message) from result.error
    raise kopf.TemporaryError(message, delay=RETRY_DELAY_SECONDS) from result.error


def make_reconcile_handler(factory: OrchestratorFactory) -> Callable[..., None]:
    """Build the kopf handler running one pass per delivered event."""

    def reconcile_control_plane(
        namespace: str,
        name: str,
        logger: Union[logging.Logger, logging.LoggerAdapter],  # type: ignore[type-arg]
        **_: Any,
    ) -> None:
        result = factory(logger).reconcile(namespace, name)
        raise_for_dispatch(result)

    return reconcile_control_plane


def register_handlers(
    registry: kopf.OperatorRegistry,
    config: ModelOperatorConfig,
    accessor: ProtocolLiveStateAccessor,
    token_minter: ProtocolTokenMinter,
) -> None:
    """Register the Kog change handlers and the resync timer on ``registry``.

    The accessor and token minter are shared by all passes; the orchestrator
    is built per event around kopf's logger for that object.
    """

    def factory(
        logger: Union[logging.Logger, logging.LoggerAdapter],  # type: ignore[type-arg]
    ) -> ControlPlaneOrchestrator:
        return ControlPlaneOrchestrator(
            accessor=accessor,
            token_minter=token_minter,
            logger=logger,
            config=config,
        )

    handler = make_reconcile_handler(factory)
    resource = (config.crd_group, config.crd_version, config.crd_plural)
    kopf.on.resume(*resource, registry=registry)(handler)
    kopf.on.create(*resource, registry=registry)(handler)
    kopf.on.update(*resource, registry=registry)(handler)
    # fires only once the Kog has been unchanged for a full interval
    kopf.on.timer(
        *resource,
        id=RESYNC_HANDLER_ID,
        registry=registry,
        interval=config.resync_interval_seconds,
        idle=config.resync_interval_seconds,
    )(handler)


__all__ = [
    "RESYNC_HANDLER_ID",
    "RETRY_DELAY_SECONDS",
    "make_reconcile_handler",
    "raise_for_dispatch",
    "register_handlers",
]
