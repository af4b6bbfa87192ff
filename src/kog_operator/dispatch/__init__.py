# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Event dispatch integration (kopf)."""

from kog_operator.dispatch.handlers_kopf import (
    RESYNC_HANDLER_ID,
    RETRY_DELAY_SECONDS,
    make_reconcile_handler,
    raise_for_dispatch,
    register_handlers,
)

__all__ = [
    "RESYNC_HANDLER_ID",
    "RETRY_DELAY_SECONDS",
    "make_reconcile_handler",
    "raise_for_dispatch",
    "register_handlers",
]
