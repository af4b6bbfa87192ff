# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Logging setup for the operator process."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the operator process.

    The kubernetes client logs every request at DEBUG; it is capped at
    WARNING unless the operator itself runs at DEBUG.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    if level != "DEBUG":
        logging.getLogger("kubernetes").setLevel(logging.WARNING)


__all__ = ["LOG_FORMAT", "configure_logging"]
