# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for kog_operator unit tests.

Available Utilities:
    Live State:
        - InMemoryLiveStateAccessor: dict-backed accessor mimicking API server storage
        - FakeTokenMinter: fixed-token minter recording calls

    Control Plane:
        - make_kog_body: Kog custom resource body factory
"""

from tests.helpers.control_plane import (
    KOG_NAME,
    KOG_NAMESPACE,
    KOG_UID,
    USER_PASSWORD,
    make_kog_body,
)
from tests.helpers.live_state import FakeTokenMinter, InMemoryLiveStateAccessor

__all__ = [
    "KOG_NAME",
    "KOG_NAMESPACE",
    "KOG_UID",
    "USER_PASSWORD",
    "FakeTokenMinter",
    "InMemoryLiveStateAccessor",
    "make_kog_body",
]
