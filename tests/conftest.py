# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for kog_operator tests."""

from __future__ import annotations

import logging

import pytest

from kog_operator.enums import EnumResourceKind
from kog_operator.models import ModelOperatorConfig
from kog_operator.reconcilers import ControlPlaneOrchestrator
from tests.helpers import (
    KOG_NAME,
    KOG_NAMESPACE,
    FakeTokenMinter,
    InMemoryLiveStateAccessor,
    make_kog_body,
)

# =============================================================================
# Live State Fixtures
# =============================================================================


@pytest.fixture
def accessor() -> InMemoryLiveStateAccessor:
    """Live state holding one Kog resource and the router's volume secrets."""
    live = InMemoryLiveStateAccessor()
    live.control_planes[(KOG_NAMESPACE, KOG_NAME)] = make_kog_body()
    for secret_name in ("skupper-internal", "skupper-amqps"):
        live.seed(
            EnumResourceKind.SECRET,
            KOG_NAMESPACE,
            {
                "apiVersion": "v1",
                "kind": "Secret",
                "metadata": {"name": secret_name},
                "data": {"tls.crt": "Y2VydA=="},
            },
        )
    return live


@pytest.fixture
def token_minter() -> FakeTokenMinter:
    return FakeTokenMinter(token="minted-token")


@pytest.fixture
def operator_config() -> ModelOperatorConfig:
    return ModelOperatorConfig()


@pytest.fixture
def orchestrator(
    accessor: InMemoryLiveStateAccessor,
    token_minter: FakeTokenMinter,
    operator_config: ModelOperatorConfig,
) -> ControlPlaneOrchestrator:
    """Orchestrator wired to in-memory live state and a fixed-token minter."""
    return ControlPlaneOrchestrator(
        accessor=accessor,
        token_minter=token_minter,
        logger=logging.getLogger("tests.kog_operator"),
        config=operator_config,
    )
