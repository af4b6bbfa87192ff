# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for operator enums."""

import pytest

from kog_operator.enums import (
    EXTERNALLY_ROUTED_SERVICE_TYPES,
    EnumComponentName,
    EnumConvergenceAction,
    EnumResourceKind,
)


class TestEnumResourceKind:
    """Tests for EnumResourceKind."""

    @pytest.mark.parametrize(
        ("kind", "api_version"),
        [
            (EnumResourceKind.DEPLOYMENT, "apps/v1"),
            (EnumResourceKind.SERVICE, "v1"),
            (EnumResourceKind.SERVICE_ACCOUNT, "v1"),
            (EnumResourceKind.SECRET, "v1"),
            (EnumResourceKind.ROLE, "rbac.authorization.k8s.io/v1"),
            (EnumResourceKind.ROLE_BINDING, "rbac.authorization.k8s.io/v1"),
        ],
    )
    def test_api_version(self, kind: EnumResourceKind, api_version: str) -> None:
        assert kind.api_version == api_version

    def test_lookup_by_manifest_kind(self) -> None:
        assert EnumResourceKind("RoleBinding") is EnumResourceKind.ROLE_BINDING


class TestEnumConvergenceAction:
    """Tests for EnumConvergenceAction."""

    def test_is_mutation(self) -> None:
        assert EnumConvergenceAction.CREATED.is_mutation
        assert EnumConvergenceAction.UPDATED.is_mutation
        assert not EnumConvergenceAction.UNCHANGED.is_mutation


def test_component_names_are_object_names() -> None:
    assert [component.value for component in EnumComponentName] == [
        "controller",
        "kubelet",
        "port-manager",
        "skupper",
    ]


def test_externally_routed_service_types() -> None:
    assert EXTERNALLY_ROUTED_SERVICE_TYPES == {"NodePort", "LoadBalancer"}
