# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for single-object convergence."""

from __future__ import annotations

import pytest

from kog_operator.enums import EnumConvergenceAction, EnumResourceKind
from kog_operator.errors import PlatformApiError
from kog_operator.runtime import build_replacement, converge_manifest, manifest_matches_live
from tests.helpers import InMemoryLiveStateAccessor


def _service(port: int = 51121, service_type: str = "ClusterIP") -> dict[str, object]:
    return {
        "apiVersion": "v1",
        "kind": "Service",
        "metadata": {"name": "controller", "namespace": "iofog"},
        "spec": {
            "type": service_type,
            "selector": {"name": "controller"},
            "ports": [{"name": "control", "port": port, "targetPort": port}],
        },
    }


class TestManifestMatchesLive:
    """Subset comparison semantics."""

    def test_server_populated_fields_are_ignored(self) -> None:
        desired = {"spec": {"replicas": 1}}
        live = {"spec": {"replicas": 1, "progressDeadlineSeconds": 600}, "status": {}}

        assert manifest_matches_live(desired, live)

    def test_scalar_difference(self) -> None:
        assert not manifest_matches_live({"spec": {"replicas": 2}}, {"spec": {"replicas": 1}})

    @pytest.mark.parametrize("empty", ["", [], {}])
    def test_empty_desired_matches_missing_live(self, empty: object) -> None:
        assert manifest_matches_live({"a": 1, "b": empty}, {"a": 1})

    def test_non_empty_desired_missing_live(self) -> None:
        assert not manifest_matches_live({"args": ["x"]}, {})

    def test_lists_compare_elementwise(self) -> None:
        desired = {"ports": [{"port": 80}]}

        assert manifest_matches_live(desired, {"ports": [{"port": 80, "protocol": "TCP"}]})
        assert not manifest_matches_live(desired, {"ports": [{"port": 81}]})

    def test_list_length_must_match(self) -> None:
        assert not manifest_matches_live({"args": ["a"]}, {"args": ["a", "b"]})
        assert not manifest_matches_live({"args": ["a", "b"]}, {"args": ["a"]})

    def test_type_mismatch(self) -> None:
        assert not manifest_matches_live({"spec": {"a": 1}}, {"spec": "text"})
        assert not manifest_matches_live({"args": ["a"]}, {"args": "a"})


class TestBuildReplacement:
    """Replacement body construction."""

    def test_carries_resource_version(self) -> None:
        live = {"metadata": {"name": "controller", "resourceVersion": "42"}}

        body = build_replacement(EnumResourceKind.DEPLOYMENT, {"metadata": {"name": "controller"}}, live)

        assert body["metadata"] == {"name": "controller", "resourceVersion": "42"}

    def test_service_keeps_cluster_ip(self) -> None:
        live = {"metadata": {"resourceVersion": "7"}, "spec": {"clusterIP": "10.96.0.10"}}
        desired = _service()

        body = build_replacement(EnumResourceKind.SERVICE, desired, live)

        assert body["spec"]["clusterIP"] == "10.96.0.10"  # type: ignore[index]
        assert "clusterIP" not in desired["spec"]  # type: ignore[operator]

    def test_non_service_ignores_cluster_ip(self) -> None:
        live = {"spec": {"clusterIP": "10.96.0.10"}}

        body = build_replacement(EnumResourceKind.DEPLOYMENT, {"spec": {"replicas": 1}}, live)

        assert body["spec"] == {"replicas": 1}


class TestConvergeManifest:
    """Create / update / no-op decisions."""

    def test_creates_absent_object(self) -> None:
        accessor = InMemoryLiveStateAccessor()

        action = converge_manifest(accessor, _service())

        assert action is EnumConvergenceAction.CREATED
        assert accessor.mutations() == [("create", EnumResourceKind.SERVICE, "controller")]

    def test_converged_object_is_left_alone(self) -> None:
        accessor = InMemoryLiveStateAccessor()
        converge_manifest(accessor, _service())

        action = converge_manifest(accessor, _service())

        assert action is EnumConvergenceAction.UNCHANGED
        assert len(accessor.mutations()) == 1

    def test_divergent_object_is_replaced(self) -> None:
        accessor = InMemoryLiveStateAccessor()
        converge_manifest(accessor, _service(service_type="ClusterIP"))
        cluster_ip = accessor.get(EnumResourceKind.SERVICE, "iofog", "controller")["spec"]["clusterIP"]  # type: ignore[index]

        action = converge_manifest(accessor, _service(service_type="NodePort"))

        assert action is EnumConvergenceAction.UPDATED
        live = accessor.get(EnumResourceKind.SERVICE, "iofog", "controller")
        assert live["spec"]["type"] == "NodePort"  # type: ignore[index]
        assert live["spec"]["clusterIP"] == cluster_ip  # type: ignore[index]

    def test_replace_after_update_is_idempotent(self) -> None:
        accessor = InMemoryLiveStateAccessor()
        converge_manifest(accessor, _service(port=1))
        converge_manifest(accessor, _service(port=2))

        assert converge_manifest(accessor, _service(port=2)) is EnumConvergenceAction.UNCHANGED

    def test_platform_errors_propagate(self) -> None:
        accessor = InMemoryLiveStateAccessor()
        accessor.fail_on("create", EnumResourceKind.SERVICE, status=403)

        with pytest.raises(PlatformApiError) as exc_info:
            converge_manifest(accessor, _service())

        assert exc_info.value.status == 403
