# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the individual component reconcilers."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from kog_operator.enums import EnumComponentName, EnumConvergenceAction, EnumResourceKind
from kog_operator.errors import (
    MalformedLiveStateError,
    MissingLiveResourceError,
    PlatformApiError,
    ReconcilePipelineError,
)
from kog_operator.models import (
    ModelControlPlaneSpec,
    ModelDerivedValues,
    ModelOwnerReference,
)
from kog_operator.reconcilers import (
    ControllerReconciler,
    KubeletReconciler,
    PortManagerReconciler,
    ReconcileContext,
    SkupperReconciler,
    extract_kubelet_token,
)
from tests.helpers import (
    KOG_NAMESPACE,
    USER_PASSWORD,
    FakeTokenMinter,
    InMemoryLiveStateAccessor,
    make_kog_body,
)

ENDPOINT = "controller.iofog.svc.cluster.local:51121"


def _spec(**overrides: object) -> ModelControlPlaneSpec:
    spec = ModelControlPlaneSpec.from_custom_resource(make_kog_body(**overrides))
    return spec.with_user_password(USER_PASSWORD)


def _context(accessor: object) -> ReconcileContext:
    return ReconcileContext(
        namespace=KOG_NAMESPACE,
        owner_reference=ModelOwnerReference.from_custom_resource(make_kog_body()),
        accessor=accessor,  # type: ignore[arg-type]
        logger=logging.getLogger("tests.reconcilers"),
        correlation_id=uuid4(),
    )


def _kubelet_deployment(containers: list[dict[str, object]]) -> dict[str, object]:
    return {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {"name": "kubelet"},
        "spec": {"template": {"spec": {"containers": containers}}},
    }


def _deployment_args(accessor: InMemoryLiveStateAccessor, name: str) -> list[str]:
    deployment = accessor.get(EnumResourceKind.DEPLOYMENT, KOG_NAMESPACE, name)
    return deployment["spec"]["template"]["spec"]["containers"][0]["args"]  # type: ignore[index, no-any-return]


class TestControllerReconciler:
    """Controller convergence and endpoint derivation."""

    def test_converges_and_derives_endpoint(self) -> None:
        accessor = InMemoryLiveStateAccessor()
        context = _context(accessor)

        derived = ControllerReconciler().reconcile(_spec(), context, ModelDerivedValues())

        assert derived.controller_endpoint == ENDPOINT
        assert [(action.kind, action.action) for action in context.actions] == [
            (EnumResourceKind.SERVICE_ACCOUNT, EnumConvergenceAction.CREATED),
            (EnumResourceKind.DEPLOYMENT, EnumConvergenceAction.CREATED),
            (EnumResourceKind.SERVICE, EnumConvergenceAction.CREATED),
        ]
        assert all(action.component is EnumComponentName.CONTROLLER for action in context.actions)

    def test_cluster_domain(self) -> None:
        accessor = InMemoryLiveStateAccessor()

        derived = ControllerReconciler(cluster_domain="k8s.internal").reconcile(
            _spec(), _context(accessor), ModelDerivedValues()
        )

        assert derived.controller_endpoint == "controller.iofog.svc.k8s.internal:51121"

    def test_missing_service_after_convergence(self) -> None:
        accessor = MagicMock()
        accessor.read.return_value = None
        accessor.create.return_value = {}

        with pytest.raises(MissingLiveResourceError) as exc_info:
            ControllerReconciler().reconcile(_spec(), _context(accessor), ModelDerivedValues())

        assert exc_info.value.component is EnumComponentName.CONTROLLER

    def test_service_without_ports(self) -> None:
        def read(kind: EnumResourceKind, namespace: str, name: str) -> object:
            if kind is EnumResourceKind.SERVICE:
                return {"metadata": {"name": name}, "spec": {"ports": []}}
            return None

        accessor = MagicMock()
        accessor.read.side_effect = read

        with pytest.raises(MalformedLiveStateError):
            ControllerReconciler().reconcile(_spec(), _context(accessor), ModelDerivedValues())

    def test_platform_error_is_scoped_to_component(self) -> None:
        accessor = InMemoryLiveStateAccessor()
        accessor.fail_on("create", EnumResourceKind.SERVICE_ACCOUNT, status=403)
        context = _context(accessor)

        with pytest.raises(PlatformApiError) as exc_info:
            ControllerReconciler().reconcile(_spec(), context, ModelDerivedValues())

        error = exc_info.value
        assert error.status == 403
        assert error.component is EnumComponentName.CONTROLLER
        assert error.correlation_id == context.correlation_id
        assert error.context.resource_kind is EnumResourceKind.SERVICE_ACCOUNT


class TestExtractKubeletToken:
    """Reading the token back out of a live kubelet Deployment."""

    def test_reads_fourth_argument(self) -> None:
        deployment = _kubelet_deployment(
            [
                {
                    "name": "kubelet",
                    "args": [
                        "--namespace",
                        "ns1",
                        "--iofog-token",
                        "TOK123",
                        "--iofog-url",
                        "http://ep",
                    ],
                }
            ]
        )

        assert extract_kubelet_token(deployment) == "TOK123"

    @pytest.mark.parametrize(
        ("containers", "detail"),
        [
            ([], {"found_containers": 0}),
            (
                [{"args": ["a"] * 6}, {"args": ["a"] * 6}],
                {"found_containers": 2},
            ),
            ([{"args": ["a"] * 5}], {"found_args": 5}),
            ([{"name": "kubelet"}], {"found_args": 0}),
        ],
    )
    def test_unexpected_shape(
        self, containers: list[dict[str, object]], detail: dict[str, int]
    ) -> None:
        with pytest.raises(MalformedLiveStateError) as exc_info:
            extract_kubelet_token(_kubelet_deployment(containers))

        assert exc_info.value.extra_context == detail


class TestKubeletReconciler:
    """Token stability and failure ordering."""

    def test_mints_token_for_new_kubelet(self) -> None:
        accessor = InMemoryLiveStateAccessor()
        minter = FakeTokenMinter(token="fresh")

        derived = KubeletReconciler(minter).reconcile(
            _spec(),
            _context(accessor),
            ModelDerivedValues(controller_endpoint=ENDPOINT),
        )

        assert derived.kubelet_token == "fresh"
        assert derived.controller_endpoint == ENDPOINT
        (call,) = minter.calls
        assert call[0] == ENDPOINT
        assert call[1].password.get_secret_value() == USER_PASSWORD
        assert _deployment_args(accessor, "kubelet") == [
            "--namespace",
            KOG_NAMESPACE,
            "--iofog-token",
            "fresh",
            "--iofog-url",
            f"http://{ENDPOINT}",
        ]

    def test_reuses_live_token(self) -> None:
        accessor = InMemoryLiveStateAccessor()
        accessor.seed(
            EnumResourceKind.DEPLOYMENT,
            KOG_NAMESPACE,
            _kubelet_deployment(
                [
                    {
                        "name": "kubelet",
                        "args": [
                            "--namespace",
                            "ns1",
                            "--iofog-token",
                            "TOK123",
                            "--iofog-url",
                            "http://ep",
                        ],
                    }
                ]
            ),
        )
        minter = FakeTokenMinter()

        derived = KubeletReconciler(minter).reconcile(
            _spec(),
            _context(accessor),
            ModelDerivedValues(controller_endpoint=ENDPOINT),
        )

        assert derived.kubelet_token == "TOK123"
        assert minter.calls == []
        assert _deployment_args(accessor, "kubelet")[3] == "TOK123"

    def test_malformed_live_kubelet_fails_before_mutation(self) -> None:
        accessor = InMemoryLiveStateAccessor()
        accessor.seed(
            EnumResourceKind.DEPLOYMENT,
            KOG_NAMESPACE,
            _kubelet_deployment([{"args": ["a"] * 6}, {"args": ["b"] * 6}]),
        )
        minter = FakeTokenMinter()

        with pytest.raises(MalformedLiveStateError) as exc_info:
            KubeletReconciler(minter).reconcile(
                _spec(),
                _context(accessor),
                ModelDerivedValues(controller_endpoint=ENDPOINT),
            )

        assert exc_info.value.component is EnumComponentName.KUBELET
        assert accessor.mutations() == []
        assert minter.calls == []

    def test_requires_controller_endpoint(self) -> None:
        accessor = InMemoryLiveStateAccessor()

        with pytest.raises(ReconcilePipelineError):
            KubeletReconciler(FakeTokenMinter()).reconcile(
                _spec(), _context(accessor), ModelDerivedValues()
            )

        assert accessor.calls == []


class TestPortManagerReconciler:
    """Port manager credentials and watch namespace."""

    @pytest.mark.parametrize(
        ("watch_namespace", "expected"),
        [("", KOG_NAMESPACE), ("edge", "edge")],
    )
    def test_environment(self, watch_namespace: str, expected: str) -> None:
        accessor = InMemoryLiveStateAccessor()

        PortManagerReconciler().reconcile(
            _spec(watchNamespace=watch_namespace), _context(accessor), ModelDerivedValues()
        )

        deployment = accessor.get(EnumResourceKind.DEPLOYMENT, KOG_NAMESPACE, "port-manager")
        env = {
            item["name"]: item["value"]
            for item in deployment["spec"]["template"]["spec"]["containers"][0]["env"]  # type: ignore[index]
        }
        assert env["WATCH_NAMESPACE"] == expected
        assert env["IOFOG_USER_PASS"] == USER_PASSWORD
        assert env["IOFOG_USER_EMAIL"] == "admin@example.com"


class TestSkupperReconciler:
    """Router convergence and pre-existing secrets."""

    def test_missing_volume_secret_fails_before_mutation(self) -> None:
        accessor = InMemoryLiveStateAccessor()
        accessor.seed(
            EnumResourceKind.SECRET,
            KOG_NAMESPACE,
            {"kind": "Secret", "metadata": {"name": "skupper-internal"}},
        )

        with pytest.raises(MissingLiveResourceError, match="skupper-amqps") as exc_info:
            SkupperReconciler().reconcile(_spec(), _context(accessor), ModelDerivedValues())

        assert exc_info.value.component is EnumComponentName.SKUPPER
        assert accessor.mutations() == []

    def test_converges_router(self, accessor: InMemoryLiveStateAccessor) -> None:
        context = _context(accessor)

        derived = SkupperReconciler().reconcile(_spec(), context, ModelDerivedValues())

        assert derived == ModelDerivedValues()
        assert [action.kind for action in context.actions] == [
            EnumResourceKind.SERVICE_ACCOUNT,
            EnumResourceKind.ROLE,
            EnumResourceKind.ROLE_BINDING,
            EnumResourceKind.DEPLOYMENT,
            EnumResourceKind.SERVICE,
        ]
