# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Virtual kubelet (agent bridge) reconciler.

Token Stability:
    The kubelet authenticates to the controller with a token. Once the
    kubelet workload exists, its token is read back out of the workload's
    argument vector instead of being minted again, so every pass renders the
    same arguments and an already-converged kubelet is left untouched.

    A live workload whose shape no longer matches what this operator renders
    (container count other than 1, argument count other than 6) was changed
    out-of-band. The reconciler refuses to guess and fails before issuing any
    mutation.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional

from kog_operator.enums import EnumComponentName, EnumResourceKind
from kog_operator.errors import (
    MalformedLiveStateError,
    ModelReconcileErrorContext,
    ReconcilePipelineError,
)
from kog_operator.microservices import (
    KUBELET_ARG_COUNT,
    KUBELET_TOKEN_ARG_INDEX,
    build_kubelet_microservice,
)
from kog_operator.models import ModelControlPlaneSpec, ModelDerivedValues
from kog_operator.reconcilers.reconcile_context import ReconcileContext
from kog_operator.reconcilers.reconciler_base import ComponentReconcilerBase
from kog_operator.runtime.protocol_token_minter import ProtocolTokenMinter


def _pod_containers(deployment: Mapping[str, object]) -> list[object]:
    node: object = deployment
    for key in ("spec", "template", "spec", "containers"):
        if not isinstance(node, Mapping):
            return []
        node = node.get(key)
    return node if isinstance(node, list) else []


def extract_kubelet_token(
    deployment: Mapping[str, object],
    context: Optional[ModelReconcileErrorContext] = None,
) -> str:
    """Read the kubelet token back out of a live kubelet Deployment.

    Args:
        deployment: Live Deployment in API dict form
        context: Error context attached on failure

    Returns:
        The token stored as the fourth container argument.

    Raises:
        MalformedLiveStateError: If the Deployment does not have exactly one
            container with exactly six arguments.
    """
    containers = _pod_containers(deployment)
    if len(containers) != 1:
        raise MalformedLiveStateError(
            f"Expected 1 container in kubelet deployment. Found {len(containers)}",
            context=context,
            found_containers=len(containers),
        )
    container = containers[0]
    args = container.get("args") if isinstance(container, Mapping) else None
    if not isinstance(args, list):
        args = []
    if len(args) != KUBELET_ARG_COUNT:
        raise MalformedLiveStateError(
            f"Expected {KUBELET_ARG_COUNT} args in kubelet deployment. Found {len(args)}",
            context=context,
            found_args=len(args),
        )
    return str(args[KUBELET_TOKEN_ARG_INDEX])


class KubeletReconciler(ComponentReconcilerBase):
    """Reconciles the kubelet against the controller endpoint of this pass."""

    component = EnumComponentName.KUBELET

    def __init__(self, token_minter: ProtocolTokenMinter) -> None:
        self._token_minter = token_minter

    def reconcile(
        self,
        spec: ModelControlPlaneSpec,
        context: ReconcileContext,
        derived: ModelDerivedValues,
    ) -> ModelDerivedValues:
        endpoint = derived.controller_endpoint
        if not endpoint:
            raise ReconcilePipelineError(
                "Kubelet reconciliation requires the controller endpoint",
                context=self._error_context(context, "resolve_endpoint"),
            )

        name = EnumComponentName.KUBELET.value
        live = self._read(context, EnumResourceKind.DEPLOYMENT, name)
        if live is None:
            context.logger.info("No kubelet deployment found, minting a new token")
            token = self._token_minter.mint_token(endpoint, spec.iofog_user)
        else:
            token = extract_kubelet_token(
                live,
                self._error_context(
                    context, "extract_token", EnumResourceKind.DEPLOYMENT, name
                ),
            )

        microservice = build_kubelet_microservice(
            image=spec.kubelet_image,
            namespace=context.namespace,
            token=token,
            controller_endpoint=endpoint,
        )
        self._converge_microservice(microservice, context)
        return derived.model_copy(update={"kubelet_token": token})


__all__ = ["KubeletReconciler", "extract_kubelet_token"]
