# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Skupper router (secure overlay network) reconciler.

The router's certificate Secrets are created by a bootstrap step outside
this operator. They are checked before anything is mutated so that a
missing Secret fails the pass instead of leaving a router pod stuck in
ContainerCreating.
"""

from __future__ import annotations

from kog_operator.enums import EnumComponentName, EnumResourceKind
from kog_operator.errors import MissingLiveResourceError
from kog_operator.microservices import (
    SKUPPER_VOLUME_SECRETS,
    build_skupper_microservice,
)
from kog_operator.models import ModelControlPlaneSpec, ModelDerivedValues
from kog_operator.reconcilers.reconcile_context import ReconcileContext
from kog_operator.reconcilers.reconciler_base import ComponentReconcilerBase


class SkupperReconciler(ComponentReconcilerBase):
    """Reconciles the Skupper router and its access-policy objects."""

    component = EnumComponentName.SKUPPER

    def reconcile(
        self,
        spec: ModelControlPlaneSpec,
        context: ReconcileContext,
        derived: ModelDerivedValues,
    ) -> ModelDerivedValues:
        for secret_name in SKUPPER_VOLUME_SECRETS:
            if self._read(context, EnumResourceKind.SECRET, secret_name) is None:
                raise MissingLiveResourceError(
                    f"Router volume secret {secret_name} does not exist",
                    context=self._error_context(
                        context, "check_volume_secret", EnumResourceKind.SECRET, secret_name
                    ),
                )

        microservice = build_skupper_microservice(
            image=spec.skupper_image,
            volume_mount_path=spec.skupper_volume_mount_path,
        )
        self._converge_microservice(microservice, context)
        return derived


__all__ = ["SkupperReconciler"]
