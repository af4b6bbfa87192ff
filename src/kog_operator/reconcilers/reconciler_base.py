# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared convergence behaviour of the component reconcilers."""

from __future__ import annotations

from typing import ClassVar, Optional

from kog_operator.enums import EnumComponentName, EnumResourceKind
from kog_operator.errors import ModelReconcileErrorContext, PlatformApiError
from kog_operator.microservices import render_manifests
from kog_operator.models import ModelMicroservice, ModelObjectAction
from kog_operator.reconcilers.reconcile_context import ReconcileContext
from kog_operator.runtime.convergence import converge_manifest


class ComponentReconcilerBase:
    """Base class providing bundle convergence and component-scoped errors.

    Subclasses set ``component`` and implement ``reconcile``.
    """

    component: ClassVar[EnumComponentName]

    def _error_context(
        self,
        context: ReconcileContext,
        operation: str,
        kind: Optional[EnumResourceKind] = None,
        target_name: Optional[str] = None,
    ) -> ModelReconcileErrorContext:
        return ModelReconcileErrorContext(
            component=self.component,
            operation=operation,
            resource_kind=kind,
            target_name=target_name,
            correlation_id=context.correlation_id,
        )

    def _scoped(self, e: PlatformApiError, context: ReconcileContext) -> PlatformApiError:
        """Copy a platform error, stamping this component and the pass correlation ID."""
        scoped_context = e.context.model_copy(
            update={"component": self.component, "correlation_id": context.correlation_id}
        )
        return PlatformApiError(
            e.message,
            context=scoped_context,
            status=e.status,
            reason=e.reason,
            **e.extra_context,
        )

    def _read(
        self,
        context: ReconcileContext,
        kind: EnumResourceKind,
        name: str,
    ) -> Optional[dict[str, object]]:
        try:
            return context.accessor.read(kind, context.namespace, name)
        except PlatformApiError as e:
            raise self._scoped(e, context) from e

    def _converge_microservice(
        self,
        microservice: ModelMicroservice,
        context: ReconcileContext,
    ) -> None:
        """Converge every object rendered for ``microservice``, in apply order."""
        for manifest in render_manifests(
            microservice, context.namespace, context.owner_reference
        ):
            kind = EnumResourceKind(manifest["kind"])
            name = str(manifest["metadata"]["name"])  # type: ignore[index]
            try:
                action = converge_manifest(
                    context.accessor, manifest, context.correlation_id
                )
            except PlatformApiError as e:
                raise self._scoped(e, context) from e
            context.record(
                ModelObjectAction(
                    component=self.component,
                    kind=kind,
                    name=name,
                    action=action,
                )
            )


__all__ = ["ComponentReconcilerBase"]
