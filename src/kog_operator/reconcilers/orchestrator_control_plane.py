# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Control plane reconciliation orchestrator.

Entry point invoked once per observed change of a Kog resource. One pass:

    1. Fetch the current Kog resource; a resource deleted between the event
       and the fetch resolves as a clean no-op
    2. Validate the spec and decode the controller user password (once)
    3. Run the component reconcilers strictly in order:
           controller -> kubelet -> port-manager -> skupper
       passing derived values (controller endpoint, kubelet token) forward
    4. Stop at the first failing stage and report it

Concurrency:
    The orchestrator holds no locks and keeps no state between passes. Two
    passes for the same resource may run at once; convergence is idempotent,
    so the later pass finds the earlier pass's writes already in place.

Retries:
    None. A failed result is handed back to the dispatcher, which re-delivers
    the event. Partial convergence (e.g. controller updated, kubelet not yet)
    is a safe intermediate state; the next pass resumes from live state.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional, Union
from uuid import UUID, uuid4

from pydantic import ValidationError

from kog_operator.enums import EnumComponentName
from kog_operator.errors import (
    ControlPlaneSpecError,
    KogOperatorError,
    ModelReconcileErrorContext,
)
from kog_operator.models import (
    ModelControlPlaneSpec,
    ModelDerivedValues,
    ModelOperatorConfig,
    ModelOwnerReference,
    ModelReconcileResult,
)
from kog_operator.reconcilers.protocol_component_reconciler import (
    ProtocolComponentReconciler,
)
from kog_operator.reconcilers.reconcile_context import ReconcileContext
from kog_operator.reconcilers.reconciler_controller import ControllerReconciler
from kog_operator.reconcilers.reconciler_kubelet import KubeletReconciler
from kog_operator.reconcilers.reconciler_port_manager import PortManagerReconciler
from kog_operator.reconcilers.reconciler_skupper import SkupperReconciler
from kog_operator.runtime.protocol_live_state_accessor import (
    ProtocolLiveStateAccessor,
)
from kog_operator.runtime.protocol_token_minter import ProtocolTokenMinter
from kog_operator.utils import decode_credential


def default_reconcilers(
    token_minter: ProtocolTokenMinter,
    config: ModelOperatorConfig,
) -> tuple[ProtocolComponentReconciler, ...]:
    """The four component reconcilers in dependency order."""
    return (
        ControllerReconciler(cluster_domain=config.cluster_domain),
        KubeletReconciler(token_minter=token_minter),
        PortManagerReconciler(),
        SkupperReconciler(),
    )


class ControlPlaneOrchestrator:
    """Runs one reconciliation pass per invocation.

    Example:
        >>> orchestrator = ControlPlaneOrchestrator(
        ...     accessor=KubernetesLiveStateAccessor.from_environment(config),
        ...     token_minter=ControllerTokenMinter(),
        ...     logger=logging.getLogger("kog"),
        ...     config=config,
        ... )
        >>> result = orchestrator.reconcile("iofog", "kog")
        >>> result.raise_for_error()
    """

    def __init__(
        self,
        accessor: ProtocolLiveStateAccessor,
        token_minter: ProtocolTokenMinter,
        logger: Union[logging.Logger, logging.LoggerAdapter],  # type: ignore[type-arg]
        config: Optional[ModelOperatorConfig] = None,
        reconcilers: Optional[Sequence[ProtocolComponentReconciler]] = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            accessor: Live state accessor
            token_minter: Issues kubelet tokens when no kubelet exists yet
            logger: Logging handle; each pass wraps it with request context
            config: Operator configuration (defaults when None)
            reconcilers: Stage override, in execution order (defaults to the
                four component reconcilers)
        """
        self._accessor = accessor
        self._logger = logger
        self._config = config or ModelOperatorConfig()
        self._reconcilers: tuple[ProtocolComponentReconciler, ...] = (
            tuple(reconcilers)
            if reconcilers is not None
            else default_reconcilers(token_minter, self._config)
        )

    @property
    def stages(self) -> tuple[EnumComponentName, ...]:
        return tuple(reconciler.component for reconciler in self._reconcilers)

    def reconcile(self, namespace: str, name: str) -> ModelReconcileResult:
        """Run one reconciliation pass for the Kog resource ``namespace/name``.

        Returns:
            The pass result. Failures are reported in the result, never raised,
            except for programming errors outside the operator error hierarchy.
        """
        correlation_id = uuid4()
        pass_logger = logging.LoggerAdapter(
            self._logger,
            {
                "kog_namespace": namespace,
                "kog_name": name,
                "correlation_id": str(correlation_id),
            },
        )
        pass_logger.info(
            "Reconciling control plane %s/%s (correlation_id=%s)",
            namespace,
            name,
            correlation_id,
        )

        def failed(
            error: KogOperatorError,
            component: Optional[EnumComponentName] = None,
            context: Optional[ReconcileContext] = None,
        ) -> ModelReconcileResult:
            pass_logger.error(
                "Reconciliation of %s/%s failed at %s: %s",
                namespace,
                name,
                component.value if component is not None else "input",
                error,
            )
            return ModelReconcileResult(
                namespace=namespace,
                name=name,
                correlation_id=correlation_id,
                success=False,
                failed_component=component,
                error=error,
                actions=tuple(context.actions) if context is not None else (),
            )

        try:
            body = self._accessor.read_control_plane(namespace, name)
        except KogOperatorError as e:
            return failed(e)

        if body is None:
            pass_logger.info(
                "Control plane %s/%s no longer exists, nothing to do (correlation_id=%s)",
                namespace,
                name,
                correlation_id,
            )
            return ModelReconcileResult(
                namespace=namespace,
                name=name,
                correlation_id=correlation_id,
                success=True,
                skipped=True,
            )

        try:
            spec = self._load_spec(body, correlation_id)
            owner_reference = self._owner_reference(body, correlation_id)
        except KogOperatorError as e:
            return failed(e)

        context = ReconcileContext(
            namespace=namespace,
            owner_reference=owner_reference,
            accessor=self._accessor,
            logger=pass_logger,
            correlation_id=correlation_id,
        )
        derived = ModelDerivedValues()
        for reconciler in self._reconcilers:
            pass_logger.debug("Reconciling %s", reconciler.component.value)
            try:
                derived = reconciler.reconcile(spec, context, derived)
            except KogOperatorError as e:
                return failed(e, reconciler.component, context)

        result = ModelReconcileResult(
            namespace=namespace,
            name=name,
            correlation_id=correlation_id,
            success=True,
            actions=tuple(context.actions),
        )
        pass_logger.info(
            "Completed reconciliation of %s/%s: %d mutation(s) (correlation_id=%s)",
            namespace,
            name,
            result.mutation_count,
            correlation_id,
        )
        return result

    def _load_spec(
        self,
        body: dict[str, object],
        correlation_id: UUID,
    ) -> ModelControlPlaneSpec:
        """Validate the resource and decode the controller user password."""
        spec = ModelControlPlaneSpec.from_custom_resource(
            body,
            ModelReconcileErrorContext(operation="load_spec", correlation_id=correlation_id),
        )
        password = decode_credential(
            spec.iofog_user.password.get_secret_value(),
            ModelReconcileErrorContext(
                operation="decode_credential",
                target_name="iofogUser.password",
                correlation_id=correlation_id,
            ),
        )
        return spec.with_user_password(password)

    def _owner_reference(
        self,
        body: dict[str, object],
        correlation_id: UUID,
    ) -> ModelOwnerReference:
        try:
            return ModelOwnerReference.from_custom_resource(body)
        except ValidationError as e:
            raise ControlPlaneSpecError(
                "Custom resource metadata is incomplete for an owner reference",
                context=ModelReconcileErrorContext(
                    operation="load_spec", correlation_id=correlation_id
                ),
                validation_errors=[str(err["loc"][0]) for err in e.errors()],
            ) from e


__all__ = ["ControlPlaneOrchestrator", "default_reconcilers"]
