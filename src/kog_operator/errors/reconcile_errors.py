# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Operator Error Classes.

Error Hierarchy:
    KogOperatorError (base operator error)
    ├── ControlPlaneInputError      desired spec missing fields or malformed
    │   ├── CredentialDecodeError
    │   └── ControlPlaneSpecError
    ├── LiveStateError              live object does not have the expected shape
    │   ├── MalformedLiveStateError
    │   └── MissingLiveResourceError
    ├── PlatformApiError            Kubernetes API rejected a read or write
    ├── TokenMintError              controller API could not mint a kubelet token
    ├── ReconcilePipelineError      a stage ran without a value it depends on
    └── OperatorConfigurationError  operator configuration invalid

All errors:
    - Support proper error chaining with `raise ... from e`
    - Accept ModelReconcileErrorContext for bundled context parameters
    - Keep any extra keyword context in `extra_context`
    - Never carry credential or token values
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from kog_operator.enums import EnumComponentName
from kog_operator.errors.model_reconcile_error_context import (
    ModelReconcileErrorContext,
)


class KogOperatorError(Exception):
    """Base error class for the Kog operator.

    Structured Fields (via ModelReconcileErrorContext):
        component: Managed component being reconciled
        operation: Operation being performed
        resource_kind: Kubernetes kind involved
        target_name: Object or endpoint name
        correlation_id: Reconciliation pass correlation ID

    Example:
        >>> context = ModelReconcileErrorContext(
        ...     component=EnumComponentName.CONTROLLER,
        ...     operation="replace",
        ... )
        >>> raise KogOperatorError("Operation failed", context=context, status=409)
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelReconcileErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize KogOperatorError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled reconciliation context
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context or ModelReconcileErrorContext()
        self.extra_context: dict[str, object] = dict(extra_context)

    @property
    def component(self) -> Optional[EnumComponentName]:
        return self.context.component

    @property
    def operation(self) -> Optional[str]:
        return self.context.operation

    @property
    def correlation_id(self) -> Optional[UUID]:
        return self.context.correlation_id

    def __str__(self) -> str:
        details: list[str] = []
        if self.context.component is not None:
            details.append(f"component={self.context.component.value}")
        if self.context.operation is not None:
            details.append(f"operation={self.context.operation}")
        if self.context.resource_kind is not None:
            details.append(f"kind={self.context.resource_kind.value}")
        if self.context.target_name is not None:
            details.append(f"target={self.context.target_name}")
        if self.context.correlation_id is not None:
            details.append(f"correlation_id={self.context.correlation_id}")
        if not details:
            return self.message
        return f"{self.message} ({', '.join(details)})"


class ControlPlaneInputError(KogOperatorError):
    """Raised when the desired control-plane specification is unusable.

    Input errors are fatal for the current pass: no component reconciler runs
    after one is raised, and re-running with the same specification fails the
    same way.
    """


class CredentialDecodeError(ControlPlaneInputError):
    """Raised when an at-rest encoded credential is not valid base64 text.

    Example:
        >>> raise CredentialDecodeError(
        ...     "Credential is not valid base64",
        ...     context=ModelReconcileErrorContext(operation="decode_credential"),
        ... )
    """


class ControlPlaneSpecError(ControlPlaneInputError):
    """Raised when the custom resource body fails schema validation."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelReconcileErrorContext] = None,
        validation_errors: Optional[list[str]] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(message, context=context, **extra_context)
        self.validation_errors: list[str] = list(validation_errors or [])


class LiveStateError(KogOperatorError):
    """Base class for live objects whose shape prevents safe reconciliation."""


class MalformedLiveStateError(LiveStateError):
    """Raised when a live object was mutated out-of-band into an unexpected shape.

    Used when a derived value (kubelet token, controller endpoint) must be
    extracted from a live object that does not have the expected structure.

    Example:
        >>> raise MalformedLiveStateError(
        ...     "Expected 6 args in kubelet deployment. Found 5",
        ...     context=context,
        ...     found_args=5,
        ... )
    """


class MissingLiveResourceError(LiveStateError):
    """Raised when a pre-existing object a component depends on is absent.

    The overlay router mounts secrets created by an out-of-band bootstrap
    step; the operator mounts them but never creates their contents.
    """


class PlatformApiError(KogOperatorError):
    """Raised when the Kubernetes API rejects a read or write.

    Attributes:
        status: HTTP status returned by the API server (None for transport errors)
        reason: Reason phrase returned by the API server
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelReconcileErrorContext] = None,
        status: Optional[int] = None,
        reason: Optional[str] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(message, context=context, **extra_context)
        self.status = status
        self.reason = reason


class TokenMintError(KogOperatorError):
    """Raised when the controller API cannot issue a kubelet token."""


class ReconcilePipelineError(KogOperatorError):
    """Raised when a reconciler runs without a derived value it depends on."""


class OperatorConfigurationError(KogOperatorError):
    """Raised when operator configuration cannot be loaded or validated.

    Example:
        >>> raise OperatorConfigurationError(
        ...     "Failed to parse operator config YAML at /etc/kog/config.yaml",
        ...     context=ModelReconcileErrorContext(operation="load_config"),
        ...     config_path="/etc/kog/config.yaml",
        ... )
    """


__all__ = [
    "ControlPlaneInputError",
    "ControlPlaneSpecError",
    "CredentialDecodeError",
    "KogOperatorError",
    "LiveStateError",
    "MalformedLiveStateError",
    "MissingLiveResourceError",
    "OperatorConfigurationError",
    "PlatformApiError",
    "ReconcilePipelineError",
    "TokenMintError",
]
