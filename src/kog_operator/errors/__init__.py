# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Kog Operator Errors Module.

Exports:
    ModelReconcileErrorContext: Configuration model for bundled error context
    KogOperatorError: Base operator error class
    ControlPlaneInputError: Desired specification unusable (input errors)
    CredentialDecodeError: At-rest credential is not valid base64
    ControlPlaneSpecError: Custom resource failed schema validation
    LiveStateError: Live object has an unexpected shape
    MalformedLiveStateError: Live object mutated out-of-band
    MissingLiveResourceError: Pre-existing dependency object is absent
    PlatformApiError: Kubernetes API rejected a call
    TokenMintError: Controller API could not issue a token
    ReconcilePipelineError: Stage ran without a required derived value
    OperatorConfigurationError: Operator configuration invalid

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - Passwords, including decoded controller user passwords
        - Kubelet tokens or controller access tokens
        - Encoded credential payloads

    SAFE to include:
        - Component names (e.g., "kubelet", "skupper")
        - Operation names (e.g., "read", "replace", "extract_token")
        - Object names, namespaces, HTTP status codes
        - Correlation IDs
"""

from kog_operator.errors.model_reconcile_error_context import (
    ModelReconcileErrorContext,
)
from kog_operator.errors.reconcile_errors import (
    ControlPlaneInputError,
    ControlPlaneSpecError,
    CredentialDecodeError,
    KogOperatorError,
    LiveStateError,
    MalformedLiveStateError,
    MissingLiveResourceError,
    OperatorConfigurationError,
    PlatformApiError,
    ReconcilePipelineError,
    TokenMintError,
)

__all__ = [
    "ControlPlaneInputError",
    "ControlPlaneSpecError",
    "CredentialDecodeError",
    "KogOperatorError",
    "LiveStateError",
    "MalformedLiveStateError",
    "MissingLiveResourceError",
    "ModelReconcileErrorContext",
    "OperatorConfigurationError",
    "PlatformApiError",
    "ReconcilePipelineError",
    "TokenMintError",
]
