# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the operator error hierarchy."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from kog_operator.enums import EnumComponentName, EnumResourceKind
from kog_operator.errors import (
    ControlPlaneInputError,
    ControlPlaneSpecError,
    CredentialDecodeError,
    KogOperatorError,
    LiveStateError,
    MalformedLiveStateError,
    MissingLiveResourceError,
    ModelReconcileErrorContext,
    OperatorConfigurationError,
    PlatformApiError,
    ReconcilePipelineError,
    TokenMintError,
)


class TestKogOperatorError:
    """Test KogOperatorError base class."""

    def test_basic_initialization(self) -> None:
        error = KogOperatorError("Operation failed")

        assert str(error) == "Operation failed"
        assert error.message == "Operation failed"
        assert error.component is None
        assert error.correlation_id is None
        assert error.extra_context == {}

    def test_with_context(self) -> None:
        """Structured fields are exposed and rendered into the message."""
        correlation_id = uuid4()
        context = ModelReconcileErrorContext(
            component=EnumComponentName.KUBELET,
            operation="extract_token",
            resource_kind=EnumResourceKind.DEPLOYMENT,
            target_name="kubelet",
            correlation_id=correlation_id,
        )

        error = KogOperatorError("Unexpected shape", context=context)

        assert error.component is EnumComponentName.KUBELET
        assert error.operation == "extract_token"
        assert error.correlation_id == correlation_id
        rendered = str(error)
        assert rendered.startswith("Unexpected shape (")
        assert "component=kubelet" in rendered
        assert "kind=Deployment" in rendered
        assert "target=kubelet" in rendered
        assert f"correlation_id={correlation_id}" in rendered

    def test_extra_context(self) -> None:
        error = MalformedLiveStateError("Expected 6 args", found_args=5)

        assert error.extra_context == {"found_args": 5}

    def test_error_chaining(self) -> None:
        original = ValueError("boom")

        with pytest.raises(TokenMintError) as exc_info:
            try:
                raise original
            except ValueError as e:
                raise TokenMintError("Mint failed") from e

        assert exc_info.value.__cause__ is original


class TestErrorHierarchy:
    """Input errors are distinguishable from retryable failures."""

    @pytest.mark.parametrize(
        "error_class",
        [CredentialDecodeError, ControlPlaneSpecError],
    )
    def test_input_errors(self, error_class: type[KogOperatorError]) -> None:
        assert issubclass(error_class, ControlPlaneInputError)
        assert issubclass(error_class, KogOperatorError)

    @pytest.mark.parametrize(
        "error_class",
        [
            MalformedLiveStateError,
            MissingLiveResourceError,
            PlatformApiError,
            TokenMintError,
            ReconcilePipelineError,
            OperatorConfigurationError,
        ],
    )
    def test_non_input_errors(self, error_class: type[KogOperatorError]) -> None:
        assert not issubclass(error_class, ControlPlaneInputError)
        assert issubclass(error_class, KogOperatorError)

    def test_live_state_errors(self) -> None:
        assert issubclass(MalformedLiveStateError, LiveStateError)
        assert issubclass(MissingLiveResourceError, LiveStateError)


class TestSpecificErrors:
    """Errors carrying extra attributes."""

    def test_spec_error_validation_errors(self) -> None:
        error = ControlPlaneSpecError(
            "Validation failed",
            validation_errors=["controllerImage: Field required"],
        )

        assert error.validation_errors == ["controllerImage: Field required"]

    def test_platform_error_status(self) -> None:
        error = PlatformApiError("Rejected", status=409, reason="Conflict", body="{}")

        assert error.status == 409
        assert error.reason == "Conflict"
        assert error.extra_context == {"body": "{}"}

    def test_platform_error_defaults(self) -> None:
        error = PlatformApiError("Unreachable")

        assert error.status is None
        assert error.reason is None


class TestModelReconcileErrorContext:
    """Test the error context model."""

    def test_correlation_id_defaults_to_none(self) -> None:
        context = ModelReconcileErrorContext(operation="read")

        assert context.correlation_id is None
        assert context.operation == "read"

    def test_is_frozen(self) -> None:
        context = ModelReconcileErrorContext(operation="read")

        with pytest.raises(ValidationError):
            context.operation = "write"  # type: ignore[misc]
