# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Kubelet token minting against the controller REST API.

Flow:
    1. ``POST /api/v3/user/signup`` with the configured user; a 400 response
       means the user already exists and is accepted
    2. ``POST /api/v3/user/login``; the returned ``accessToken`` is the token

Security:
    - Passwords and tokens are never logged nor embedded in errors
    - Response bodies are sanitized before being attached to errors
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from kog_operator.enums import EnumComponentName
from kog_operator.errors import ModelReconcileErrorContext, TokenMintError
from kog_operator.models import ModelIofogUser
from kog_operator.models.model_operator_config import (
    DEFAULT_TOKEN_REQUEST_TIMEOUT_SECONDS,
)
from kog_operator.utils import sanitize_error_string

logger = logging.getLogger(__name__)

SIGNUP_PATH = "/api/v3/user/signup"
LOGIN_PATH = "/api/v3/user/login"
HTTP_BAD_REQUEST = 400


class ControllerTokenMinter:
    """ProtocolTokenMinter implementation using the controller's user API."""

    def __init__(
        self,
        timeout_seconds: float = DEFAULT_TOKEN_REQUEST_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the minter.

        Args:
            timeout_seconds: Per-request timeout
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self._timeout = timeout_seconds
        self._transport = transport

    def mint_token(self, controller_endpoint: str, user: ModelIofogUser) -> str:
        context = ModelReconcileErrorContext(
            component=EnumComponentName.KUBELET,
            operation="mint_token",
            target_name=controller_endpoint,
        )
        base_url = f"http://{controller_endpoint}"
        try:
            with httpx.Client(
                base_url=base_url,
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
            ) as http:
                self._sign_up(http, user, context)
                token = self._login(http, user, context)
        except httpx.TimeoutException as e:
            raise TokenMintError(
                f"Controller token request timed out after {self._timeout}s",
                context=context,
            ) from e
        except httpx.HTTPError as e:
            raise TokenMintError(
                f"HTTP error during controller token request: {type(e).__name__}",
                context=context,
            ) from e
        logger.info("Minted new kubelet token from controller at %s", controller_endpoint)
        return token

    def _sign_up(
        self,
        http: httpx.Client,
        user: ModelIofogUser,
        context: ModelReconcileErrorContext,
    ) -> None:
        response = http.post(
            SIGNUP_PATH,
            json={
                "firstName": user.name,
                "lastName": user.surname,
                "email": user.email,
                "password": user.password.get_secret_value(),
            },
        )
        if response.status_code == HTTP_BAD_REQUEST:
            logger.debug("Controller user already exists, logging in")
            return
        if response.is_error:
            raise TokenMintError(
                f"Controller rejected user signup with HTTP {response.status_code}",
                context=context,
                body=sanitize_error_string(response.text),
            )

    def _login(
        self,
        http: httpx.Client,
        user: ModelIofogUser,
        context: ModelReconcileErrorContext,
    ) -> str:
        response = http.post(
            LOGIN_PATH,
            json={
                "email": user.email,
                "password": user.password.get_secret_value(),
            },
        )
        if response.is_error:
            raise TokenMintError(
                f"Controller rejected login with HTTP {response.status_code}",
                context=context,
                body=sanitize_error_string(response.text),
            )
        try:
            payload = response.json()
        except ValueError as e:
            raise TokenMintError(
                "Controller login response is not JSON",
                context=context,
            ) from e
        token = payload.get("accessToken") if isinstance(payload, dict) else None
        if not isinstance(token, str) or not token:
            raise TokenMintError(
                "Controller login response carries no access token",
                context=context,
            )
        return token


__all__ = ["ControllerTokenMinter"]
