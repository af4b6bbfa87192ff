# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol interface for minting kubelet authentication tokens.

A token is minted only when no kubelet workload exists yet. Once the kubelet
is live its token is read back from the workload's arguments, so repeated
passes never rotate it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from kog_operator.models import ModelIofogUser


@runtime_checkable
class ProtocolTokenMinter(Protocol):
    """Issues a new kubelet token from the live controller."""

    def mint_token(self, controller_endpoint: str, user: ModelIofogUser) -> str:
        """Return a new token for the kubelet.

        Args:
            controller_endpoint: Controller address ("host:port")
            user: Controller user with a decoded password

        Raises:
            TokenMintError: If the controller cannot issue a token.
        """
        ...


__all__ = ["ProtocolTokenMinter"]
