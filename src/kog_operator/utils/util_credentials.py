# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""At-rest credential decoding.

Credentials in the Kog custom resource are stored base64 encoded. They are
decoded exactly once per reconciliation pass, before any component sees them.

Example:
    >>> decode_credential("cGFzc3dvcmQ=")
    'password'
"""

from __future__ import annotations

import base64
import binascii
from typing import Optional

from kog_operator.errors import CredentialDecodeError, ModelReconcileErrorContext


def decode_credential(
    encoded: str,
    context: Optional[ModelReconcileErrorContext] = None,
) -> str:
    """Decode a standard base64 credential into its UTF-8 plaintext.

    Args:
        encoded: Standard (padded) base64 text, optionally line wrapped
        context: Error context attached on failure

    Returns:
        The decoded plaintext.

    Raises:
        CredentialDecodeError: If ``encoded`` is not valid base64 or does not
            decode to UTF-8 text. The encoded value is never echoed.
    """
    try:
        # line breaks from wrapped encoders and YAML block scalars are skipped
        stripped = encoded.replace("\r", "").replace("\n", "")
        return base64.b64decode(stripped, validate=True).decode("utf-8")
    except (binascii.Error, ValueError) as e:
        # UnicodeDecodeError is a ValueError; non-ASCII input raises ValueError too
        raise CredentialDecodeError(
            f"Credential is not valid base64 text: {type(e).__name__}",
            context=context,
        ) from e


__all__ = ["decode_credential"]
