# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for the Kog operator.

    - util_credentials: At-rest credential decoding
    - util_error_sanitization: Error message sanitization for logs and errors
    - util_logging: Process logging setup
"""

from kog_operator.utils.util_credentials import decode_credential
from kog_operator.utils.util_error_sanitization import (
    SENSITIVE_PATTERNS,
    sanitize_error_string,
)
from kog_operator.utils.util_logging import configure_logging

__all__ = [
    "SENSITIVE_PATTERNS",
    "configure_logging",
    "decode_credential",
    "sanitize_error_string",
]
