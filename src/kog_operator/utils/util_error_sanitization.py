# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error message sanitization utilities.

Foreign error text (Kubernetes API bodies, HTTP responses from the
controller) is sanitized before it is embedded in operator errors or logs,
so that credentials and tokens never leak into events or log sinks.

Example:
    >>> sanitize_error_string("login failed: password=hunter2")
    '[REDACTED - potentially sensitive data]'
"""

from __future__ import annotations

# Patterns that may indicate sensitive data in error messages.
# These patterns are checked case-insensitively against the error message.
SENSITIVE_PATTERNS: tuple[str, ...] = (
    # Credentials
    "password",
    "passwd",
    "pwd",
    # Secrets and keys
    "secret",
    "token",
    "api_key",
    "apikey",
    "private_key",
    # Authentication
    "credential",
    "bearer",
    "authorization",
    # Connection strings (often contain credentials)
    "user:pass",
    "postgres://",
    "postgresql://",
    "mysql://",
    # Certificate and key material
    "-----begin",
    "-----end",
)


def sanitize_error_string(error_str: str, max_length: int = 500) -> str:
    """Sanitize a raw error string for safe inclusion in logs and errors.

    Sanitization rules:
        1. If a sensitive pattern is present, return a generic redacted message
        2. Truncate long messages

    Args:
        error_str: The error string to sanitize
        max_length: Maximum length of the sanitized message (default 500)

    Returns:
        Sanitized error message.
    """
    if not error_str:
        return ""

    error_lower = error_str.lower()
    for pattern in SENSITIVE_PATTERNS:
        if pattern in error_lower:
            return "[REDACTED - potentially sensitive data]"

    if len(error_str) > max_length:
        return error_str[:max_length] + "... [truncated]"

    return error_str


__all__ = ["SENSITIVE_PATTERNS", "sanitize_error_string"]
