# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Convergence Action Enumeration.

Outcome of converging a single desired manifest against live state.
"""

from enum import Enum


class EnumConvergenceAction(str, Enum):
    """Action taken by the convergence algorithm for one object.

    Attributes:
        CREATED: Object was absent and has been created
        UPDATED: Object diverged and has been replaced with the desired state
        UNCHANGED: Live object already matched; no mutating call was issued
    """

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"

    @property
    def is_mutation(self) -> bool:
        """True when the action issued a write against the platform."""
        return self is not EnumConvergenceAction.UNCHANGED


__all__ = ["EnumConvergenceAction"]
