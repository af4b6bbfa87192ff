# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for the Kog operator."""

from kog_operator.enums.enum_component_name import EnumComponentName
from kog_operator.enums.enum_convergence_action import EnumConvergenceAction
from kog_operator.enums.enum_resource_kind import EnumResourceKind
from kog_operator.enums.enum_service_type import (
    EXTERNALLY_ROUTED_SERVICE_TYPES,
    EnumServiceType,
    EnumTrafficPolicy,
)

__all__ = [
    "EXTERNALLY_ROUTED_SERVICE_TYPES",
    "EnumComponentName",
    "EnumConvergenceAction",
    "EnumResourceKind",
    "EnumServiceType",
    "EnumTrafficPolicy",
]
