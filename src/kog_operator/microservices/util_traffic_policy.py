# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Service traffic-locality policy derivation."""

from __future__ import annotations

from kog_operator.enums import EnumServiceType, EnumTrafficPolicy


def get_traffic_policy(service_type: str) -> str:
    """Map a Service type to its external traffic policy.

    Load-balanced services keep traffic on the receiving node ("Local");
    every other type is balanced cluster-wide ("Cluster").
    """
    if service_type == EnumServiceType.LOAD_BALANCER.value:
        return EnumTrafficPolicy.LOCAL.value
    return EnumTrafficPolicy.CLUSTER.value


__all__ = ["get_traffic_policy"]
