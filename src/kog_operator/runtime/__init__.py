# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Runtime seams of the Kog operator.

    - ProtocolLiveStateAccessor / KubernetesLiveStateAccessor: live cluster state
    - converge_manifest: idempotent create-or-replace of one object
    - ProtocolTokenMinter / ControllerTokenMinter: kubelet token issuance
    - load_operator_config: configuration loading
"""

from kog_operator.runtime.config_loader import (
    load_operator_config,
    load_operator_config_from_env,
)
from kog_operator.runtime.controller_token_minter import ControllerTokenMinter
from kog_operator.runtime.convergence import (
    build_replacement,
    converge_manifest,
    manifest_matches_live,
)
from kog_operator.runtime.kubernetes_live_state_accessor import (
    KubernetesLiveStateAccessor,
    load_kubernetes_configuration,
)
from kog_operator.runtime.protocol_live_state_accessor import (
    ProtocolLiveStateAccessor,
)
from kog_operator.runtime.protocol_token_minter import ProtocolTokenMinter

__all__ = [
    "ControllerTokenMinter",
    "KubernetesLiveStateAccessor",
    "ProtocolLiveStateAccessor",
    "ProtocolTokenMinter",
    "build_replacement",
    "converge_manifest",
    "load_kubernetes_configuration",
    "load_operator_config",
    "load_operator_config_from_env",
]
