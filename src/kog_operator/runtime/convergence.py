# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Convergence of one desired manifest against live state.

Algorithm:
    1. Read the live object by kind, namespace and name
    2. Absent: create it from the desired manifest
    3. Present: compare every field the manifest sets against the live object
       (``manifest_matches_live``); on divergence replace the object with the
       full desired manifest
    4. Otherwise issue no call at all

Comparison uses subset semantics. Fields the API server populates on its own
(status, defaults such as ``protocol: TCP`` or ``timeoutSeconds``) are ignored;
a desired empty value (``""``, ``[]``, ``{}``) matches an absent live field,
because the API server drops empty values when it stores an object. Lists
must have the same length and match element-wise.

Re-running convergence against already-converged state is a no-op, which is
what makes concurrent or repeated passes for the same spec safe without any
locking.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Optional

from kog_operator.enums import EnumConvergenceAction, EnumResourceKind
from kog_operator.runtime.protocol_live_state_accessor import (
    ProtocolLiveStateAccessor,
)

logger = logging.getLogger(__name__)

_EMPTY_VALUES: tuple[object, ...] = ("", [], {}, None)


def manifest_matches_live(desired: object, live: object) -> bool:
    """Return True when every field set in ``desired`` equals ``live``.

    Example:
        >>> manifest_matches_live({"spec": {"replicas": 1}},
        ...                       {"spec": {"replicas": 1, "paused": False}})
        True
        >>> manifest_matches_live({"args": ["a"]}, {"args": ["a", "b"]})
        False
    """
    if isinstance(desired, Mapping):
        if not isinstance(live, Mapping):
            return False
        for key, desired_value in desired.items():
            if key not in live:
                if desired_value in _EMPTY_VALUES:
                    continue
                return False
            if not manifest_matches_live(desired_value, live[key]):
                return False
        return True
    if isinstance(desired, (list, tuple)):
        if not isinstance(live, (list, tuple)) or len(desired) != len(live):
            return False
        return all(
            manifest_matches_live(desired_item, live_item)
            for desired_item, live_item in zip(desired, live)
        )
    return desired == live


def _metadata(obj: Mapping[str, object]) -> Mapping[str, object]:
    metadata = obj.get("metadata")
    return metadata if isinstance(metadata, Mapping) else {}


def _spec(obj: Mapping[str, object]) -> Mapping[str, object]:
    spec = obj.get("spec")
    return spec if isinstance(spec, Mapping) else {}


def build_replacement(
    kind: EnumResourceKind,
    desired: Mapping[str, object],
    live: Mapping[str, object],
) -> dict[str, object]:
    """Build the full-replacement body for a divergent object.

    Carries the live ``resourceVersion`` (optimistic concurrency) and, for
    Services, the immutable ``clusterIP``.
    """
    body = copy.deepcopy(dict(desired))
    metadata = dict(_metadata(body))
    resource_version = _metadata(live).get("resourceVersion")
    if resource_version:
        metadata["resourceVersion"] = resource_version
    body["metadata"] = metadata

    if kind is EnumResourceKind.SERVICE:
        cluster_ip = _spec(live).get("clusterIP")
        if cluster_ip:
            spec = dict(_spec(body))
            spec["clusterIP"] = cluster_ip
            body["spec"] = spec
    return body


def converge_manifest(
    accessor: ProtocolLiveStateAccessor,
    manifest: Mapping[str, object],
    correlation_id: Optional[object] = None,
) -> EnumConvergenceAction:
    """Converge one object onto ``manifest``.

    Args:
        accessor: Live state accessor
        manifest: Desired manifest (must carry kind, metadata.name, metadata.namespace)
        correlation_id: Pass correlation ID for log records

    Returns:
        The action taken.

    Raises:
        PlatformApiError: If the platform rejects the read or the write.
    """
    kind = EnumResourceKind(manifest["kind"])
    metadata = _metadata(manifest)
    name = str(metadata["name"])
    namespace = str(metadata["namespace"])

    live = accessor.read(kind, namespace, name)
    if live is None:
        accessor.create(kind, namespace, manifest)
        logger.info(
            "Created %s %s/%s (correlation_id=%s)",
            kind.value,
            namespace,
            name,
            correlation_id,
        )
        return EnumConvergenceAction.CREATED

    if manifest_matches_live(manifest, live):
        logger.debug(
            "%s %s/%s already converged (correlation_id=%s)",
            kind.value,
            namespace,
            name,
            correlation_id,
        )
        return EnumConvergenceAction.UNCHANGED

    accessor.replace(kind, namespace, name, build_replacement(kind, manifest, live))
    logger.info(
        "Updated %s %s/%s (correlation_id=%s)",
        kind.value,
        namespace,
        name,
        correlation_id,
    )
    return EnumConvergenceAction.UPDATED


__all__ = ["build_replacement", "converge_manifest", "manifest_matches_live"]
