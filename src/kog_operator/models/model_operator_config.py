# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Operator Configuration Model.

Loaded by ``kog_operator.runtime.config_loader.load_operator_config`` from a
YAML file or from ``KOG_*`` environment variables.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CRD_GROUP = "iofog.org"
DEFAULT_CRD_VERSION = "v1"
DEFAULT_CRD_PLURAL = "kogs"
DEFAULT_CLUSTER_DOMAIN = "cluster.local"
DEFAULT_TOKEN_REQUEST_TIMEOUT_SECONDS = 10.0
DEFAULT_RESYNC_INTERVAL_SECONDS = 60.0
DEFAULT_LOG_LEVEL = "INFO"


class ModelOperatorConfig(BaseModel):
    """Operator runtime configuration.

    Attributes:
        crd_group: API group of the Kog custom resource
        crd_version: API version of the Kog custom resource
        crd_plural: Plural resource name of the Kog custom resource
        watch_namespaces: Namespaces to watch (empty: cluster-wide)
        cluster_domain: Cluster DNS domain used to build in-cluster endpoints
        token_request_timeout_seconds: Timeout for controller token requests
        resync_interval_seconds: Period of the drift-correcting resync pass
        log_level: Logging level name
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    crd_group: str = Field(default=DEFAULT_CRD_GROUP, min_length=1)
    crd_version: str = Field(default=DEFAULT_CRD_VERSION, min_length=1)
    crd_plural: str = Field(default=DEFAULT_CRD_PLURAL, min_length=1)
    watch_namespaces: tuple[str, ...] = ()
    cluster_domain: str = Field(default=DEFAULT_CLUSTER_DOMAIN, min_length=1)
    token_request_timeout_seconds: float = Field(
        default=DEFAULT_TOKEN_REQUEST_TIMEOUT_SECONDS,
        ge=1.0,
        le=300.0,
    )
    resync_interval_seconds: float = Field(
        default=DEFAULT_RESYNC_INTERVAL_SECONDS,
        ge=5.0,
        le=3600.0,
    )
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def clusterwide(self) -> bool:
        return not self.watch_namespaces


__all__ = [
    "DEFAULT_CLUSTER_DOMAIN",
    "DEFAULT_CRD_GROUP",
    "DEFAULT_CRD_PLURAL",
    "DEFAULT_CRD_VERSION",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_RESYNC_INTERVAL_SECONDS",
    "DEFAULT_TOKEN_REQUEST_TIMEOUT_SECONDS",
    "ModelOperatorConfig",
]
