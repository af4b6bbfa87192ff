# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Operator configuration loading.

Configuration Loading Process:
    1. If a config file path is given, parse it as YAML and validate it
       against ModelOperatorConfig
    2. Otherwise build the configuration from ``KOG_*`` environment variables
       and defaults

Environment Variables:
    KOG_CRD_GROUP: Kog custom resource API group (default: iofog.org)
    KOG_CRD_VERSION: Kog custom resource version (default: v1)
    KOG_CRD_PLURAL: Kog custom resource plural (default: kogs)
    KOG_WATCH_NAMESPACES: Comma-separated namespaces (default: cluster-wide)
    KOG_CLUSTER_DOMAIN: Cluster DNS domain (default: cluster.local)
    KOG_TOKEN_TIMEOUT_SECONDS: Controller token request timeout (default: 10)
    KOG_RESYNC_INTERVAL_SECONDS: Drift-correcting resync period (default: 60)
    KOG_LOG_LEVEL: Logging level (default: INFO)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from kog_operator.errors import ModelReconcileErrorContext, OperatorConfigurationError
from kog_operator.models import ModelOperatorConfig

logger = logging.getLogger(__name__)

_ENV_FIELDS: dict[str, str] = {
    "KOG_CRD_GROUP": "crd_group",
    "KOG_CRD_VERSION": "crd_version",
    "KOG_CRD_PLURAL": "crd_plural",
    "KOG_CLUSTER_DOMAIN": "cluster_domain",
    "KOG_TOKEN_TIMEOUT_SECONDS": "token_request_timeout_seconds",
    "KOG_RESYNC_INTERVAL_SECONDS": "resync_interval_seconds",
    "KOG_LOG_LEVEL": "log_level",
}


def _validate(
    raw_config: Mapping[str, object],
    source: str,
    context: ModelReconcileErrorContext,
) -> ModelOperatorConfig:
    try:
        return ModelOperatorConfig.model_validate(dict(raw_config))
    except ValidationError as e:
        validation_errors = [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise OperatorConfigurationError(
            f"Operator config validation failed from {source}: "
            f"{e.error_count()} error(s). First errors: {'; '.join(validation_errors[:3])}",
            context=context,
            validation_errors=validation_errors,
        ) from e


def load_operator_config_from_env(
    environ: Optional[Mapping[str, str]] = None,
) -> ModelOperatorConfig:
    """Build the operator configuration from environment variables."""
    env = os.environ if environ is None else environ
    raw_config: dict[str, object] = {
        field: env[variable] for variable, field in _ENV_FIELDS.items() if env.get(variable)
    }
    namespaces = env.get("KOG_WATCH_NAMESPACES", "")
    raw_config["watch_namespaces"] = tuple(
        namespace.strip() for namespace in namespaces.split(",") if namespace.strip()
    )
    context = ModelReconcileErrorContext(operation="load_config", target_name="environment")
    return _validate(raw_config, "environment", context)


def load_operator_config(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ModelOperatorConfig:
    """Load the operator configuration from a YAML file or the environment.

    Args:
        config_path: YAML file; when None the environment is used
        environ: Environment mapping override (defaults to os.environ)

    Raises:
        OperatorConfigurationError: If the file cannot be read or parsed, or
            the configuration fails validation.
    """
    if config_path is None:
        logger.info("No operator config file given, using environment/defaults")
        return load_operator_config_from_env(environ)

    context = ModelReconcileErrorContext(
        operation="load_config",
        target_name=str(config_path),
    )
    logger.info("Loading operator config from %s", config_path)
    try:
        with open(config_path, encoding="utf-8") as f:
            raw_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise OperatorConfigurationError(
            f"Failed to parse operator config YAML at {config_path}: {e}",
            context=context,
            config_path=str(config_path),
        ) from e
    except OSError as e:
        raise OperatorConfigurationError(
            f"Failed to read operator config at {config_path}: {e}",
            context=context,
            config_path=str(config_path),
        ) from e

    if not isinstance(raw_config, Mapping):
        raise OperatorConfigurationError(
            f"Operator config at {config_path} must be a mapping",
            context=context,
            config_path=str(config_path),
        )
    return _validate(raw_config, str(config_path), context)


__all__ = ["load_operator_config", "load_operator_config_from_env"]
