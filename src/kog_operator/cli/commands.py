# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Kog Operator CLI Commands.

Provides the operator process entrypoint and an offline renderer that prints
the manifests a Kog resource converges to.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
import yaml
from rich.console import Console

from kog_operator.errors import KogOperatorError
from kog_operator.microservices import (
    CONTROLLER_CONTROL_PORT,
    build_controller_microservice,
    build_kubelet_microservice,
    build_port_manager_microservice,
    build_skupper_microservice,
    render_manifests,
)
from kog_operator.models import ModelControlPlaneSpec, ModelOwnerReference
from kog_operator.runtime import load_operator_config
from kog_operator.utils import configure_logging, decode_credential

console = Console(stderr=True)

PLACEHOLDER_UID = "00000000-0000-0000-0000-000000000000"


@click.group()
def cli() -> None:
    """Kog edge control plane operator."""


@cli.command("run")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Operator config YAML (default: KOG_* environment variables)",
)
def run_cmd(config_path: Optional[Path]) -> None:
    """Run the operator until interrupted."""
    import kopf

    from kog_operator.dispatch import register_handlers
    from kog_operator.runtime import ControllerTokenMinter, KubernetesLiveStateAccessor

    try:
        config = load_operator_config(config_path)
    except KogOperatorError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {e}")
        raise SystemExit(1) from e

    configure_logging(config.log_level)
    registry = kopf.OperatorRegistry()
    register_handlers(
        registry,
        config,
        accessor=KubernetesLiveStateAccessor.from_environment(config),
        token_minter=ControllerTokenMinter(
            timeout_seconds=config.token_request_timeout_seconds
        ),
    )
    scope = "cluster-wide" if config.clusterwide else ", ".join(config.watch_namespaces)
    console.print(
        f"[bold blue]Watching {config.crd_plural}.{config.crd_group}/"
        f"{config.crd_version} ({scope})[/bold blue]"
    )
    kopf.run(
        registry=registry,
        standalone=True,
        clusterwide=config.clusterwide,
        namespaces=list(config.watch_namespaces),
    )


@cli.command("render")
@click.argument(
    "resource_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--namespace", default=None, help="Target namespace (default: resource's)")
@click.option(
    "--kubelet-token",
    default="<kubelet-token>",
    show_default=True,
    help="Token rendered into the kubelet arguments",
)
@click.option(
    "--cluster-domain",
    default="cluster.local",
    show_default=True,
    help="Cluster DNS domain for the controller endpoint",
)
def render_cmd(
    resource_file: Path,
    namespace: Optional[str],
    kubelet_token: str,
    cluster_domain: str,
) -> None:
    """Print the manifests a Kog resource converges to, as YAML."""
    try:
        with open(resource_file, encoding="utf-8") as f:
            body = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        console.print(f"[bold red]Invalid YAML in {resource_file}:[/bold red] {e}")
        raise SystemExit(1) from e
    if not isinstance(body, dict):
        console.print(f"[bold red]{resource_file} is not a Kubernetes object[/bold red]")
        raise SystemExit(1)

    metadata = body.get("metadata") if isinstance(body.get("metadata"), dict) else {}
    target_namespace = namespace or metadata.get("namespace") or "default"
    owner_reference = ModelOwnerReference(
        api_version=str(body.get("apiVersion") or "iofog.org/v1"),
        kind=str(body.get("kind") or "Kog"),
        name=str(metadata.get("name") or "kog"),
        uid=str(metadata.get("uid") or PLACEHOLDER_UID),
    )

    try:
        spec = ModelControlPlaneSpec.from_custom_resource(body)
        spec = spec.with_user_password(
            decode_credential(spec.iofog_user.password.get_secret_value())
        )
    except KogOperatorError as e:
        console.print(f"[bold red]Invalid control plane spec:[/bold red] {e}")
        raise SystemExit(1) from e

    endpoint = (
        f"controller.{target_namespace}.svc.{cluster_domain}:{CONTROLLER_CONTROL_PORT}"
    )
    microservices = (
        build_controller_microservice(
            replicas=spec.controller_replica_count,
            image=spec.controller_image,
            image_pull_secret=spec.image_pull_secret,
            database=spec.database,
            service_type=spec.service_type,
            load_balancer_ip=spec.load_balancer_ip,
        ),
        build_kubelet_microservice(
            image=spec.kubelet_image,
            namespace=target_namespace,
            token=kubelet_token,
            controller_endpoint=endpoint,
        ),
        build_port_manager_microservice(
            image=spec.port_manager_image,
            watch_namespace=spec.resolve_watch_namespace(target_namespace),
            user_email=spec.iofog_user.email,
            user_password=spec.iofog_user.password.get_secret_value(),
        ),
        build_skupper_microservice(
            image=spec.skupper_image,
            volume_mount_path=spec.skupper_volume_mount_path,
        ),
    )
    manifests = [
        manifest
        for microservice in microservices
        for manifest in render_manifests(microservice, target_namespace, owner_reference)
    ]
    click.echo(yaml.safe_dump_all(manifests, sort_keys=False), nl=False)
    console.print(f"[green]Rendered {len(manifests)} manifests[/green]")


if __name__ == "__main__":
    cli()
