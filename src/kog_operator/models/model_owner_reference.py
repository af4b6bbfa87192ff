# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Owner Reference Model.

Every object the operator creates or replaces carries an owner reference to
the Kog custom resource; the Kubernetes garbage collector deletes the owned
objects when the resource is deleted.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field


class ModelOwnerReference(BaseModel):
    """Controller owner reference to the Kog custom resource."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_version: str = Field(min_length=1)
    kind: str = Field(min_length=1)
    name: str = Field(min_length=1)
    uid: str = Field(min_length=1)

    @classmethod
    def from_custom_resource(cls, body: Mapping[str, object]) -> ModelOwnerReference:
        """Build the reference from a custom resource body."""
        metadata = body.get("metadata")
        if not isinstance(metadata, Mapping):
            metadata = {}
        return cls(
            api_version=str(body.get("apiVersion", "")),
            kind=str(body.get("kind", "")),
            name=str(metadata.get("name", "")),
            uid=str(metadata.get("uid", "")),
        )

    def to_manifest(self) -> dict[str, object]:
        """Render as a Kubernetes ``metadata.ownerReferences`` entry."""
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "name": self.name,
            "uid": self.uid,
            "controller": True,
            "blockOwnerDeletion": True,
        }


__all__ = ["ModelOwnerReference"]
