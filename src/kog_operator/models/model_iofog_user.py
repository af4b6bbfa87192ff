# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Controller User Credential Model.

Security Note:
    The password arrives base64 encoded at rest in the custom resource. It is
    decoded once per reconciliation pass by the orchestrator, before any
    component reconciler reads it, and is kept in a SecretStr throughout.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic.alias_generators import to_camel


class ModelIofogUser(BaseModel):
    """Controller user credential pair (email as username).

    Attributes:
        name: User first name (used when signing the user up)
        surname: User surname (used when signing the user up)
        email: User email, the login name
        password: Password; base64 encoded until decoded by the orchestrator
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    name: str = Field(default="", description="User first name")
    surname: str = Field(default="", description="User surname")
    email: str = Field(description="User email (login name)")
    password: SecretStr = Field(description="User password")


__all__ = ["ModelIofogUser"]
