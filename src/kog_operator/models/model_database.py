# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Controller Database Connection Model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic.alias_generators import to_camel


class ModelDatabase(BaseModel):
    """Database connection parameters handed verbatim to the controller.

    Attributes:
        provider: Database provider (e.g., "postgres", "mysql")
        database_name: Database name
        user: Database user
        password: Database password (SecretStr to prevent accidental logging)
        host: Database host
        port: Database port
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    provider: str = Field(default="", description="Database provider")
    database_name: str = Field(default="", description="Database name")
    user: str = Field(default="", description="Database user")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    host: str = Field(default="", description="Database host")
    port: int = Field(default=0, ge=0, le=65535, description="Database port")


__all__ = ["ModelDatabase"]
