# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings."""

    model_config = SettingsConfigDict(
        env_prefix="stacklet_help_",
        validate_assignment=True,
    )

    root_path: Path = Field(
        default=Path("."),
        description="Content root, holding the pages/, assets/ and views/ directories",
    )
    default_page_size: int = Field(
        default=10,
        gt=0,
        description="Number of topics in a listing page when no limit is requested",
    )
    max_page_size: int = Field(
        default=100,
        gt=0,
        description="Upper bound for the requested listing page size",
    )
    strict_page_size: bool = Field(
        default=False,
        description="Slice listing pages as [skip:skip+limit] instead of [skip:limit]",
    )
    host: str = Field(
        default="127.0.0.1",
        description="Address the HTTP server binds to",
    )
    port: int = Field(
        default=8080,
        description="Port the HTTP server listens on",
    )


SETTINGS = Settings()
