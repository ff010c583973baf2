"""Pipeline topology configuration.

Loaded from a TOML file by ``autobuild.core.config_loader``.  Example::

    pipeline_name = "orders"

    [self_repository]
    connection_handle = "arn:aws:codestar-connections:...:connection/abc"
    owner = "acme"
    name = "orders-infra"

    [[additional_repositories]]
    connection_handle = "arn:aws:codestar-connections:...:connection/abc"
    owner = "acme"
    name = "orders-service"
    branch = "release"

    [[deployment_stages]]
    stage = "beta"
    units = ["network", "database", "compute"]
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from autobuild.models.repository import RepositoryDescriptor


class DeploymentStageConfig(BaseModel):
    """One deployment stage: a label plus the units deployed together."""

    model_config = ConfigDict(frozen=True)

    stage: str = Field(min_length=1)
    units: list[Annotated[str, Field(min_length=1)]] = Field(default_factory=list)


class PipelineConfig(BaseModel):
    """Everything a caller supplies before assembly begins."""

    model_config = ConfigDict(frozen=True)

    pipeline_name: str = Field(min_length=1)
    self_repository: RepositoryDescriptor
    additional_repositories: list[RepositoryDescriptor] = Field(default_factory=list)
    deployment_stages: list[DeploymentStageConfig] = Field(default_factory=list)
    archive_bucket: str | None = None
    stack_name: str | None = None
