"""Declarative build specifications.

The contents of a build specification are opaque to the assembler; it only
decides which specification is wired to which artifact slots.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from autobuild.models.grants import TrustBoundary

DEFAULT_BUILD_IMAGE = "aws/codebuild/standard:7.0"
BUILD_SPEC_VERSION = "0.2"


class BuildSpecification(BaseModel):
    """Phase list, exported files, environment and image for one build."""

    model_config = ConfigDict(frozen=True)

    version: str = BUILD_SPEC_VERSION
    phases: dict[str, list[str]] = Field(default_factory=dict)
    artifact_files: list[str] = Field(default_factory=list)
    environment_variables: dict[str, str] = Field(default_factory=dict)
    image: str = DEFAULT_BUILD_IMAGE

    def to_buildspec(self) -> dict[str, Any]:
        """Render in the executor's buildspec document shape."""
        document: dict[str, Any] = {
            "version": self.version,
            "phases": {
                name: {"commands": list(commands)}
                for name, commands in self.phases.items()
            },
        }
        if self.environment_variables:
            document["env"] = {"variables": dict(self.environment_variables)}
        if self.artifact_files:
            document["artifacts"] = {"files": list(self.artifact_files)}
        return document


class BuildProject(BaseModel):
    """A named build project: a specification plus the trust it runs with."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    spec: BuildSpecification
    trust_boundary: TrustBoundary | None = None
