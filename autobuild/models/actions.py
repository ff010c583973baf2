"""Pipeline action models.

Every action names the slots it reads and writes through ``input_slots``
and ``output_slots`` so the definition can be walked as a graph.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from autobuild.core.archive_locator import get_full_location
from autobuild.models.archive import ArchiveLocation
from autobuild.models.artifacts import ArtifactPath, ArtifactSlot
from autobuild.models.build import BuildProject
from autobuild.models.grants import AuthorizationGrant


class ActionKind(str, Enum):
    SOURCE = "source"
    BUILD = "build"
    ARCHIVE = "archive"
    DEPLOY = "deploy"


class PullAction(BaseModel):
    """Check out one repository branch into an artifact slot."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[ActionKind.SOURCE] = ActionKind.SOURCE
    name: str
    connection_handle: str
    owner: str
    repository: str
    branch: str
    output: ArtifactSlot

    @property
    def full_repository_id(self) -> str:
        return f"{self.owner}/{self.repository}"

    @property
    def input_slots(self) -> list[ArtifactSlot]:
        return []

    @property
    def output_slots(self) -> list[ArtifactSlot]:
        return [self.output]


class BuildAction(BaseModel):
    """Run a build project against one input slot."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[ActionKind.BUILD] = ActionKind.BUILD
    name: str
    project: BuildProject
    input: ArtifactSlot
    outputs: list[ArtifactSlot] = Field(default_factory=list)

    @property
    def input_slots(self) -> list[ArtifactSlot]:
        return [self.input]

    @property
    def output_slots(self) -> list[ArtifactSlot]:
        return list(self.outputs)


class ArchiveAction(BaseModel):
    """Copy a checked-out repository to object storage."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[ActionKind.ARCHIVE] = ActionKind.ARCHIVE
    name: str
    input: ArtifactSlot
    location: ArchiveLocation
    object_key: str

    @property
    def full_path(self) -> str:
        return get_full_location(self.location.bucket.name, self.object_key)

    @property
    def input_slots(self) -> list[ArtifactSlot]:
        return [self.input]

    @property
    def output_slots(self) -> list[ArtifactSlot]:
        return []


class DeployAction(BaseModel):
    """Create or update one deployable unit from a compiled template."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[ActionKind.DEPLOY] = ActionKind.DEPLOY
    name: str
    unit: str
    template: ArtifactPath
    grant: AuthorizationGrant
    admin_permissions: bool = True

    @property
    def input_slots(self) -> list[ArtifactSlot]:
        return [self.template.slot]

    @property
    def output_slots(self) -> list[ArtifactSlot]:
        return []


PipelineAction = Annotated[
    Union[PullAction, BuildAction, ArchiveAction, DeployAction],
    Field(discriminator="kind"),
]
