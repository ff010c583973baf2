"""Source repository descriptor."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from autobuild.models.actions import PullAction
from autobuild.models.artifacts import ArtifactSlot

DEFAULT_BRANCH = "main"


class RepositoryDescriptor(BaseModel):
    """One repository the pipeline pulls and builds on every commit.

    Identity is ``(owner, name, branch)``; the connection handle is how the
    repository is reached, not part of what it is.
    """

    model_config = ConfigDict(frozen=True)

    connection_handle: str = Field(min_length=1)
    owner: str
    name: str
    branch: str = DEFAULT_BRANCH

    @field_validator("owner", "name", "branch")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must be a non-empty string")
        return value

    @property
    def identity(self) -> tuple[str, str, str]:
        return (self.owner, self.name, self.branch)

    @property
    def display_name(self) -> str:
        return f"{self.owner}/{self.name}@{self.branch}"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, RepositoryDescriptor):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    def create_pull_action(self, output: ArtifactSlot) -> PullAction:
        """Build the pull action writing this repository into *output*.

        The action name is ``<name>-Source`` so repeated assemblies produce
        the same definition.
        """
        return PullAction(
            name=f"{self.name}-Source",
            connection_handle=self.connection_handle,
            owner=self.owner,
            repository=self.name,
            branch=self.branch,
            output=output,
        )
