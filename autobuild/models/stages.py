"""Stage and pipeline definition models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from autobuild.models.actions import PipelineAction
from autobuild.models.artifacts import ArtifactSlot


class StageName(str, Enum):
    """Names of the fixed stages every pipeline starts with."""

    SOURCE = "Source"
    SYNTHESIS = "Synthesis"
    SELF_MUTATION = "Self-Mutation"
    ARCHIVAL = "Archival"


FIXED_STAGE_ORDER: list[StageName] = [
    StageName.SOURCE,
    StageName.SYNTHESIS,
    StageName.SELF_MUTATION,
    StageName.ARCHIVAL,
]


class PipelineStage(BaseModel):
    """An ordered group of actions.

    Actions inside a stage may run concurrently; every action must finish
    before the next stage starts.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    actions: list[PipelineAction] = Field(default_factory=list)
    is_prod: bool = False

    @property
    def action_names(self) -> list[str]:
        return [a.name for a in self.actions]

    @property
    def consumed_slots(self) -> list[ArtifactSlot]:
        return [s for a in self.actions for s in a.input_slots]

    @property
    def produced_slots(self) -> list[ArtifactSlot]:
        return [s for a in self.actions for s in a.output_slots]


class PipelineDefinition(BaseModel):
    """Frozen snapshot of an assembled pipeline."""

    model_config = ConfigDict(frozen=True)

    name: str
    pipeline_type: str = "V2"
    stages: list[PipelineStage] = Field(default_factory=list)

    @property
    def stage_names(self) -> list[str]:
        return [s.name for s in self.stages]

    def get_stage(self, name: str) -> PipelineStage:
        for stage in self.stages:
            if stage.name == name:
                return stage
        raise KeyError(f"Unknown stage {name!r}. Stages: {self.stage_names}")
