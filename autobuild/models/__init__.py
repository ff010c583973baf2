"""autobuild data models — Pydantic v2, frozen."""

from autobuild.models.actions import (
    ActionKind,
    ArchiveAction,
    BuildAction,
    DeployAction,
    PipelineAction,
    PullAction,
)
from autobuild.models.archive import ArchiveLocation, BucketIdentity
from autobuild.models.artifacts import ArtifactPath, ArtifactSlot
from autobuild.models.build import BuildProject, BuildSpecification
from autobuild.models.config import DeploymentStageConfig, PipelineConfig
from autobuild.models.environments import (
    BETA_STAGE,
    DEV_STAGE,
    GAMMA_STAGE,
    PROD_STAGE,
    Environment,
    EnvironmentStage,
)
from autobuild.models.grants import (
    SELF_MUTATION_TRUST_BOUNDARY,
    AuthorizationGrant,
    TrustBoundary,
)
from autobuild.models.repository import RepositoryDescriptor
from autobuild.models.stages import (
    FIXED_STAGE_ORDER,
    PipelineDefinition,
    PipelineStage,
    StageName,
)

__all__ = [
    # actions
    "ActionKind",
    "PipelineAction",
    "PullAction",
    "BuildAction",
    "ArchiveAction",
    "DeployAction",
    # archive
    "ArchiveLocation",
    "BucketIdentity",
    # artifacts
    "ArtifactSlot",
    "ArtifactPath",
    # build
    "BuildProject",
    "BuildSpecification",
    # config
    "PipelineConfig",
    "DeploymentStageConfig",
    # environments
    "Environment",
    "EnvironmentStage",
    "DEV_STAGE",
    "BETA_STAGE",
    "GAMMA_STAGE",
    "PROD_STAGE",
    # grants
    "AuthorizationGrant",
    "TrustBoundary",
    "SELF_MUTATION_TRUST_BOUNDARY",
    # repository
    "RepositoryDescriptor",
    # stages
    "StageName",
    "FIXED_STAGE_ORDER",
    "PipelineStage",
    "PipelineDefinition",
]
