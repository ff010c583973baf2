"""Pipeline assembler — builds the fixed stage sequence and wires artifacts.

Every pipeline starts with the same four stages:

    Source -> Synthesis -> Self-Mutation -> Archival

followed by any number of deployment stages appended with
``add_deployment_stage``.  Assembly is synchronous and purely in-memory; the
result is a declaration of stage order and artifact edges that an external
execution engine honours.  All assembly failures raise
``ConfigurationError`` subclasses.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from pydantic import ValidationError

from autobuild.config import Settings
from autobuild.core.artifact_registry import ArtifactRegistry
from autobuild.core.build_specs import self_mutation_project, synthesis_project
from autobuild.core.errors import (
    ConfigurationError,
    DuplicateActionError,
    DuplicateStageError,
    RepositoryNotRegisteredError,
)
from autobuild.core.run_path import Clock, RandomSource, RunPathAllocator, join_path
from autobuild.core.stage_group import StageGroup
from autobuild.core.text import to_title_case
from autobuild.models.actions import (
    ArchiveAction,
    BuildAction,
    DeployAction,
    PipelineAction,
)
from autobuild.models.archive import ArchiveLocation, BucketIdentity
from autobuild.models.artifacts import ArtifactSlot
from autobuild.models.config import PipelineConfig
from autobuild.models.environments import (
    DEFAULT_ENVIRONMENT_STAGES,
    Environment,
    EnvironmentStage,
)
from autobuild.models.grants import deploy_grant_for
from autobuild.models.repository import RepositoryDescriptor
from autobuild.models.stages import PipelineDefinition, PipelineStage, StageName

logger = logging.getLogger(__name__)

# Layout of the compiled output artifact; must match what synthesis writes.
DEFINITION_DIR = "cdk.out"
TEMPLATE_SUFFIX = ".template.json"
COMPILED_OUTPUT_SLOT_NAME = "CompiledOutput"


def template_path_for(unit: str) -> str:
    """``cdk.out/<unit>.template.json``"""
    return f"{DEFINITION_DIR}/{unit}{TEMPLATE_SUFFIX}"


def default_bucket_name(pipeline_name: str) -> str:
    return f"{pipeline_name}-code-replication-bucket".lower()


class PipelineAssembler:
    """Builds one pipeline definition.

    Parameters
    ----------
    pipeline_name:
        Name of the pipeline; also prefixes the build project names.
    self_repository:
        The repository holding this pipeline's own infrastructure
        definition.  Always registered first.
    additional_repositories:
        Further repositories to pull and archive, in order.  Entries equal
        to an earlier repository are skipped.
    archive_bucket:
        Bucket for archived sources.  Defaults to
        ``<pipeline_name>-code-replication-bucket``.
    stack_name:
        Stack the self-mutation step redeploys.  Defaults to
        ``pipeline_name``.
    settings:
        Runtime settings.  Uses defaults if not provided.
    clock, random_source:
        Injected time and randomness for the archive path prefix.
    """

    def __init__(
        self,
        pipeline_name: str,
        self_repository: RepositoryDescriptor,
        additional_repositories: Iterable[RepositoryDescriptor] = (),
        *,
        archive_bucket: BucketIdentity | str | None = None,
        stack_name: str | None = None,
        settings: Settings | None = None,
        clock: Clock | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        if not pipeline_name or not pipeline_name.strip():
            raise ConfigurationError("Pipeline name must be non-empty")

        self.pipeline_name = pipeline_name
        self.self_repository = self_repository
        self.stack_name = stack_name or pipeline_name
        self._settings = settings or Settings()
        self._allocator = RunPathAllocator(clock=clock, random_source=random_source)
        self._bucket = self._resolve_bucket(archive_bucket)

        self._registry = ArtifactRegistry()
        self._stages: list[PipelineStage] = []
        self.compiled_output = ArtifactSlot(name=COMPILED_OUTPUT_SLOT_NAME)

        repositories = self._declared_repositories(self_repository, additional_repositories)
        self._build_source_stage(repositories)
        self._build_synthesis_stage()
        self._build_self_mutation_stage()
        self._archive_location = self._build_archival_stage()

        logger.info(
            "Assembled pipeline %s: %d repositories, archive at %s",
            self.pipeline_name,
            len(self._registry),
            self._archive_location.full_path,
        )

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    def _resolve_bucket(self, archive_bucket: BucketIdentity | str | None) -> BucketIdentity:
        if isinstance(archive_bucket, BucketIdentity):
            return archive_bucket
        name = archive_bucket or default_bucket_name(self.pipeline_name)
        try:
            return BucketIdentity(name=name)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid archive bucket {name!r}: {exc.errors()[0]['msg']}",
                stage=StageName.ARCHIVAL.value,
            ) from exc

    @staticmethod
    def _declared_repositories(
        self_repository: RepositoryDescriptor,
        additional: Iterable[RepositoryDescriptor],
    ) -> list[RepositoryDescriptor]:
        """Self repository first, then *additional* in order, without repeats."""
        declared = [self_repository]
        for repository in additional:
            if repository in declared:
                logger.warning(
                    "Repository %s declared more than once; keeping the first",
                    repository.display_name,
                )
                continue
            declared.append(repository)
        return declared

    def _add_stage(
        self,
        name: str,
        actions: Sequence[PipelineAction],
        *,
        is_prod: bool = False,
    ) -> PipelineStage:
        if any(stage.name == name for stage in self._stages):
            raise DuplicateStageError("Stage already exists in this pipeline", stage=name)
        seen: set[str] = set()
        for action in actions:
            if action.name in seen:
                raise DuplicateActionError(
                    f"Action name {action.name!r} is used twice", stage=name
                )
            seen.add(action.name)

        stage = PipelineStage(name=name, actions=list(actions), is_prod=is_prod)
        self._stages.append(stage)
        logger.info("Stage %s: %s", name, ", ".join(stage.action_names))
        return stage

    def _build_source_stage(self, repositories: list[RepositoryDescriptor]) -> None:
        actions = []
        for repository in repositories:
            slot = self._registry.register(repository)
            actions.append(repository.create_pull_action(slot))
        self._add_stage(StageName.SOURCE.value, actions)

    def _build_synthesis_stage(self) -> None:
        try:
            source = self._registry.lookup(self.self_repository)
        except RepositoryNotRegisteredError as exc:
            raise ConfigurationError(
                "Synthesis requires the self repository's source artifact",
                repository=self.self_repository.display_name,
                stage=StageName.SYNTHESIS.value,
            ) from exc

        action = BuildAction(
            name="Synth",
            project=synthesis_project(self.pipeline_name, self._settings.build_image),
            input=source,
            outputs=[self.compiled_output],
        )
        self._add_stage(StageName.SYNTHESIS.value, [action])

    def _build_self_mutation_stage(self) -> None:
        action = BuildAction(
            name="SelfMutate",
            project=self_mutation_project(
                self.pipeline_name, self.stack_name, self._settings.build_image
            ),
            input=self.compiled_output,
        )
        self._add_stage(StageName.SELF_MUTATION.value, [action])

    def _build_archival_stage(self) -> ArchiveLocation:
        # One timestamp and one prefix for the whole assembly, so every
        # repository from a run lands under the same path.
        assembled_at = self._allocator.now()
        prefix = self._allocator.allocate(
            assembled_at, self._settings.archive_suffix_length
        )
        location = ArchiveLocation(
            bucket=self._bucket,
            path=join_path(self._settings.archive_path_root, prefix),
        )

        actions = [
            ArchiveAction(
                name=f"{repository.name}-replication",
                input=slot,
                location=location,
                object_key=join_path(location.path, f"{repository.name}-replication") + "/",
            )
            for repository, slot in self._registry.items()
        ]
        self._add_stage(StageName.ARCHIVAL.value, actions)
        return location

    # ------------------------------------------------------------------
    # Deployment stages
    # ------------------------------------------------------------------

    def add_deployment_stage(
        self,
        stage_label: str | EnvironmentStage | Environment,
        stage_group: StageGroup,
    ) -> PipelineStage:
        """Append a stage deploying every unit in *stage_group*.

        The stage is named ``to_title_case(stage_label)``.  Each unit gets
        one action named after it, reading its template from
        ``cdk.out/<unit>.template.json`` in the compiled output and granted
        deploy authorization for that unit only.
        """
        environment = stage_group.environment
        if isinstance(stage_label, EnvironmentStage):
            environment = stage_label
            label = stage_label.label
        elif isinstance(stage_label, Environment):
            label = stage_label.value
        else:
            label = stage_label
        is_prod = environment.is_prod if environment is not None else False
        stage_name = to_title_case(label)
        if not stage_name.strip():
            raise ConfigurationError("Deployment stage label must be non-empty")

        units = stage_group.units
        if not units:
            raise ConfigurationError("Deployment stage has no deployable units", stage=stage_name)

        actions = [
            DeployAction(
                name=unit,
                unit=unit,
                template=self.compiled_output.at_path(template_path_for(unit)),
                grant=deploy_grant_for(unit),
            )
            for unit in units
        ]
        return self._add_stage(stage_name, actions, is_prod=is_prod)

    # ------------------------------------------------------------------
    # Query methods
    # ------------------------------------------------------------------

    def get_artifact_for(self, repository: RepositoryDescriptor) -> ArtifactSlot:
        """Return the Source-stage slot holding *repository*'s checkout."""
        return self._registry.lookup(repository)

    def get_archive_location(self) -> ArchiveLocation:
        return self._archive_location

    @property
    def registry(self) -> ArtifactRegistry:
        return self._registry

    @property
    def stages(self) -> tuple[PipelineStage, ...]:
        return tuple(self._stages)

    def definition(self) -> PipelineDefinition:
        """Snapshot the current pipeline as a frozen definition."""
        return PipelineDefinition(name=self.pipeline_name, stages=list(self._stages))


def assemble_from_config(
    config: PipelineConfig,
    *,
    settings: Settings | None = None,
    clock: Clock | None = None,
    random_source: RandomSource | None = None,
) -> PipelineAssembler:
    """Assemble a pipeline and append every configured deployment stage."""
    assembler = PipelineAssembler(
        config.pipeline_name,
        config.self_repository,
        config.additional_repositories,
        archive_bucket=config.archive_bucket,
        stack_name=config.stack_name,
        settings=settings,
        clock=clock,
        random_source=random_source,
    )
    known = {stage.label: stage for stage in DEFAULT_ENVIRONMENT_STAGES}
    for stage_config in config.deployment_stages:
        group = StageGroup(known.get(stage_config.stage.strip().lower()))
        for unit in stage_config.units:
            group.add_unit(unit)
        assembler.add_deployment_stage(stage_config.stage, group)
    return assembler
