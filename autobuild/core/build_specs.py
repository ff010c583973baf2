"""Build projects for the synthesis and self-mutation steps."""

from __future__ import annotations

from autobuild.models.build import DEFAULT_BUILD_IMAGE, BuildProject, BuildSpecification
from autobuild.models.grants import SELF_MUTATION_TRUST_BOUNDARY


def synthesis_project(pipeline_name: str, image: str = DEFAULT_BUILD_IMAGE) -> BuildProject:
    """Compile the pipeline's infrastructure definition into ``cdk.out``."""
    return BuildProject(
        name=f"{pipeline_name}-pipeline-synthesis",
        spec=BuildSpecification(
            phases={
                "install": ["npm install -g aws-cdk", "npm ci"],
                "build": ["npx cdk synth"],
            },
            artifact_files=["**/*"],
            image=image,
        ),
    )


def self_mutation_project(
    pipeline_name: str,
    stack_name: str,
    image: str = DEFAULT_BUILD_IMAGE,
) -> BuildProject:
    """Redeploy the pipeline's own stack from the compiled output."""
    return BuildProject(
        name=f"{pipeline_name}-pipeline-mutation",
        spec=BuildSpecification(
            phases={
                "install": ["npm ci"],
                "build": [f"npx cdk deploy {stack_name} --require-approval=never"],
            },
            image=image,
        ),
        trust_boundary=SELF_MUTATION_TRUST_BOUNDARY,
    )
