"""autobuild: self-mutating continuous-delivery pipeline definitions.

Assembles a fixed stage topology (Source, Synthesis, Self-Mutation,
Archival) over a pluggable set of source repositories, then appends any
number of deployment stages built from the compiled output.
"""

__version__ = "0.1.0"
__description__ = "Self-mutating continuous-delivery pipeline assembler"

from autobuild.core.assembler import PipelineAssembler, assemble_from_config
from autobuild.core.errors import ConfigurationError
from autobuild.core.stage_group import StageGroup
from autobuild.models.repository import RepositoryDescriptor

__all__ = [
    "PipelineAssembler",
    "assemble_from_config",
    "ConfigurationError",
    "StageGroup",
    "RepositoryDescriptor",
    "__version__",
]
