"""Runtime settings — env-driven.

Reads from a .env file and AUTOBUILD_* environment variables.  Pipeline
topology (repositories, stages) is not a setting; it comes from the
pipeline configuration file (see ``autobuild.models.config``).
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from autobuild.core.run_path import MAX_SUFFIX_LENGTH
from autobuild.models.build import DEFAULT_BUILD_IMAGE


class Settings(BaseSettings):
    """Runtime settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export AUTOBUILD_LOG_LEVEL=DEBUG
        export AUTOBUILD_ARCHIVE_SUFFIX_LENGTH=8
        export AUTOBUILD_ARCHIVE_PATH_ROOT=archives/
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="AUTOBUILD_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = "development"
    log_level: str = "INFO"

    # Build executor
    build_image: str = DEFAULT_BUILD_IMAGE

    # Archival
    archive_suffix_length: int = Field(default=6, ge=1, le=MAX_SUFFIX_LENGTH)
    archive_path_root: str = ""

    @property
    def is_production(self) -> bool:
        return self.environment == "production"
