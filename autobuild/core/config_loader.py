"""Load pipeline topology configuration from TOML."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from autobuild.core.errors import ConfigurationError
from autobuild.models.config import PipelineConfig

logger = logging.getLogger(__name__)


def load_pipeline_config(path: str | Path) -> PipelineConfig:
    """Parse and validate a pipeline configuration file.

    Raises ``ConfigurationError`` naming the file if it cannot be read,
    is not valid TOML, or fails validation.
    """
    path = Path(path)
    try:
        raw = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigurationError(f"Pipeline config not found: {path}") from None
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Pipeline config {path} is not valid TOML: {exc}") from exc

    try:
        config = PipelineConfig.model_validate(raw)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid pipeline config {path}: {problems}") from exc

    logger.info(
        "Loaded pipeline config %s (%d repositories, %d deployment stages)",
        path,
        1 + len(config.additional_repositories),
        len(config.deployment_stages),
    )
    return config
