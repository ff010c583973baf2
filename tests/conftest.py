"""Shared test fixtures for autobuild."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest

from autobuild.config import Settings
from autobuild.core.assembler import PipelineAssembler
from autobuild.models.repository import RepositoryDescriptor

CONNECTION = "arn:aws:codestar-connections:us-east-1:123456789012:connection/test"

FIXED_TIMESTAMP = datetime(2023, 1, 24, 11, 22, 33)


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """A clock frozen at 2023-01-24 11:22:33."""
    return lambda: FIXED_TIMESTAMP


@pytest.fixture
def fixed_random() -> Callable[[int], str]:
    """A deterministic suffix source: the first n hex digits, repeated."""
    return lambda n: ("0123456789abcdef" * 2)[:n]


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults, independent of the host environment."""
    return Settings(_env_file=None, log_level="INFO", archive_path_root="")


@pytest.fixture
def make_repo() -> Callable[..., RepositoryDescriptor]:
    """Factory fixture: build a RepositoryDescriptor with sensible defaults."""

    def _factory(name: str, owner: str = "TemplateSoftware", **overrides) -> RepositoryDescriptor:
        fields = {"connection_handle": CONNECTION, "owner": owner, "name": name}
        fields.update(overrides)
        return RepositoryDescriptor(**fields)

    return _factory


@pytest.fixture
def repo_a(make_repo) -> RepositoryDescriptor:
    return make_repo("A")


@pytest.fixture
def repo_b(make_repo) -> RepositoryDescriptor:
    return make_repo("B")


@pytest.fixture
def repo_c(make_repo) -> RepositoryDescriptor:
    return make_repo("C")


@pytest.fixture
def assembler(repo_a, repo_b, repo_c, settings, fixed_clock, fixed_random) -> PipelineAssembler:
    """A pipeline with self repository A and additional repositories B, C."""
    return PipelineAssembler(
        "TestPipeline",
        repo_a,
        [repo_b, repo_c],
        settings=settings,
        clock=fixed_clock,
        random_source=fixed_random,
    )


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write TOML text to a temp file and return its path."""

    def _write(text: str, name: str = "pipeline.toml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


SAMPLE_CONFIG = f"""
pipeline_name = "Orders"
archive_bucket = "orders-archive"

[self_repository]
connection_handle = "{CONNECTION}"
owner = "acme"
name = "orders-infra"

[[additional_repositories]]
connection_handle = "{CONNECTION}"
owner = "acme"
name = "orders-service"
branch = "release"

[[deployment_stages]]
stage = "beta"
units = ["network", "database"]

[[deployment_stages]]
stage = "prod"
units = ["network", "database", "compute"]
"""


@pytest.fixture
def sample_config_path(write_config) -> Path:
    """A two-repository, two-deployment-stage pipeline config on disk."""
    return write_config(SAMPLE_CONFIG)
