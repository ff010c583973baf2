"""Tests for ArtifactRegistry — registration order, duplicates, lookups."""

from __future__ import annotations

import pytest

from autobuild.core.artifact_registry import ArtifactRegistry
from autobuild.core.errors import (
    ConfigurationError,
    DuplicateRepositoryError,
    RepositoryNotRegisteredError,
)


class TestArtifactRegistry:
    def test_register_returns_fresh_slot(self, repo_a, repo_b):
        registry = ArtifactRegistry()
        slot_a = registry.register(repo_a)
        slot_b = registry.register(repo_b)
        assert slot_a != slot_b
        assert slot_a.name == "A"

    def test_lookup_returns_registered_slot(self, repo_a):
        registry = ArtifactRegistry()
        slot = registry.register(repo_a)
        assert registry.lookup(repo_a) is slot

    def test_lookup_by_equal_descriptor(self, repo_a, make_repo):
        registry = ArtifactRegistry()
        slot = registry.register(repo_a)
        assert registry.lookup(make_repo("A", connection_handle="other")) is slot

    def test_preserves_registration_order(self, repo_a, repo_b, repo_c):
        registry = ArtifactRegistry()
        for repo in (repo_c, repo_a, repo_b):
            registry.register(repo)
        assert registry.repositories == [repo_c, repo_a, repo_b]
        assert list(registry) == [repo_c, repo_a, repo_b]

    def test_duplicate_registration_rejected(self, repo_a):
        registry = ArtifactRegistry()
        registry.register(repo_a)
        with pytest.raises(DuplicateRepositoryError) as excinfo:
            registry.register(repo_a)
        assert excinfo.value.repository == repo_a.display_name

    def test_unregistered_lookup_fails_loudly(self, repo_a, repo_b):
        registry = ArtifactRegistry()
        registry.register(repo_a)
        with pytest.raises(RepositoryNotRegisteredError) as excinfo:
            registry.lookup(repo_b)
        assert "TemplateSoftware/B@main" in str(excinfo.value)

    def test_not_found_is_configuration_and_key_error(self, repo_a):
        with pytest.raises(ConfigurationError):
            ArtifactRegistry().lookup(repo_a)
        with pytest.raises(KeyError):
            ArtifactRegistry().lookup(repo_a)

    def test_contains_and_len(self, repo_a, repo_b):
        registry = ArtifactRegistry()
        registry.register(repo_a)
        assert repo_a in registry
        assert repo_b not in registry
        assert len(registry) == 1
