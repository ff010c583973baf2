"""Tests for RepositoryDescriptor — identity, validation, pull actions."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from autobuild.models.actions import ActionKind
from autobuild.models.artifacts import ArtifactSlot
from autobuild.models.repository import RepositoryDescriptor


class TestRepositoryDescriptor:
    def test_branch_defaults_to_main(self, make_repo):
        assert make_repo("TestRepo").branch == "main"

    def test_explicit_branch(self, make_repo):
        assert make_repo("TestRepo", branch="develop").branch == "develop"

    def test_empty_owner_rejected(self, make_repo):
        with pytest.raises(ValidationError):
            make_repo("TestRepo", owner="")

    def test_blank_name_rejected(self, make_repo):
        with pytest.raises(ValidationError):
            make_repo("   ")

    def test_immutable(self, make_repo):
        repo = make_repo("TestRepo")
        with pytest.raises(ValidationError):
            repo.branch = "other"

    def test_equality_on_owner_name_branch(self, make_repo):
        first = make_repo("TestRepo", connection_handle="conn-1")
        second = make_repo("TestRepo", connection_handle="conn-2")
        assert first == second
        assert hash(first) == hash(second)

    def test_different_branch_is_different_repo(self, make_repo):
        assert make_repo("TestRepo") != make_repo("TestRepo", branch="develop")

    def test_usable_as_dict_key(self, make_repo):
        lookup = {make_repo("TestRepo"): 1}
        assert lookup[make_repo("TestRepo")] == 1

    def test_display_name(self, make_repo):
        assert make_repo("TestRepo").display_name == "TemplateSoftware/TestRepo@main"


class TestCreatePullAction:
    def test_action_configuration(self):
        repo = RepositoryDescriptor(
            connection_handle="arn:aws:iam::123456789:some/resource",
            owner="TemplateSoftware",
            name="TestRepo",
            branch="main",
        )
        slot = ArtifactSlot(name="test-artifact")
        action = repo.create_pull_action(slot)

        assert action.kind == ActionKind.SOURCE
        assert action.name == "TestRepo-Source"
        assert action.connection_handle == "arn:aws:iam::123456789:some/resource"
        assert action.full_repository_id == "TemplateSoftware/TestRepo"
        assert action.branch == "main"
        assert action.output == slot

    def test_name_is_deterministic(self, make_repo):
        repo = make_repo("TestRepo")
        first = repo.create_pull_action(ArtifactSlot(name="x"))
        second = repo.create_pull_action(ArtifactSlot(name="y"))
        assert first.name == second.name

    def test_pull_reads_nothing_and_writes_its_slot(self, make_repo):
        slot = ArtifactSlot(name="out")
        action = make_repo("TestRepo").create_pull_action(slot)
        assert action.input_slots == []
        assert action.output_slots == [slot]
