"""Artifact slots: the bindings that connect one action's output to a later
action's input.

A slot is produced by exactly one action and may be consumed by any number
of later actions.  Nothing here checks ordering at run time; the stage order
built by the assembler guarantees a slot is produced before it is consumed.
"""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field


class ArtifactSlot(BaseModel):
    """An opaque handle for the bytes one action produces.

    Two slots with the same display name are still distinct slots; identity
    is the ``slot_id``.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    slot_id: str = Field(default_factory=lambda: uuid.uuid4().hex)

    def at_path(self, file_path: str) -> ArtifactPath:
        """Reference a file inside this artifact."""
        return ArtifactPath(slot=self, file_path=file_path)


class ArtifactPath(BaseModel):
    """A file located inside an artifact slot."""

    model_config = ConfigDict(frozen=True)

    slot: ArtifactSlot
    file_path: str

    @property
    def location(self) -> str:
        """``<slot name>::<file path>``, the form the execution engine reads."""
        return f"{self.slot.name}::{self.file_path}"
