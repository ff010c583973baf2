"""Archive location models.

Bucket identity and object path are deliberately separate types: a bucket
is never addressed by a path string, and a path never stands in for a
bucket.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from autobuild.core.archive_locator import get_full_location
from autobuild.core.run_path import PATH_SEPARATOR, normalize_path


class BucketIdentity(BaseModel):
    """Identifies an object-storage bucket by name only."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def _no_separators(cls, value: str) -> str:
        if PATH_SEPARATOR in value:
            raise ValueError(
                f"Bucket name {value!r} contains {PATH_SEPARATOR!r}; "
                "pass the path separately"
            )
        return value

    def __str__(self) -> str:
        return self.name


class ArchiveLocation(BaseModel):
    """Where one assembly's archived sources land."""

    model_config = ConfigDict(frozen=True)

    bucket: BucketIdentity
    path: str = ""

    @field_validator("path")
    @classmethod
    def _normalize(cls, value: str) -> str:
        return normalize_path(value)

    @property
    def full_path(self) -> str:
        """``s3://<bucket>/<path>``; a pure function of bucket and path."""
        return get_full_location(self.bucket.name, self.path)
