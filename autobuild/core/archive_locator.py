"""Resolve archive locations into fully-qualified object-storage URIs."""

from __future__ import annotations

from autobuild.core.run_path import PATH_SEPARATOR, normalize_path

OBJECT_STORAGE_SCHEME = "s3://"


def get_full_location(bucket_name: str, path_prefix: str) -> str:
    """Return ``s3://<bucket>/<prefix>``.

    The prefix is normalized again here, so callers that already normalized
    get the same result.  An empty prefix yields ``s3://<bucket>/``.
    """
    return f"{OBJECT_STORAGE_SCHEME}{bucket_name}{PATH_SEPARATOR}{normalize_path(path_prefix)}"
