"""Run path allocation for archived source snapshots.

A run path prefix is ``<YYYY-MM-DD_HH-MM-SS>-<suffix>``.  The random suffix
only exists to keep two runs that start within the same formatted second
from overwriting each other's archives; it is not a secret.

Clock and randomness are injected so assemblies can be made deterministic
in tests.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
RandomSource = Callable[[int], str]

PATH_SEPARATOR = "/"
TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"
MAX_SUFFIX_LENGTH = 32


def normalize_path(raw_path: str) -> str:
    """Strip every leading ``/`` from *raw_path*.

    Only leading separators are removed.  An all-separator input yields
    ``""``, which is a legal result.
    """
    return raw_path.lstrip(PATH_SEPARATOR)


def join_path(*fragments: str) -> str:
    """Join path fragments with single separators, skipping empty ones."""
    parts = [f.strip(PATH_SEPARATOR) for f in fragments]
    return PATH_SEPARATOR.join(p for p in parts if p)


def format_timestamp(timestamp: datetime) -> str:
    """Format *timestamp* as ``YYYY-MM-DD_HH-MM-SS`` (zero-padded)."""
    return timestamp.strftime(TIMESTAMP_FORMAT)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def uuid_suffix(length: int) -> str:
    """Default random source: the first *length* hex chars of a uuid4."""
    return uuid.uuid4().hex[:length]


class RunPathAllocator:
    """Allocates the archive path prefix for one pipeline assembly.

    Parameters
    ----------
    clock:
        Returns the current time.  Defaults to UTC now.
    random_source:
        Called with the requested length, returns the disambiguating
        suffix.  Defaults to uuid4 hex.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        self._clock = clock or utc_now
        self._random_source = random_source or uuid_suffix

    def now(self) -> datetime:
        return self._clock()

    def allocate(
        self,
        timestamp: datetime | None = None,
        random_suffix_length: int = 6,
    ) -> str:
        """Return ``<formatted timestamp>-<suffix>``.

        Raises ``ValueError`` if *random_suffix_length* is outside
        ``1..32`` or the random source returns a suffix of the wrong length.
        """
        if not 1 <= random_suffix_length <= MAX_SUFFIX_LENGTH:
            raise ValueError(
                f"random_suffix_length must be between 1 and {MAX_SUFFIX_LENGTH}, "
                f"got {random_suffix_length}"
            )
        timestamp = timestamp if timestamp is not None else self.now()
        suffix = self._random_source(random_suffix_length)
        if len(suffix) != random_suffix_length:
            raise ValueError(
                f"Random source returned {len(suffix)} characters, "
                f"expected {random_suffix_length}"
            )
        prefix = f"{format_timestamp(timestamp)}-{suffix}"
        logger.debug("Allocated run path prefix %s", prefix)
        return prefix
