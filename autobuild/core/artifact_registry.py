"""Repository -> artifact slot registry.

Populated once during assembly, in declaration order (self repository
first), then only read.  The registration order is the left-to-right action
order of the Source stage.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from autobuild.core.errors import DuplicateRepositoryError, RepositoryNotRegisteredError
from autobuild.models.artifacts import ArtifactSlot
from autobuild.models.repository import RepositoryDescriptor

logger = logging.getLogger(__name__)


class ArtifactRegistry:
    """Bijective mapping from each repository to the slot holding its checkout."""

    def __init__(self) -> None:
        self._slots: dict[RepositoryDescriptor, ArtifactSlot] = {}

    def register(self, repository: RepositoryDescriptor) -> ArtifactSlot:
        """Create and store a fresh slot for *repository*.

        Raises ``DuplicateRepositoryError`` if it is already registered.
        """
        if repository in self._slots:
            raise DuplicateRepositoryError(
                "Repository is already registered",
                repository=repository.display_name,
            )
        slot = ArtifactSlot(name=repository.name)
        self._slots[repository] = slot
        logger.debug("Registered %s -> slot %s", repository.display_name, slot.slot_id)
        return slot

    def lookup(self, repository: RepositoryDescriptor) -> ArtifactSlot:
        """Return the slot for *repository*.

        Raises ``RepositoryNotRegisteredError`` if it was never registered.
        """
        try:
            return self._slots[repository]
        except KeyError:
            raise RepositoryNotRegisteredError(
                "Repository is not registered with this pipeline",
                repository=repository.display_name,
            ) from None

    @property
    def repositories(self) -> list[RepositoryDescriptor]:
        return list(self._slots)

    def items(self) -> list[tuple[RepositoryDescriptor, ArtifactSlot]]:
        return list(self._slots.items())

    def __contains__(self, repository: object) -> bool:
        return repository in self._slots

    def __iter__(self) -> Iterator[RepositoryDescriptor]:
        return iter(list(self._slots))

    def __len__(self) -> int:
        return len(self._slots)
