"""Groups of deployable units that go out together."""

from __future__ import annotations

import logging

from autobuild.models.environments import EnvironmentStage

logger = logging.getLogger(__name__)


class StageGroup:
    """An ordered set of deployable-unit identifiers for one environment,
    e.g. network, database and compute for beta.

    Created empty and filled by the caller with ``add_unit``.  The
    assembler reads ``units`` once and never mutates the group.
    """

    def __init__(self, environment: EnvironmentStage | None = None) -> None:
        self.environment = environment
        self._units: list[str] = []

    def add_unit(self, unit: str) -> bool:
        """Append *unit*.  Returns ``False`` if it was already present."""
        if not unit or not unit.strip():
            raise ValueError("Deployable unit identifier must be non-empty")
        if unit in self._units:
            logger.debug("Unit %s already in stage group; ignoring", unit)
            return False
        self._units.append(unit)
        return True

    @property
    def units(self) -> tuple[str, ...]:
        return tuple(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        env = self.environment.label if self.environment else None
        return f"<StageGroup environment={env!r} units={list(self._units)!r}>"
