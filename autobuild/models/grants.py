"""Authorization grants and trust boundaries.

The core never enforces permissions.  It only decides which
(action-set, resource-set) pairs are attached to which execution identity,
and keeps the broad ones in named ``TrustBoundary`` values so the scope can
be audited in one place.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AuthorizationGrant(BaseModel):
    """One (action-set, resource-set) pair."""

    model_config = ConfigDict(frozen=True)

    actions: tuple[str, ...] = Field(min_length=1)
    resources: tuple[str, ...] = Field(min_length=1)


class TrustBoundary(BaseModel):
    """A named, documented set of grants handed to one execution identity."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    grants: tuple[AuthorizationGrant, ...]

    @property
    def actions(self) -> frozenset[str]:
        return frozenset(a for g in self.grants for a in g.actions)

    @property
    def resources(self) -> frozenset[str]:
        return frozenset(r for g in self.grants for r in g.resources)


# The self-mutation step redeploys the pipeline's own infrastructure,
# including the roles it runs under, so it must be able to assume any
# execution role and read configuration parameters.
SELF_MUTATION_TRUST_BOUNDARY = TrustBoundary(
    name="pipeline-self-mutation",
    description=(
        "Redeploys the pipeline definition itself. May assume any execution "
        "role and read any configuration parameter."
    ),
    grants=(
        AuthorizationGrant(actions=("sts:AssumeRole",), resources=("*",)),
        AuthorizationGrant(actions=("ssm:GetParameter*",), resources=("*",)),
    ),
)


def deploy_grant_for(unit: str) -> AuthorizationGrant:
    """Full deploy authorization scoped to exactly one deployable unit."""
    return AuthorizationGrant(
        actions=("cloudformation:*",),
        resources=(f"stack/{unit}/*",),
    )
