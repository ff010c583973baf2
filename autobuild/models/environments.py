"""Deployment environments a pipeline promotes through."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Environment(str, Enum):
    DEV = "dev"
    BETA = "beta"
    GAMMA = "gamma"
    PROD = "prod"


class EnvironmentStage(BaseModel):
    """An environment plus whether it serves production traffic."""

    model_config = ConfigDict(frozen=True)

    environment: Environment
    is_prod: bool = False

    @property
    def label(self) -> str:
        return self.environment.value


DEV_STAGE = EnvironmentStage(environment=Environment.DEV, is_prod=False)
BETA_STAGE = EnvironmentStage(environment=Environment.BETA, is_prod=False)
GAMMA_STAGE = EnvironmentStage(environment=Environment.GAMMA, is_prod=False)
PROD_STAGE = EnvironmentStage(environment=Environment.PROD, is_prod=True)

DEFAULT_ENVIRONMENT_STAGES: list[EnvironmentStage] = [
    DEV_STAGE,
    BETA_STAGE,
    GAMMA_STAGE,
    PROD_STAGE,
]
