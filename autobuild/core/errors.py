"""Assembly-time error taxonomy.

Every error raised while building a pipeline definition is a
``ConfigurationError``.  These are never retried: they abort assembly and
carry enough context (which repository, which stage) to be actionable.
Failures of the *assembled* pipeline at run time belong to the external
execution engine and are not represented here.
"""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when the pipeline cannot be assembled from its configuration.

    Parameters
    ----------
    message:
        Human-readable description.
    repository:
        Display form of the offending repository, if any.
    stage:
        Name of the stage being built when the error occurred, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        repository: str | None = None,
        stage: str | None = None,
    ) -> None:
        self.repository = repository
        self.stage = stage
        context = []
        if stage:
            context.append(f"stage={stage}")
        if repository:
            context.append(f"repository={repository}")
        if context:
            message = f"{message} [{', '.join(context)}]"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError subclasses would otherwise repr() the message.
        return str(self.args[0]) if self.args else ""


class RepositoryNotRegisteredError(ConfigurationError, KeyError):
    """Raised when looking up a repository that was never registered."""


class DuplicateRepositoryError(ConfigurationError):
    """Raised when the same repository is registered twice."""


class DuplicateActionError(ConfigurationError):
    """Raised when two actions in one stage share a name."""


class DuplicateStageError(ConfigurationError):
    """Raised when two stages in one pipeline share a name."""
