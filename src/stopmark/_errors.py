"""Stopmark error types."""


class StopmarkError(Exception):
    """Base error for all stopmark failures."""


class StopmarkConfigError(StopmarkError):
    """Unknown stage name or unusable pipeline configuration."""


class StopmarkRequirementError(StopmarkError):
    """A stage runs before the stages it requires."""


class StopmarkPreconditionError(StopmarkError):
    """Annotation input is missing something an upstream stage should provide."""
