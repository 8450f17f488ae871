"""Exceptions raised when task-set input is rejected."""


class FeasibilityError(ValueError):
    """Base class for all validation failures in this package."""


class InvalidTaskError(FeasibilityError):
    """A task parameter is missing, non-numeric, non-finite or not positive."""


class EmptyTaskSetError(FeasibilityError):
    """An operation that needs at least one task was given none."""


class ConfigError(FeasibilityError):
    """A task-set configuration document is malformed."""
