class FormStateError(ValueError):
    """Base class for rejected form mutations."""


class InvalidPathError(FormStateError):
    """Path does not resolve against the current tree (caller's view is stale)."""


class OperationNotPermitted(FormStateError):
    """Mutation is not allowed for the addressed item."""


class UnknownFieldError(FormStateError):
    """Header/follow-up field name does not exist."""
