"""Domain exceptions."""


class RepogateError(Exception):
    """Base exception for repogate."""

    pass


class PermissionDenied(RepogateError):
    """Subject does not have permission for the requested action."""

    pass


class NotFound(RepogateError):
    """Requested resource was not found."""

    pass


class ValidationError(RepogateError):
    """Validation failed for input data."""

    pass


class SubjectResolutionError(RepogateError):
    """Current caller could not be resolved to a subject."""

    pass


class LifecycleError(RepogateError):
    """Component used outside of its started state."""

    pass
