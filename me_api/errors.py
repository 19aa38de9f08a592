"""Exceptions raised across the service."""


class MeApiError(Exception):
    """Base class for service errors."""


class StoreUnavailable(MeApiError):
    """The profile store could not be read or written."""
