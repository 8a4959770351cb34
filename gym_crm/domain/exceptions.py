"""Error types raised by repositories and surfaced unchanged by services."""


class GymCrmError(Exception):
    """Base class for all gym CRM errors."""


class InvalidInputError(GymCrmError, ValueError):
    """Request data failed validation; nothing was written."""


class NotFoundError(GymCrmError, LookupError):
    """The requested (or a referenced) entity does not exist."""
