"""Domain errors raised by the service layer."""


class ServiceError(Exception):
    """Base class for business-rule failures."""


class NotFoundError(ServiceError):
    """The entity does not exist, was deleted, or no entity matched."""


class AlreadyExistsError(ServiceError):
    """The entity collides with an existing one."""


class InvalidCredentialsError(ServiceError):
    """Unknown username or wrong password."""
