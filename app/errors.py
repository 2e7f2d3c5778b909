class ServiceError(Exception):
    """Base class for failures reported to the caller of a service operation."""


class UserNotFound(ServiceError):
    def __init__(self, message="User not found!"):
        super().__init__(message)


class InvalidCredentials(ServiceError):
    def __init__(self, message="Incorrect password!"):
        super().__init__(message)


class PersistenceError(ServiceError):
    pass


class StorageError(ServiceError):
    pass
