"""Exception types raised by the coat shop."""


class ShopError(Exception):
    """Base class for every error the shop reports."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(ShopError):
    """Raised when user input does not describe a valid coat."""


class RepositoryError(ShopError):
    """Raised when a repository operation cannot be carried out."""


class ServiceError(ShopError):
    """Raised by the service layer, e.g. when there is nothing to undo."""