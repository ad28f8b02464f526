"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised for malformed input; nothing is persisted.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_name: str):
        super().__init__(
            f"User {user_name} is not authorized to modify {resource} {resource_id}"
        )


class ConflictError(DomainError):
    """Raised when a uniqueness constraint loses a race.

    Never surfaced to end callers: the like ledger turns it into a
    ``False`` outcome.
    """

    pass


class StorageError(DomainError):
    """Raised when a unit of work fails in the database.

    The transaction has been rolled back by the time this propagates.
    """

    pass
