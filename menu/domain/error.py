"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Input failed validation; the caller can correct it."""

    pass


class NotAuthenticatedError(DomainError):
    """Raised when an operation requires an actor and none was supplied."""

    def __init__(self, action: str):
        super().__init__(f"Authentication required to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AlreadyVotedError(DomainError):
    """Raised when a voter already has a ledger entry for a suggestion."""

    def __init__(self, suggestion_id: str, voter_id: str):
        self.suggestion_id = suggestion_id
        self.voter_id = voter_id
        super().__init__(f"User {voter_id} already voted on suggestion {suggestion_id}")


class StoreError(DomainError):
    """Raised when the backing store fails or times out.

    The message carries the underlying error for diagnostics.
    """

    pass
