"""Storage-layer errors."""

from media_relay.core.exceptions.upload import RelayError


class StorageOperationError(RelayError):
    """Bucket operation failed.

    The client only sees a generic retry message; the cause is logged.
    """

    status_code = 500

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation.capitalize()} failed. Please try again.")
