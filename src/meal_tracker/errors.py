"""Error types shared across the application."""


class StorageError(RuntimeError):
    """Raised when the record store fails to read or write."""
