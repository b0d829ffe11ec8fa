"""Exception hierarchy for the wine cellar."""


class WineCellarError(Exception):
    """Base class for all wine cellar errors."""


class StoreError(WineCellarError):
    """A document store operation failed.

    The message is free text meant to be shown to API clients as-is.
    """


class StoreConnectionError(StoreError):
    """The document store could not be reached at startup."""

    def __init__(self, host: str, port: int):
        self.host = host
        self.port = port
        super().__init__(
            f"Failed connecting to MongoDB instance on {{host: {host}, port: {port}}}"
        )


class NotFoundError(StoreError):
    """No document exists with the requested id."""

    def __init__(self, wine_id: str):
        self.wine_id = wine_id
        super().__init__(f"No wine found with id: {wine_id}")


class SeedError(WineCellarError):
    """Seeding the sample catalog failed and fail-soft seeding is disabled."""
