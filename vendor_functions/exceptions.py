class FeedFetchError(Exception):
    """Raised when the news feed cannot be fetched or answers with a non-success status."""


class MissingParameterError(Exception):
    """Raised when a required query parameter is absent or blank."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} parameter is required")
        self.name = name


class PlacesError(Exception):
    """Raised when the Google Maps Places API rejects a request."""

    def __init__(self, message: str, status: int = 500) -> None:
        super().__init__(message)
        self.status = status


class SupabaseError(Exception):
    """Raised when a Supabase REST call answers with a non-success status."""
