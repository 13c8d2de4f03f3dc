"""Error types shared by the server and the sync job."""


class MetadataError(Exception):
    """Base exception for the metadata service."""


class ConfigError(MetadataError):
    """Invalid configuration value."""


class SyncError(MetadataError):
    """Sync job aborted before touching the store."""


class RemoteUnavailable(SyncError):
    """Upstream answered with a non-success status or could not be reached."""

    def __init__(self, message: str, *, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class SchemaMismatch(SyncError):
    """Upstream body does not match the expected record shape."""


class StoreUnreadable(MetadataError):
    """Local store is missing, unparsable or malformed."""
