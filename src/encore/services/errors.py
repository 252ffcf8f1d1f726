"""Service-layer exceptions."""


class StoreUnavailableError(Exception):
    """Raised by a store when its backing data cannot be read or written."""


class SnapshotLoadError(Exception):
    """Raised when a store snapshot file is missing or malformed."""


# Store faults that services absorb. Connection and timeout errors from a
# driver subclass OSError.
STORE_FAILURES = (StoreUnavailableError, OSError)
