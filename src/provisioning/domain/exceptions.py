class InvalidSnapshotError(ValueError):
    """Raised when a load snapshot carries a negative or non-integer count."""
    pass

class DuplicateProviderError(Exception):
    """Raised when a capacity provider name is registered twice."""
    pass

class UnknownProviderError(KeyError):
    """Raised when a capacity provider name is not registered."""
    pass

class LedgerError(Exception):
    """Raised when pending launch bookkeeping is asked for an unknown launch."""
    pass
