"""Resolver errors.

Not-found is never an error here: resolvers return empty lists.
"""


class ResolverError(Exception):
    """Base resolver error."""

    def __init__(self, message: str = "Resolver error"):
        self.message = message
        super().__init__(self.message)


class StoreUnavailableError(ResolverError):
    """Reference store (or cache store) could not be reached."""

    def __init__(self, message: str = "Reference store unavailable"):
        super().__init__(message)


class CacheWriteError(ResolverError):
    """Cache upsert failed."""

    def __init__(self, message: str = "Cache write failed"):
        super().__init__(message)
