"""Exception hierarchy for the analytics engine."""


class KenoAnalyticsError(Exception):
    """Base class for all errors raised by keno_analytics."""


class IngestionError(KenoAnalyticsError):
    """A venue snapshot could not be read or decoded.

    Raised by the loader only; the ingestion context records it and hands
    callers an empty history instead.
    """

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


class PayoutTableError(KenoAnalyticsError, ValueError):
    """Payout table is malformed or lacks the requested game/spot count."""


class UnknownVenueError(KenoAnalyticsError, LookupError):
    """Venue name is not part of the configured locations."""
