class TimelineError(Exception):
    """Base class for fatal errors raised by ipsw_timeline."""


class FeedFetchError(TimelineError):
    """Raised when the feed cannot be fetched or the server answers non-2xx."""


class FeedParseError(TimelineError):
    """Raised when the feed body is not a well-formed RSS document."""


class UsageError(TimelineError):
    """Raised when command-line or environment settings are invalid."""
