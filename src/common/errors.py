"""Error taxonomy shared by the pipeline stages and the API."""


class NewsError(Exception):
    """Base class for all pipeline errors."""


class ValidationError(NewsError):
    """Bad or oversized request input. The message is safe to return verbatim."""


class ConfigurationError(NewsError):
    """Missing or rejected upstream credential.

    reason is "missing" when no credential is configured and "invalid" when
    the upstream rejected the one we sent.
    """

    def __init__(self, message: str, reason: str = "missing"):
        super().__init__(message)
        self.reason = reason


class UpstreamError(NewsError):
    """A single upstream call failed."""


class UpstreamRateLimited(UpstreamError):
    """The upstream refused the call with a rate limit."""
