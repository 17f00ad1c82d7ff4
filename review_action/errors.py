"""Exceptions that abort a review run."""


class ReviewActionError(Exception):
    """Base class for errors that end the run with a failure status."""


class ConfigurationError(ReviewActionError):
    """Required configuration (credentials, event path) is missing."""


class EventPayloadError(ReviewActionError):
    """The triggering event payload could not be read or is incomplete."""


class GitHubServiceError(ReviewActionError):
    """A call to the GitHub API failed."""


class ReviewModelError(ReviewActionError):
    """The review model provider could not be reached or rejected the request."""


class DiffParseError(ReviewActionError):
    """The diff returned by GitHub is not a well-formed unified diff."""
