"""Exception hierarchy for job retrieval and analysis providers."""

from __future__ import annotations


class ResumeMatchError(Exception):
    """Base class for failures surfaced to callers of the pipeline."""


class RetrievalError(ResumeMatchError):
    """Raised when job description text cannot be obtained."""


class BlockedURLError(RetrievalError):
    """Raised when a URL resolves to a blocked (private/internal) address."""


class AuthenticationError(ResumeMatchError):
    """Raised when the analysis provider rejects the supplied credential."""


class ProviderError(ResumeMatchError):
    """Raised when the analysis provider fails for any other reason."""
