"""Exception hierarchy for the review pipeline.

Each error marks a boundary: AuthError stops a request before the pipeline
starts, DependencyError wraps GitHub failures, ReviewServiceError wraps model
failures. Missing file content is deliberately not represented here; it is a
normal degraded path signalled by ``None``.
"""

from __future__ import annotations


class PRCriticError(Exception):
    """Base class for all errors raised by prcritic_core."""


class AuthError(PRCriticError):
    """The webhook signature was missing or did not match the shared secret."""


class PayloadError(PRCriticError):
    """The webhook body could not be parsed into a pull request event."""


class DependencyError(PRCriticError):
    """GitHub returned a non-success response.

    ``status`` is the HTTP status code when one is known.
    """

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class ReviewServiceError(PRCriticError):
    """The model service was unreachable or returned no usable candidate."""
