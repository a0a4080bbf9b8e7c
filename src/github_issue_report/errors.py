"""Exceptions raised while building an issue report.

Every error is fatal for a run: nothing in the package retries or recovers.
"""

from __future__ import annotations


class ReportError(Exception):
    """Base class for issue report errors."""


class IssueFetchError(ReportError):
    """GitHub answered successfully but the issue listing was not usable."""


class ClassificationError(ReportError):
    """A completion could not be turned into a valid classified report."""


class CompletionError(ReportError):
    """The LLM provider refused the request or returned no content."""
