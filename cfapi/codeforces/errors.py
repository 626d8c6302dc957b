"""Exception hierarchy shared by the Codeforces client, resolver and scraper."""

from __future__ import annotations

NO_TESTCASES_MESSAGE = 'No testcase input found for this problem.'
MISSING_CONTEST_ID_MESSAGE = 'problem.contest_id field is required.'
MISSING_INDEX_MESSAGE = 'problem.index field is required.'


class CodeforcesError(RuntimeError):
    """Base error raised for every failure surfaced by this package."""


class TransportError(CodeforcesError):
    """The HTTP round trip itself failed (connection, protocol or HTTP status)."""


class DecodeError(CodeforcesError):
    """The response body is not a valid envelope or breaks the API contract."""


class RemoteRejectedError(CodeforcesError):
    """Wrap a ``status = FAILED`` reply so callers can inspect the remote comment."""

    def __init__(self, comment: str, *, method: str | None = None):
        self.comment = comment
        self.method = method
        prefix = f'Codeforces rejected {method!r}' if method else 'Codeforces rejected the request'
        super().__init__(f'{prefix}: {comment}')


class ScrapeError(CodeforcesError):
    """No sample markup was found, or the problem lacks the fields needed to locate it."""


__all__ = [
    'MISSING_CONTEST_ID_MESSAGE',
    'MISSING_INDEX_MESSAGE',
    'NO_TESTCASES_MESSAGE',
    'CodeforcesError',
    'DecodeError',
    'RemoteRejectedError',
    'ScrapeError',
    'TransportError',
]
