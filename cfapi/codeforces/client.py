"""Synchronous HTTP client for the Codeforces API.

:class:`CodeforcesClient` signs a request model (see
:mod:`cfapi.codeforces.commands`), performs a single ``GET`` through ``httpx``
and hands the body to :mod:`cfapi.codeforces.resolver`.  It also fetches
problem pages for the sample-test scraper in :mod:`cfapi.codeforces.testcases`.

The client keeps no state between calls apart from the underlying
``httpx.Client`` connection pool: every call draws its own nonce and timestamp,
and API credentials are passed explicitly on each call.  There is no retry,
caching or rate limiting; failures surface immediately as
:class:`~cfapi.codeforces.errors.CodeforcesError` subclasses.

The module-level :func:`get`, :func:`get_raw`,
:func:`fetch_testcases_for_problem` and :func:`enrich_problem` helpers open a
short-lived client for a single call.
"""

from __future__ import annotations

import logging

import httpx

from .commands import CodeforcesRequest
from .errors import DecodeError, TransportError
from .models import CodeforcesResult, Problem
from .resolver import resolve_response
from .signing import API_BASE, SignedRequest, sign_request
from .testcases import SITE_BASE, extract_testcases, problem_locator, problem_url

logger = logging.getLogger(__name__)


class CodeforcesClient:
    """High-level helper for calling the Codeforces API and scraping problem pages."""

    def __init__(
        self,
        api_base: str = API_BASE,
        site_base: str = SITE_BASE,
        *,
        timeout: float | httpx.Timeout | None = 10.0,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        if http_client is not None and transport is not None:
            msg = 'Pass either `transport` or a pre-configured `http_client`, not both.'
            raise ValueError(msg)

        self.api_base = api_base.rstrip('/')
        self.site_base = site_base.rstrip('/')
        self._own_client = http_client is None
        if http_client is None:
            self._client = httpx.Client(timeout=timeout, transport=transport, follow_redirects=True)
        else:
            self._client = http_client

    def __enter__(self) -> CodeforcesClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._own_client:
            self._client.close()

    # -- Public API -----------------------------------------------------

    def sign(self, command: CodeforcesRequest, api_key: str, api_secret: str) -> SignedRequest:
        return sign_request(command, api_key, api_secret, api_base=self.api_base)

    def get(self, command: CodeforcesRequest, api_key: str, api_secret: str) -> CodeforcesResult:
        """Call ``command`` and decode the reply into its declared result type."""

        response = self._send(command, api_key, api_secret)
        try:
            return resolve_response(response.content, command.result_type, method=command.method_name())
        except DecodeError as exc:
            # A FAILED envelope on a 4xx already raised RemoteRejectedError.
            if response.is_error:
                msg = f'Codeforces returned unexpected HTTP status {response.status_code} for {command.method_name()!r}'
                raise TransportError(msg) from exc
            raise

    def get_raw(self, command: CodeforcesRequest, api_key: str, api_secret: str) -> str:
        """Call ``command`` and return the undecoded reply body."""

        return self._send(command, api_key, api_secret).text

    def fetch_testcases(self, contest_id: int, index: str) -> list[str]:
        """Scrape the sample inputs of problem ``index`` of contest ``contest_id``."""

        url = problem_url(contest_id, index, self.site_base)
        logger.debug('Fetching problem page %s', url)
        response = self._fetch(url, f'problem page {contest_id}{index}')
        return extract_testcases(response.content)

    def enrich_problem(self, problem: Problem) -> Problem:
        """Return a copy of ``problem`` carrying its scraped sample inputs.

        ``problem`` needs both ``contest_id`` and ``index``; this is checked
        before any request is made.  On failure ``problem`` is left as is.
        """

        contest_id, index = problem_locator(problem)
        return problem.with_testcases(self.fetch_testcases(contest_id, index))

    # -- Internal helpers -----------------------------------------------

    def _send(self, command: CodeforcesRequest, api_key: str, api_secret: str) -> httpx.Response:
        signed = self.sign(command, api_key, api_secret)
        logger.debug('Calling Codeforces method %s', signed.method)
        return self._fetch(signed.url, signed.method)

    def _fetch(self, url: str, what: str) -> httpx.Response:
        try:
            return self._client.get(url)
        except httpx.HTTPError as exc:  # Network / protocol problems
            msg = f'Error communicating with Codeforces while fetching {what!r}'
            raise TransportError(msg) from exc


def get(command: CodeforcesRequest, api_key: str, api_secret: str) -> CodeforcesResult:
    with CodeforcesClient() as client:
        return client.get(command, api_key, api_secret)


def get_raw(command: CodeforcesRequest, api_key: str, api_secret: str) -> str:
    with CodeforcesClient() as client:
        return client.get_raw(command, api_key, api_secret)


def fetch_testcases_for_problem(contest_id: int, index: str) -> list[str]:
    with CodeforcesClient() as client:
        return client.fetch_testcases(contest_id, index)


def enrich_problem(problem: Problem) -> Problem:
    with CodeforcesClient() as client:
        return client.enrich_problem(problem)


__all__ = ['CodeforcesClient', 'enrich_problem', 'fetch_testcases_for_problem', 'get', 'get_raw']
