"""Build signed Codeforces API URLs.

Codeforces authenticates API calls with a per-request signature::

    apiSig = <nonce> + sha512hex('<nonce>/<method>?<sorted params>#<secret>')

where ``<sorted params>`` is the ``key=value`` list (including ``apiKey`` and
``time``) sorted by key and then by value, joined with ``&``.  The server
recomputes the hash from the received parameters, so the ordering has to be
bit-exact.

Nonce and timestamp can be injected, which makes :func:`sign_request`
deterministic for tests.  In production both are generated per call and the
resulting :class:`SignedRequest` is never reused.
"""

from __future__ import annotations

import hashlib
import secrets
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .commands import CodeforcesRequest

API_BASE = 'https://codeforces.com/api'
NONCE_LENGTH = 6

NonceFactory = Callable[[], str]
Clock = Callable[[], float]


def generate_nonce(length: int = NONCE_LENGTH) -> str:
    """Return ``length`` random decimal digits drawn from the OS CSPRNG."""

    return ''.join(secrets.choice('0123456789') for _ in range(length))


def sort_params(params: Iterable[tuple[str, str]]) -> list[tuple[str, str]]:
    """Sort parameters by key, then value, comparing UTF-8 bytes."""

    return sorted(params, key=lambda pair: (pair[0].encode(), pair[1].encode()))


def canonical_query(params: Iterable[tuple[str, str]]) -> str:
    """Render already sorted parameters as ``k1=v1&k2=v2``, without escaping."""

    return '&'.join(f'{key}={value}' for key, value in params)


@dataclass(slots=True, frozen=True)
class SignedRequest:
    """Ephemeral, fully signed call to a single API method."""

    method: str
    params: tuple[tuple[str, str], ...]
    nonce: str
    signature: str
    api_base: str = API_BASE

    @property
    def api_sig(self) -> str:
        return f'{self.nonce}{self.signature}'

    @property
    def url(self) -> str:
        query = ''.join(f'{key}={value}&' for key, value in self.params)
        return f'{self.api_base}/{self.method}?{query}apiSig={self.api_sig}'


def compute_signature(method: str, params: Iterable[tuple[str, str]], nonce: str, api_secret: str) -> str:
    """Hex SHA-512 of ``<nonce>/<method>?<params>#<secret>`` for sorted ``params``."""

    buffer = f'{nonce}/{method}?{canonical_query(params)}#{api_secret}'
    return hashlib.sha512(buffer.encode()).hexdigest()


def sign_request(
    command: CodeforcesRequest,
    api_key: str,
    api_secret: str,
    *,
    nonce: str | None = None,
    timestamp: int | None = None,
    api_base: str = API_BASE,
    nonce_factory: NonceFactory = generate_nonce,
    clock: Clock = time.time,
) -> SignedRequest:
    """Sign ``command`` with the caller's API credentials.

    ``nonce``/``timestamp`` take precedence over ``nonce_factory``/``clock``.
    Identical inputs always produce an identical :attr:`SignedRequest.url`.
    """

    if nonce is None:
        nonce = nonce_factory()
    if timestamp is None:
        timestamp = int(clock())

    method = command.method_name()
    params = [*command.query_params(), ('apiKey', api_key), ('time', str(timestamp))]
    ordered = sort_params(params)
    signature = compute_signature(method, ordered, nonce, api_secret)
    return SignedRequest(
        method=method,
        params=tuple(ordered),
        nonce=nonce,
        signature=signature,
        api_base=api_base.rstrip('/'),
    )


__all__ = [
    'API_BASE',
    'NONCE_LENGTH',
    'SignedRequest',
    'canonical_query',
    'compute_signature',
    'generate_nonce',
    'sign_request',
    'sort_params',
]
