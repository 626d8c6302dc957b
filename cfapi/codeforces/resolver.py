"""Turn raw Codeforces replies into typed results or structured errors.

Every reply is an envelope ``{"status": "OK"|"FAILED", "result"?, "comment"?}``.
A ``FAILED`` envelope becomes :class:`RemoteRejectedError`; an ``OK`` envelope
must carry ``result``, which is decoded into one of the
:data:`~cfapi.codeforces.models.CodeforcesResult` variants.

The payload itself is untagged.  When the caller knows which request produced
it (the client always does) the payload is validated against that request's
``result_type`` only.  Without that context :func:`resolve_result` tries the
variants in :data:`RESOLUTION_ORDER` and keeps the first one that validates.
Structural matching is ambiguous for payloads that fit several shapes: an
empty list always resolves to :class:`CommentList`, and list shapes with only
optional fields in common are separated solely by their required fields.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from .errors import DecodeError, RemoteRejectedError
from .models import (
    BlogEntry,
    BlogEntryList,
    CodeforcesResult,
    CommentList,
    ContestList,
    ContestStandings,
    Friends,
    HackList,
    Problemset,
    RatingChangeList,
    RecentActionList,
    ResponseEnvelope,
    SubmissionList,
    User,
    UserList,
)

logger = logging.getLogger(__name__)

RESOLUTION_ORDER: tuple[type[CodeforcesResult], ...] = (
    CommentList,
    BlogEntry,
    HackList,
    ContestList,
    RatingChangeList,
    ContestStandings,
    SubmissionList,
    Problemset,
    RecentActionList,
    BlogEntryList,
    Friends,
    UserList,
    User,
)


def parse_envelope(body: str | bytes) -> ResponseEnvelope:
    """Decode ``body`` into a :class:`ResponseEnvelope`."""

    try:
        payload = json.loads(body)
    except ValueError as exc:
        msg = f'Codeforces response is not valid JSON: {exc}'
        raise DecodeError(msg) from exc

    try:
        return ResponseEnvelope.model_validate(payload)
    except ValidationError as exc:
        msg = 'Codeforces response is not a valid status/result/comment envelope.'
        raise DecodeError(msg) from exc


def resolve_result(payload: Any) -> CodeforcesResult:
    """Return the first variant of :data:`RESOLUTION_ORDER` that ``payload`` validates against."""

    for variant in RESOLUTION_ORDER:
        try:
            return variant.model_validate(payload)
        except ValidationError:
            continue
    msg = 'Codeforces result does not match any known result shape.'
    raise DecodeError(msg)


def _validate_expected(payload: Any, expected: type[CodeforcesResult]) -> CodeforcesResult:
    try:
        return expected.model_validate(payload)
    except ValidationError as exc:
        msg = f'Unable to validate Codeforces result as {expected.__name__}.'
        raise DecodeError(msg) from exc


def unwrap_envelope(envelope: ResponseEnvelope, *, method: str | None = None) -> Any:
    """Return the raw ``result`` of an OK envelope, raising for anything else."""

    if envelope.status == 'FAILED':
        if envelope.comment is None:
            msg = 'Codeforces reported a failure without a comment.'
            raise DecodeError(msg)
        logger.debug('Codeforces rejected %s: %s', method or 'request', envelope.comment)
        raise RemoteRejectedError(envelope.comment, method=method)

    if envelope.result is None:
        msg = 'Codeforces reported success without a result payload.'
        raise DecodeError(msg)
    return envelope.result


def resolve_response(
    body: str | bytes,
    expected: type[CodeforcesResult] | None = None,
    *,
    method: str | None = None,
) -> CodeforcesResult:
    """Decode a raw reply body.

    ``expected`` selects strict decoding against a single variant; when it is
    omitted the payload goes through :func:`resolve_result`.  ``method`` only
    enriches error messages.
    """

    payload = unwrap_envelope(parse_envelope(body), method=method)
    if expected is not None:
        return _validate_expected(payload, expected)
    return resolve_result(payload)


__all__ = [
    'RESOLUTION_ORDER',
    'parse_envelope',
    'resolve_response',
    'resolve_result',
    'unwrap_envelope',
]
