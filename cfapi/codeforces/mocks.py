"""Light-weight helpers to mock Codeforces for unit tests."""

from __future__ import annotations

import json
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import BaseModel

from .models import BlogEntry, Comment, Problem, User


@dataclass(slots=True)
class RecordedCall:
    """Simple container capturing an outgoing request for assertions."""

    method: str
    url: httpx.URL


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return json.loads(value.model_dump_json(by_alias=True, exclude_none=True))
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


def ok_envelope(result: Any) -> dict[str, Any]:
    return {'status': 'OK', 'result': _jsonable(result)}


def failed_envelope(comment: str) -> dict[str, Any]:
    return {'status': 'FAILED', 'comment': comment}


def _coerce_reply(value: Any) -> tuple[int, Any]:
    status_code = 200
    payload = value
    if isinstance(value, tuple) and len(value) == 2 and isinstance(value[0], int):
        status_code, payload = value

    if isinstance(payload, (str, bytes, Mapping)):
        return status_code, payload
    msg = 'Mock replies must be envelopes (dicts), raw bodies or (status, reply) tuples.'
    raise TypeError(msg)


def create_mock_transport(
    *,
    methods: Mapping[str, Any] | None = None,
    pages: Mapping[str, Any] | None = None,
) -> tuple[httpx.MockTransport, list[RecordedCall]]:
    """Create an :class:`httpx.MockTransport` returning canned Codeforces replies.

    ``methods`` maps API method names (``user.info``) to envelopes; ``pages``
    maps site paths (``/contest/1/problem/A``) to HTML.  Any value may be a
    ``(status_code, reply)`` tuple.
    """

    api_replies: MutableMapping[str, tuple[int, Any]] = {name: _coerce_reply(reply) for name, reply in (methods or {}).items()}
    page_replies: MutableMapping[str, tuple[int, Any]] = {path: _coerce_reply(html) for path, html in (pages or {}).items()}
    calls: list[RecordedCall] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(RecordedCall(method=request.method, url=request.url))

        path = request.url.path
        if path.startswith('/api/'):
            method = path.removeprefix('/api/')
            reply = api_replies.get(method)
            if reply is None:
                return httpx.Response(400, json=failed_envelope(f'Method {method!r} is not mocked'))
        else:
            reply = page_replies.get(path)
            if reply is None:
                return httpx.Response(404, text='<html><body>Not found</body></html>')

        status_code, payload = reply
        if isinstance(payload, Mapping):
            return httpx.Response(status_code, json=payload)
        return httpx.Response(status_code, content=payload if isinstance(payload, bytes) else payload.encode())

    return httpx.MockTransport(handler), calls


def make_user(*, handle: str = 'tourist', rating: int | None = 3800) -> User:
    return User(
        handle=handle,
        contribution=0,
        rating=rating,
        last_online_time_seconds=1_700_000_000,
        registration_time_seconds=1_265_987_288,
        friend_of_count=1,
        avatar='https://userpic.codeforces.org/no-avatar.jpg',
        title_photo='https://userpic.codeforces.org/no-title.jpg',
    )


def make_blog_entry(*, entry_id: int = 82347, author_handle: str = 'tourist') -> BlogEntry:
    return BlogEntry(
        id=entry_id,
        original_locale='en',
        creation_time_seconds=1_600_000_000,
        author_handle=author_handle,
        title='<p>Round announcement</p>',
        locale='en',
        modification_time_seconds=1_600_000_100,
        allow_view_history=True,
        tags=['announcement'],
        rating=10,
    )


def make_comment(*, comment_id: int = 1, parent_comment_id: int | None = None) -> Comment:
    return Comment(
        id=comment_id,
        creation_time_seconds=1_600_000_200,
        commentator_handle='Petr',
        locale='en',
        text='<div>Nice problems</div>',
        parent_comment_id=parent_comment_id,
        rating=3,
    )


def make_problem(*, contest_id: int | None = 1477, index: str | None = 'B', name: str = 'Nezzar and Binary String') -> Problem:
    return Problem(
        contest_id=contest_id,
        index=index,
        name=name,
        type='PROGRAMMING',
        points=1000.0,
        rating=1900,
        tags=['data structures', 'greedy'],
    )


def make_problem_page(*inputs: str) -> str:
    """Render a minimal problem page with one sample block per input."""

    samples = ''.join(
        f'<div class="input"><div class="title">Input</div><pre>{text}</pre></div>'
        f'<div class="output"><div class="title">Output</div><pre>ignored</pre></div>'
        for text in inputs
    )
    return f'<html><body><div class="problem-statement"><div class="sample-test">{samples}</div></div></body></html>'


__all__ = [
    'RecordedCall',
    'create_mock_transport',
    'failed_envelope',
    'make_blog_entry',
    'make_comment',
    'make_problem',
    'make_problem_page',
    'make_user',
    'ok_envelope',
]
