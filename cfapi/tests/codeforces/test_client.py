from __future__ import annotations

import functools
import json

import httpx
import pytest

from cfapi.codeforces import (
    BlogEntryCommentsRequest,
    BlogEntryViewRequest,
    CodeforcesClient,
    DecodeError,
    Friends,
    RemoteRejectedError,
    ScrapeError,
    TransportError,
    UserFriendsRequest,
    UserInfoRequest,
    UserList,
    fetch_testcases_for_problem,
)
from cfapi.codeforces import client as client_module
from cfapi.codeforces.mocks import create_mock_transport, failed_envelope, make_blog_entry, make_problem, make_problem_page, make_user, ok_envelope

API_KEY = 'test-key'
API_SECRET = 'test-secret'


def test_get_user_info_roundtrip(mock_client) -> None:
    client, calls = mock_client(methods={'user.info': ok_envelope([make_user(handle='tourist'), make_user(handle='Petr')])})

    result = client.get(UserInfoRequest(handles=['tourist', 'Petr']), API_KEY, API_SECRET)

    assert isinstance(result, UserList)
    assert [user.handle for user in result] == ['tourist', 'Petr']
    assert len(calls) == 1
    call = calls[0]
    assert call.method == 'GET'
    assert call.url.path == '/api/user.info'
    assert call.url.params['handles'] == 'tourist;Petr'
    assert call.url.params['apiKey'] == API_KEY
    assert call.url.params['time'].isdigit()
    assert len(call.url.params['apiSig']) == 6 + 128


def test_every_call_draws_a_fresh_nonce(mock_client) -> None:
    client, calls = mock_client(methods={'user.friends': ok_envelope(['Petr'])})

    for _ in range(5):
        client.get(UserFriendsRequest(), API_KEY, API_SECRET)

    signatures = {call.url.params['apiSig'] for call in calls}
    assert len(signatures) > 1


def test_strict_decoding_uses_declared_result_type(mock_client) -> None:
    client, _ = mock_client(methods={'user.friends': ok_envelope([])})

    result = client.get(UserFriendsRequest(only_online=True), API_KEY, API_SECRET)

    assert isinstance(result, Friends)
    assert len(result) == 0


def test_bad_blog_entry_is_rejected_remotely(mock_client) -> None:
    comment = 'blogEntryId: Blog entry with id -1 not found'
    client, _ = mock_client(methods={'blogEntry.comments': (400, failed_envelope(comment))})

    with pytest.raises(RemoteRejectedError) as exc_info:
        client.get(BlogEntryCommentsRequest(blog_entry_id=-1), API_KEY, API_SECRET)

    assert exc_info.value.comment == comment
    assert exc_info.value.method == 'blogEntry.comments'


def test_error_status_without_envelope_is_a_transport_error(mock_client) -> None:
    client, _ = mock_client(methods={'blogEntry.view': (503, '<html>Codeforces is temporarily unavailable</html>')})

    with pytest.raises(TransportError) as exc_info:
        client.get(BlogEntryViewRequest(blog_entry_id=82347), API_KEY, API_SECRET)

    assert isinstance(exc_info.value.__cause__, DecodeError)


def test_contract_violation_is_a_decode_error(mock_client) -> None:
    client, _ = mock_client(methods={'blogEntry.view': ok_envelope(['not', 'a', 'blog', 'entry'])})

    with pytest.raises(DecodeError):
        client.get(BlogEntryViewRequest(blog_entry_id=82347), API_KEY, API_SECRET)


def test_network_failure_is_a_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError('connection refused', request=request)

    with CodeforcesClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(TransportError) as exc_info:
            client.get(UserFriendsRequest(), API_KEY, API_SECRET)

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_get_raw_returns_body_untouched(mock_client) -> None:
    client, _ = mock_client(methods={'blogEntry.view': ok_envelope(make_blog_entry(entry_id=5))})

    body = client.get_raw(BlogEntryViewRequest(blog_entry_id=5), API_KEY, API_SECRET)

    assert json.loads(body)['result']['id'] == 5


def test_get_raw_does_not_interpret_failures(mock_client) -> None:
    client, _ = mock_client(methods={'blogEntry.comments': (400, failed_envelope('not found'))})

    body = client.get_raw(BlogEntryCommentsRequest(blog_entry_id=-1), API_KEY, API_SECRET)

    assert 'FAILED' in body


def test_fetch_testcases(mock_client) -> None:
    client, calls = mock_client(pages={'/contest/1477/problem/B': make_problem_page('3<br>1 2 3', '1<br>5')})

    assert client.fetch_testcases(1477, 'B') == ['3\n1 2 3', '1\n5']
    assert str(calls[0].url) == 'https://codeforces.com/contest/1477/problem/B'


def test_fetch_testcases_without_samples(mock_client) -> None:
    client, _ = mock_client(pages={'/contest/1/problem/Z': '<html><body>No such problem</body></html>'})

    with pytest.raises(ScrapeError):
        client.fetch_testcases(1, 'Z')


def test_enrich_problem_returns_copy(mock_client) -> None:
    client, _ = mock_client(pages={'/contest/1477/problem/B': make_problem_page('2<br>01')})
    problem = make_problem()

    enriched = client.enrich_problem(problem)

    assert enriched.input_testcases == ['2\n01']
    assert enriched.name == problem.name
    assert problem.input_testcases is None


def test_enrich_problem_checks_fields_before_fetching(mock_client) -> None:
    client, calls = mock_client()

    with pytest.raises(ScrapeError):
        client.enrich_problem(make_problem(contest_id=None))
    with pytest.raises(ScrapeError):
        client.enrich_problem(make_problem(index=None))

    assert calls == []


def test_enrich_problem_failure_leaves_problem_untouched(mock_client) -> None:
    client, _ = mock_client(pages={'/contest/1477/problem/B': '<html></html>'})
    problem = make_problem()

    with pytest.raises(ScrapeError):
        client.enrich_problem(problem)

    assert problem.input_testcases is None


def test_transport_and_http_client_are_exclusive() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200))

    with httpx.Client(transport=transport) as http_client:
        with pytest.raises(ValueError):
            CodeforcesClient(transport=transport, http_client=http_client)


def test_external_http_client_is_not_closed() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=ok_envelope(['Petr'])))

    with httpx.Client(transport=transport) as http_client:
        with CodeforcesClient(http_client=http_client) as client:
            client.get(UserFriendsRequest(), API_KEY, API_SECRET)
        assert not http_client.is_closed


def test_request_helpers_use_a_short_lived_client(monkeypatch) -> None:
    transport, calls = create_mock_transport(
        methods={'user.friends': ok_envelope(['Petr']), 'blogEntry.comments': (400, failed_envelope('not found'))},
        pages={'/contest/1477/problem/B': make_problem_page('1')},
    )
    monkeypatch.setattr(client_module, 'CodeforcesClient', functools.partial(CodeforcesClient, transport=transport))

    assert list(UserFriendsRequest().get(API_KEY, API_SECRET)) == ['Petr']
    assert 'FAILED' in BlogEntryCommentsRequest(blog_entry_id=-1).get_raw(API_KEY, API_SECRET)
    assert fetch_testcases_for_problem(1477, 'B') == ['1']
    with pytest.raises(RemoteRejectedError):
        BlogEntryCommentsRequest(blog_entry_id=-1).get(API_KEY, API_SECRET)
    assert len(calls) == 4


def test_problem_fetch_testcases_uses_a_short_lived_client(monkeypatch) -> None:
    transport, calls = create_mock_transport(pages={'/contest/1477/problem/B': make_problem_page('3<br>1 2 3')})
    monkeypatch.setattr(client_module, 'CodeforcesClient', functools.partial(CodeforcesClient, transport=transport))
    problem = make_problem()

    enriched = problem.fetch_testcases()

    assert enriched.input_testcases == ['3\n1 2 3']
    assert problem.input_testcases is None
    assert str(calls[0].url) == 'https://codeforces.com/contest/1477/problem/B'
