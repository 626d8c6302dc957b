from __future__ import annotations

import hashlib

from cfapi.codeforces import ContestStandingsRequest, UserInfoRequest, generate_nonce, sign_request
from cfapi.codeforces.signing import canonical_query, sort_params

API_KEY = 'xxx'
API_SECRET = 'yyy'
NONCE = '123456'
TIMESTAMP = 1_600_000_000


def test_signed_url_matches_documented_algorithm() -> None:
    request = UserInfoRequest(handles=['tourist', 'Petr'])

    signed = sign_request(request, API_KEY, API_SECRET, nonce=NONCE, timestamp=TIMESTAMP)

    query = f'apiKey={API_KEY}&handles=tourist;Petr&time={TIMESTAMP}'
    digest = hashlib.sha512(f'{NONCE}/user.info?{query}#{API_SECRET}'.encode()).hexdigest()
    assert signed.signature == digest
    assert signed.url == f'https://codeforces.com/api/user.info?{query}&apiSig={NONCE}{digest}'


def test_signing_is_deterministic_for_fixed_inputs() -> None:
    request = ContestStandingsRequest(contest_id=566, from_=1, count=5, show_unofficial=True)

    first = sign_request(request, API_KEY, API_SECRET, nonce=NONCE, timestamp=TIMESTAMP)
    second = sign_request(request, API_KEY, API_SECRET, nonce=NONCE, timestamp=TIMESTAMP)

    assert first.url == second.url
    assert first == second


def test_injected_factories_are_used() -> None:
    request = UserInfoRequest(handles=['tourist'])

    signed = sign_request(request, API_KEY, API_SECRET, nonce_factory=lambda: '000042', clock=lambda: 1234.9)

    assert signed.nonce == '000042'
    assert ('time', '1234') in signed.params
    assert signed.url.endswith(f'&apiSig=000042{signed.signature}')


def test_params_are_sorted_by_key() -> None:
    request = ContestStandingsRequest(contest_id=566, from_=1, count=5, handles=['a'], room=2, show_unofficial=True)

    signed = sign_request(request, API_KEY, API_SECRET, nonce=NONCE, timestamp=TIMESTAMP)

    keys = [key for key, _ in signed.params]
    assert keys == ['apiKey', 'contestId', 'count', 'from', 'handles', 'room', 'showUnofficial', 'time']
    assert keys == sorted(keys)


def test_sort_breaks_ties_by_value_bytewise() -> None:
    params = [('b', '2'), ('a', 'z'), ('b', '10'), ('B', '1'), ('a', 'Z')]

    assert sort_params(params) == [('B', '1'), ('a', 'Z'), ('a', 'z'), ('b', '10'), ('b', '2')]


def test_canonical_query_does_not_escape() -> None:
    assert canonical_query([('handles', 'a;b'), ('tags', '2-sat')]) == 'handles=a;b&tags=2-sat'


def test_signature_depends_on_secret_and_nonce() -> None:
    request = UserInfoRequest(handles=['tourist'])

    base = sign_request(request, API_KEY, API_SECRET, nonce=NONCE, timestamp=TIMESTAMP)
    other_secret = sign_request(request, API_KEY, 'zzz', nonce=NONCE, timestamp=TIMESTAMP)
    other_nonce = sign_request(request, API_KEY, API_SECRET, nonce='654321', timestamp=TIMESTAMP)

    assert base.signature != other_secret.signature
    assert base.signature != other_nonce.signature


def test_api_base_is_configurable() -> None:
    request = UserInfoRequest(handles=['tourist'])

    signed = sign_request(request, API_KEY, API_SECRET, nonce=NONCE, timestamp=TIMESTAMP, api_base='http://mirror.local/api/')

    assert signed.url.startswith('http://mirror.local/api/user.info?apiKey=xxx&')


def test_generated_nonce_is_six_digits() -> None:
    nonces = {generate_nonce() for _ in range(50)}

    assert all(len(nonce) == 6 and nonce.isdigit() for nonce in nonces)
    assert len(nonces) > 1
