"""Typed primitives and HTTP helpers for the Codeforces API integration."""

from .client import CodeforcesClient, enrich_problem, fetch_testcases_for_problem, get, get_raw
from .commands import (
    BlogEntryCommand,
    BlogEntryCommentsRequest,
    BlogEntryViewRequest,
    CodeforcesRequest,
    Command,
    ContestCommand,
    ContestHacksRequest,
    ContestListRequest,
    ContestRatingChangesRequest,
    ContestStandingsRequest,
    ContestStatusRequest,
    ProblemsetCommand,
    ProblemsetProblemsRequest,
    ProblemsetRecentStatusRequest,
    RecentActionsRequest,
    UserBlogEntriesRequest,
    UserCommand,
    UserFriendsRequest,
    UserInfoRequest,
    UserRatedListRequest,
    UserRatingRequest,
    UserStatusRequest,
)
from .errors import CodeforcesError, DecodeError, RemoteRejectedError, ScrapeError, TransportError
from .models import (
    BlogEntry,
    BlogEntryList,
    CodeforcesResult,
    Comment,
    CommentList,
    Contest,
    ContestList,
    ContestStandings,
    Friends,
    Hack,
    HackList,
    Problem,
    Problemset,
    RatingChange,
    RatingChangeList,
    RecentAction,
    RecentActionList,
    ResponseEnvelope,
    Submission,
    SubmissionList,
    User,
    UserList,
)
from .resolver import RESOLUTION_ORDER, parse_envelope, resolve_response, resolve_result
from .signing import API_BASE, SignedRequest, generate_nonce, sign_request
from .testcases import SITE_BASE, extract_testcases, problem_url

__all__ = [
    'API_BASE',
    'RESOLUTION_ORDER',
    'SITE_BASE',
    'BlogEntry',
    'BlogEntryCommand',
    'BlogEntryCommentsRequest',
    'BlogEntryList',
    'BlogEntryViewRequest',
    'CodeforcesClient',
    'CodeforcesError',
    'CodeforcesRequest',
    'CodeforcesResult',
    'Command',
    'Comment',
    'CommentList',
    'Contest',
    'ContestCommand',
    'ContestHacksRequest',
    'ContestList',
    'ContestListRequest',
    'ContestRatingChangesRequest',
    'ContestStandings',
    'ContestStandingsRequest',
    'ContestStatusRequest',
    'DecodeError',
    'Friends',
    'Hack',
    'HackList',
    'Problem',
    'Problemset',
    'ProblemsetCommand',
    'ProblemsetProblemsRequest',
    'ProblemsetRecentStatusRequest',
    'RatingChange',
    'RatingChangeList',
    'RecentAction',
    'RecentActionList',
    'RecentActionsRequest',
    'RemoteRejectedError',
    'ResponseEnvelope',
    'ScrapeError',
    'SignedRequest',
    'Submission',
    'SubmissionList',
    'TransportError',
    'User',
    'UserBlogEntriesRequest',
    'UserCommand',
    'UserFriendsRequest',
    'UserInfoRequest',
    'UserList',
    'UserRatedListRequest',
    'UserRatingRequest',
    'UserStatusRequest',
    'enrich_problem',
    'extract_testcases',
    'fetch_testcases_for_problem',
    'generate_nonce',
    'get',
    'get_raw',
    'parse_envelope',
    'problem_url',
    'resolve_response',
    'resolve_result',
    'sign_request',
]
