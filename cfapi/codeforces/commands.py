"""Typed request models for every Codeforces API method this package can call.

Each request is a frozen Pydantic model whose ``method`` literal names the
remote method (``blogEntry.comments``, ``user.info`` ...) and whose remaining
fields are exactly the parameters that method accepts.  Field names are
snake_case in Python and camelCase on the wire (``from_`` maps to ``from``).

Two derived facts are available on every request:

* :meth:`CodeforcesRequest.method_name` - the remote method name;
* :meth:`CodeforcesRequest.query_params` - ordered ``(name, value)`` string
  pairs, ready to be signed by :mod:`cfapi.codeforces.signing`.

Requests are grouped by resource (:data:`BlogEntryCommand`,
:data:`ContestCommand`, :data:`ProblemsetCommand`, :data:`UserCommand`,
:class:`RecentActionsRequest`) and closed by the discriminated union
:data:`Command`.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

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
    SubmissionList,
    UserList,
)

LIST_SEPARATOR = ';'

ContestId = Annotated[int, Field(description='Contest identifier, as seen in the contest URL.')]
BlogEntryId = Annotated[int, Field(description='Blog entry identifier, as seen in the blog entry URL.')]
Handle = Annotated[str, Field(min_length=1, description='Codeforces user handle.')]
ProblemsetName = Annotated[str | None, Field(description='Custom problemset short name, like ``acmsguru``.')]
From = Annotated[int | None, Field(alias='from', description='1-based index of the first returned item.')]
Count = Annotated[int | None, Field(description='Number of returned items.')]


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (list, tuple)):
        return LIST_SEPARATOR.join(str(item) for item in value)
    return str(value)


class CodeforcesRequest(BaseModel):
    """Base class shared by all Codeforces API requests."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='forbid', frozen=True)

    method: str
    result_type: ClassVar[type[CodeforcesResult]]

    def method_name(self) -> str:
        return self.method

    def query_params(self) -> list[tuple[str, str]]:
        """Return the request parameters in declaration order, skipping unset optionals."""

        payload = self.model_dump(mode='python', by_alias=True, exclude_none=True, exclude={'method'})
        return [(key, _stringify(value)) for key, value in payload.items()]

    def get(self, api_key: str, api_secret: str) -> CodeforcesResult:
        """Send the request through a short-lived client and decode the result."""

        from .client import get

        return get(self, api_key, api_secret)

    def get_raw(self, api_key: str, api_secret: str) -> str:
        """Send the request through a short-lived client and return the body untouched."""

        from .client import get_raw

        return get_raw(self, api_key, api_secret)


# -- blogEntry.* ------------------------------------------------------------


class BlogEntryCommentsRequest(CodeforcesRequest):
    """Comments of a blog entry (``blogEntry.comments``)."""

    method: Literal['blogEntry.comments'] = Field(default='blogEntry.comments', frozen=True)
    result_type: ClassVar[type[CodeforcesResult]] = CommentList

    blog_entry_id: BlogEntryId


class BlogEntryViewRequest(CodeforcesRequest):
    """A single blog entry (``blogEntry.view``)."""

    method: Literal['blogEntry.view'] = Field(default='blogEntry.view', frozen=True)
    result_type: ClassVar[type[CodeforcesResult]] = BlogEntry

    blog_entry_id: BlogEntryId


# -- contest.* --------------------------------------------------------------


class ContestHacksRequest(CodeforcesRequest):
    method: Literal['contest.hacks'] = Field(default='contest.hacks', frozen=True)
    result_type: ClassVar[type[CodeforcesResult]] = HackList

    contest_id: ContestId


class ContestListRequest(CodeforcesRequest):
    method: Literal['contest.list'] = Field(default='contest.list', frozen=True)
    result_type: ClassVar[type[CodeforcesResult]] = ContestList

    gym: Annotated[bool | None, Field(description='Return gym contests instead of regular ones.')] = None


class ContestRatingChangesRequest(CodeforcesRequest):
    method: Literal['contest.ratingChanges'] = Field(default='contest.ratingChanges', frozen=True)
    result_type: ClassVar[type[CodeforcesResult]] = RatingChangeList

    contest_id: ContestId


class ContestStandingsRequest(CodeforcesRequest):
    """Ranklist of a contest (``contest.standings``)."""

    method: Literal['contest.standings'] = Field(default='contest.standings', frozen=True)
    result_type: ClassVar[type[CodeforcesResult]] = ContestStandings

    contest_id: ContestId
    from_: From = None
    count: Count = None
    handles: Annotated[list[Handle] | None, Field(description='Only show rows of these handles.')] = None
    room: Annotated[int | None, Field(description='Only show participants from this room.')] = None
    show_unofficial: Annotated[bool | None, Field(description='Include virtual, out-of-competition and practice rows.')] = None


class ContestStatusRequest(CodeforcesRequest):
    method: Literal['contest.status'] = Field(default='contest.status', frozen=True)
    result_type: ClassVar[type[CodeforcesResult]] = SubmissionList

    contest_id: ContestId
    handle: Annotated[str | None, Field(description='Only return submissions of this user.')] = None
    from_: From = None
    count: Count = None


# -- problemset.* -----------------------------------------------------------


class ProblemsetProblemsRequest(CodeforcesRequest):
    method: Literal['problemset.problems'] = Field(default='problemset.problems', frozen=True)
    result_type: ClassVar[type[CodeforcesResult]] = Problemset

    tags: Annotated[list[str] | None, Field(description='Only return problems carrying all of these tags.')] = None
    problemset_name: ProblemsetName = None


class ProblemsetRecentStatusRequest(CodeforcesRequest):
    method: Literal['problemset.recentStatus'] = Field(default='problemset.recentStatus', frozen=True)
    result_type: ClassVar[type[CodeforcesResult]] = SubmissionList

    count: Annotated[int, Field(description='Number of returned submissions, at most 1000.')]
    problemset_name: ProblemsetName = None


# -- user.* -----------------------------------------------------------------


class UserBlogEntriesRequest(CodeforcesRequest):
    method: Literal['user.blogEntries'] = Field(default='user.blogEntries', frozen=True)
    result_type: ClassVar[type[CodeforcesResult]] = BlogEntryList

    handle: Handle


class UserFriendsRequest(CodeforcesRequest):
    """Friends of the user owning the API key (``user.friends``)."""

    method: Literal['user.friends'] = Field(default='user.friends', frozen=True)
    result_type: ClassVar[type[CodeforcesResult]] = Friends

    only_online: bool | None = None


class UserInfoRequest(CodeforcesRequest):
    method: Literal['user.info'] = Field(default='user.info', frozen=True)
    result_type: ClassVar[type[CodeforcesResult]] = UserList

    handles: Annotated[list[Handle], Field(min_length=1, description='Up to 10000 handles.')]


class UserRatedListRequest(CodeforcesRequest):
    method: Literal['user.ratedList'] = Field(default='user.ratedList', frozen=True)
    result_type: ClassVar[type[CodeforcesResult]] = UserList

    active_only: Annotated[bool | None, Field(description='Only users who participated in a rated contest during the last month.')] = None


class UserRatingRequest(CodeforcesRequest):
    method: Literal['user.rating'] = Field(default='user.rating', frozen=True)
    result_type: ClassVar[type[CodeforcesResult]] = RatingChangeList

    handle: Handle


class UserStatusRequest(CodeforcesRequest):
    method: Literal['user.status'] = Field(default='user.status', frozen=True)
    result_type: ClassVar[type[CodeforcesResult]] = SubmissionList

    handle: Handle
    from_: From = None
    count: Count = None


# -- recentActions ----------------------------------------------------------


class RecentActionsRequest(CodeforcesRequest):
    method: Literal['recentActions'] = Field(default='recentActions', frozen=True)
    result_type: ClassVar[type[CodeforcesResult]] = RecentActionList

    max_count: Annotated[int, Field(description='Number of actions to return, at most 100.')]


BlogEntryCommand = Union[BlogEntryCommentsRequest, BlogEntryViewRequest]
ContestCommand = Union[
    ContestHacksRequest,
    ContestListRequest,
    ContestRatingChangesRequest,
    ContestStandingsRequest,
    ContestStatusRequest,
]
ProblemsetCommand = Union[ProblemsetProblemsRequest, ProblemsetRecentStatusRequest]
UserCommand = Union[
    UserBlogEntriesRequest,
    UserFriendsRequest,
    UserInfoRequest,
    UserRatedListRequest,
    UserRatingRequest,
    UserStatusRequest,
]

Command = Annotated[
    Union[BlogEntryCommand, ContestCommand, ProblemsetCommand, UserCommand, RecentActionsRequest],
    Field(discriminator='method'),
]
"""Every remote operation supported by the client, discriminated by ``method``."""


__all__ = [
    'LIST_SEPARATOR',
    'BlogEntryCommand',
    'BlogEntryCommentsRequest',
    'BlogEntryViewRequest',
    'CodeforcesRequest',
    'Command',
    'ContestCommand',
    'ContestHacksRequest',
    'ContestListRequest',
    'ContestRatingChangesRequest',
    'ContestStandingsRequest',
    'ContestStatusRequest',
    'ProblemsetCommand',
    'ProblemsetProblemsRequest',
    'ProblemsetRecentStatusRequest',
    'RecentActionsRequest',
    'UserBlogEntriesRequest',
    'UserCommand',
    'UserFriendsRequest',
    'UserInfoRequest',
    'UserRatedListRequest',
    'UserRatingRequest',
    'UserStatusRequest',
]
