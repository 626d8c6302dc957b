"""Pydantic models describing the objects returned by the Codeforces API.

The classes mirror the return objects documented at
https://codeforces.com/apiHelp/objects.  Wire names are camelCase; the models
expose snake_case attributes and accept either spelling on input.  Unknown wire
fields are ignored because Codeforces adds fields to its objects over time.

Result variants (:data:`CodeforcesResult`) are either entity models themselves
(``BlogEntry``, ``ContestStandings``, ``Problemset``, ``User``) or thin
``RootModel`` wrappers around lists of entities.  The wire format carries no
discriminant, see :mod:`cfapi.codeforces.resolver` for how a payload is matched
to a variant.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator
from pydantic.alias_generators import to_camel

# -- Shared scalar aliases --------------------------------------------------
UnixSeconds = Annotated[int, Field(description='Unix timestamp in seconds.')]
Handle = Annotated[str, Field(min_length=1, description='Codeforces user handle.')]

ResponseStatus = Literal['OK', 'FAILED']
ContestType = Literal['CF', 'IOI', 'ICPC']
ContestPhase = Literal['BEFORE', 'CODING', 'PENDING_SYSTEM_TEST', 'SYSTEM_TEST', 'FINISHED']
ParticipantType = Literal['CONTESTANT', 'PRACTICE', 'VIRTUAL', 'MANAGER', 'OUT_OF_COMPETITION']
ProblemType = Literal['PROGRAMMING', 'QUESTION']
ProblemResultType = Literal['PRELIMINARY', 'FINAL']
SubmissionVerdict = Literal[
    'FAILED',
    'OK',
    'PARTIAL',
    'COMPILATION_ERROR',
    'RUNTIME_ERROR',
    'WRONG_ANSWER',
    'PRESENTATION_ERROR',
    'TIME_LIMIT_EXCEEDED',
    'MEMORY_LIMIT_EXCEEDED',
    'IDLENESS_LIMIT_EXCEEDED',
    'SECURITY_VIOLATED',
    'CRASHED',
    'INPUT_PREPARATION_CRASHED',
    'CHALLENGED',
    'SKIPPED',
    'TESTING',
    'REJECTED',
]
Testset = Literal[
    'SAMPLES',
    'PRETESTS',
    'TESTS',
    'CHALLENGES',
    'TESTS1',
    'TESTS2',
    'TESTS3',
    'TESTS4',
    'TESTS5',
    'TESTS6',
    'TESTS7',
    'TESTS8',
    'TESTS9',
    'TESTS10',
]
HackVerdict = Literal[
    'HACK_SUCCESSFUL',
    'HACK_UNSUCCESSFUL',
    'INVALID_INPUT',
    'GENERATOR_INCOMPILABLE',
    'GENERATOR_CRASHED',
    'IGNORED',
    'TESTING',
    'OTHER',
]


class CodeforcesBaseModel(BaseModel):
    """Base class shared by all Codeforces wire objects."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')


class User(CodeforcesBaseModel):
    """Public profile returned by ``user.info`` and ``user.ratedList``."""

    handle: Handle
    email: Annotated[str | None, Field(description='Shown only if the user allowed to share contact info.')] = None
    vk_id: Annotated[str | None, Field(description='User id for VK social network, if shared.')] = None
    open_id: Annotated[str | None, Field(description='Shown only if the user allowed to share contact info.')] = None
    first_name: str | None = None
    last_name: str | None = None
    country: str | None = None
    city: str | None = None
    organization: str | None = None
    contribution: Annotated[int, Field(description='User contribution.')]
    rank: str | None = None
    rating: int | None = None
    max_rank: str | None = None
    max_rating: int | None = None
    last_online_time_seconds: UnixSeconds
    registration_time_seconds: UnixSeconds
    friend_of_count: Annotated[int, Field(ge=0, description='Amount of users who have this user in friends.')]
    avatar: Annotated[str, Field(description="User's avatar URL.")]
    title_photo: Annotated[str, Field(description="User's title photo URL.")]


class BlogEntry(CodeforcesBaseModel):
    """A blog entry, with or without its content depending on the method."""

    id: int
    original_locale: str
    creation_time_seconds: UnixSeconds
    author_handle: Handle
    title: Annotated[str, Field(description='Localized title, may contain HTML markup.')]
    content: Annotated[str | None, Field(description='Localized content; not returned for short blog entry views.')] = None
    locale: str
    modification_time_seconds: UnixSeconds
    allow_view_history: Annotated[bool, Field(description='Whether the revision history of the entry is public.')]
    tags: list[str]
    rating: int


class Comment(CodeforcesBaseModel):
    id: int
    creation_time_seconds: UnixSeconds
    commentator_handle: Handle
    locale: str
    text: Annotated[str, Field(description='Localized comment body, may contain HTML markup.')]
    parent_comment_id: Annotated[int | None, Field(description='Absent for top level comments.')] = None
    rating: int


class RecentAction(CodeforcesBaseModel):
    """An entry of the ``recentActions`` feed (blog entry and/or comment)."""

    time_seconds: UnixSeconds
    blog_entry: Annotated[BlogEntry | None, Field(description='Blog entry in short form, if the action relates to one.')] = None
    comment: Comment | None = None


class RatingChange(CodeforcesBaseModel):
    """A single participation in a rated contest."""

    contest_id: int
    contest_name: str
    handle: Handle
    rank: Annotated[int, Field(description='Place of the user in the contest at the moment of the rating update.')]
    rating_update_time_seconds: UnixSeconds
    old_rating: int
    new_rating: int


class Contest(CodeforcesBaseModel):
    id: int
    name: str
    type: ContestType
    phase: ContestPhase
    frozen: Annotated[bool | None, Field(description='True if the ranklist is frozen.')] = None
    duration_seconds: int
    start_time_seconds: Annotated[int | None, Field(description='Absent when the start time is not scheduled yet.')] = None
    relative_time_seconds: Annotated[int | None, Field(description='Seconds passed since the start, may be negative.')] = None
    prepared_by: Annotated[str | None, Field(description='Handle of the contest creator (gym only).')] = None
    website_url: str | None = None
    description: str | None = None
    difficulty: Annotated[int | None, Field(ge=1, le=5, description='Gym difficulty from 1 to 5.')] = None
    kind: str | None = None
    icpc_region: str | None = None
    country: str | None = None
    city: str | None = None
    season: str | None = None


class Member(CodeforcesBaseModel):
    handle: Handle


class Party(CodeforcesBaseModel):
    """The participant(s) behind a submission, hack or ranklist row."""

    contest_id: int | None = None
    members: list[Member]
    participant_type: ParticipantType
    team_id: Annotated[int | None, Field(description='Present only for team parties.')] = None
    team_name: str | None = None
    ghost: Annotated[bool, Field(description='True for parties imported from an external ranklist.')]
    room: int | None = None
    start_time_seconds: UnixSeconds | None = None


class Problem(CodeforcesBaseModel):
    """A problem, optionally enriched with sample inputs scraped from its page.

    ``input_testcases`` is never part of the API payload and cannot be set by
    validation.  It stays ``None`` until :meth:`with_testcases` (or
    :meth:`fetch_testcases`) returns an enriched copy.
    """

    contest_id: int | None = None
    problemset_name: str | None = None
    index: Annotated[str | None, Field(description='Usually a letter or a letter followed by a digit.')] = None
    name: str
    type: ProblemType
    points: Annotated[float | None, Field(description='Maximum amount of points for the problem.')] = None
    rating: Annotated[int | None, Field(description='Problem difficulty rating.')] = None
    tags: list[str] = Field(default_factory=list)
    input_testcases: Annotated[list[str] | None, Field(exclude=True)] = None

    @model_validator(mode='before')
    @classmethod
    def _drop_testcases(cls, data: Any) -> Any:
        # Only the scraper fills input_testcases.
        if isinstance(data, dict) and ('inputTestcases' in data or 'input_testcases' in data):
            data = {key: value for key, value in data.items() if key not in ('inputTestcases', 'input_testcases')}
        return data

    def with_testcases(self, testcases: list[str]) -> Problem:
        """Return a copy of the problem carrying ``testcases``; ``self`` is left untouched."""

        return self.model_copy(update={'input_testcases': list(testcases)})

    def fetch_testcases(self) -> Problem:
        """Scrape the sample inputs through a short-lived client and return an enriched copy."""

        from .client import enrich_problem

        return enrich_problem(self)


class ProblemStatistics(CodeforcesBaseModel):
    contest_id: int | None = None
    index: str | None = None
    solved_count: Annotated[int, Field(ge=0, description='Number of users who solved the problem.')]


class Submission(CodeforcesBaseModel):
    id: int
    contest_id: int | None = None
    creation_time_seconds: UnixSeconds
    relative_time_seconds: Annotated[int | None, Field(description='Seconds since the contest start.')] = None
    problem: Problem
    author: Party
    programming_language: str
    verdict: Annotated[SubmissionVerdict | None, Field(description='Absent while the submission is in the queue.')] = None
    testset: Testset
    passed_test_count: int
    time_consumed_millis: int
    memory_consumed_bytes: int
    points: float | None = None


class JudgeProtocol(CodeforcesBaseModel):
    manual: Annotated[str, Field(description='"true" if the hack was judged manually.')]
    protocol: str
    verdict: str


class Hack(CodeforcesBaseModel):
    id: int
    creation_time_seconds: UnixSeconds
    hacker: Party
    defender: Party
    verdict: HackVerdict | None = None
    problem: Problem
    test: Annotated[str | None, Field(description='Hack test, absent if too large.')] = None
    judge_protocol: JudgeProtocol | None = None


class ProblemResult(CodeforcesBaseModel):
    """Per-problem cell of a ranklist row."""

    points: float
    penalty: Annotated[int | None, Field(description='Penalty (ICPC contests only).')] = None
    rejected_attempt_count: int
    type: ProblemResultType
    best_submission_time_seconds: Annotated[int | None, Field(description='Seconds after the start of the contest.')] = None


class RanklistRow(CodeforcesBaseModel):
    party: Party
    rank: Annotated[int, Field(description='Party place in the contest, 0 for unofficial rows.')]
    points: float
    penalty: int
    successful_hack_count: int
    unsuccessful_hack_count: int
    problem_results: list[ProblemResult]
    last_submission_time_seconds: Annotated[int | None, Field(description='IOI contests only.')] = None


class ContestStandings(CodeforcesBaseModel):
    """Composite result of ``contest.standings``."""

    contest: Contest
    problems: list[Problem]
    rows: list[RanklistRow]


class Problemset(CodeforcesBaseModel):
    """Composite result of ``problemset.problems``."""

    problems: list[Problem]
    problem_statistics: list[ProblemStatistics]


# -- List result variants ---------------------------------------------------


class _SequenceResult:
    """Sequence behaviour for the ``RootModel`` list wrappers below."""

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, item):
        return self.root[item]


class CommentList(_SequenceResult, RootModel[list[Comment]]):
    """Result of ``blogEntry.comments``."""


class HackList(_SequenceResult, RootModel[list[Hack]]):
    """Result of ``contest.hacks``."""


class ContestList(_SequenceResult, RootModel[list[Contest]]):
    """Result of ``contest.list``."""


class RatingChangeList(_SequenceResult, RootModel[list[RatingChange]]):
    """Result of ``contest.ratingChanges`` and ``user.rating``."""


class SubmissionList(_SequenceResult, RootModel[list[Submission]]):
    """Result of ``contest.status``, ``problemset.recentStatus`` and ``user.status``."""


class RecentActionList(_SequenceResult, RootModel[list[RecentAction]]):
    """Result of ``recentActions``."""


class BlogEntryList(_SequenceResult, RootModel[list[BlogEntry]]):
    """Result of ``user.blogEntries``."""


class Friends(_SequenceResult, RootModel[list[str]]):
    """Result of ``user.friends``: bare handles."""


class UserList(_SequenceResult, RootModel[list[User]]):
    """Result of ``user.info`` and ``user.ratedList``."""


CodeforcesResult = Union[
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
]
"""Closed union of every payload shape a successful call can return."""


# -- Envelope ---------------------------------------------------------------


class ResponseEnvelope(CodeforcesBaseModel):
    """Top-level wrapper of every API reply.

    ``result`` is kept as raw JSON here; turning it into a
    :data:`CodeforcesResult` is the resolver's job.
    """

    status: ResponseStatus
    result: Annotated[Any | None, Field(description='Payload of a successful call.')] = None
    comment: Annotated[str | None, Field(description='Reason of a failed call.')] = None


__all__ = [
    'BlogEntry',
    'BlogEntryList',
    'CodeforcesResult',
    'Comment',
    'CommentList',
    'Contest',
    'ContestList',
    'ContestPhase',
    'ContestStandings',
    'ContestType',
    'Friends',
    'Hack',
    'HackList',
    'HackVerdict',
    'JudgeProtocol',
    'Member',
    'ParticipantType',
    'Party',
    'Problem',
    'ProblemResult',
    'ProblemResultType',
    'ProblemStatistics',
    'ProblemType',
    'Problemset',
    'RanklistRow',
    'RatingChange',
    'RatingChangeList',
    'RecentAction',
    'RecentActionList',
    'ResponseEnvelope',
    'ResponseStatus',
    'Submission',
    'SubmissionList',
    'SubmissionVerdict',
    'Testset',
    'User',
    'UserList',
]
