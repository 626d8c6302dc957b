"""Scrape sample test inputs from a Codeforces problem page.

The API does not expose sample tests, so they are read from the problem page
markup: every ``<pre>`` nested under an element with the ``input`` class holds
one sample input.  Legacy ``<br>`` line breaks are turned into newlines; the
rest of the inner markup is returned untouched.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from .errors import MISSING_CONTEST_ID_MESSAGE, MISSING_INDEX_MESSAGE, NO_TESTCASES_MESSAGE, ScrapeError
from .models import Problem

SITE_BASE = 'https://codeforces.com'
TESTCASE_SELECTOR = '.input pre'

_LINE_BREAK_RE = re.compile(r'<br>|<br/>')


def problem_url(contest_id: int, index: str, site_base: str = SITE_BASE) -> str:
    return f'{site_base.rstrip("/")}/contest/{contest_id}/problem/{index}'


def extract_testcases(html: str | bytes) -> list[str]:
    """Return the sample inputs found in ``html`` in document order."""

    soup = BeautifulSoup(html, 'html.parser')
    testcases = [_LINE_BREAK_RE.sub('\n', block.decode_contents()) for block in soup.select(TESTCASE_SELECTOR)]
    if not testcases:
        raise ScrapeError(NO_TESTCASES_MESSAGE)
    return testcases


def problem_locator(problem: Problem) -> tuple[int, str]:
    """Return ``(contest_id, index)`` of ``problem`` or raise :class:`ScrapeError`."""

    if problem.contest_id is None:
        raise ScrapeError(MISSING_CONTEST_ID_MESSAGE)
    if problem.index is None:
        raise ScrapeError(MISSING_INDEX_MESSAGE)
    return problem.contest_id, problem.index


__all__ = [
    'SITE_BASE',
    'TESTCASE_SELECTOR',
    'extract_testcases',
    'problem_locator',
    'problem_url',
]
