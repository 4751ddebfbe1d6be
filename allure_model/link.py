"""Links from a report to issues, test cases and other pages."""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from .config import ISSUE_PATTERN_ENV_KEY, TEST_CASE_PATTERN_ENV_KEY, TMS_LINK_PATTERN_ENV_KEY

logger = logging.getLogger(__name__)

_DEFAULT_PATTERN = "%s"


class LinkType(str, Enum):
    """Kind of a link."""

    LINK = "link"
    ISSUE = "issue"
    TEST_CASE = "test_case"
    TMS = "tms"

    def __str__(self) -> str:
        return self.value


@dataclass
class Link:
    """A named URL of a given kind."""

    name: str
    type: str
    url: str

    def to_dict(self) -> dict:
        return {"name": self.name, "type": self.type, "url": self.url}


def new_link(name: str, link_type: Union[LinkType, str], url: str) -> Link:
    type_text = link_type.value if isinstance(link_type, Enum) else str(link_type)
    return Link(name=name, type=type_text, url=url)


def _pattern(env_key: str) -> str:
    pattern = os.environ.get(env_key, "")
    if not pattern:
        logger.warning(
            "Provided pattern (%s) is empty; set %s to a URL pattern containing '%%s'. "
            "Using default pattern (%s).",
            pattern,
            env_key,
            _DEFAULT_PATTERN,
        )
        return _DEFAULT_PATTERN
    return pattern


def _format(env_key: str, value: str) -> str:
    pattern = _pattern(env_key)
    try:
        return pattern % value
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"link pattern {pattern!r} from {env_key} must contain exactly one '%s'"
        ) from exc


def test_case_link(test_case: str) -> Link:
    return new_link(f"TestCase[{test_case}]", LinkType.TEST_CASE, _format(TEST_CASE_PATTERN_ENV_KEY, test_case))


def issue_link(issue: str) -> Link:
    return new_link(f"Issue[{issue}]", LinkType.ISSUE, _format(ISSUE_PATTERN_ENV_KEY, issue))


def named_link(name: str, url: str) -> Link:
    return new_link(name, LinkType.LINK, url)


def tms_link(test_case: str) -> Link:
    return new_link(test_case, LinkType.TMS, _format(TMS_LINK_PATTERN_ENV_KEY, test_case))


def tms_links(*test_cases: str) -> List[Link]:
    return [tms_link(test_case) for test_case in test_cases]