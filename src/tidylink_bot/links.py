"""
Rewriting of social-media links into tracking-free, embed-friendly forms.

Each supported URL family is described by a ``LinkRule``: a compiled pattern
and a function that builds the clean URL from a single match. Only the first
match of a family in a message is rewritten.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional

from .types import NormalizedLink

STATUS_POST_HOST = "fxtwitter.com"
THREAD_HOST = "rxddit.com"

STATUS_POST_PATTERN = re.compile(
    r"https?://(?i:www\.)?(?i:twitter\.com|x\.com)/(?P<handle>\w+)/status/(?P<post_id>\d+)"
)
THREAD_PATTERN = re.compile(
    r"(?P<prefix>https?://(?:[\w-]+\.)?(?i:reddit\.com)/r/\w+/comments/[^\s?]+)"
)
REDDIT_HOST = re.compile(r"reddit\.com", re.IGNORECASE)


@dataclass(frozen=True)
class LinkRule:
    kind: str
    pattern: re.Pattern
    rewrite: Callable[[re.Match], NormalizedLink]

    def apply(self, text: str) -> Optional[NormalizedLink]:
        match = self.pattern.search(text)
        if not match:
            return None
        return self.rewrite(match)


def rewrite_status_post(match: re.Match) -> NormalizedLink:
    handle = match.group("handle")
    post_id = match.group("post_id")
    return NormalizedLink(
        url=f"https://{STATUS_POST_HOST}/{handle}/status/{post_id}",
        source_username=handle,
        kind="status_post",
    )


def rewrite_thread(match: re.Match) -> NormalizedLink:
    prefix = match.group("prefix")
    return NormalizedLink(
        url=REDDIT_HOST.sub(THREAD_HOST, prefix, count=1),
        kind="thread",
    )


LINK_RULES: List[LinkRule] = [
    LinkRule("status_post", STATUS_POST_PATTERN, rewrite_status_post),
    LinkRule("thread", THREAD_PATTERN, rewrite_thread),
]


def normalize(
    text: Optional[str], rules: List[LinkRule] = LINK_RULES
) -> Optional[NormalizedLink]:
    """Return the clean URL for the first rule that matches ``text``."""
    if not text:
        return None
    for rule in rules:
        link = rule.apply(text)
        if link:
            return link
    return None


def normalize_each(
    text: Optional[str], rules: List[LinkRule] = LINK_RULES
) -> List[NormalizedLink]:
    """Return the first match of every rule, in rule order."""
    if not text:
        return []
    return [link for rule in rules if (link := rule.apply(text))]


def contains_link(text: Optional[str], rules: List[LinkRule] = LINK_RULES) -> bool:
    return bool(text) and any(rule.pattern.search(text) for rule in rules)
