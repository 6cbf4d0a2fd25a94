"""Classification of events into categories and tags by rules."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import Union

from awkit.models import Event

UNCATEGORIZED = "Uncategorized"


class Rule:
    """A classification rule. The base rule matches no event."""

    def matches(self, event: Event) -> bool:
        return False


class RegexRule(Rule):
    """Matches events with any string data value in which the regex is found."""

    def __init__(self, regex: Union[str, re.Pattern[str]], ignore_case: bool = False) -> None:
        if isinstance(regex, re.Pattern):
            if ignore_case:
                regex = re.compile(regex.pattern, regex.flags | re.IGNORECASE)
            self.regex = regex
        else:
            self.regex = re.compile(regex, re.IGNORECASE if ignore_case else 0)

    def matches(self, event: Event) -> bool:
        return any(
            isinstance(value, str) and self.regex.search(value) is not None
            for value in event.data.values()
        )


def _categorize_one(event: Event, rules: Sequence[tuple[Sequence[str], Rule]]) -> Event:
    category: list[str] = [UNCATEGORIZED]
    for cat, rule in rules:
        # The deepest matching category wins; ties go to the later rule.
        if rule.matches(event) and len(cat) >= len(category):
            category = list(cat)
    result = event.copy()
    result.data["$category"] = category
    return result


def categorize(
    events: Iterable[Event], rules: Sequence[tuple[Sequence[str], Rule]]
) -> list[Event]:
    """Return copies of the events with a ``$category`` list set in their data.

    Each event gets the deepest matching category, or ``["Uncategorized"]``.
    """
    return [_categorize_one(event, rules) for event in events]


def _tag_one(event: Event, rules: Sequence[tuple[str, Rule]]) -> Event:
    tags = sorted({name for name, rule in rules if rule.matches(event)})
    result = event.copy()
    result.data["$tags"] = tags
    return result


def tag(events: Iterable[Event], rules: Sequence[tuple[str, Rule]]) -> list[Event]:
    """Return copies of the events with a sorted, deduplicated ``$tags`` list in their data."""
    return [_tag_one(event, rules) for event in events]