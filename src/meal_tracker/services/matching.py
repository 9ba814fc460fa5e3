"""Food memory matching.

Suggestions are produced in two stages. Stored names are first narrowed to
those that start with the query or contain it at a word boundary, and only
the most recently created of them is kept. That single candidate is then
accepted if its name starts with the query, or contains it and the query is
at least half as long as the name. A rejected candidate yields no match even
when an older candidate would have been accepted. Names are compared
ignoring case and diacritics.
"""

import unicodedata
from collections.abc import Iterable

from meal_tracker.domain.foods import FoodProfile

MIN_QUERY_LENGTH = 3


def fold(text: str) -> str:
    """Lowercase text and strip diacritics, so "Creme" compares equal to "Crème"."""
    decomposed = unicodedata.normalize("NFKD", text.casefold())
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def is_candidate(name: str, query: str) -> bool:
    """Return whether a stored name passes the store-level filter."""
    name_lower = fold(name)
    query_lower = fold(query)
    return name_lower.startswith(query_lower) or f" {query_lower}" in name_lower


def accepts_candidate(name: str, query: str) -> bool:
    """Return whether the provisional candidate is close enough to offer."""
    name_lower = fold(name)
    query_lower = fold(query)
    if name_lower.startswith(query_lower):
        return True
    return query_lower in name_lower and len(query_lower) >= len(name_lower) // 2


def find_best_match(
    query: str, profiles: Iterable[FoodProfile]
) -> FoodProfile | None:
    """Return the remembered food to suggest for a typed name, if any."""
    if len(query) < MIN_QUERY_LENGTH:
        return None
    candidates = [profile for profile in profiles if is_candidate(profile.name, query)]
    if not candidates:
        return None
    provisional = max(candidates, key=lambda profile: profile.created_at)
    if not accepts_candidate(provisional.name, query):
        return None
    return provisional
