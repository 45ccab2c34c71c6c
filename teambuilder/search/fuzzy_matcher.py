"""Tiered free-text search over two-locale candidate names.

Candidates are ranked in strictly decreasing priority:

1. exact: either name equals the query
2. prefix: either name starts with the query
3. substring: either name contains the query
4. fuzzy: either name is within a small edit distance of the query

The fuzzy tier is only computed when the cheap tiers found few results and
the query is long enough for edit distances to be meaningful.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from absl import logging

from teambuilder.search.levenshtein import get_levenshtein_distance
from teambuilder.search.search_candidate import SearchCandidate
from teambuilder.search.utils import normalize_search_text

DEFAULT_LIMIT = 6


@dataclass(frozen=True)
class FuzzyMatcherConfig:
    """Tunables for search.

    Attributes:
        limit: Default maximum number of results
        fuzzy_trigger_below: Fuzzy tier runs only when tiers 1-3 found fewer results
        fuzzy_min_query_length: Fuzzy tier runs only for queries at least this long
        max_edit_distance: Largest edit distance accepted by the fuzzy tier
        fold_accents: Compare with diacritics removed ("evoli" matches "Évoli")
    """

    limit: int = DEFAULT_LIMIT
    fuzzy_trigger_below: int = 5
    fuzzy_min_query_length: int = 3
    max_edit_distance: int = 2
    fold_accents: bool = False


DEFAULT_CONFIG = FuzzyMatcherConfig()


def _candidate_names(
    candidate: SearchCandidate, fold_accents: bool
) -> Tuple[str, str]:
    return (
        normalize_search_text(candidate.name or "", accent_insensitive=fold_accents),
        normalize_search_text(
            candidate.secondary_name or "", accent_insensitive=fold_accents
        ),
    )


def search(
    query: Optional[str],
    candidates: Iterable[SearchCandidate],
    limit: Optional[int] = None,
    config: FuzzyMatcherConfig = DEFAULT_CONFIG,
) -> List[SearchCandidate]:
    """Rank candidates against a free-text query.

    Args:
        query: Raw user input in either locale
        candidates: Candidates in their preferred display order
        limit: Maximum number of results (defaults to config.limit)
        config: Search tunables

    Returns:
        At most `limit` candidates: exact, prefix and substring matches in
        input order, followed by fuzzy matches by ascending edit distance.
        Never raises for malformed input; returns an empty list instead.
    """
    if limit is None:
        limit = config.limit
    if not isinstance(query, str) or limit <= 0:
        return []

    normalized_query = normalize_search_text(
        query, accent_insensitive=config.fold_accents
    )
    if not normalized_query:
        return []

    exact: List[SearchCandidate] = []
    prefix: List[SearchCandidate] = []
    substring: List[SearchCandidate] = []
    unmatched: List[Tuple[SearchCandidate, Tuple[str, str]]] = []
    seen_ids: Set[int] = set()

    for candidate in candidates or []:
        if candidate.id in seen_ids:
            continue
        seen_ids.add(candidate.id)

        names = _candidate_names(candidate, config.fold_accents)
        if normalized_query in names:
            exact.append(candidate)
        elif any(name.startswith(normalized_query) for name in names):
            prefix.append(candidate)
        elif any(normalized_query in name for name in names):
            substring.append(candidate)
        else:
            unmatched.append((candidate, names))

    results = exact + prefix + substring
    logging.debug(
        "Search %r: %d exact, %d prefix, %d substring",
        normalized_query,
        len(exact),
        len(prefix),
        len(substring),
    )

    if (
        len(results) < config.fuzzy_trigger_below
        and len(normalized_query) >= config.fuzzy_min_query_length
    ):
        fuzzy = _fuzzy_matches(normalized_query, unmatched, config.max_edit_distance)
        logging.debug("Search %r: %d fuzzy", normalized_query, len(fuzzy))
        results.extend(fuzzy)

    return results[:limit]


def _fuzzy_matches(
    normalized_query: str,
    unmatched: Sequence[Tuple[SearchCandidate, Tuple[str, str]]],
    max_edit_distance: int,
) -> List[SearchCandidate]:
    scored: List[Tuple[int, SearchCandidate]] = []
    for candidate, names in unmatched:
        score = min(get_levenshtein_distance(normalized_query, name) for name in names)
        if score <= max_edit_distance:
            scored.append((score, candidate))

    # Stable: equal scores keep input order.
    scored.sort(key=lambda entry: entry[0])
    return [candidate for _, candidate in scored]


class FuzzyMatcher:
    """Search session over a fixed, read-only candidate list.

    Typical usage:
        matcher = FuzzyMatcher(GameData().get_search_candidates())
        suggestions = matcher.search("pikach")
    """

    def __init__(
        self,
        candidates: Iterable[SearchCandidate],
        config: FuzzyMatcherConfig = DEFAULT_CONFIG,
    ) -> None:
        self._candidates: Tuple[SearchCandidate, ...] = tuple(candidates)
        self.config = config

    @property
    def candidates(self) -> Tuple[SearchCandidate, ...]:
        return self._candidates

    def search(
        self, query: Optional[str], limit: Optional[int] = None
    ) -> List[SearchCandidate]:
        return search(query, self._candidates, limit=limit, config=self.config)
