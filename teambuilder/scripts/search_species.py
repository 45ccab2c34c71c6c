"""Search species by English or French name, tolerating typos.

Example:
    python -m teambuilder.scripts.search_species --query=pikachou
"""

from typing import List

from absl import app, flags, logging

from teambuilder.game.data.game_data import GameData
from teambuilder.search.fuzzy_matcher import (
    DEFAULT_LIMIT,
    FuzzyMatcher,
    FuzzyMatcherConfig,
)

FLAGS = flags.FLAGS

flags.DEFINE_string("query", None, "Species name to search for (English or French)")
flags.DEFINE_integer("limit", DEFAULT_LIMIT, "Maximum number of suggestions")
flags.DEFINE_bool(
    "fold_accents",
    False,
    "Ignore diacritics when matching (e.g., 'evoli' matches 'Évoli')",
)


def format_suggestions(
    query: str, game_data: GameData, matcher: FuzzyMatcher, limit: int
) -> List[str]:
    """Format search results as one line per suggested species.

    Args:
        query: Raw user query
        game_data: Source of species types
        matcher: Search session over the species candidates
        limit: Maximum number of suggestions

    Returns:
        Lines of the form "#025 Pikachu / Pikachu [electric]"
    """
    lines = []
    for candidate in matcher.search(query, limit=limit):
        species = game_data.get_species_by_id(candidate.id)
        lines.append(
            f"#{candidate.id:03d} {candidate.name} / {candidate.secondary_name} "
            f"[{'/'.join(species.types)}]"
        )
    return lines


def main(argv: List[str]) -> int:
    del argv
    game_data = GameData()
    matcher = FuzzyMatcher(
        game_data.get_search_candidates(),
        FuzzyMatcherConfig(limit=FLAGS.limit, fold_accents=FLAGS.fold_accents),
    )
    lines = format_suggestions(FLAGS.query, game_data, matcher, FLAGS.limit)
    if not lines:
        logging.warning("No species matched %r", FLAGS.query)
        return 1
    for line in lines:
        print(line)
    return 0


def run() -> None:
    flags.mark_flag_as_required("query")
    app.run(main)


if __name__ == "__main__":
    run()
