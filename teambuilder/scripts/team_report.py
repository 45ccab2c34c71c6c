"""Print the defensive type report of a team.

Example:
    python -m teambuilder.scripts.team_report \
        --species=Dracaufeu,Blastoise,Venusaur,Pikachu
"""

from typing import List, Optional, Sequence

from absl import app, flags, logging

from teambuilder.game.data.game_data import GameData
from teambuilder.game.exceptions import SpeciesNotFoundError, TeamError
from teambuilder.search.fuzzy_matcher import search
from teambuilder.team.team_report import TeamReportConfig
from teambuilder.team.team_roster import TeamRoster

FLAGS = flags.FLAGS

flags.DEFINE_list("species", [], "Team members by English or French name")
flags.DEFINE_float(
    "weakness_threshold", 2.0, "Multiplier at or above which a member is weak"
)
flags.DEFINE_float(
    "resistance_threshold", 0.5, "Multiplier at or below which a member resists"
)
flags.DEFINE_integer(
    "shared_min_members", 2, "Members needed for a weakness/resistance to be shared"
)
flags.DEFINE_float(
    "shared_min_fraction",
    None,
    "Fraction of the team that also makes a weakness/resistance shared (e.g., 0.5)",
)


def build_roster(names: Sequence[str], game_data: GameData) -> TeamRoster:
    """Resolve species names into a roster.

    Names that are not an exact species fall back to the best search
    suggestion. Unknown names, duplicates and members beyond the team size
    are skipped with a warning.

    Args:
        names: Species names as typed by the user
        game_data: Source of species and search candidates

    Returns:
        Roster of the resolved species
    """
    roster = TeamRoster()
    candidates = game_data.get_search_candidates()
    for name in names:
        try:
            species = game_data.get_species(name)
        except SpeciesNotFoundError:
            suggestions = search(name, candidates, limit=1)
            if not suggestions:
                logging.warning("Unknown species %r, skipping", name)
                continue
            species = game_data.get_species_by_id(suggestions[0].id)
            logging.info("Resolved %r to %s", name, species.name)
        try:
            roster = roster.add(species)
        except TeamError as e:
            logging.warning("Skipping %s: %s", species.name, e)
    return roster


def report_config_from_flags() -> TeamReportConfig:
    return TeamReportConfig(
        weakness_threshold=FLAGS.weakness_threshold,
        resistance_threshold=FLAGS.resistance_threshold,
        shared_min_members=FLAGS.shared_min_members,
        shared_min_fraction=FLAGS.shared_min_fraction,
    )


def main(argv: List[str]) -> Optional[int]:
    del argv
    game_data = GameData()
    roster = build_roster(FLAGS.species, game_data)
    if len(roster) == 0:
        logging.error("No valid species given; use --species=Name1,Name2")
        return 1

    report = roster.type_report(game_data.get_type_chart(), report_config_from_flags())
    print(roster)
    print(report)
    return 0


def run() -> None:
    app.run(main)


if __name__ == "__main__":
    run()
