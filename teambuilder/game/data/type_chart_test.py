import json
import unittest
from pathlib import Path

from absl.testing import parameterized

from teambuilder.game.data.type_chart import (
    TypeChart,
    compute_defensive_profile,
    parse_type_set,
)
from teambuilder.game.exceptions import (
    EmptyTypeSetError,
    InvalidTypeChartError,
    InvalidTypeError,
    TooManyTypesError,
    TypeSetError,
)
from teambuilder.game.schema.enums import ALL_TYPES, PokemonType

SINGLE_TYPE_MULTIPLIERS = {0.0, 0.25, 0.5, 1.0, 2.0}
DUAL_TYPE_MULTIPLIERS = {0.0, 0.0625, 0.125, 0.25, 0.5, 1.0, 2.0, 4.0}


def load_chart() -> TypeChart:
    data_dir = Path(__file__).resolve().parent
    with open(data_dir / "type_chart.json", "r", encoding="utf-8") as f:
        data = json.load(f)
    return TypeChart.from_dict(data[0])


class TypeChartTest(parameterized.TestCase):
    def setUp(self) -> None:
        self.type_chart = load_chart()

    def test_super_effective_types(self) -> None:
        self.assertEqual(self.type_chart.get_effectiveness("fire", "grass"), 2.0)
        self.assertEqual(self.type_chart.get_effectiveness("water", "fire"), 2.0)
        self.assertEqual(self.type_chart.get_effectiveness("grass", "water"), 2.0)
        self.assertEqual(self.type_chart.get_effectiveness("ghost", "ghost"), 2.0)
        self.assertEqual(self.type_chart.get_effectiveness("ice", "grass"), 2.0)

    def test_not_very_effective_types(self) -> None:
        self.assertEqual(self.type_chart.get_effectiveness("fire", "water"), 0.5)
        self.assertEqual(self.type_chart.get_effectiveness("fire", "fire"), 0.5)
        self.assertEqual(self.type_chart.get_effectiveness("water", "grass"), 0.5)

    def test_immune_types(self) -> None:
        self.assertEqual(self.type_chart.get_effectiveness("ghost", "normal"), 0.0)
        self.assertEqual(self.type_chart.get_effectiveness("normal", "ghost"), 0.0)
        self.assertEqual(self.type_chart.get_effectiveness("ground", "flying"), 0.0)
        self.assertEqual(self.type_chart.get_effectiveness("dragon", "fairy"), 0.0)

    def test_missing_pair_is_neutral(self) -> None:
        self.assertEqual(self.type_chart.get_effectiveness("normal", "normal"), 1.0)
        self.assertEqual(self.type_chart.get_effectiveness("water", "steel"), 1.0)

    def test_case_insensitive(self) -> None:
        self.assertEqual(self.type_chart.get_effectiveness("FIRE", "grass"), 2.0)
        self.assertEqual(self.type_chart.get_effectiveness("fire", "GRASS"), 2.0)
        self.assertEqual(self.type_chart.get_effectiveness("grasS", "FIre"), 0.5)

    def test_accepts_enum_labels(self) -> None:
        self.assertEqual(
            self.type_chart.get_effectiveness(PokemonType.ELECTRIC, PokemonType.WATER),
            2.0,
        )

    def test_unknown_attacking_type(self) -> None:
        with self.assertRaises(InvalidTypeError) as context:
            self.type_chart.get_effectiveness("unknown", "fire")
        self.assertEqual(context.exception.label, "unknown")

    def test_unknown_defending_type(self) -> None:
        with self.assertRaises(InvalidTypeError) as context:
            self.type_chart.get_effectiveness("fire", "stellar")
        self.assertIn("stellar", str(context.exception))

    def test_chart_is_read_only(self) -> None:
        with self.assertRaises(TypeError):
            self.type_chart.effectiveness["fire"]["grass"] = 0.5  # type: ignore[index]


class DefensiveProfileTest(parameterized.TestCase):
    def setUp(self) -> None:
        self.type_chart = load_chart()

    def test_profile_covers_every_attacking_type(self) -> None:
        profile = self.type_chart.compute_defensive_profile(["water"])
        self.assertEqual(list(profile.keys()), ALL_TYPES)

    @parameterized.parameters(*ALL_TYPES)
    def test_single_type_matches_table(self, defending: str) -> None:
        profile = self.type_chart.compute_defensive_profile([defending])
        for attacking in ALL_TYPES:
            expected = self.type_chart.effectiveness.get(attacking, {}).get(
                defending, 1.0
            )
            self.assertEqual(profile[attacking], expected)
            self.assertIn(profile[attacking], SINGLE_TYPE_MULTIPLIERS)

    def test_dual_type_is_product_of_single_types(self) -> None:
        for first in ALL_TYPES:
            for second in ALL_TYPES:
                if first == second:
                    continue
                profile = self.type_chart.compute_defensive_profile([first, second])
                first_profile = self.type_chart.compute_defensive_profile([first])
                second_profile = self.type_chart.compute_defensive_profile([second])
                for attacking in ALL_TYPES:
                    self.assertEqual(
                        profile[attacking],
                        first_profile[attacking] * second_profile[attacking],
                    )
                    self.assertIn(profile[attacking], DUAL_TYPE_MULTIPLIERS)

    def test_order_does_not_matter(self) -> None:
        self.assertEqual(
            self.type_chart.compute_defensive_profile(["fire", "flying"]),
            self.type_chart.compute_defensive_profile(["flying", "fire"]),
        )

    def test_ghost_poison(self) -> None:
        profile = self.type_chart.compute_defensive_profile(["Ghost", "Poison"])
        self.assertEqual(profile["normal"], 0.0)
        self.assertEqual(profile["fighting"], 0.0)
        self.assertEqual(profile["poison"], 0.25)
        self.assertEqual(profile["bug"], 0.25)
        self.assertEqual(profile["ground"], 2.0)
        self.assertEqual(profile["psychic"], 2.0)
        self.assertEqual(profile["ghost"], 2.0)
        self.assertEqual(profile["dark"], 2.0)
        self.assertEqual(profile["fairy"], 0.5)
        self.assertEqual(profile["water"], 1.0)

    def test_electric_steel(self) -> None:
        profile = self.type_chart.compute_defensive_profile(["electric", "steel"])
        self.assertEqual(profile["ground"], 4.0)
        self.assertEqual(profile["flying"], 0.25)
        self.assertEqual(profile["steel"], 0.25)
        self.assertEqual(profile["poison"], 0.0)
        self.assertEqual(profile["fire"], 2.0)
        self.assertEqual(profile["water"], 1.0)

    def test_fire_flying_rock_weakness(self) -> None:
        profile = self.type_chart.compute_defensive_profile(["fire", "flying"])
        self.assertEqual(profile["rock"], 4.0)
        self.assertEqual(profile["ground"], 0.0)
        self.assertEqual(profile["grass"], 0.25)

    def test_custom_table_defaults_missing_pairs(self) -> None:
        chart = TypeChart.from_dict(
            {"effectiveness": {"water": {"fire": 0.5}, "grass": {"fire": 2}}}
        )
        profile = chart.compute_defensive_profile(["fire"])
        self.assertEqual(profile["water"], 0.5)
        self.assertEqual(profile["grass"], 2.0)
        self.assertEqual(profile["fire"], 1.0)

    def test_duplicate_labels_collapse(self) -> None:
        self.assertEqual(
            self.type_chart.compute_defensive_profile(["fire", "Fire"]),
            self.type_chart.compute_defensive_profile(["fire"]),
        )

    def test_module_level_function(self) -> None:
        self.assertEqual(
            compute_defensive_profile(["grass"], self.type_chart),
            self.type_chart.compute_defensive_profile(["grass"]),
        )

    def test_attack_multiplier(self) -> None:
        self.assertEqual(
            self.type_chart.get_attack_multiplier("ice", ["dragon", "flying"]), 4.0
        )
        self.assertEqual(
            self.type_chart.get_attack_multiplier("electric", ["ground"]), 0.0
        )

    @parameterized.parameters(
        (["unknown"],),
        (["fire", "plasma"],),
        (["fire", ""],),
        ([None],),
        ([42],),
    )
    def test_invalid_type_rejected(self, types) -> None:
        with self.assertRaises(InvalidTypeError):
            self.type_chart.compute_defensive_profile(types)

    def test_empty_type_set_rejected(self) -> None:
        with self.assertRaises(EmptyTypeSetError):
            self.type_chart.compute_defensive_profile([])

    def test_too_many_types_rejected(self) -> None:
        with self.assertRaises(TooManyTypesError) as context:
            self.type_chart.compute_defensive_profile(["fire", "water", "grass"])
        self.assertEqual(context.exception.types, ["fire", "water", "grass"])

    def test_invalid_label_reported_before_size(self) -> None:
        with self.assertRaises(InvalidTypeError):
            parse_type_set(["fire", "water", "grass", "plasma"])

    def test_type_set_errors_are_value_errors(self) -> None:
        self.assertTrue(issubclass(InvalidTypeError, TypeSetError))
        self.assertTrue(issubclass(EmptyTypeSetError, ValueError))
        self.assertTrue(issubclass(TooManyTypesError, ValueError))


class TypeChartValidationTest(parameterized.TestCase):
    def test_unknown_attacking_type_in_chart(self) -> None:
        with self.assertRaises(InvalidTypeChartError):
            TypeChart.from_dict({"effectiveness": {"sound": {"fire": 2.0}}})

    def test_unknown_defending_type_in_chart(self) -> None:
        with self.assertRaises(InvalidTypeChartError):
            TypeChart.from_dict({"effectiveness": {"fire": {"sound": 2.0}}})

    @parameterized.parameters(3.0, 0.75, -1.0)
    def test_invalid_multiplier(self, multiplier: float) -> None:
        with self.assertRaises(InvalidTypeChartError):
            TypeChart.from_dict({"effectiveness": {"fire": {"grass": multiplier}}})

    def test_missing_effectiveness(self) -> None:
        with self.assertRaises(InvalidTypeChartError):
            TypeChart.from_dict({"name": "empty"})

    def test_quarter_multiplier_allowed(self) -> None:
        chart = TypeChart.from_dict({"effectiveness": {"fire": {"grass": 0.25}}})
        self.assertEqual(chart.get_effectiveness("fire", "grass"), 0.25)

    def test_labels_lower_cased(self) -> None:
        chart = TypeChart.from_dict({"name": "caps", "effectiveness": {"Fire": {"Grass": 2}}})
        self.assertEqual(chart.name, "caps")
        self.assertEqual(chart.get_effectiveness("fire", "grass"), 2.0)

    def test_constructor_copies_caller_table(self) -> None:
        table = {"fire": {"grass": 2.0}}
        chart = TypeChart(effectiveness=table)
        table["fire"]["grass"] = 3.0
        table["water"] = {"fire": 2.0}
        self.assertEqual(chart.get_effectiveness("fire", "grass"), 2.0)
        self.assertEqual(chart.get_effectiveness("water", "fire"), 1.0)

    def test_table_is_read_only(self) -> None:
        chart = TypeChart(effectiveness={"Fire": {"Grass": 2}})
        self.assertEqual(chart.get_effectiveness("fire", "grass"), 2.0)
        with self.assertRaises(TypeError):
            chart.effectiveness["fire"]["grass"] = 3.0  # type: ignore[index]
        with self.assertRaises(TypeError):
            chart.effectiveness["water"] = {}  # type: ignore[index]

    def test_constructor_validates_multipliers(self) -> None:
        with self.assertRaises(InvalidTypeChartError):
            TypeChart(effectiveness={"fire": {"grass": 3.0}})


if __name__ == "__main__":
    unittest.main()
