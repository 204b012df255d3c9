import json
import os
import tempfile
import unittest

from nutri.domain.IngredientReference import IngredientReferenceEntry, ReferenceTable
from nutri.infra.Reference_Repository import (
    ReferenceTableError,
    get_reference_table,
    load_reference_table,
    load_taste_profiles,
)
from nutri.logic.matching.matcher import IngredientMatcher
from nutri.utilities.constants import NUTRIENT_KEYS


class TestReferenceRepository(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def _write(self, name, content):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_bundled_table_loads(self):
        table = get_reference_table()
        self.assertGreater(len(table), 50)
        self.assertIn("flour", table)
        self.assertEqual(table.get("flour").calories, 364)
        self.assertIs(get_reference_table(), table)

    def test_bundled_table_names_are_unique_and_lowercase(self):
        names = get_reference_table().names()
        self.assertEqual(len(names), len(set(names)))
        self.assertTrue(all(n == n.lower() for n in names))

    def test_missing_file_raises(self):
        with self.assertRaises(ReferenceTableError):
            load_reference_table(os.path.join(self.tmpdir.name, "nope.json"))

    def test_invalid_json_raises(self):
        path = self._write("bad.json", "[{\"name\": ")
        with self.assertRaises(ReferenceTableError):
            load_reference_table(path)

    def test_non_list_raises(self):
        path = self._write("obj.json", json.dumps({"name": "flour"}))
        with self.assertRaises(ReferenceTableError):
            load_reference_table(path)

    def test_invalid_records_raise(self):
        cases = [
            [{"calories": 10}],
            [{"name": "salt", "sodium": -1}],
            [{"name": "salt"}, {"name": "Salt"}],
            [{"name": "salt", "sodium": "lots"}],
        ]
        for records in cases:
            with self.subTest(records=records):
                path = self._write("records.json", json.dumps(records))
                with self.assertRaises(ReferenceTableError):
                    load_reference_table(path)

    def test_custom_table_keeps_file_order(self):
        path = self._write("small.json", json.dumps([
            {"name": "Rice", "aliases": [" Basmati "], "calories": 130},
            {"name": "brown rice", "calories": 111},
        ]))
        table = load_reference_table(path)
        self.assertEqual(table.names(), ["rice", "brown rice"])
        self.assertEqual(table.get("rice").aliases, ("basmati",))
        self.assertIsNone(table.get("rice").protein)

    def test_missing_taste_profiles_are_empty(self):
        with self.assertLogs("nutri.infra.Reference_Repository", level="WARNING"):
            profiles = load_taste_profiles(os.path.join(self.tmpdir.name, "nope.json"))
        self.assertEqual(profiles, {})

    def test_taste_profile_keys_are_lowercased(self):
        path = self._write("taste.json", json.dumps({"Chili": ["spicy"], "bad": "x"}))
        self.assertEqual(load_taste_profiles(path), {"chili": ["spicy"]})


class TestReferenceEntries(unittest.TestCase):

    def test_entries_are_immutable(self):
        entry = IngredientReferenceEntry.from_dict({"name": "salt", "sodium": 38758})
        with self.assertRaises(AttributeError):
            entry.sodium = 0
        table = ReferenceTable([entry])
        with self.assertRaises(TypeError):
            table._by_name["pepper"] = entry

    def test_absent_nutrient_reads_as_zero(self):
        entry = IngredientReferenceEntry.from_dict({"name": "water"})
        self.assertEqual(entry.nutrient("calories"), 0.0)
        self.assertEqual(set(entry.to_dict()) - {"name", "aliases"}, set(NUTRIENT_KEYS))


class TestBundledMatches(unittest.TestCase):

    def setUp(self):
        self.matcher = IngredientMatcher(get_reference_table())

    def test_specific_entries_win(self):
        cases = {
            "large eggs": "egg",
            "eggplant, diced": "eggplant",
            "unsalted butter": "butter",
            "crunchy peanut butter": "peanut butter",
            "extra virgin olive oil": "olive oil",
            "veggie stock": "vegetable broth",
            "cooked brown rice": "brown rice",
            "basmati rice": "rice",
            "all-purpose flour": "flour",
        }
        for query, expected in cases.items():
            with self.subTest(query=query):
                self.assertEqual(self.matcher.match(query).name, expected)

    def test_unknown_ingredient(self):
        self.assertIsNone(self.matcher.match("unicorn tears"))
