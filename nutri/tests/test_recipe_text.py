import unittest

from nutri.domain.RecipeLine import RecipeLine
from nutri.logic.parsing.recipe_text import (
    parse_ingredient_line,
    parse_quantity,
    parse_recipe_text,
)

PANCAKES = """Fluffy Pancakes
Serves 4

Ingredients:
- 1 1/2 cups all-purpose flour
- 2 tbsp sugar
- 1 1/4 cups milk
- 1 egg
- 3 tbsp butter, melted
- 1 tsp baking powder

Instructions:
1. Whisk the dry ingredients.
2. Add milk, egg and butter.
3. Cook on a hot griddle.
"""

HEADERLESS = """Quick Rice
2 cups rice
1 tbsp butter
Salt
1. Rinse the rice.
2. Simmer for 15 minutes.
"""


class TestParseQuantity(unittest.TestCase):

    def test_forms(self):
        cases = {
            "2": 2.0, "0.5": 0.5, "3/4": 0.75, "1 1/2": 1.5,
            "½": 0.5, "1½": 1.5, "2 ¼": 2.25,
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                self.assertAlmostEqual(parse_quantity(text), expected)

    def test_invalid(self):
        for text in (None, "", "  ", "abc", "1/0"):
            with self.subTest(text=text):
                self.assertIsNone(parse_quantity(text))

    def test_malformed_fraction_is_not_a_quantity(self):
        self.assertIsNone(parse_quantity("1/2/3"))
        self.assertIsNone(parse_quantity("1 2/3/4"))

    def test_overflowing_number_is_not_a_quantity(self):
        self.assertIsNone(parse_quantity("9" * 320))
        self.assertIsNone(parse_quantity("9" * 320 + "/2"))
        line = parse_ingredient_line("9" * 320 + " g flour")
        self.assertIsNone(line.qty)
        self.assertFalse(line.is_countable())


class TestParseIngredientLine(unittest.TestCase):

    def test_qty_unit_item(self):
        self.assertEqual(parse_ingredient_line("1 1/2 cups all-purpose flour"),
                         RecipeLine(1.5, "cups", "all-purpose flour"))
        self.assertEqual(parse_ingredient_line("200g sugar"), RecipeLine(200, "g", "sugar"))
        self.assertEqual(parse_ingredient_line("2 tbsp. olive oil"), RecipeLine(2, "tbsp", "olive oil"))
        self.assertEqual(parse_ingredient_line("2 fl oz water"), RecipeLine(2, "fl oz", "water"))
        self.assertEqual(parse_ingredient_line("1 cup of rice"), RecipeLine(1, "cup", "rice"))

    def test_unit_needs_word_boundary(self):
        self.assertEqual(parse_ingredient_line("2 large eggs"), RecipeLine(2, "", "large eggs"))
        self.assertEqual(parse_ingredient_line("1 egg"), RecipeLine(1, "", "egg"))
        self.assertEqual(parse_ingredient_line("3 garlic cloves"), RecipeLine(3, "", "garlic cloves"))

    def test_vulgar_fraction(self):
        self.assertEqual(parse_ingredient_line("½ cup milk"), RecipeLine(0.5, "cup", "milk"))

    def test_no_quantity(self):
        self.assertEqual(parse_ingredient_line("- salt to taste"), RecipeLine(None, "", "salt to taste"))


class TestParseRecipeText(unittest.TestCase):

    def test_sections(self):
        parsed = parse_recipe_text(PANCAKES)
        self.assertEqual(parsed.title, "Fluffy Pancakes")
        self.assertEqual(parsed.servings, 4)
        self.assertEqual(len(parsed.ingredients), 6)
        self.assertEqual(parsed.ingredients[0], "1 1/2 cups all-purpose flour")
        self.assertEqual(parsed.steps, [
            "Whisk the dry ingredients.",
            "Add milk, egg and butter.",
            "Cook on a hot griddle.",
        ])
        self.assertEqual(parsed.ingredient_lines()[2], RecipeLine(1.25, "cups", "milk"))

    def test_without_headers(self):
        parsed = parse_recipe_text(HEADERLESS)
        self.assertEqual(parsed.title, "Quick Rice")
        self.assertEqual(parsed.servings, 1)
        self.assertEqual(parsed.ingredients, ["2 cups rice", "1 tbsp butter"])
        self.assertEqual(parsed.steps, ["Rinse the rice.", "Simmer for 15 minutes."])

    def test_decimal_quantity_is_not_a_step(self):
        parsed = parse_recipe_text("Stew\n2.5 kg potatoes\n1) Boil them.")
        self.assertEqual(parsed.ingredients, ["2.5 kg potatoes"])
        self.assertEqual(parsed.steps, ["Boil them."])

    def test_servings_in_title(self):
        self.assertEqual(parse_recipe_text("Chili (serves 6)\n1 onion").servings, 6)
        self.assertEqual(parse_recipe_text("Cookies\nMakes 24\n200g flour").servings, 24)

    def test_empty_text(self):
        parsed = parse_recipe_text("")
        self.assertEqual(parsed.to_dict(), {"title": "Untitled", "servings": 1, "ingredients": [], "steps": []})

    def test_header_first_line_is_not_title(self):
        parsed = parse_recipe_text("Ingredients:\n1 cup rice")
        self.assertEqual(parsed.title, "Untitled")
        self.assertEqual(parsed.ingredients, ["1 cup rice"])
