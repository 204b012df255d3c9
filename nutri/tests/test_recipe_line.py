import unittest

from nutri.domain.RecipeLine import RecipeLine


class TestRecipeLine(unittest.TestCase):

    def test_from_dict_numeric_string(self):
        line = RecipeLine.from_dict({"qty": " 2.5 ", "unit": "cup", "item": "milk", "extra": 1})
        self.assertEqual(line, RecipeLine(2.5, "cup", "milk"))

    def test_unset_quantities(self):
        for qty in (None, "", "   ", "abc", "nan", "inf", True):
            with self.subTest(qty=qty):
                self.assertIsNone(RecipeLine.from_dict({"qty": qty, "item": "flour"}).qty)

    def test_countable(self):
        self.assertTrue(RecipeLine(0, "g", "salt").is_countable())
        self.assertFalse(RecipeLine(None, "g", "salt").is_countable())
        self.assertFalse(RecipeLine(5, "g", "  ").is_countable())

    def test_missing_fields_default_to_empty(self):
        line = RecipeLine.from_dict({"qty": 1, "unit": None})
        self.assertEqual(line.unit, "")
        self.assertEqual(line.item, "")
        self.assertEqual(RecipeLine.from_dict(None), RecipeLine())

    def test_to_dict_and_str(self):
        line = RecipeLine(1.5, "cups", "flour")
        self.assertEqual(line.to_dict(), {"qty": 1.5, "unit": "cups", "item": "flour"})
        self.assertEqual(str(line), "1.5 cups flour")
        self.assertEqual(str(RecipeLine(None, "", "salt")), "- salt")
