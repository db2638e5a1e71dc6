# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import datetime, timedelta, timezone

from pydantic import ValidationError

from dailydiet.meals.metrics import best_on_diet_sequence
from dailydiet.meals.models import MealWriteRequest


class TestBestOnDietSequence(unittest.TestCase):
    def test_documented_example(self) -> None:
        self.assertEqual(best_on_diet_sequence([True, True, False, True]), 2)

    def test_empty_and_all_off(self) -> None:
        self.assertEqual(best_on_diet_sequence([]), 0)
        self.assertEqual(best_on_diet_sequence([False, False]), 0)

    def test_longest_run_wins_regardless_of_position(self) -> None:
        flags = [True, False, True, True, True, False, True, True]
        self.assertEqual(best_on_diet_sequence(flags), 3)
        self.assertEqual(best_on_diet_sequence(reversed(flags)), 3)
        self.assertEqual(best_on_diet_sequence([True] * 5), 5)


class TestMealWriteRequest(unittest.TestCase):
    def _parse(self, date: object) -> MealWriteRequest:
        return MealWriteRequest.model_validate(
            {"name": "Soup", "description": "", "isOnTheDiet": True, "date": date}
        )

    def test_iso_datetime_with_offset(self) -> None:
        req = self._parse("2024-03-01T12:00:00+02:00")
        self.assertEqual(req.date, datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc))
        self.assertEqual(req.date_millis(), 1709287200000)

    def test_naive_values_are_utc(self) -> None:
        self.assertEqual(self._parse("2024-03-01T00:00:00").date_millis(), 1709251200000)
        self.assertEqual(self._parse("2024-03-01").date_millis(), 1709251200000)

    def test_numbers_are_epoch_millis(self) -> None:
        self.assertEqual(self._parse(1709251200123).date_millis(), 1709251200123)
        self.assertEqual(self._parse(0).date, datetime(1970, 1, 1, tzinfo=timezone.utc))
        self.assertEqual(self._parse(-86_400_000).date, datetime(1970, 1, 1, tzinfo=timezone.utc) - timedelta(days=1))

    def test_rejects_bad_dates(self) -> None:
        for value in ("yesterday", True, None, 10 ** 20, "86400000", " 1.5e3 "):
            with self.assertRaises(ValidationError, msg=repr(value)):
                self._parse(value)

    def test_on_diet_flag_is_strict(self) -> None:
        for flag in ("true", 1, "yes"):
            with self.assertRaises(ValidationError, msg=repr(flag)):
                MealWriteRequest.model_validate(
                    {"name": "Soup", "description": "", "isOnTheDiet": flag, "date": "2024-01-01"}
                )

    def test_text_fields_have_no_upper_bound(self) -> None:
        req = MealWriteRequest.model_validate(
            {"name": "n" * 1000, "description": "d" * 10000, "isOnTheDiet": True, "date": "2024-01-01"}
        )
        self.assertEqual(len(req.description), 10000)

    def test_name_must_not_be_empty(self) -> None:
        with self.assertRaises(ValidationError):
            MealWriteRequest.model_validate(
                {"name": "", "description": "", "isOnTheDiet": False, "date": "2024-01-01"}
            )


if __name__ == "__main__":
    unittest.main()
