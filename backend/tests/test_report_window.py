import unittest
from datetime import date
from unittest.mock import patch

from utils.report_window import ALL_TIME_START, ReportWindow, window_bounds


class ReportWindowTestCase(unittest.TestCase):
    today = date(2024, 3, 31)

    def test_seven_day(self):
        self.assertEqual(window_bounds(ReportWindow.SEVEN_DAY, self.today), (date(2024, 3, 24), self.today))

    def test_thirty_day(self):
        self.assertEqual(window_bounds(ReportWindow.THIRTY_DAY, self.today), (date(2024, 3, 1), self.today))

    def test_all_time_uses_far_past_lower_bound(self):
        start, end = window_bounds(ReportWindow.ALL_TIME, self.today)
        self.assertEqual(start, ALL_TIME_START)
        self.assertEqual(end, self.today)
        self.assertLess(start, date(1900, 1, 1))

    def test_today_is_evaluated_per_call(self):
        with patch("utils.report_window.farm_today", return_value=date(2025, 1, 10)):
            self.assertEqual(window_bounds(ReportWindow.SEVEN_DAY), (date(2025, 1, 3), date(2025, 1, 10)))
        with patch("utils.report_window.farm_today", return_value=date(2025, 1, 11)):
            self.assertEqual(window_bounds(ReportWindow.SEVEN_DAY), (date(2025, 1, 4), date(2025, 1, 11)))

    def test_window_values(self):
        self.assertEqual(ReportWindow("seven_day"), ReportWindow.SEVEN_DAY)
        with self.assertRaises(ValueError):
            ReportWindow("quarter")
