import unittest
from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace

from utils.aggregation import bucket_by_date, compute_profit, grade_distribution, sum_field


class SumFieldTestCase(unittest.TestCase):
    def test_empty_rows_sum_to_zero(self):
        self.assertEqual(sum_field([], "count"), 0)

    def test_sums_objects_and_mappings(self):
        rows = [SimpleNamespace(cost=Decimal("500.00")), {"cost": Decimal("200.50")}, {"cost": None}]
        self.assertEqual(sum_field(rows, "cost"), Decimal("700.50"))

    def test_integer_counts(self):
        rows = [{"count": n} for n in (850, 150, 3, 0)]
        self.assertEqual(sum_field(rows, "count"), 1003)


class BucketByDateTestCase(unittest.TestCase):
    def test_same_day_entries_are_summed(self):
        rows = [
            {"date": date(2024, 3, 1), "count": 850},
            {"date": date(2024, 3, 1), "count": 150},
        ]
        self.assertEqual(bucket_by_date(rows), [{"date": date(2024, 3, 1), "count": 1000}])

    def test_buckets_ascending_without_duplicates(self):
        rows = [
            {"date": date(2024, 3, 3), "count": 10},
            {"date": date(2024, 3, 1), "count": 20},
            {"date": date(2024, 3, 2), "count": 30},
            {"date": date(2024, 3, 1), "count": 5},
        ]
        buckets = bucket_by_date(rows)
        days = [b["date"] for b in buckets]
        self.assertEqual(days, [date(2024, 3, 1), date(2024, 3, 2), date(2024, 3, 3)])
        self.assertEqual(len(days), len(set(days)))
        self.assertEqual(sum(b["count"] for b in buckets), sum_field(rows, "count"))

    def test_time_of_day_is_discarded(self):
        rows = [
            {"date": datetime(2024, 3, 1, 6, 30), "count": 100},
            {"date": "2024-03-01T18:45:00", "count": 40},
            {"date": "2024-03-02", "count": 7},
        ]
        self.assertEqual(
            bucket_by_date(rows),
            [{"date": date(2024, 3, 1), "count": 140}, {"date": date(2024, 3, 2), "count": 7}],
        )

    def test_empty_input(self):
        self.assertEqual(bucket_by_date([]), [])


class ProfitTestCase(unittest.TestCase):
    def test_profit_example(self):
        sales = [{"total": 1000}, {"total": 2000}]
        feed = [{"cost": 500}]
        health = [{"cost": 200}]
        profit = compute_profit(sum_field(sales, "total"), sum_field(feed, "cost"), sum_field(health, "cost"))
        self.assertEqual(profit, 2300)

    def test_loss_is_negative(self):
        self.assertEqual(compute_profit(Decimal("100"), Decimal("150"), Decimal("0")), Decimal("-50"))


class GradeDistributionTestCase(unittest.TestCase):
    def test_counts_per_grade_in_fixed_order(self):
        rows = [
            {"quality": "B", "count": 30},
            {"quality": "A", "count": 60},
            {"quality": "A", "count": 5},
        ]
        self.assertEqual(
            grade_distribution(rows),
            [{"grade": "A", "count": 65}, {"grade": "B", "count": 30}, {"grade": "C", "count": 0}],
        )

    def test_accepts_enum_grades(self):
        from models.egg_production import EggGrade

        rows = [SimpleNamespace(quality=EggGrade.C, count=12)]
        self.assertEqual(grade_distribution(rows)[2], {"grade": "C", "count": 12})
