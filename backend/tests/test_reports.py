import unittest
from decimal import Decimal
from io import BytesIO

from openpyxl import load_workbook

from tests.api_case import ApiTestCase


class ReportSummaryTestCase(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.coop = self.create_coop()
        self.chicken = self.create_chicken(self.coop["id"])

    def summary(self, window="thirty_day", headers=None):
        response = self.client.get("/reports/summary", params={"window": window}, headers=headers or self.headers)
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()

    def test_empty_farm_reports_zeroes(self):
        body = self.summary()
        self.assertEqual(body["total_eggs"], 0)
        self.assertEqual(Decimal(body["profit"]), Decimal("0"))
        self.assertEqual(body["egg_production"], [])
        self.assertEqual([g["count"] for g in body["eggs_by_grade"]], [0, 0, 0])

    def test_profit_counts_only_completed_sales_in_window(self):
        self.create_sale(500, "2.00", day=self.days_ago(1))
        self.create_sale(1000, "2.00", day=self.days_ago(3))
        self.create_sale(400, "2.50", status="pending", day=self.days_ago(1))
        self.create_sale(100, "9.00", day=self.days_ago(45))
        self.create_feed(self.coop["id"], "500.00", day=self.days_ago(2))
        self.create_feed(self.coop["id"], "80.00", day=self.days_ago(60))
        self.create_health(self.chicken["id"], "200.00", day=self.days_ago(5))

        body = self.summary("thirty_day")
        self.assertEqual(Decimal(body["total_sales"]), Decimal("3000"))
        self.assertEqual(Decimal(body["total_feed_cost"]), Decimal("500"))
        self.assertEqual(Decimal(body["total_health_cost"]), Decimal("200"))
        self.assertEqual(Decimal(body["total_cost"]), Decimal("700"))
        self.assertEqual(Decimal(body["profit"]), Decimal("2300"))

        all_time = self.summary("all_time")
        self.assertEqual(Decimal(all_time["total_sales"]), Decimal("3900"))
        self.assertEqual(Decimal(all_time["profit"]), Decimal("3120"))

    def test_loss_is_negative(self):
        self.create_feed(self.coop["id"], "150.00", day=self.days_ago(1))
        self.assertEqual(Decimal(self.summary("seven_day")["profit"]), Decimal("-150"))

    def test_window_start_is_inclusive(self):
        self.create_eggs(self.chicken["id"], 7, day=self.days_ago(7))
        self.create_eggs(self.chicken["id"], 8, day=self.days_ago(8))
        self.create_eggs(self.chicken["id"], 30, day=self.days_ago(30))
        self.create_eggs(self.chicken["id"], 31, day=self.days_ago(31))
        self.create_sale(10, "1.00", day=self.days_ago(7))
        self.create_sale(20, "1.00", day=self.days_ago(8))

        seven = self.summary("seven_day")
        self.assertEqual(seven["total_eggs"], 7)
        self.assertEqual(Decimal(seven["total_sales"]), Decimal("10"))

        thirty = self.summary("thirty_day")
        self.assertEqual(thirty["total_eggs"], 7 + 8 + 30)
        self.assertEqual(Decimal(thirty["total_sales"]), Decimal("30"))

    def test_future_rows_are_outside_every_window(self):
        tomorrow = self.days_ago(-1)
        self.create_eggs(self.chicken["id"], 50, day=tomorrow)
        for window in ("seven_day", "thirty_day", "all_time"):
            with self.subTest(window=window):
                self.assertEqual(self.summary(window)["total_eggs"], 0)

    def test_redated_row_moves_between_windows(self):
        sale = self.create_sale(100, "2.00", day=self.days_ago(40))
        self.assertEqual(Decimal(self.summary("thirty_day")["total_sales"]), Decimal("0"))
        response = self.client.patch(f"/sales/{sale['id']}", json={"date": self.days_ago(3)}, headers=self.headers)
        self.assertEqual(response.status_code, 200, response.text)
        self.assertEqual(Decimal(self.summary("thirty_day")["total_sales"]), Decimal("200"))

    def test_production_series_and_grades(self):
        self.create_eggs(self.chicken["id"], 850, day=self.days_ago(1), quality="A")
        self.create_eggs(self.chicken["id"], 150, day=self.days_ago(1), quality="B")
        self.create_eggs(self.chicken["id"], 40, day=self.days_ago(3), quality="C")
        self.create_eggs(self.chicken["id"], 999, day=self.days_ago(10))

        body = self.summary("seven_day")
        self.assertEqual(body["total_eggs"], 1040)
        self.assertEqual(
            body["egg_production"],
            [{"date": self.days_ago(3), "count": 40}, {"date": self.days_ago(1), "count": 1000}],
        )
        self.assertEqual(
            body["eggs_by_grade"],
            [{"grade": "A", "count": 850}, {"grade": "B", "count": 150}, {"grade": "C", "count": 40}],
        )
        self.assertEqual(body["start_date"], self.days_ago(7))
        self.assertEqual(body["end_date"], self.today.isoformat())

    def test_reports_are_per_user(self):
        self.create_sale(100, "1.00")
        self.assertEqual(Decimal(self.summary(headers=self.other_headers)["total_sales"]), Decimal("0"))

    def test_unknown_window_is_rejected(self):
        response = self.client.get("/reports/summary", params={"window": "quarter"}, headers=self.headers)
        self.assertEqual(response.status_code, 422)


class ReportExportTestCase(ApiTestCase):
    def test_export_workbook(self):
        coop = self.create_coop()
        chicken = self.create_chicken(coop["id"])
        self.create_eggs(chicken["id"], 300, day=self.days_ago(1))
        self.create_sale(300, "2.00", day=self.days_ago(1))

        response = self.client.get("/reports/export", params={"window": "seven_day"}, headers=self.headers)
        self.assertEqual(response.status_code, 200)
        self.assertIn("spreadsheetml", response.headers["content-type"])
        self.assertIn(f"farm_report_seven_day_{self.today.isoformat()}.xlsx", response.headers["content-disposition"])

        workbook = load_workbook(BytesIO(response.content))
        self.assertEqual(workbook.sheetnames, ["Summary", "Egg Production", "Grades"])
        summary_rows = {row[0]: row[1] for row in workbook["Summary"].iter_rows(values_only=True) if row[0]}
        self.assertEqual(summary_rows["Total eggs"], 300)
        self.assertEqual(summary_rows["Profit / loss"], 600)


if __name__ == "__main__":
    unittest.main()
