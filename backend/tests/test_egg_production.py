import unittest

from tests.api_case import ApiTestCase


class EggProductionTestCase(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.chicken = self.create_chicken()

    def test_record_and_read(self):
        entry = self.create_eggs(self.chicken["id"], 850, quality="B")
        self.assertEqual(entry["count"], 850)
        self.assertEqual(entry["quality"], "B")
        fetched = self.client.get(f"/egg-production/{entry['id']}", headers=self.headers).json()
        self.assertEqual(fetched["chicken_id"], self.chicken["id"])

    def test_quality_defaults_to_grade_a(self):
        entry = self.post(
            "/egg-production/",
            {"chicken_id": self.chicken["id"], "date": self.today.isoformat(), "count": 10},
        )
        self.assertEqual(entry["quality"], "A")

    def test_several_entries_per_day_are_kept(self):
        self.create_eggs(self.chicken["id"], 850)
        self.create_eggs(self.chicken["id"], 150)
        entries = self.client.get("/egg-production/", headers=self.headers).json()
        self.assertEqual(sorted(e["count"] for e in entries), [150, 850])

    def test_list_newest_first_with_date_filters(self):
        old = self.create_eggs(self.chicken["id"], 10, day=self.days_ago(20))
        recent = self.create_eggs(self.chicken["id"], 20, day=self.days_ago(2))
        entries = self.client.get("/egg-production/", headers=self.headers).json()
        self.assertEqual([e["id"] for e in entries], [recent["id"], old["id"]])

        filtered = self.client.get(
            "/egg-production/", params={"start_date": self.days_ago(7)}, headers=self.headers
        ).json()
        self.assertEqual([e["id"] for e in filtered], [recent["id"]])

    def test_validation(self):
        payload = {"chicken_id": self.chicken["id"], "date": self.today.isoformat(), "count": -5}
        self.post("/egg-production/", payload, expected=422)
        payload.update(count=5, quality="D")
        self.post("/egg-production/", payload, expected=422)

    def test_unknown_or_foreign_chicken(self):
        foreign = self.create_chicken(headers=self.other_headers)
        self.post(
            "/egg-production/",
            {"chicken_id": foreign["id"], "date": self.today.isoformat(), "count": 5},
            expected=404,
        )
        self.post(
            "/egg-production/",
            {"chicken_id": 9999, "date": self.today.isoformat(), "count": 5},
            expected=404,
        )

    def test_ownership_follows_the_chicken(self):
        entry = self.create_eggs(self.chicken["id"], 100)
        self.assertEqual(self.client.get("/egg-production/", headers=self.other_headers).json(), [])
        self.assertEqual(
            self.client.get(f"/egg-production/{entry['id']}", headers=self.other_headers).status_code, 404
        )
        self.assertEqual(
            self.client.delete(f"/egg-production/{entry['id']}", headers=self.other_headers).status_code, 404
        )

    def test_update_date(self):
        entry = self.create_eggs(self.chicken["id"], 100)
        response = self.client.patch(
            f"/egg-production/{entry['id']}", json={"date": self.days_ago(2)}, headers=self.headers
        )
        self.assertEqual(response.status_code, 200, response.text)
        fetched = self.client.get(f"/egg-production/{entry['id']}", headers=self.headers).json()
        self.assertEqual(fetched["date"], self.days_ago(2))

    def test_update_and_delete(self):
        entry = self.create_eggs(self.chicken["id"], 100)
        response = self.client.patch(
            f"/egg-production/{entry['id']}", json={"count": 120, "notes": "two cracked"}, headers=self.headers
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["count"], 120)
        self.assertEqual(response.json()["notes"], "two cracked")

        self.assertEqual(self.client.delete(f"/egg-production/{entry['id']}", headers=self.headers).status_code, 200)
        self.assertEqual(self.client.get(f"/egg-production/{entry['id']}", headers=self.headers).status_code, 404)


if __name__ == "__main__":
    unittest.main()
