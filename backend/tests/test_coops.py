import unittest

from tests.api_case import ApiTestCase


class CoopTestCase(ApiTestCase):
    def test_empty_list(self):
        response = self.client.get("/coops/", headers=self.headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [])

    def test_create_read_update(self):
        coop = self.create_coop("Kandang A", 500)
        self.assertEqual(coop["user_id"], "user-1")
        self.assertEqual(coop["capacity"], 500)

        fetched = self.client.get(f"/coops/{coop['id']}", headers=self.headers).json()
        self.assertEqual(fetched["name"], "Kandang A")

        response = self.client.patch(f"/coops/{coop['id']}", json={"capacity": 650}, headers=self.headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["capacity"], 650)
        self.assertEqual(response.json()["name"], "Kandang A")

    def test_list_is_newest_first(self):
        first = self.create_coop("Kandang A")
        second = self.create_coop("Kandang B")
        ids = [c["id"] for c in self.client.get("/coops/", headers=self.headers).json()]
        self.assertEqual(ids, [second["id"], first["id"]])

    def test_validation(self):
        self.post("/coops/", {"name": "Kandang A", "capacity": -1}, expected=422)
        self.post("/coops/", {"name": "", "capacity": 10}, expected=422)
        coop = self.create_coop()
        response = self.client.patch(f"/coops/{coop['id']}", json={"name": None}, headers=self.headers)
        self.assertEqual(response.status_code, 422)

    def test_other_users_coops_are_invisible(self):
        coop = self.create_coop()
        self.assertEqual(self.client.get("/coops/", headers=self.other_headers).json(), [])
        self.assertEqual(self.client.get(f"/coops/{coop['id']}", headers=self.other_headers).status_code, 404)
        response = self.client.patch(f"/coops/{coop['id']}", json={"capacity": 1}, headers=self.other_headers)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(self.client.delete(f"/coops/{coop['id']}", headers=self.other_headers).status_code, 404)
        self.assertEqual(self.client.get(f"/coops/{coop['id']}", headers=self.headers).json()["capacity"], 500)

    def test_delete(self):
        coop = self.create_coop()
        response = self.client.delete(f"/coops/{coop['id']}", headers=self.headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get(f"/coops/{coop['id']}", headers=self.headers).status_code, 404)
        self.assertEqual(self.client.delete(f"/coops/{coop['id']}", headers=self.headers).status_code, 404)

    def test_delete_with_feed_history_conflicts(self):
        coop = self.create_coop()
        self.create_feed(coop["id"], "120.00")
        response = self.client.delete(f"/coops/{coop['id']}", headers=self.headers)
        self.assertEqual(response.status_code, 409)
        self.assertEqual(self.client.get(f"/coops/{coop['id']}", headers=self.headers).status_code, 200)

    def test_delete_unhouses_chickens(self):
        coop = self.create_coop()
        chicken = self.create_chicken(coop["id"])
        self.assertEqual(self.client.delete(f"/coops/{coop['id']}", headers=self.headers).status_code, 200)
        fetched = self.client.get(f"/chickens/{chicken['id']}", headers=self.headers).json()
        self.assertIsNone(fetched["coop_id"])


if __name__ == "__main__":
    unittest.main()
