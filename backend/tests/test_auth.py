import unittest
from datetime import datetime, timedelta, timezone

from database import SessionLocal
from models.revoked_token import RevokedToken

from tests.api_case import ApiTestCase, make_token


class AuthenticationTestCase(ApiTestCase):
    def test_missing_header_is_rejected(self):
        response = self.client.get("/coops/")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["detail"], "Authorization header is missing")

    def test_malformed_header_is_rejected(self):
        response = self.client.get("/coops/", headers={"Authorization": "Token abc"})
        self.assertEqual(response.status_code, 401)

    def test_expired_token_is_rejected(self):
        token = make_token("user-1", "farmer@example.com", expires_in=-60)
        response = self.client.get("/coops/", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["detail"], "Token has expired")

    def test_wrong_signature_is_rejected(self):
        token = make_token("user-1", "farmer@example.com", secret="not-the-secret")
        response = self.client.get("/coops/", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(response.status_code, 401)

    def test_wrong_audience_is_rejected(self):
        token = make_token("user-1", "farmer@example.com", aud="someone-else")
        response = self.client.get("/coops/", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(response.status_code, 401)

    def test_every_data_route_requires_a_session(self):
        for path in ("/coops/", "/chickens/", "/egg-production/", "/feed/", "/health-records/",
                     "/sales/", "/dashboard/", "/reports/summary", "/reports/export", "/profile/", "/auth/me"):
            with self.subTest(path=path):
                self.assertEqual(self.client.get(path).status_code, 401)

    def test_root_is_public(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")


class SessionTestCase(ApiTestCase):
    def test_me_returns_identity(self):
        response = self.client.get("/auth/me", headers=self.headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"id": "user-1", "email": "farmer@example.com"})

    def test_sync_creates_profile_once(self):
        first = self.client.post("/auth/sync", headers=self.headers)
        self.assertEqual(first.status_code, 200)
        self.assertEqual(first.json(), {"status": "synced", "user_id": "user-1", "new": True})

        second = self.client.post("/auth/sync", headers=self.headers)
        self.assertEqual(second.json()["new"], False)

    def test_logout_revokes_only_the_presented_token(self):
        signed_out = self.auth_headers("user-1", "farmer@example.com", jti="session-a")
        still_valid = self.auth_headers("user-1", "farmer@example.com", jti="session-b")

        response = self.client.post("/auth/logout", headers=signed_out)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Signed out successfully")

        refused = self.client.get("/coops/", headers=signed_out)
        self.assertEqual(refused.status_code, 401)
        self.assertEqual(refused.json()["detail"], "Session has been signed out")

        self.assertEqual(self.client.get("/coops/", headers=still_valid).status_code, 200)

    def test_logout_purges_expired_revocations(self):
        db = SessionLocal()
        try:
            db.add(RevokedToken(
                token_id="stale", user_id="user-1",
                expires_at=datetime.now(timezone.utc) - timedelta(days=1),
            ))
            db.commit()
        finally:
            db.close()

        headers = self.auth_headers("user-1", "farmer@example.com", jti="session-c")
        self.assertEqual(self.client.post("/auth/logout", headers=headers).status_code, 200)

        db = SessionLocal()
        try:
            remaining = [row.token_id for row in db.query(RevokedToken).all()]
        finally:
            db.close()
        self.assertEqual(remaining, ["session-c"])


if __name__ == "__main__":
    unittest.main()
