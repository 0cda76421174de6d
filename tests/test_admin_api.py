from models import Admin
from services.category_service import SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD, seed_categories

from conftest import PASSWORD, bearer, register_user, verified_user_token


def _register_admin(client, email="root@mail.com"):
     return client.post(
          "/admin/register",
          json={"fullName": "Root Admin", "email": email, "password": PASSWORD},
     )


def _admin_token(client, mailer, email="root@mail.com"):
     assert _register_admin(client, email).status_code == 201
     response = client.post("/admin/verifyOtp", json={"email": email, "otp": mailer.last_otp(email)})
     assert response.status_code == 200
     return response.json()["data"]["token"]


def test_admin_registration_and_verification(client, mailer, db):
     response = _register_admin(client)
     assert response.status_code == 201
     data = response.json()["data"]
     assert data["fullName"] == "Root Admin"
     assert data["role"] == "admin"
     assert "otp" not in data and "password" not in data

     assert client.post(
          "/admin/login", json={"email": "root@mail.com", "password": PASSWORD}
     ).status_code == 403

     response = client.post(
          "/admin/verifyOtp",
          json={"email": "ROOT@mail.com", "otp": mailer.last_otp("root@mail.com")},
     )
     assert response.status_code == 200
     assert response.json()["data"]["account"]["isVerified"] is True

     response = client.post("/admin/login", json={"email": "root@mail.com", "password": PASSWORD})
     assert response.status_code == 200
     assert db.query(Admin).one().is_verified is True


def test_admin_duplicate_email(client, mailer):
     _register_admin(client)
     response = _register_admin(client, "Root@Mail.com")
     assert response.status_code == 400
     assert response.json()["message"] == "Admin already exists with this email"


def test_admin_resend_otp(client, mailer):
     _register_admin(client)
     response = client.post("/admin/resendOtp", json={"email": "root@mail.com"})
     assert response.status_code == 200
     assert len(mailer.sent) == 2
     assert client.post("/admin/resendOtp", json={"email": "ghost@mail.com"}).status_code == 404


def test_admin_and_user_accounts_are_separate(client, mailer):
     verified_user_token(client, mailer, "bob@x.com")
     response = client.post("/admin/login", json={"email": "bob@x.com", "password": PASSWORD})
     assert response.status_code == 401


def test_me_returns_admin_record_for_admin_token(client, mailer):
     token = _admin_token(client, mailer)
     response = client.get("/api/auth/me", headers=bearer(token))
     assert response.status_code == 200
     assert response.json()["data"]["fullName"] == "Root Admin"


def test_list_users_requires_admin_role(client, mailer):
     assert client.get("/admin/users/all").status_code == 401

     user_token = verified_user_token(client, mailer, "bob@x.com")
     response = client.get("/admin/users/all", headers=bearer(user_token))
     assert response.status_code == 403
     assert response.json()["success"] is False

     admin_token = _admin_token(client, mailer)
     response = client.get("/admin/users/all", headers=bearer(admin_token))
     assert response.status_code == 200
     assert [user["email"] for user in response.json()["data"]] == ["bob@x.com"]


def test_list_users_is_paginated_newest_first(client, mailer):
     for i in range(12):
          assert register_user(client, f"user{i}@x.com").status_code == 201
     token = _admin_token(client, mailer)

     first = client.get("/admin/users/all", headers=bearer(token)).json()
     assert first["pagination"] == {"total": 12, "page": 1, "pages": 2, "pageSize": 10}
     assert len(first["data"]) == 10
     assert first["data"][0]["email"] == "user11@x.com"

     second = client.get("/admin/users/all?page=2", headers=bearer(token)).json()
     assert second["pagination"]["page"] == 2
     assert [user["email"] for user in second["data"]] == ["user1@x.com", "user0@x.com"]

     fallback = client.get("/admin/users/all?page=0", headers=bearer(token)).json()
     assert fallback["pagination"]["page"] == 1


def test_seeded_admin_can_log_in(client, db):
     seed_categories(db)
     response = client.post(
          "/admin/login", json={"email": SEED_ADMIN_EMAIL, "password": SEED_ADMIN_PASSWORD}
     )
     assert response.status_code == 200
