import json
from datetime import timedelta

from models import User
from services.otp_service import utcnow

from conftest import PASSWORD, bearer, register_user, verified_user_token

SECRET_KEYS = {"password", "otp", "otpExpires", "otpExpiresAt"}


def _keys(value):
     if isinstance(value, dict):
          for key, item in value.items():
               yield key
               yield from _keys(item)
     elif isinstance(value, list):
          for item in value:
               yield from _keys(item)


def test_register_login_verify_flow(client, mailer):
     response = register_user(client, "bob@x.com")
     assert response.status_code == 201
     body = response.json()
     assert body["success"] is True
     assert body["data"]["isVerified"] is False
     assert "token" not in body["data"]

     response = client.post("/api/auth/login", json={"email": "bob@x.com", "password": PASSWORD})
     assert response.status_code == 403
     assert response.json() == {
          "success": False,
          "message": "Please verify your account before logging in",
     }

     response = client.post(
          "/api/auth/verifyOtp",
          json={"email": "bob@x.com", "otp": mailer.last_otp("bob@x.com")},
     )
     assert response.status_code == 200
     assert response.json()["data"]["token"]
     assert response.json()["data"]["account"]["isVerified"] is True

     response = client.post("/api/auth/login", json={"email": "bob@x.com", "password": PASSWORD})
     assert response.status_code == 200
     assert response.json()["data"]["token"]


def test_responses_never_expose_secrets(client, mailer):
     responses = [register_user(client, "bob@x.com")]
     responses.append(client.post(
          "/api/auth/verifyOtp",
          json={"email": "bob@x.com", "otp": mailer.last_otp("bob@x.com")},
     ))
     token = responses[-1].json()["data"]["token"]
     responses.append(client.post("/api/auth/login", json={"email": "bob@x.com", "password": PASSWORD}))
     responses.append(client.get("/api/auth/me", headers=bearer(token)))
     responses.append(client.get("/users/me", headers=bearer(token)))

     for response in responses:
          assert response.status_code in (200, 201)
          assert not SECRET_KEYS & set(_keys(response.json()))
          assert PASSWORD not in json.dumps(response.json())


def test_stored_password_is_hashed(client, mailer, db):
     register_user(client, "bob@x.com")
     user = db.query(User).filter(User.email == "bob@x.com").one()
     assert user.password != PASSWORD
     assert user.password.startswith("$2")


def test_email_is_case_insensitive(client, mailer):
     assert register_user(client, "Bob@X.com").status_code == 201
     response = register_user(client, "bob@x.com")
     assert response.status_code == 400
     assert response.json()["message"] == "User already exists with this email"

     client.post("/api/auth/verifyOtp", json={"email": "BOB@x.com", "otp": mailer.last_otp("bob@x.com")})
     response = client.post("/api/auth/login", json={"email": "BOB@X.COM", "password": PASSWORD})
     assert response.status_code == 200


def test_register_rejects_mismatched_passwords(client, mailer):
     response = register_user(client, "bob@x.com", confirmPassword="different")
     assert response.status_code == 400
     assert response.json()["message"] == "Passwords do not match"
     assert mailer.sent == []


def test_register_rejects_missing_fields_and_short_password(client, mailer):
     response = client.post("/api/auth/register", json={"email": "bob@x.com"})
     assert response.status_code == 400
     body = response.json()
     assert body["success"] is False
     fields = {error["field"] for error in body["errors"]}
     assert {"firstName", "lastName", "mobile", "password", "confirmPassword"} <= fields

     response = register_user(client, "bob@x.com", password="abc", confirmPassword="abc")
     assert response.status_code == 400


def test_register_fails_cleanly_when_email_cannot_be_sent(client, mailer, db):
     mailer.fail = True
     response = register_user(client, "bob@x.com")
     assert response.status_code == 500
     assert response.json()["success"] is False
     assert db.query(User).count() == 0


def test_login_failures_share_one_message(client, mailer):
     verified_user_token(client, mailer, "bob@x.com")
     unknown = client.post("/api/auth/login", json={"email": "nobody@x.com", "password": PASSWORD})
     wrong = client.post("/api/auth/login", json={"email": "bob@x.com", "password": "wrong-pass"})
     assert unknown.status_code == wrong.status_code == 401
     assert unknown.content == wrong.content


def test_deactivated_user_cannot_log_in(client, mailer, db):
     verified_user_token(client, mailer, "bob@x.com")
     db.query(User).filter(User.email == "bob@x.com").update({User.is_active: False})
     db.commit()
     response = client.post("/api/auth/login", json={"email": "bob@x.com", "password": PASSWORD})
     assert response.status_code == 401
     assert response.json()["message"] == "Your account has been deactivated"


def test_resend_invalidates_previous_code(client, mailer):
     register_user(client, "bob@x.com")
     first = mailer.last_otp("bob@x.com")
     response = client.post("/api/auth/resendOtp", json={"email": "bob@x.com"})
     assert response.status_code == 200
     second = mailer.last_otp("bob@x.com")
     assert len(mailer.sent) == 2

     if first != second:
          response = client.post("/api/auth/verifyOtp", json={"email": "bob@x.com", "otp": first})
          assert response.status_code == 400
          assert response.json()["message"] == "Invalid or expired OTP"

     response = client.post("/api/auth/verifyOtp", json={"email": "bob@x.com", "otp": second})
     assert response.status_code == 200


def test_resend_for_unknown_email_is_not_found(client, mailer):
     response = client.post("/api/auth/resendOtp", json={"email": "ghost@x.com"})
     assert response.status_code == 404
     assert response.json()["message"] == "Please enter correct email"
     assert mailer.sent == []


def test_resend_unverifies_a_verified_account(client, mailer):
     verified_user_token(client, mailer, "bob@x.com")
     client.post("/api/auth/resendOtp", json={"email": "bob@x.com"})
     response = client.post("/api/auth/login", json={"email": "bob@x.com", "password": PASSWORD})
     assert response.status_code == 403


def test_expired_otp_is_rejected(client, mailer, db):
     register_user(client, "bob@x.com")
     db.query(User).filter(User.email == "bob@x.com").update(
          {User.otp_expires_at: utcnow() - timedelta(minutes=1)}
     )
     db.commit()
     response = client.post(
          "/api/auth/verifyOtp",
          json={"email": "bob@x.com", "otp": mailer.last_otp("bob@x.com")},
     )
     assert response.status_code == 400


def test_me_and_logout_require_a_token(client, mailer):
     assert client.get("/api/auth/me").status_code == 401
     assert client.post("/api/auth/logout").status_code == 401
     response = client.get("/api/auth/me", headers=bearer("garbage"))
     assert response.status_code == 401
     assert response.json()["success"] is False

     token = verified_user_token(client, mailer, "bob@x.com")
     response = client.get("/api/auth/me", headers=bearer(token))
     assert response.status_code == 200
     assert response.json()["data"]["email"] == "bob@x.com"
     response = client.post("/api/auth/logout", headers=bearer(token))
     assert response.status_code == 200
     assert response.json()["success"] is True


def test_users_routes_duplicate_auth_register_and_login(client, mailer):
     body = {
          "firstName": "Dan",
          "lastName": "Ray",
          "email": "dan@x.com",
          "mobile": "5550102",
          "password": PASSWORD,
          "confirmPassword": PASSWORD,
     }
     assert client.post("/users/register", json=body).status_code == 201
     client.post("/api/auth/verifyOtp", json={"email": "dan@x.com", "otp": mailer.last_otp("dan@x.com")})
     response = client.post("/users/login", json={"email": "dan@x.com", "password": PASSWORD})
     assert response.status_code == 200


def test_update_profile_fields(client, mailer):
     token = verified_user_token(client, mailer, "bob@x.com")
     response = client.put(
          "/users/me",
          headers=bearer(token),
          json={"city": "Lyon", "zip": "69001", "phone": "5550999"},
     )
     assert response.status_code == 200
     data = response.json()["data"]
     assert (data["city"], data["zip"], data["phone"]) == ("Lyon", "69001", "5550999")
     assert data["firstName"] == "Bob"


def test_update_profile_email_must_stay_unique(client, mailer):
     verified_user_token(client, mailer, "alice@x.com")
     token = verified_user_token(client, mailer, "bob@x.com")
     response = client.put("/users/me", headers=bearer(token), json={"email": "ALICE@x.com"})
     assert response.status_code == 400

     response = client.put("/users/me", headers=bearer(token), json={"email": "bob@x.com"})
     assert response.status_code == 200

     response = client.put("/users/me", headers=bearer(token), json={"email": "robert@x.com"})
     assert response.status_code == 200
     assert response.json()["data"]["email"] == "robert@x.com"


def test_update_profile_password_change(client, mailer):
     token = verified_user_token(client, mailer, "bob@x.com")

     response = client.put("/users/me", headers=bearer(token), json={"newPassword": "newpass1"})
     assert response.status_code == 400

     response = client.put(
          "/users/me",
          headers=bearer(token),
          json={"currentPassword": "wrong-pass", "newPassword": "newpass1"},
     )
     assert response.status_code == 401

     response = client.put(
          "/users/me",
          headers=bearer(token),
          json={"currentPassword": PASSWORD, "newPassword": "newpass1"},
     )
     assert response.status_code == 200

     assert client.post("/api/auth/login", json={"email": "bob@x.com", "password": PASSWORD}).status_code == 401
     assert client.post("/api/auth/login", json={"email": "bob@x.com", "password": "newpass1"}).status_code == 200


def test_unknown_route_uses_envelope(client):
     response = client.get("/nope")
     assert response.status_code == 404
     assert response.json() == {"success": False, "message": "Route not found"}


def test_verify_otp_accepts_numeric_code(client, mailer):
     register_user(client, "bob@x.com")
     otp = int(mailer.last_otp("bob@x.com"))

     response = client.post("/api/auth/verifyOtp", json={"email": "bob@x.com", "otp": otp})
     assert response.status_code == 200
     assert response.json()["data"]["account"]["isVerified"] is True
