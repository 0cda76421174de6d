from datetime import timedelta

import pytest

from models import User
from services.account_repository import ADMIN_ACCOUNT, USER_ACCOUNT
from services.auth_service import AuthService
from services.exceptions import InvalidOrExpiredOtp, UpstreamUnavailable
from services.otp_service import generate_otp, utcnow

from conftest import PASSWORD, RecordingMailer


def _register(service, email="carol@mail.com"):
     return service.register(
          email=email,
          password=PASSWORD,
          confirm_password=PASSWORD,
          first_name="Carol",
          last_name="Lane",
          phone="5550101",
     )


@pytest.fixture
def recorder():
     return RecordingMailer()


@pytest.fixture
def users(db, recorder):
     return AuthService(db, recorder, USER_ACCOUNT)


def test_generated_codes_are_four_digits():
     for _ in range(200):
          code = generate_otp()
          assert len(code) == 4
          assert 1000 <= int(code) <= 9999


def test_register_stores_code_and_expiry_together(users, recorder, db):
     user = _register(users)
     stored = users.accounts.get(user.id, with_secrets=True)
     assert stored.otp == recorder.last_otp("carol@mail.com")
     assert stored.otp_expires_at > utcnow()
     assert stored.otp_expires_at <= utcnow() + timedelta(minutes=10)
     assert stored.is_verified is False


def test_verify_clears_code_and_marks_verified(users, recorder):
     _register(users)
     account, token = users.verify_otp("carol@mail.com", recorder.last_otp("carol@mail.com"))
     assert token
     stored = users.accounts.get(account.id, with_secrets=True)
     assert stored.is_verified is True
     assert stored.otp is None
     assert stored.otp_expires_at is None


def test_same_code_cannot_be_used_twice(users, recorder):
     _register(users)
     code = recorder.last_otp("carol@mail.com")
     users.verify_otp("carol@mail.com", code)
     with pytest.raises(InvalidOrExpiredOtp):
          users.verify_otp("carol@mail.com", code)


def test_expired_code_is_rejected(users, recorder, db):
     user = _register(users)
     db.query(User).filter(User.id == user.id).update(
          {User.otp_expires_at: utcnow() - timedelta(seconds=1)}
     )
     db.commit()
     db.expire_all()
     with pytest.raises(InvalidOrExpiredOtp):
          users.verify_otp("carol@mail.com", recorder.last_otp("carol@mail.com"))


def test_wrong_code_is_rejected(users, recorder):
     _register(users)
     code = recorder.last_otp("carol@mail.com")
     wrong = "1000" if code != "1000" else "1001"
     with pytest.raises(InvalidOrExpiredOtp):
          users.verify_otp("carol@mail.com", wrong)


def test_failed_email_persists_nothing_on_register(users, recorder, db):
     recorder.fail = True
     with pytest.raises(UpstreamUnavailable):
          _register(users)
     assert db.query(User).count() == 0


def test_failed_email_keeps_previous_code_on_resend(users, recorder, db):
     user = _register(users)
     code = recorder.last_otp("carol@mail.com")
     recorder.fail = True
     with pytest.raises(UpstreamUnavailable):
          users.resend_otp("carol@mail.com")
     db.rollback()
     db.expire_all()
     assert users.accounts.get(user.id, with_secrets=True).otp == code


def test_admin_codes_use_admin_template(db, recorder):
     admins = AuthService(db, recorder, ADMIN_ACCOUNT)
     admins.register(email="root@mail.com", password=PASSWORD, full_name="Root Admin")
     assert recorder.sent[-1]["subject"] == "Admin registration OTP"
