import os

# Point the app at an in-memory database before anything imports database.py
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ.pop("BREVO_API_KEY", None)

import pytest
from fastapi.testclient import TestClient

from database import SessionLocal, engine
from dependencies import get_mailer
from main import app
from models import Base, Category
from services.category_service import seed_categories
from utils.email import EmailDeliveryError

PASSWORD = "pw123456"


class RecordingMailer:
     """Stands in for the mail API and remembers every OTP it was asked to send."""

     def __init__(self):
          self.sent = []
          self.fail = False

     def send_otp_email(self, to_email, otp, template, expiry_minutes):
          if self.fail:
               raise EmailDeliveryError("transport down")
          self.sent.append({"to": to_email, "otp": otp, "subject": template.subject})

     def last_otp(self, email):
          for message in reversed(self.sent):
               if message["to"] == email.lower():
                    return message["otp"]
          return None


@pytest.fixture(autouse=True)
def reset_database():
     Base.metadata.drop_all(bind=engine)
     Base.metadata.create_all(bind=engine)
     yield


@pytest.fixture
def mailer():
     recorder = RecordingMailer()
     app.dependency_overrides[get_mailer] = lambda: recorder
     yield recorder
     app.dependency_overrides.pop(get_mailer, None)


@pytest.fixture
def client(mailer):
     return TestClient(app)


@pytest.fixture
def db():
     session = SessionLocal()
     yield session
     session.close()


@pytest.fixture
def platform_id(db):
     seed_categories(db)
     return db.query(Category).filter(Category.platform == "Netflix").one().id


def register_user(client, email, password=PASSWORD, **overrides):
     body = {
          "firstName": "Bob",
          "lastName": "Stone",
          "email": email,
          "mobile": "5550100",
          "password": password,
          "confirmPassword": password,
     }
     body.update(overrides)
     return client.post("/api/auth/register", json=body)


def verified_user_token(client, mailer, email, password=PASSWORD):
     response = register_user(client, email, password)
     assert response.status_code == 201, response.text
     response = client.post(
          "/api/auth/verifyOtp",
          json={"email": email, "otp": mailer.last_otp(email)},
     )
     assert response.status_code == 200, response.text
     return response.json()["data"]["token"]


def bearer(token):
     return {"Authorization": f"Bearer {token}"}


def ad_body(platform_id, **overrides):
     body = {
          "title": "Netflix premium slot",
          "description": "One 4K screen on a family plan",
          "platform": platform_id,
          "price": 9.99,
          "duration": {"value": 2, "unit": "week"},
          "contactEmail": "bob@x.com",
     }
     body.update(overrides)
     return body
