"""
Token issuer - stateless signed session tokens (HS256 JWT).

Tokens encode the account id, its role and its account kind (which table the
id refers to). There is no revocation list; logout is client-side only.
"""
import os
from datetime import datetime, timedelta, timezone

from jose import JWTError, ExpiredSignatureError, jwt
from pydantic import BaseModel, ValidationError
from dotenv import load_dotenv

from services.exceptions import Unauthorized

load_dotenv()

SECRET_KEY = os.getenv("JWT_SECRET")
ALGORITHM = "HS256"
TOKEN_EXPIRE_DAYS = int(os.getenv("JWT_EXPIRE_DAYS", "7"))


class TokenData(BaseModel):
     """Identity attached to an authenticated request."""
     id: int
     role: str
     kind: str


def _secret() -> str:
     if not SECRET_KEY:
          raise RuntimeError("JWT_SECRET is not set")
     return SECRET_KEY


def mint_token(account_id: int, role: str, kind: str) -> str:
     now = datetime.now(timezone.utc)
     payload = {
          "id": account_id,
          "role": role,
          "kind": kind,
          "iat": now,
          "exp": now + timedelta(days=TOKEN_EXPIRE_DAYS),
     }
     return jwt.encode(payload, _secret(), algorithm=ALGORITHM)


def validate_token(token: str) -> TokenData:
     """
     Decode and check a token. Fails closed: anything missing, malformed,
     expired or signed with another key raises Unauthorized.
     """
     if not token:
          raise Unauthorized()
     try:
          payload = jwt.decode(token, _secret(), algorithms=[ALGORITHM])
     except ExpiredSignatureError:
          raise Unauthorized("Token has expired")
     except JWTError:
          raise Unauthorized()
     try:
          return TokenData.model_validate(payload)
     except ValidationError:
          raise Unauthorized()
