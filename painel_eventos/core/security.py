# painel_eventos/core/security.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt  # PyJWT
from passlib.context import CryptContext

# -------------------- Password hashing --------------------
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain: str, hashed: str | None) -> bool:
    if not plain or not hashed:
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        # hash corrompido/desconhecido no banco conta como senha errada
        return False


def dummy_verify() -> None:
    """Gasta o mesmo tempo de uma verificação real (usuário inexistente)."""
    pwd_context.dummy_verify()


def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)


# -------------------- JWT helpers --------------------
def _now() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(
    *, user_id: int, usuario: str, secret: str, algorithm: str = "HS256", minutes: int = 60
) -> str:
    """Gera o token de sessão do admin com as claims {id, usuario, iat, exp}."""
    now = _now()
    payload = {
        "id": user_id,
        "usuario": usuario,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=minutes)).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_token(token: str, *, secret: str, algorithm: str = "HS256") -> dict:
    """Valida assinatura e expiração. Levanta `jwt.InvalidTokenError` se inválido."""
    return jwt.decode(token, secret, algorithms=[algorithm], options={"require": ["exp"]})
