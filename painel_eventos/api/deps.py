# painel_eventos/api/deps.py
from __future__ import annotations

import json
from urllib.parse import parse_qs

import jwt  # PyJWT
from fastapi import Depends, HTTPException, Request, status

from painel_eventos.core.config import Settings
from painel_eventos.core.logger import log
from painel_eventos.core.security import decode_token
from painel_eventos.database.store import EventoStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> EventoStore:
    return request.app.state.store


def verificar_token(request: Request, settings: Settings = Depends(get_settings)) -> dict:
    """
    Guarda das rotas protegidas: `Authorization: Bearer <token>`.
    Sem header -> 401; token inválido/expirado -> 403.
    As claims ficam em `request.state.auth`.
    """
    header = request.headers.get("authorization")
    if header is None:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Acesso não autorizado. Token não fornecido.")

    partes = header.split()
    token = partes[1] if len(partes) > 1 else ""
    try:
        claims = decode_token(token, secret=settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    except jwt.InvalidTokenError as e:
        log.debug(f"Token rejeitado: {e}")
        raise HTTPException(status.HTTP_403_FORBIDDEN, "Acesso negado ou token inválido.")

    request.state.auth = claims
    return claims


async def ler_payload(request: Request) -> dict:
    """Aceita JSON ou x-www-form-urlencoded, como o front antigo enviava."""
    ctype = (request.headers.get("content-type") or "").lower()
    raw = await request.body()

    if "application/json" in ctype:
        if not raw:
            return {}
        try:
            data = json.loads(raw)
        except ValueError:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "JSON inválido.")
        if not isinstance(data, dict):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "O corpo deve ser um objeto JSON.")
        return data

    q = parse_qs(raw.decode(errors="ignore"))
    return {k: v[0] for k, v in q.items()}
