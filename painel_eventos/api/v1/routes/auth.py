# painel_eventos/api/v1/routes/auth.py
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import ValidationError

from painel_eventos.api.deps import get_settings, get_store, ler_payload
from painel_eventos.core.config import Settings
from painel_eventos.core.logger import log
from painel_eventos.core.security import create_access_token, dummy_verify, verify_password
from painel_eventos.database.store import EventoStore
from painel_eventos.schemas.auth import LoginIn, TokenOut

router = APIRouter(tags=["auth"])

# mesma mensagem para usuário inexistente e senha errada
MSG_CREDENCIAIS = "Usuário ou senha inválidos."


@router.post("/login", response_model=TokenOut)
def login(
    payload: dict = Depends(ler_payload),
    store: EventoStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    try:
        dados = LoginIn.model_validate(payload)
    except ValidationError:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, MSG_CREDENCIAIS)

    user = store.buscar_usuario(dados.usuario) if dados.usuario else None
    if not user:
        dummy_verify()
        log.info(f"Login recusado para '{dados.usuario}'.")
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, MSG_CREDENCIAIS)

    if not verify_password(dados.senha or "", user["senha_hash"]):
        log.info(f"Login recusado para '{dados.usuario}'.")
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, MSG_CREDENCIAIS)

    token = create_access_token(
        user_id=user["id"],
        usuario=user["usuario"],
        secret=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )
    log.info(f"Login do admin '{user['usuario']}' (id={user['id']}).")
    return {"token": token}
