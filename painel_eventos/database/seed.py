from painel_eventos.core.logger import log
from painel_eventos.core.security import hash_password
from painel_eventos.database.store import EventoStore


def seed_admin(store: EventoStore, usuario: str, senha: str) -> int:
    if not usuario or not senha:
        raise ValueError("Usuário e senha do admin são obrigatórios.")
    user_id = store.salvar_usuario(usuario, hash_password(senha))
    log.info(f"[seed] Usuário admin '{usuario}' gravado (id={user_id}).")
    return user_id
