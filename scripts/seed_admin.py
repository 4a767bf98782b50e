"""Cria (ou atualiza a senha do) usuário admin na tabela `usuarios`.

Uso:
    SEED_ADMIN_USER=admin SEED_ADMIN_PASS=troque-me DB_HOST=... DB_NAME=... python scripts/seed_admin.py
"""
import os
import sys

from painel_eventos.core.config import settings
from painel_eventos.core.logger import log
from painel_eventos.database.seed import seed_admin
from painel_eventos.database.store import EventoStore, StoreError


def main() -> int:
    usuario = os.getenv("SEED_ADMIN_USER", "admin")
    senha = os.getenv("SEED_ADMIN_PASS", "")
    if not senha:
        log.error("[seed] Defina SEED_ADMIN_PASS.")
        return 1

    store = EventoStore.from_settings(settings)
    if not store.conectar(create_tables=settings.CREATE_TABLES):
        return 1
    try:
        seed_admin(store, usuario, senha)
    except StoreError as e:
        log.error(f"[seed] Falha ao gravar admin: {e}")
        return 1
    log.info("[seed] OK.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
