"""
Cliente do banco de eventos/usuários.

Construído uma vez no start do processo e injetado nos handlers.
Cada operação executa um único statement; não há transações multi-statement.
"""
from __future__ import annotations

import re
from datetime import date, time
from typing import Any

from sqlalchemy import delete, insert, select, text, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from painel_eventos.core.logger import log
from painel_eventos.database.init_db import init_db
from painel_eventos.database.session import make_engine
from painel_eventos.models import Evento, Usuario

eventos = Evento.__table__
usuarios = Usuario.__table__

DATA_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})")
HORA_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


class StoreError(Exception):
    """Falha do banco (ou banco não configurado); vira HTTP 500."""


def _parse_data(valor: Any) -> date | None:
    """Aceita 'YYYY-MM-DD', 'YYYY-M-D' e ISO com horário ('2024-03-05T00:00:00.000Z')."""
    if valor in (None, ""):
        return None
    if isinstance(valor, date):
        return valor
    m = DATA_RE.match(str(valor).strip())
    try:
        if not m:
            raise ValueError
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        raise StoreError(f"Valor de data inválido para data_evento: {valor!r}")


def _parse_hora(valor: Any) -> time | None:
    """Aceita 'H:MM', 'HH:MM' e 'HH:MM:SS'."""
    if valor in (None, ""):
        return None
    if isinstance(valor, time):
        return valor
    m = HORA_RE.match(str(valor).strip())
    try:
        if not m:
            raise ValueError
        return time(int(m.group(1)), int(m.group(2)), int(m.group(3) or 0))
    except ValueError:
        raise StoreError(f"Valor de hora inválido para hora_evento: {valor!r}")


def _valores(dados: dict) -> dict:
    return {
        "nome": dados.get("nome"),
        "descricao": dados.get("descricao"),
        "tipo": dados.get("tipo"),
        "data_evento": _parse_data(dados.get("data_evento")),
        "hora_evento": _parse_hora(dados.get("hora_evento")),
    }


def evento_to_dict(row: Any) -> dict:
    data_evento = row.data_evento
    hora_evento = row.hora_evento
    return {
        "id": row.id,
        "nome": row.nome,
        "descricao": row.descricao,
        "tipo": row.tipo,
        "data_evento": data_evento.isoformat() if data_evento else None,
        "hora_evento": hora_evento.strftime("%H:%M:%S") if hora_evento else None,
    }


class EventoStore:
    def __init__(self, engine: Engine | None):
        self.engine = engine

    @classmethod
    def from_settings(cls, settings) -> "EventoStore":
        url = settings.database_url()
        if not url:
            log.error("🛑 Parâmetros do banco ausentes (DATABASE_URL ou DB_HOST/DB_NAME).")
            return cls(None)
        try:
            return cls(make_engine(url))
        except (SQLAlchemyError, ImportError, ValueError) as e:
            log.error(f"🛑 Falha ao configurar o banco de dados: {e}")
            return cls(None)

    # ---------- infra ----------
    def _engine(self) -> Engine:
        if self.engine is None:
            raise StoreError("Banco de dados não configurado.")
        return self.engine

    def conectar(self, create_tables: bool = True) -> bool:
        """Testa a conexão no start. Falha só é logada, o processo continua de pé."""
        try:
            engine = self._engine()
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            if create_tables:
                init_db(engine)
        except (StoreError, SQLAlchemyError) as e:
            log.error(f"🛑 Falha ao conectar ao banco de dados: {e}")
            return False
        log.info(f"✅ Conectado ao banco de dados ({engine.dialect.name})!")
        return True

    def _executar(self, operacao: str, stmt, ler=None):
        try:
            with self._engine().begin() as conn:
                result = conn.execute(stmt)
                # o resultado precisa ser lido antes de a conexão voltar ao pool
                return ler(result) if ler else result.rowcount
        except SQLAlchemyError as e:
            log.error(f"Erro ao {operacao}: {e}")
            raise StoreError(str(getattr(e, "orig", None) or e)) from e

    # ---------- eventos ----------
    def listar(self) -> list[dict]:
        stmt = select(eventos).order_by(
            eventos.c.data_evento.desc(), eventos.c.hora_evento.desc(), eventos.c.nome.asc()
        )
        rows = self._executar("listar eventos", stmt, lambda r: r.all())
        return [evento_to_dict(r) for r in rows]

    def buscar(self, evento_id: int) -> dict | None:
        stmt = select(eventos).where(eventos.c.id == evento_id)
        row = self._executar("buscar evento", stmt, lambda r: r.first())
        return evento_to_dict(row) if row else None

    def criar(self, dados: dict) -> int:
        stmt = insert(eventos).values(**_valores(dados))
        return self._executar("inserir evento", stmt, lambda r: int(r.inserted_primary_key[0]))

    def atualizar(self, evento_id: int, dados: dict) -> bool:
        stmt = update(eventos).where(eventos.c.id == evento_id).values(**_valores(dados))
        return self._executar("atualizar evento", stmt) > 0

    def excluir(self, evento_id: int) -> bool:
        stmt = delete(eventos).where(eventos.c.id == evento_id)
        return self._executar("excluir evento", stmt) > 0

    def resetar_auto_increment(self) -> dict:
        """Volta o contador de ID de `eventos` ao mínimo permitido pelo banco."""
        dialeto = self._engine().dialect.name
        if dialeto == "mysql":
            sql = "ALTER TABLE eventos AUTO_INCREMENT = 1"
        elif dialeto == "sqlite":
            # sem a linha em sqlite_sequence o próximo id volta a ser MAX(id) + 1
            sql = "DELETE FROM sqlite_sequence WHERE name = 'eventos'"
        elif dialeto == "postgresql":
            sql = (
                "SELECT setval(pg_get_serial_sequence('eventos', 'id'), "
                "COALESCE(MAX(id), 0) + 1, false) FROM eventos"
            )
        else:
            raise StoreError(f"Reset de ID não suportado para o banco '{dialeto}'.")
        affected = self._executar("resetar o ID", text(sql))
        log.info(f"Contador de ID de eventos resetado ({dialeto}).")
        return {"dialeto": dialeto, "affectedRows": affected}

    # ---------- usuários ----------
    def buscar_usuario(self, usuario: str) -> dict | None:
        stmt = select(usuarios).where(usuarios.c.usuario == usuario)
        row = self._executar("buscar usuário", stmt, lambda r: r.first())
        if not row:
            return None
        return {"id": row.id, "usuario": row.usuario, "senha_hash": row.senha_hash}

    def salvar_usuario(self, usuario: str, senha_hash: str) -> int:
        """Insere ou atualiza o hash do usuário (usado pelo seed do admin)."""
        existente = self.buscar_usuario(usuario)
        if existente:
            stmt = update(usuarios).where(usuarios.c.id == existente["id"]).values(senha_hash=senha_hash)
            self._executar("atualizar usuário", stmt)
            return existente["id"]
        stmt = insert(usuarios).values(usuario=usuario, senha_hash=senha_hash)
        return self._executar("inserir usuário", stmt, lambda r: int(r.inserted_primary_key[0]))
