from __future__ import annotations

from datetime import date, time

from sqlalchemy import Date, Integer, String, Text, Time
from sqlalchemy.orm import Mapped, mapped_column

from painel_eventos.models.base import Base


class Evento(Base):
    __tablename__ = "eventos"
    # AUTOINCREMENT no SQLite mantém o contador em sqlite_sequence (usado no reset-id)
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nome: Mapped[str] = mapped_column(String(255), nullable=False)
    descricao: Mapped[str] = mapped_column(Text, nullable=False)
    tipo: Mapped[str] = mapped_column(String(50), nullable=False)  # "Evento" | "Atração" | ...
    data_evento: Mapped[date | None] = mapped_column(Date, nullable=True)
    hora_evento: Mapped[time | None] = mapped_column(Time, nullable=True)

    def __repr__(self) -> str:
        return f"<Evento(id={self.id}, nome={self.nome}, tipo={self.tipo})>"
