from typing import Optional

from pydantic import BaseModel


class EventoIn(BaseModel):
    """Payload de cadastro/edição. Só nome/descricao/tipo são exigidos (checados na rota)."""

    nome: Optional[str] = None
    descricao: Optional[str] = None
    tipo: Optional[str] = None
    data_evento: Optional[str] = None
    hora_evento: Optional[str] = None

    def campos_obrigatorios_ok(self) -> bool:
        return bool(self.nome and self.descricao and self.tipo)


class EventoOut(BaseModel):
    id: int
    nome: str
    descricao: str
    tipo: str
    data_evento: Optional[str] = None
    hora_evento: Optional[str] = None


class EventoCriadoOut(BaseModel):
    message: str
    id: int


class MensagemOut(BaseModel):
    message: str
