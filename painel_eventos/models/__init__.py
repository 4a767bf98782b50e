from painel_eventos.models.base import Base
from painel_eventos.models.evento import Evento
from painel_eventos.models.usuario import Usuario

__all__ = ["Base", "Evento", "Usuario"]
