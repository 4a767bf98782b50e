from sqlalchemy.engine import Engine

from painel_eventos.models import Base


def init_db(engine: Engine) -> None:
    # Importar painel_eventos.models já registrou Evento e Usuario no metadata
    Base.metadata.create_all(bind=engine)
