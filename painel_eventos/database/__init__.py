from painel_eventos.database.store import EventoStore, StoreError

__all__ = ["EventoStore", "StoreError"]
