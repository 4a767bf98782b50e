from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol

# chave única onde o token do admin fica guardado
TOKEN_KEY = "adminToken"


class Storage(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    def __init__(self, inicial: dict[str, str] | None = None):
        self._dados = dict(inicial or {})

    def get_item(self, key: str) -> str | None:
        return self._dados.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._dados[key] = value

    def remove_item(self, key: str) -> None:
        self._dados.pop(key, None)


class FileStorage:
    """Storage persistente em um arquivo JSON (equivalente ao localStorage)."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _ler(self) -> dict:
        if not self.path.exists():
            return {}
        return json.loads(self.path.read_text(encoding="utf-8") or "{}")

    def _gravar(self, dados: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(dados), encoding="utf-8")

    def get_item(self, key: str) -> str | None:
        return self._ler().get(key)

    def set_item(self, key: str, value: str) -> None:
        dados = self._ler()
        dados[key] = value
        self._gravar(dados)

    def remove_item(self, key: str) -> None:
        dados = self._ler()
        if dados.pop(key, None) is not None:
            self._gravar(dados)
