"""
Controllers das páginas (público, admin, login).

Cada controller recebe um cliente HTTP compatível com httpx, um storage
chave/valor (o "localStorage") e um navegador (alert/confirm/redirect).
"""
import httpx

from painel_eventos.frontend.admin import AdminController
from painel_eventos.frontend.login import LoginController
from painel_eventos.frontend.navegador import Navegador
from painel_eventos.frontend.publico import PublicoController
from painel_eventos.frontend.storage import TOKEN_KEY, FileStorage, MemoryStorage, Storage


def criar_cliente(base_url: str, timeout: float = 10.0, transport: httpx.BaseTransport | None = None) -> httpx.Client:
    return httpx.Client(base_url=base_url, timeout=timeout, transport=transport)


__all__ = [
    "AdminController",
    "FileStorage",
    "LoginController",
    "MemoryStorage",
    "Navegador",
    "PublicoController",
    "Storage",
    "TOKEN_KEY",
    "criar_cliente",
]
