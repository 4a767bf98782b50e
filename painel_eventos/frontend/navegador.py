from typing import Protocol

PAGINA_LOGIN = "login.html"
PAGINA_ADMIN = "admin.html"


class Navegador(Protocol):
    """O que os controllers usam do browser: alert, confirm e troca de página."""

    def alertar(self, mensagem: str) -> None: ...

    def confirmar(self, mensagem: str) -> bool: ...

    def redirecionar(self, destino: str) -> None: ...
