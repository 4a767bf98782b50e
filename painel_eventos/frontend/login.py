from __future__ import annotations

import httpx

from painel_eventos.core.logger import log
from painel_eventos.frontend.navegador import PAGINA_ADMIN, Navegador
from painel_eventos.frontend.storage import TOKEN_KEY, Storage


class LoginController:
    def __init__(self, http, storage: Storage, navegador: Navegador):
        self.http = http
        self.storage = storage
        self.navegador = navegador
        self.mensagem_erro = ""

    def iniciar(self) -> bool:
        """Admin já autenticado pula o formulário. Retorna False se redirecionou."""
        if self.storage.get_item(TOKEN_KEY):
            self.navegador.redirecionar(PAGINA_ADMIN)
            return False
        return True

    def entrar(self, usuario: str, senha: str) -> bool:
        self.mensagem_erro = ""
        try:
            response = self.http.post("/api/login", json={"usuario": usuario, "senha": senha})
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            log.error(f"Erro de rede: {e}")
            self.mensagem_erro = "Erro de conexão com o servidor."
            return False

        if response.is_success:
            self.storage.set_item(TOKEN_KEY, data["token"])
            self.navegador.redirecionar(PAGINA_ADMIN)
            return True

        self.mensagem_erro = data.get("message") or "Erro ao tentar fazer login."
        return False
