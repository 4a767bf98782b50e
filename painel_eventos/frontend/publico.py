from __future__ import annotations

import httpx

from painel_eventos.core.logger import log
from painel_eventos.frontend.render import mensagem_html, render

MSG_VAZIA = "Nenhum evento/atração cadastrado(a) no momento."


class FalhaCarregamento(Exception):
    pass


class PublicoController:
    """Página pública: lista todos os eventos/atrações em cards."""

    def __init__(self, http):
        self.http = http
        self.lista_html = ""

    def carregar(self) -> list[dict]:
        try:
            response = self.http.get("/api/eventos")
            if not response.is_success:
                raise FalhaCarregamento(f"Erro ao carregar dados: {response.status_code}")
            eventos = response.json()
        except (httpx.HTTPError, FalhaCarregamento, ValueError) as e:
            log.error(f"Falha ao carregar itens: {e}")
            self.lista_html = mensagem_html(f"Erro de conexão com o servidor: {e}", cor="red")
            return []

        if not eventos:
            self.lista_html = mensagem_html(MSG_VAZIA)
            return []

        self.lista_html = "".join(render("card_publico.html", evento=e) for e in eventos)
        return eventos
