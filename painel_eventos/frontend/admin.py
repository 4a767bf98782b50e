"""
Controller do painel administrativo.

Um único formulário serve cadastro e edição: `em_edicao_id` decide entre
POST /api/eventos e PUT /api/eventos/{id}. Qualquer 401/403 encerra a sessão
(remove o token e volta para o login).
"""
from __future__ import annotations

import httpx

from painel_eventos.core.logger import log
from painel_eventos.frontend.navegador import PAGINA_LOGIN, Navegador
from painel_eventos.frontend.render import mensagem_html, render
from painel_eventos.frontend.storage import TOKEN_KEY, Storage

CAMPOS = ("nome", "descricao", "tipo", "data_evento", "hora_evento")

TITULO_NOVO = "➕ Inserir Novo Item"
BOTAO_NOVO = "Cadastrar Item"
BOTAO_EDICAO = "Salvar Alterações"
MSG_SESSAO = "Sua sessão expirou. Faça login novamente."
MSG_CONEXAO = "🚨 Erro de conexão com o servidor."


def _json(response) -> dict:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


class AdminController:
    def __init__(self, http, storage: Storage, navegador: Navegador):
        self.http = http
        self.storage = storage
        self.navegador = navegador

        self.lista_html = ""
        self.em_edicao_id: int | None = None
        self.formulario = dict.fromkeys(CAMPOS, "")
        self.titulo = TITULO_NOVO
        self.rotulo_botao = BOTAO_NOVO
        self.mensagem = ""
        self.estilo_mensagem = "info"

    # ---------- sessão ----------
    @property
    def token(self) -> str | None:
        return self.storage.get_item(TOKEN_KEY)

    def _headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"}

    def _encerrar_sessao(self, aviso: str | None = MSG_SESSAO) -> None:
        if aviso:
            self.navegador.alertar(aviso)
        self.storage.remove_item(TOKEN_KEY)
        self.navegador.redirecionar(PAGINA_LOGIN)

    def iniciar(self) -> bool:
        if not self.token:
            self.navegador.alertar("Sua sessão expirou ou você não está logado. Redirecionando...")
            self.navegador.redirecionar(PAGINA_LOGIN)
            return False
        self.carregar_lista()
        return True

    def sair(self) -> None:
        self._encerrar_sessao(aviso=None)

    def _mostrar(self, texto: str, estilo: str) -> None:
        self.mensagem = texto
        self.estilo_mensagem = estilo

    # ---------- lista ----------
    def carregar_lista(self) -> list[dict]:
        self.lista_html = mensagem_html("Carregando itens para administração...")
        try:
            response = self.http.get("/api/eventos")
            if not response.is_success:
                raise ValueError("Falha ao buscar itens da lista.")
            eventos = response.json()
        except (httpx.HTTPError, ValueError) as e:
            log.error(f"Erro ao carregar lista de administração: {e}")
            self.lista_html = mensagem_html(f"Erro ao carregar lista: {e}", cor="red")
            return []

        if not eventos:
            self.lista_html = mensagem_html("Nenhum item cadastrado.")
            return []

        self.lista_html = "".join(render("card_admin.html", evento=e) for e in eventos)
        return eventos

    # ---------- formulário ----------
    def editar(self, evento_id: int) -> bool:
        """Busca o item e coloca o formulário em modo edição."""
        try:
            response = self.http.get(f"/api/eventos/{evento_id}")
            if not response.is_success:
                raise ValueError("Item não encontrado.")
            evento = response.json()
        except (httpx.HTTPError, ValueError) as e:
            self.navegador.alertar(f"Falha ao buscar dados para edição: {e}")
            return False

        self.formulario = {
            "nome": evento.get("nome") or "",
            "descricao": evento.get("descricao") or "",
            "tipo": evento.get("tipo") or "",
            "data_evento": (evento.get("data_evento") or "")[:10],
            "hora_evento": evento.get("hora_evento") or "",
        }
        self.em_edicao_id = evento_id
        self.titulo = f"✏️ Editando Item ID {evento_id}"
        self.rotulo_botao = BOTAO_EDICAO
        self._mostrar("Modo de Edição. Preencha e salve.", "aviso")
        return True

    def resetar_formulario(self) -> None:
        self.formulario = dict.fromkeys(CAMPOS, "")
        self.em_edicao_id = None
        self.titulo = TITULO_NOVO
        self.rotulo_botao = BOTAO_NOVO
        self._mostrar("Formulário pronto para novo cadastro.", "info")

    def enviar(self, dados: dict | None = None) -> bool:
        """Submete o formulário: cadastro (POST) ou edição (PUT)."""
        if dados:
            self.formulario.update({k: v for k, v in dados.items() if k in CAMPOS})
        self._mostrar("Aguarde...", "info")

        if self.em_edicao_id is not None:
            method, url = "PUT", f"/api/eventos/{self.em_edicao_id}"
        else:
            method, url = "POST", "/api/eventos"

        try:
            response = self.http.request(method, url, json=self.formulario, headers=self._headers())
        except httpx.HTTPError as e:
            log.error(f"Erro de rede: {e}")
            self._mostrar(MSG_CONEXAO, "erro")
            return False

        corpo = _json(response)
        if response.is_success:
            mensagem = corpo.get("message") or "Operação realizada com sucesso!"
            self.resetar_formulario()
            self._mostrar(mensagem, "sucesso")
            self.carregar_lista()
            return True
        if response.status_code in (401, 403):
            self._encerrar_sessao()
            return False

        self._mostrar(f"🚨 Erro: {corpo.get('message') or 'Falha na operação.'}", "erro")
        return False

    # ---------- exclusão ----------
    def excluir(self, evento_id: int) -> bool:
        if not self.navegador.confirmar(f"Tem certeza que deseja excluir o item ID {evento_id}?"):
            return False
        try:
            response = self.http.delete(f"/api/eventos/{evento_id}", headers=self._headers())
        except httpx.HTTPError as e:
            log.error(f"Erro ao excluir: {e}")
            self.navegador.alertar("Erro de conexão ao tentar excluir.")
            return False

        if response.status_code == 204:
            self.navegador.alertar("Item excluído com sucesso!")
            self.carregar_lista()
            return True
        if response.status_code in (401, 403):
            self._encerrar_sessao()
            return False

        corpo = _json(response)
        self.navegador.alertar(f"Falha ao excluir: {corpo.get('message') or 'Erro desconhecido.'}")
        return False

    # ---------- manutenção ----------
    def resetar_contador(self) -> bool:
        try:
            response = self.http.post("/api/manutencao/reset-id", headers=self._headers())
        except httpx.HTTPError as e:
            log.error(f"Erro ao resetar contador: {e}")
            self._mostrar(MSG_CONEXAO, "erro")
            return False

        if response.status_code in (401, 403):
            self._encerrar_sessao()
            return False
        corpo = _json(response)
        if response.is_success:
            self._mostrar(corpo.get("message") or "Contador resetado.", "sucesso")
            return True
        self._mostrar(f"🚨 Erro: {corpo.get('error') or corpo.get('message') or 'Falha na operação.'}", "erro")
        return False
