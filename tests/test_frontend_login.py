from painel_eventos.frontend import TOKEN_KEY, LoginController, MemoryStorage
from tests.conftest import HttpForaDoAr


def test_ja_logado_vai_direto_para_admin(client, navegador):
    ctrl = LoginController(client, MemoryStorage({TOKEN_KEY: "abc"}), navegador)
    assert ctrl.iniciar() is False
    assert navegador.redirecionamentos == ["admin.html"]


def test_sem_token_mostra_formulario(client, navegador):
    ctrl = LoginController(client, MemoryStorage(), navegador)
    assert ctrl.iniciar() is True
    assert navegador.redirecionamentos == []


def test_login_ok_guarda_token(client, admin, navegador):
    storage = MemoryStorage()
    ctrl = LoginController(client, storage, navegador)

    assert ctrl.entrar(admin["usuario"], admin["senha"]) is True
    assert storage.get_item(TOKEN_KEY)
    assert navegador.redirecionamentos == ["admin.html"]
    assert ctrl.mensagem_erro == ""


def test_login_errado_mostra_mensagem(client, admin, navegador):
    storage = MemoryStorage()
    ctrl = LoginController(client, storage, navegador)

    assert ctrl.entrar(admin["usuario"], "errada") is False
    assert ctrl.mensagem_erro == "Usuário ou senha inválidos."
    assert storage.get_item(TOKEN_KEY) is None
    assert navegador.redirecionamentos == []


def test_login_sem_conexao(navegador):
    ctrl = LoginController(HttpForaDoAr(), MemoryStorage(), navegador)
    assert ctrl.entrar("admin", "x") is False
    assert ctrl.mensagem_erro == "Erro de conexão com o servidor."
