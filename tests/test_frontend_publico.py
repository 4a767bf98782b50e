import httpx
from fastapi.testclient import TestClient

from painel_eventos.database.store import EventoStore
from painel_eventos.frontend import PublicoController, criar_cliente
from painel_eventos.main import create_app
from tests.conftest import HttpForaDoAr


def test_lista_vazia(client):
    ctrl = PublicoController(client)
    assert ctrl.carregar() == []
    assert "Nenhum evento/atração cadastrado(a) no momento." in ctrl.lista_html


def test_evento_mostra_data_e_hora(client, criar_evento):
    criar_evento(nome="Show", tipo="Evento", data_evento="2024-03-05", hora_evento="20:00")
    ctrl = PublicoController(client)
    eventos = ctrl.carregar()

    assert len(eventos) == 1
    assert "<h3>Show</h3>" in ctrl.lista_html
    assert "05/03/2024" in ctrl.lista_html
    assert "Hora: 20:00" in ctrl.lista_html


def test_evento_sem_data_mostra_nao_definida(client, criar_evento):
    criar_evento(tipo="Evento")
    ctrl = PublicoController(client)
    ctrl.carregar()
    assert "Data: Não definida" in ctrl.lista_html
    assert "Hora: Não definida" in ctrl.lista_html


def test_atracao_com_data_mostra_so_data(client, criar_evento):
    criar_evento(nome="Museu", tipo="Atração", data_evento="2024-06-01", hora_evento="09:00")
    ctrl = PublicoController(client)
    ctrl.carregar()
    assert "01/06/2024" in ctrl.lista_html
    assert "Hora" not in ctrl.lista_html


def test_atracao_sem_data_nao_mostra_datas(client, criar_evento):
    criar_evento(nome="Parque", tipo="Atração")
    ctrl = PublicoController(client)
    ctrl.carregar()
    assert "Data:" not in ctrl.lista_html
    assert "Descrição:</strong> Descrição" in ctrl.lista_html


def test_erro_do_servidor(settings):
    client = TestClient(create_app(settings, EventoStore(None)))
    ctrl = PublicoController(client)
    assert ctrl.carregar() == []
    assert "Erro ao carregar dados: 500" in ctrl.lista_html
    assert 'style="color: red;"' in ctrl.lista_html


def test_servidor_fora_do_ar():
    ctrl = PublicoController(HttpForaDoAr())
    assert ctrl.carregar() == []
    assert "Erro de conexão com o servidor: Connection refused" in ctrl.lista_html


def test_criar_cliente_usa_base_url():
    vistos = []

    def responder(request):
        vistos.append(str(request.url))
        return httpx.Response(200, json=[{"id": 1, "nome": "Feira", "descricao": "d", "tipo": "Atração"}])

    http = criar_cliente("http://painel.local", transport=httpx.MockTransport(responder))
    ctrl = PublicoController(http)

    assert [e["nome"] for e in ctrl.carregar()] == ["Feira"]
    assert vistos == ["http://painel.local/api/eventos"]
