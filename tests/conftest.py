"""
Configurações de teste compartilhadas.
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from painel_eventos.core.config import Settings
from painel_eventos.core.security import create_access_token
from painel_eventos.database.seed import seed_admin
from painel_eventos.database.session import make_engine
from painel_eventos.database.store import EventoStore
from painel_eventos.main import create_app

SECRET = "segredo-de-teste-com-pelo-menos-32-bytes"
ADMIN_USER = "admin"
ADMIN_PASS = "senha-forte-123"


class NavegadorFake:
    """Grava alert/confirm/redirect em vez de mexer em um browser."""

    def __init__(self, confirmar: bool = True):
        self.resposta_confirmacao = confirmar
        self.alertas = []
        self.confirmacoes = []
        self.redirecionamentos = []

    def alertar(self, mensagem):
        self.alertas.append(mensagem)

    def confirmar(self, mensagem):
        self.confirmacoes.append(mensagem)
        return self.resposta_confirmacao

    def redirecionar(self, destino):
        self.redirecionamentos.append(destino)


class HttpForaDoAr:
    """Cliente HTTP que nunca recebe resposta (servidor fora do ar)."""

    def _falhar(self, *args, **kwargs):
        raise httpx.ConnectError("Connection refused")

    get = post = put = delete = request = _falhar


@pytest.fixture
def settings():
    return Settings(SECRET_KEY=SECRET, DATABASE_URL="sqlite://", LOG_LEVEL="WARNING")


@pytest.fixture
def store():
    """Banco SQLite em memória novo para cada teste."""
    store = EventoStore(make_engine("sqlite://"))
    assert store.conectar()
    return store


@pytest.fixture
def admin(store):
    user_id = seed_admin(store, ADMIN_USER, ADMIN_PASS)
    return {"id": user_id, "usuario": ADMIN_USER, "senha": ADMIN_PASS}


@pytest.fixture
def app(settings, store):
    return create_app(settings, store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def token(admin):
    return create_access_token(user_id=admin["id"], usuario=admin["usuario"], secret=SECRET)


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def expired_headers(admin):
    tok = create_access_token(user_id=admin["id"], usuario=admin["usuario"], secret=SECRET, minutes=-5)
    return {"Authorization": f"Bearer {tok}"}


@pytest.fixture
def navegador():
    return NavegadorFake()


@pytest.fixture
def criar_evento(client, auth_headers):
    def _criar(**campos):
        payload = {"nome": "Show", "descricao": "Descrição", "tipo": "Evento"}
        payload.update(campos)
        res = client.post("/api/eventos", json=payload, headers=auth_headers)
        assert res.status_code == 201, res.text
        return res.json()["id"]

    return _criar
