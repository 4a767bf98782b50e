from fastapi.testclient import TestClient

from painel_eventos.database.store import EventoStore
from painel_eventos.main import create_app


def test_reset_id_reaproveita_ids(client, auth_headers, criar_evento):
    ids = [criar_evento(nome=f"E{i}") for i in range(3)]
    for evento_id in ids[1:]:
        assert client.delete(f"/api/eventos/{evento_id}", headers=auth_headers).status_code == 204

    res = client.post("/api/manutencao/reset-id", headers=auth_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["message"].startswith("Contador de ID da tabela eventos resetado")
    assert body["detalhe"]["dialeto"] == "sqlite"

    assert criar_evento(nome="Depois do reset") == ids[0] + 1


def test_sem_reset_ids_nao_voltam(client, auth_headers, criar_evento):
    primeiro = criar_evento()
    segundo = criar_evento()
    client.delete(f"/api/eventos/{segundo}", headers=auth_headers)
    assert criar_evento() == primeiro + 2


def test_reset_id_falha_do_banco(settings, auth_headers):
    client = TestClient(create_app(settings, EventoStore(None)))
    res = client.post("/api/manutencao/reset-id", headers=auth_headers)
    assert res.status_code == 500
    assert res.json() == {
        "message": "Falha ao resetar o contador de ID.",
        "error": "Banco de dados não configurado.",
    }
