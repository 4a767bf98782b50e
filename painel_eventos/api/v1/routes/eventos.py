# painel_eventos/api/v1/routes/eventos.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import ValidationError

from painel_eventos.api.deps import get_store, ler_payload, verificar_token
from painel_eventos.database.store import EventoStore
from painel_eventos.schemas.evento import EventoCriadoOut, EventoIn, EventoOut, MensagemOut

router = APIRouter(tags=["eventos"])

MSG_NAO_ENCONTRADO = "Item não encontrado."
MSG_OBRIGATORIOS = "Nome, descrição e tipo são obrigatórios."


def _parse_id(evento_id: str) -> int:
    # id que não é número não casa com nenhuma linha
    try:
        return int(evento_id)
    except ValueError:
        raise HTTPException(status.HTTP_404_NOT_FOUND, MSG_NAO_ENCONTRADO)


def _validar(payload: dict) -> EventoIn:
    try:
        evento = EventoIn.model_validate(payload)
    except ValidationError:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, MSG_OBRIGATORIOS)
    if not evento.campos_obrigatorios_ok():
        raise HTTPException(status.HTTP_400_BAD_REQUEST, MSG_OBRIGATORIOS)
    return evento


# ---------- rotas públicas ----------
@router.get("/eventos", response_model=list[EventoOut])
def listar_eventos(store: EventoStore = Depends(get_store)):
    return store.listar()


@router.get("/eventos/{evento_id}", response_model=EventoOut)
def buscar_evento(evento_id: str, store: EventoStore = Depends(get_store)):
    evento = store.buscar(_parse_id(evento_id))
    if not evento:
        raise HTTPException(status.HTTP_404_NOT_FOUND, MSG_NAO_ENCONTRADO)
    return evento


# ---------- rotas protegidas ----------
@router.post("/eventos", status_code=status.HTTP_201_CREATED, response_model=EventoCriadoOut)
def criar_evento(
    auth: dict = Depends(verificar_token),
    payload: dict = Depends(ler_payload),
    store: EventoStore = Depends(get_store),
):
    evento = _validar(payload)
    novo_id = store.criar(evento.model_dump())
    return {"message": "Item cadastrado com sucesso!", "id": novo_id}


@router.put("/eventos/{evento_id}", response_model=MensagemOut)
def atualizar_evento(
    evento_id: str,
    auth: dict = Depends(verificar_token),
    payload: dict = Depends(ler_payload),
    store: EventoStore = Depends(get_store),
):
    evento = _validar(payload)
    if not store.atualizar(_parse_id(evento_id), evento.model_dump()):
        raise HTTPException(status.HTTP_404_NOT_FOUND, MSG_NAO_ENCONTRADO)
    return {"message": "Item atualizado com sucesso!"}


@router.delete("/eventos/{evento_id}", status_code=status.HTTP_204_NO_CONTENT)
def excluir_evento(
    evento_id: str,
    auth: dict = Depends(verificar_token),
    store: EventoStore = Depends(get_store),
):
    if not store.excluir(_parse_id(evento_id)):
        raise HTTPException(status.HTTP_404_NOT_FOUND, MSG_NAO_ENCONTRADO)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
