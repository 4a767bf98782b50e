from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from painel_eventos.api.deps import get_store, verificar_token
from painel_eventos.database.store import EventoStore, StoreError

router = APIRouter(tags=["manutencao"])


@router.post("/manutencao/reset-id")
def resetar_id(auth: dict = Depends(verificar_token), store: EventoStore = Depends(get_store)):
    try:
        detalhe = store.resetar_auto_increment()
    except StoreError as e:
        return JSONResponse(
            status_code=500,
            content={"message": "Falha ao resetar o contador de ID.", "error": str(e)},
        )
    return {
        "message": "Contador de ID da tabela eventos resetado com sucesso para 1 (ou o próximo valor disponível).",
        "detalhe": detalhe,
    }
