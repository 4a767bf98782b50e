from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from painel_eventos import __version__
from painel_eventos.api.v1.routes import auth, eventos, manutencao
from painel_eventos.core.config import Settings
from painel_eventos.core.config import settings as default_settings
from painel_eventos.core.logger import log, setup_logger
from painel_eventos.database.store import EventoStore, StoreError


# -----------------------------------------------------------------------------
# Erros -> JSON {"message": ...} / {"error": ...}
# -----------------------------------------------------------------------------
async def _http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def _validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Requisição inválida.", "detalhes": jsonable_encoder(exc.errors())},
    )


async def _store_error(request: Request, exc: StoreError):
    return JSONResponse(status_code=500, content={"error": str(exc)})


def create_app(settings: Settings | None = None, store: EventoStore | None = None) -> FastAPI:
    settings = settings or default_settings
    setup_logger(settings.LOG_LEVEL, settings.LOG_FILE or None)

    # cliente do banco: criado uma vez e injetado via Depends(get_store)
    store = store or EventoStore.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # falha de conexão não derruba o processo; cada request devolve 500
        store.conectar(create_tables=settings.CREATE_TABLES)
        yield

    app = FastAPI(title="Painel de Eventos API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(StoreError, _store_error)

    app.include_router(eventos.router, prefix="/api")
    app.include_router(auth.router, prefix="/api")
    app.include_router(manutencao.router, prefix="/api")

    log.info(f"🚀 Painel de Eventos v{__version__} configurado.")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("painel_eventos.main:app", host="0.0.0.0", port=8000, reload=True)
