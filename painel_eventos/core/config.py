from __future__ import annotations

import os
import secrets
from urllib.parse import quote_plus

from pydantic import BaseModel, model_validator

from painel_eventos.core.logger import log


def _bool_env(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    SECRET_KEY: str = os.getenv("SECRET_KEY", "")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

    DATABASE_URL: str = os.getenv("DATABASE_URL", "")
    DB_HOST: str = os.getenv("DB_HOST", "")
    DB_PORT: int = int(os.getenv("DB_PORT", "3306"))
    DB_USER: str = os.getenv("DB_USER", "")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "")
    DB_NAME: str = os.getenv("DB_NAME", "")
    CREATE_TABLES: bool = _bool_env("CREATE_TABLES", "true")

    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "")

    @model_validator(mode="after")
    def gerar_chave_provisoria(self) -> "Settings":
        # sem SECRET_KEY a assinatura continua ativa, só não sobrevive a um restart
        if not self.SECRET_KEY:
            log.warning("SECRET_KEY não definida: usando chave aleatória válida só para este processo.")
            self.SECRET_KEY = secrets.token_urlsafe(32)
        return self

    def database_url(self) -> str | None:
        """URL do SQLAlchemy: DATABASE_URL tem prioridade, senão monta MySQL a partir das partes."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if not self.DB_HOST or not self.DB_NAME:
            return None
        user = quote_plus(self.DB_USER)
        password = quote_plus(self.DB_PASSWORD)
        cred = f"{user}:{password}@" if password else (f"{user}@" if user else "")
        return f"mysql+pymysql://{cred}{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()] or ["*"]


settings = Settings()
