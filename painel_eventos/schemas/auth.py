from typing import Optional

from pydantic import BaseModel


class LoginIn(BaseModel):
    usuario: Optional[str] = None
    senha: Optional[str] = None


class TokenOut(BaseModel):
    token: str
