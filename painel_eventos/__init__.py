"""Painel de eventos/atrações: API pública, login JWT e área administrativa."""

__version__ = "1.0.0"
