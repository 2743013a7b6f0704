"""
PokerLog – Presentation Layer
===============================
API HTTP.

Este módulo contiene:
- api/: FastAPI routes, schemas, dependencies y error handlers

REGLA DE DEPENDENCIA:
Esta capa SOLO llama a SessionService de application/.
NO accede directamente a domain/repositories ni a infrastructure/.
"""

from pokerlog.presentation.api.routes import router
from pokerlog.presentation.api.error_handlers import register_error_handlers

__all__ = [
    "router",
    "register_error_handlers",
]
