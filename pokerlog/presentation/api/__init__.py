"""FastAPI routes, schemas y error handlers."""
from pokerlog.presentation.api.routes import router
from pokerlog.presentation.api.error_handlers import register_error_handlers

__all__ = ["router", "register_error_handlers"]
