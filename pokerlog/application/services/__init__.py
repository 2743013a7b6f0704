"""Application services de orquestación."""
from pokerlog.application.services.session_service import SessionService

__all__ = ["SessionService"]
