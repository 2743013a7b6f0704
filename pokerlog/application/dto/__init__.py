"""Application DTOs."""
from pokerlog.application.dto.session_dto import SessionInput

__all__ = ["SessionInput"]
