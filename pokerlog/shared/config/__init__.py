"""Configuración de la aplicación."""
from pokerlog.shared.config.settings import Settings

__all__ = ["Settings"]
