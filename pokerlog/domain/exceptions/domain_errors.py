"""
PokerLog – Domain Exceptions
==============================
Excepciones específicas del dominio de negocio.

JERARQUÍA:
    DomainError (base)
    ├── ValidationError   → input mal formado o incompleto (400)
    ├── NotFoundError     → la operación apunta a un id inexistente (404)
    ├── ConflictError     → nombre único duplicado (409)
    └── InternalFault     → fallo inesperado de store/cálculo (500)

ValidationError y ConflictError se producen ANTES de tocar el store
y siempre son corregibles por el usuario: el mensaje se devuelve tal cual.
InternalFault se loguea y se expone como un fallo opaco.
"""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Excepción base para errores de dominio."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self) -> dict:
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainError):
    """Error de validación de datos de entrada."""

    def __init__(self, message: str, field: str = None, value: Any = None):
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field
        self.value = value


class NotFoundError(DomainError):
    """La entidad solicitada no existe."""

    def __init__(self, message: str, entity: str = None, entity_id: Any = None):
        super().__init__(message, code="NOT_FOUND")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(DomainError):
    """Violación de unicidad (ej: nombre de sala repetido)."""

    def __init__(self, message: str, field: str = None, value: Any = None):
        super().__init__(message, code="CONFLICT")
        self.field = field
        self.value = value


class InternalFault(DomainError):
    """Fallo inesperado. El mensaje expuesto al cliente es genérico."""

    def __init__(self, message: str = "Error interno del servidor"):
        super().__init__(message, code="INTERNAL_ERROR")
