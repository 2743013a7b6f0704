"""
PokerLog – Domain Value Object: CategoryKey
=============================================
Clave de agrupación para los desgloses por sala y por modalidad.

POR QUÉ UNA CLAVE ETIQUETADA Y NO UN STRING:
  Si las sesiones sin sala se agruparan bajo el string "Unknown", una
  sala llamada literalmente "Unknown" se fusionaría con ese bucket.
  CategoryKey distingue ambos casos:

    CategoryKey.named("Unknown")  → sala real llamada "Unknown"
    UNSPECIFIED                   → sesión sin sala ("")

  La agrupación usa el valor literal: sensible a mayúsculas, sin trim.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Etiqueta visible del bucket sin especificar
UNSPECIFIED_LABEL = "Unknown"


@dataclass(frozen=True, slots=True)
class CategoryKey:
    """Named(name) | Unspecified (name=None)."""

    name: Optional[str] = None

    @classmethod
    def named(cls, name: str) -> "CategoryKey":
        return cls(name=name)

    @classmethod
    def from_raw(cls, value: Optional[str]) -> "CategoryKey":
        """"" o None → UNSPECIFIED; cualquier otro valor tal cual."""
        if not value:
            return UNSPECIFIED
        return cls(name=value)

    @property
    def is_unspecified(self) -> bool:
        return self.name is None

    @property
    def label(self) -> str:
        return UNSPECIFIED_LABEL if self.name is None else self.name


UNSPECIFIED = CategoryKey()
