"""
PokerLog – Infrastructure Layer
=================================
Implementaciones concretas de interfaces.

Este módulo contiene:
- persistence/: Base de datos (SQLite por defecto, MySQL opcional)

REGLA DE DEPENDENCIA:
Esta capa implementa interfaces definidas en:
- domain/repositories/

Puede importar de:
- domain/ (entidades, interfaces)
- shared/ (config, logging)
"""
