"""
PokerLog – Registro de sesiones de poker
==========================================
Backend para registrar sesiones (fecha, sala, modalidad, buy-in, cash-out,
duración, notas) y calcular estadísticas agregadas de rendimiento.
"""

__version__ = "0.1.0"
