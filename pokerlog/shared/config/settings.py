"""
PokerLog – Settings (Pydantic BaseSettings)
=============================================
Configuración centralizada cargada desde variables de entorno / .env.
Se usa pydantic-settings para validación estricta al arranque.

NOTA: No existe un singleton global. El entry point (main.create_app o el
CLI de bootstrap) construye Settings y lo inyecta hacia abajo.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ─── Aplicación ─────────────────────────────────────────────────────
    app_name: str = Field(default="PokerLog", description="Nombre del servicio")
    log_level: str = Field(default="INFO", description="Nivel del root logger")

    # ─── Server ─────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    debug: bool = Field(default=False)
    cors_origins: List[str] = Field(
        default=["*"],
        description="Orígenes permitidos para el cliente web",
    )

    # ─── Base de datos ──────────────────────────────────────────────────
    db_backend: Literal["sqlite", "mysql"] = Field(
        default="sqlite", description="Motor de persistencia",
    )
    db_path: str = Field(
        default="data/poker.db", description="Archivo SQLite (db_backend=sqlite)",
    )
    db_host: str = Field(default="localhost", description="MySQL host")
    db_port: int = Field(default=3306, description="MySQL port")
    db_user: str = Field(default="pokerlog", description="MySQL username")
    db_password: str = Field(default="pokerlog_secret", description="MySQL password")
    db_name: str = Field(default="pokerlog", description="MySQL database name")
    db_pool_size: int = Field(default=5, description="Conexiones en el pool (MySQL)")
    db_max_overflow: int = Field(default=10, description="Conexiones extra en picos (MySQL)")
    db_url: Optional[str] = Field(
        default=None, description="URL SQLAlchemy explícita (ignora los campos anteriores)",
    )
    db_echo: bool = Field(default=False, description="Loguear queries SQL (debug)")
    db_create_schema: bool = Field(
        default=True, description="Crear tablas al arrancar si no existen",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    @property
    def database_url(self) -> str:
        """Construye URL de conexión desde los campos db_*."""
        if self.db_url:
            return self.db_url
        if self.db_backend == "mysql":
            return (
                f"mysql+aiomysql://{self.db_user}:{self.db_password}"
                f"@{self.db_host}:{self.db_port}/{self.db_name}"
                f"?charset=utf8mb4"
            )
        return f"sqlite+aiosqlite:///{Path(self.db_path).as_posix()}"
