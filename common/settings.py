# common/settings.py
"""
Configuración por variables de entorno (.env soportado vía python-dotenv).

- MONGODB_URI / DB_NAME : conexión a MongoDB
- HOST / PORT           : dónde escucha uvicorn
- CORS_ORIGINS          : orígenes permitidos, separados por coma ("*" = todos)
- FONDOS_EXCEL_URL      : origen externo para /fondos-excel-bun/sync
                          (se acepta también el nombre viejo VITE_MONGO_EXCEL)
- HTTPX_VERIFY          : poné HTTPX_VERIFY=0 para saltar verificación TLS
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _split_csv(raw: str) -> list[str]:
    return [p.strip() for p in raw.split(",") if p.strip()]


@dataclass(frozen=True)
class Settings:
    mongodb_uri: str = "mongodb://localhost:27017"
    db_name: str = "CARTERA"
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    fondos_excel_url: str | None = None
    http_verify: bool = True
    mongo_timeout_ms: int = 5000


@lru_cache
def get_settings() -> Settings:
    """Lee el entorno una sola vez por proceso."""
    return Settings(
        mongodb_uri=os.getenv("MONGODB_URI", "mongodb://localhost:27017"),
        db_name=os.getenv("DB_NAME", "CARTERA"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3000")),
        cors_origins=_split_csv(os.getenv("CORS_ORIGINS", "*")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        fondos_excel_url=os.getenv("FONDOS_EXCEL_URL") or os.getenv("VITE_MONGO_EXCEL"),
        http_verify=os.getenv("HTTPX_VERIFY", "1") != "0",
        mongo_timeout_ms=int(os.getenv("MONGO_TIMEOUT_MS", "5000")),
    )
