"""
Conexión a MongoDB mediante un único MongoClient por proceso.
"""

import logging
import re
from datetime import datetime
from typing import Any

from bson import ObjectId
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from api.services.errors import ApiError
from common.settings import get_settings

logger = logging.getLogger(__name__)

OBJECT_ID_PATTERN = r"^[0-9a-fA-F]{24}$"
_OBJECT_ID_RE = re.compile(OBJECT_ID_PATTERN)

_client: MongoClient | None = None


def get_client() -> MongoClient:
    """
    Retorna el MongoClient compartido, creándolo la primera vez.
    MongoClient ya maneja su propio pool de conexiones.
    """
    global _client
    if _client is None:
        settings = get_settings()
        _client = MongoClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
            tz_aware=True,
        )
        logger.info("MongoClient creado para la base '%s'", settings.db_name)
    return _client


def get_db() -> Database:
    """Dependencia de FastAPI: base de datos configurada en DB_NAME."""
    return get_client()[get_settings().db_name]


def ping(db: Database | None = None) -> bool:
    target = db if db is not None else get_db()
    try:
        target.command("ping")
        return True
    except PyMongoError as e:
        logger.warning("MongoDB no responde: %s", e)
        return False


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoClient cerrado")


def parse_object_id(raw: str, label: str) -> ObjectId:
    """Valida el formato de 24 hex antes de tocar la base."""
    if not isinstance(raw, str) or not _OBJECT_ID_RE.match(raw):
        raise ApiError(400, f"ID de {label} inválido")
    return ObjectId(raw)


def serialize(value: Any) -> Any:
    """ObjectId -> str, datetime -> ISO-8601, recursivo sobre dicts y listas."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize(v) for v in value]
    return value
