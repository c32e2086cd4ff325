# api/services/funds_sync.py
"""
Espejo de fondos externos (colección FONDOS_EXEL).

La planilla publicada en FONDOS_EXCEL_URL devuelve un arreglo JSON; cada fila
se normaliza (VALIDAR -> bool, sin _id) y reemplaza por completo la colección.
"""

import logging
from typing import Any

import httpx
from pymongo.collection import Collection

from api.services.errors import ApiError

logger = logging.getLogger(__name__)

COLLECTION = "FONDOS_EXEL"


def coerce_validar(value: Any) -> bool:
    """Carga manual: sólo "TRUE" (exacto) o true cuentan como validado."""
    return value == "TRUE" or value is True


def normalize_fund_row(row: dict) -> dict:
    """Fila externa -> documento: VALIDAR texto sin distinguir mayúsculas, faltante = False."""
    doc = {k: v for k, v in row.items() if k != "_id"}
    validar = doc.get("VALIDAR")
    if isinstance(validar, str):
        doc["VALIDAR"] = validar.upper() == "TRUE"
    elif "VALIDAR" not in doc:
        doc["VALIDAR"] = False
    return doc


async def fetch_external_funds(url: str, verify: bool = True) -> list[dict]:
    try:
        async with httpx.AsyncClient(timeout=30.0, verify=verify) as client:
            r = await client.get(url)
            r.raise_for_status()
            data = r.json()
    except httpx.HTTPError as e:
        raise ApiError(502, f"Error al obtener datos de la URL externa: {e}")
    except ValueError:
        raise ApiError(502, "La URL externa no devolvió JSON válido.")

    if not isinstance(data, list):
        raise ApiError(502, "La URL externa no devolvió un array de documentos.")
    return data


def replace_all(collection: Collection, rows: list[dict]) -> tuple[int, int]:
    """Borra todo e inserta `rows`. Devuelve (insertados, eliminados)."""
    docs = [normalize_fund_row(r) for r in rows if isinstance(r, dict)]
    deleted = collection.delete_many({}).deleted_count
    logger.info("FONDOS_EXEL: %d documentos existentes eliminados", deleted)

    inserted = 0
    if docs:
        inserted = len(collection.insert_many(docs).inserted_ids)
    logger.info("FONDOS_EXEL: %d documentos nuevos insertados", inserted)
    return inserted, deleted
