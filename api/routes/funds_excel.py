"""
/fondos-excel-bun : fondos importados desde la planilla (colección FONDOS_EXEL).
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.concurrency import run_in_threadpool
from pymongo.database import Database

from api.services import funds_sync
from api.services.db import get_db, serialize
from api.services.errors import ApiError
from common.settings import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/fondos-excel-bun", tags=["Fondos"])


def _with_validar(doc: dict) -> dict:
    return {**doc, "VALIDAR": funds_sync.coerce_validar(doc.get("VALIDAR"))}


@router.get("", summary="Obtiene todos los documentos de la colección FONDOS_EXEL")
def list_funds(db: Database = Depends(get_db)):
    fondos = serialize(list(db[funds_sync.COLLECTION].find({})))
    return {
        "success": True,
        "count": len(fondos),
        "data": fondos,
        "message": "Documentos de fondos recuperados correctamente de FONDOS_EXEL.",
    }


@router.post("", summary="Inserta cualquier JSON (objeto o arreglo) en FONDOS_EXEL")
def insert_funds(payload: dict[str, Any] | list[dict[str, Any]] = Body(...), db: Database = Depends(get_db)):
    collection = db[funds_sync.COLLECTION]
    if isinstance(payload, list):
        if not payload:
            raise ApiError(400, "El arreglo de documentos no puede estar vacío")
        result = collection.insert_many([_with_validar(d) for d in payload])
        return {
            "success": True,
            "message": f"Se insertaron {len(result.inserted_ids)} documentos correctamente en FONDOS_EXEL.",
            "insertedCount": len(result.inserted_ids),
        }

    result = collection.insert_one(_with_validar(payload))
    return {
        "success": True,
        "message": "Documento insertado correctamente en FONDOS_EXEL",
        "insertedId": serialize(result.inserted_id),
    }


@router.delete("", summary="Elimina todos los documentos de la colección FONDOS_EXEL")
def delete_funds(db: Database = Depends(get_db)):
    result = db[funds_sync.COLLECTION].delete_many({})
    return {"success": True, "message": f"Se eliminaron {result.deleted_count} documentos de FONDOS_EXEL."}


@router.post("/sync", summary="Reemplaza FONDOS_EXEL con los datos de FONDOS_EXCEL_URL")
async def sync_funds(db: Database = Depends(get_db)):
    settings = get_settings()
    if not settings.fondos_excel_url:
        logger.error("FONDOS_EXCEL_URL no está definida en las variables de entorno")
        raise ApiError(500, "URL de fondos externos no configurada en el servidor.")

    logger.info("Sincronizando fondos desde %s", settings.fondos_excel_url)
    rows = await funds_sync.fetch_external_funds(settings.fondos_excel_url, verify=settings.http_verify)
    inserted, deleted = await run_in_threadpool(funds_sync.replace_all, db[funds_sync.COLLECTION], rows)

    return {
        "success": True,
        "countInserted": inserted,
        "countDeleted": deleted,
        "message": f"Sincronización completa: {inserted} documentos insertados, {deleted} eliminados.",
    }
