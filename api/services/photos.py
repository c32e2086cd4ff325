"""
Actualización de link_foto buscando por nombre completo (académicos / estudiantes).
"""

import logging

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from api.domain.people_models import FotoUpdate
from api.services.errors import ApiError

logger = logging.getLogger(__name__)

SUCCESS = "success"
SKIPPED = "skipped"
FAILED = "failed"
ERROR = "error"

MSG_NOT_FOUND = "{} no encontrado con esos datos"
MSG_SAME = "link_foto del {} no modificado (ya es idéntico)"
MSG_UPDATED = "link_foto del {} actualizado exitosamente"


def update_photo(collection: Collection, item: FotoUpdate, label: str) -> str:
    """Un solo registro; 404 si no hay coincidencia."""
    result = collection.update_one(item.filter(), {"$set": {"link_foto": item.link_foto}})
    if result.matched_count == 0:
        raise ApiError(404, MSG_NOT_FOUND.format(label.capitalize()))
    if result.modified_count == 0:
        return MSG_SAME.format(label)
    return MSG_UPDATED.format(label)


def update_photos_batch(collection: Collection, items: list[FotoUpdate], label: str) -> tuple[int, dict]:
    """
    Procesa cada elemento por separado y devuelve (status_code, body).

    Cada resultado lleva la consulta original y un estado:
    success | skipped (sin cambios) | failed (no encontrado) | error (falla de BD).
    Un error en un elemento no corta el lote.
    """
    if not items:
        raise ApiError(400, "El arreglo de actualizaciones no puede estar vacío")

    results: list[dict] = []
    for item in items:
        query = item.model_dump(exclude_unset=True)
        try:
            result = collection.update_one(item.filter(), {"$set": {"link_foto": item.link_foto}})
        except PyMongoError as e:
            logger.error("Error al actualizar foto de %s %s: %s", item.nombre, item.a_paterno, e)
            results.append({"query": query, "status": ERROR, "message": f"Error interno al procesar: {e}"})
            continue

        if result.matched_count == 0:
            results.append({"query": query, "status": FAILED, "message": MSG_NOT_FOUND.format(label.capitalize())})
        elif result.modified_count == 0:
            results.append({"query": query, "status": SKIPPED, "message": MSG_SAME.format(label)})
        else:
            results.append({"query": query, "status": SUCCESS, "message": MSG_UPDATED.format(label)})

    statuses = [r["status"] for r in results]
    if all(s in (FAILED, ERROR) for s in statuses):
        return 400, {
            "success": False,
            "message": f"Todas las actualizaciones fallaron o no se encontraron registros de {label}",
            "results": results,
        }
    if SUCCESS not in statuses:
        return 200, {
            "success": True,
            "message": f"Ningún link_foto de {label} fue modificado",
            "results": results,
        }
    return 200, {
        "success": True,
        "message": "Proceso de actualización por lotes completado",
        "results": results,
    }
