"""
/academicos y /estudiantes: CRUD + actualización de foto por nombre.

PATCH /<prefijo>/update-photo         : un registro
PATCH /<prefijo>/update-photos-batch  : varios, con estado por elemento
"""

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from pymongo.database import Database

from api.domain.people_models import FotoUpdate, PersonaIn, PersonaUpdate
from api.routes.crud_router import build_crud_router
from api.services.crud import Resource
from api.services.db import get_db
from api.services.photos import update_photo, update_photos_batch

ACADEMICOS = Resource(collection="ACADEMICOS", label="académico")
ESTUDIANTES = Resource(collection="ESTUDIANTES", label="estudiante")


def _build(prefix: str, tag: str, resource: Resource) -> APIRouter:
    router = build_crud_router(
        prefix=prefix,
        tag=tag,
        resource=resource,
        create_model=PersonaIn,
        update_model=PersonaUpdate,
    )

    @router.patch("/update-photo", summary=f"Actualizar link_foto de un {resource.label} por nombre")
    def patch_photo(item: FotoUpdate, db: Database = Depends(get_db)):
        message = update_photo(db[resource.collection], item, resource.label)
        return {"success": True, "message": message}

    @router.patch("/update-photos-batch", summary=f"Actualizar link_foto de varios {resource.label}s (lote)")
    def patch_photos_batch(items: list[FotoUpdate] = Body(...), db: Database = Depends(get_db)):
        status_code, body = update_photos_batch(db[resource.collection], items, resource.label)
        return JSONResponse(status_code=status_code, content=body)

    return router


academicos_router = _build("/academicos", "Académicos", ACADEMICOS)
estudiantes_router = _build("/estudiantes", "Estudiantes", ESTUDIANTES)
