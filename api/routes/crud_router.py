"""
Fábrica de routers CRUD: GET (lista / por id), POST, PUT parcial y DELETE
sobre una colección descrita por un `Resource`.
"""

from typing import Callable

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from pymongo.database import Database

from api.domain.base import PartialUpdate
from api.services.crud import CrudService, Resource
from api.services.db import get_db, serialize


def build_crud_router(
    *,
    prefix: str,
    tag: str,
    resource: Resource,
    create_model: type[BaseModel],
    update_model: type[PartialUpdate],
    prepare_create: Callable[[dict], dict] | None = None,
) -> APIRouter:
    """
    `prepare_create` permite completar el documento antes de insertarlo
    (p. ej. fecha_creacion puesta por el servidor).
    """
    router = APIRouter(prefix=prefix, tags=[tag])
    label = resource.label

    def service(db: Database = Depends(get_db)) -> CrudService:
        return CrudService(db, resource)

    @router.get("", summary=f"Obtener todos los registros de {label}")
    def list_items(svc: CrudService = Depends(service)):
        return {"success": True, "data": serialize(svc.list())}

    @router.get("/{item_id}", summary=f"Obtener {label} por ID")
    def get_item(item_id: str, svc: CrudService = Depends(service)):
        return {"success": True, "data": serialize(svc.get(item_id))}

    @router.post("", status_code=status.HTTP_201_CREATED, summary=f"Crear {label}")
    def create_item(payload: create_model, svc: CrudService = Depends(service)):
        data = payload.model_dump()
        if prepare_create is not None:
            data = prepare_create(data)
        created = svc.create(data)
        return {"success": True, "data": serialize(created), "message": svc.created_message()}

    @router.put("/{item_id}", summary=f"Actualizar {label} (parcial)")
    def update_item(item_id: str, payload: update_model, svc: CrudService = Depends(service)):
        return {"success": True, "message": svc.update(item_id, payload.changes())}

    @router.delete("/{item_id}", summary=f"Eliminar {label} por ID")
    def delete_item(item_id: str, svc: CrudService = Depends(service)):
        return {"success": True, "message": svc.delete(item_id)}

    return router
