"""
CRUD genérico sobre una colección de MongoDB.

Cada recurso (proyectos, académicos, instituciones, ...) se describe con un
`Resource`; `CrudService` aplica siempre las mismas reglas:
- id con formato inválido       -> 400
- no encontrado                 -> 404
- valor único ya existente      -> 409
- PUT sin campos                -> 400 (no se escribe nada)
"""

from dataclasses import dataclass, field
from typing import Any

from pymongo.database import Database

from api.services.db import parse_object_id
from api.services.errors import ApiError


@dataclass(frozen=True)
class Resource:
    collection: str
    label: str                      # "institución", "tipo de apoyo", ...
    feminine: bool = False
    # campos únicos; basta que uno coincida con otro documento para 409
    unique: tuple[str, ...] = field(default_factory=tuple)

    @property
    def title(self) -> str:
        return self.label[:1].upper() + self.label[1:]

    def adj(self, stem: str) -> str:
        """'cread' -> 'creada' / 'creado' según el género."""
        return stem + ("a" if self.feminine else "o")

    @property
    def article(self) -> str:
        return "una" if self.feminine else "un"


class CrudService:
    def __init__(self, db: Database, resource: Resource):
        self.resource = resource
        self.collection = db[resource.collection]

    # ---------- helpers ----------

    def _oid(self, raw_id: str):
        return parse_object_id(raw_id, self.resource.label)

    def _not_found(self) -> ApiError:
        r = self.resource
        return ApiError(404, f"{r.title} no {r.adj('encontrad')}")

    def _check_unique(self, data: dict, exclude_id=None) -> None:
        conditions = [{f: data[f]} for f in self.resource.unique if f in data]
        if not conditions:
            return
        query: dict[str, Any] = {"$or": conditions}
        if exclude_id is not None:
            query["_id"] = {"$ne": exclude_id}
        if self.collection.find_one(query, projection={"_id": 1}) is not None:
            r = self.resource
            campos = " o ".join(self.resource.unique)
            otro = "otra" if r.feminine else "otro"
            quien = otro if exclude_id is not None else r.article
            raise ApiError(409, f"Ya existe {quien} {r.label} con ese {campos}")

    # ---------- operaciones ----------

    def list(self) -> list[dict]:
        return list(self.collection.find({}))

    def get(self, raw_id: str) -> dict:
        doc = self.collection.find_one({"_id": self._oid(raw_id)})
        if doc is None:
            raise self._not_found()
        return doc

    def create(self, data: dict) -> dict:
        self._check_unique(data)
        doc = dict(data)
        result = self.collection.insert_one(doc)
        if not result.acknowledged:
            raise ApiError(500, f"Fallo al crear {self.resource.label}")
        return {"_id": result.inserted_id, **data}

    def update(self, raw_id: str, data: dict) -> str:
        oid = self._oid(raw_id)
        if not data:
            raise ApiError(400, "El cuerpo de la solicitud no puede estar vacío para PUT")
        self._check_unique(data, exclude_id=oid)

        result = self.collection.update_one({"_id": oid}, {"$set": data})
        r = self.resource
        if result.matched_count == 0:
            raise self._not_found()
        if result.modified_count == 0:
            return f"{r.title} no {r.adj('modificad')} (datos idénticos)"
        return f"{r.title} {r.adj('actualizad')} exitosamente"

    def delete(self, raw_id: str) -> str:
        result = self.collection.delete_one({"_id": self._oid(raw_id)})
        if result.deleted_count == 0:
            raise self._not_found()
        r = self.resource
        return f"{r.title} {r.adj('eliminad')} exitosamente"

    def created_message(self) -> str:
        r = self.resource
        return f"{r.title} {r.adj('cread')} exitosamente"
