"""
Estadísticas sobre PROYECTOS / ACADEMICOS (pipelines de agregación en MongoDB).

GET /proyectos/academicos/proyectos-conteo-nombre-completo
GET /proyectos/tematicas/proyectos-conteo
GET /proyectos/unidades/proyectos-conteo
GET /proyectos/instituciones-convocatoria/proyectos-conteo
GET /proyectos/tipos-convocatoria/proyectos-conteo
GET /proyectos/profesores/por-unidad-academica
GET /proyectos/instituciones-convocatoria/monto-total
GET /proyectos/tipos-convocatoria/monto-total
"""

from fastapi import APIRouter, Depends
from pymongo.database import Database

from api.routes.people import ACADEMICOS
from api.routes.projects import PROYECTOS
from api.services import aggregations as agg
from api.services.db import get_db

router = APIRouter(prefix="/proyectos", tags=["Estadisticas"])


def _ok(data: list[dict]) -> dict:
    return {"success": True, "data": data}


@router.get(
    "/academicos/proyectos-conteo-nombre-completo",
    summary="Conteo de proyectos por académico (nombre y apellido paterno)",
)
def academics_project_count(db: Database = Depends(get_db)):
    return _ok(agg.projects_per_academic(db[PROYECTOS.collection]))


@router.get("/tematicas/proyectos-conteo", summary="Conteo de proyectos por temática")
def topics_project_count(db: Database = Depends(get_db)):
    return _ok(agg.projects_per_topic(db[PROYECTOS.collection]))


@router.get("/unidades/proyectos-conteo", summary="Conteo de proyectos por unidad")
def units_project_count(db: Database = Depends(get_db)):
    return _ok(agg.projects_per_unit(db[PROYECTOS.collection]))


@router.get(
    "/instituciones-convocatoria/proyectos-conteo",
    summary="Conteo de proyectos por institución de convocatoria",
)
def call_institutions_project_count(db: Database = Depends(get_db)):
    return _ok(agg.projects_per_call_institution(db[PROYECTOS.collection]))


@router.get("/tipos-convocatoria/proyectos-conteo", summary="Conteo de proyectos por tipo de convocatoria")
def call_types_project_count(db: Database = Depends(get_db)):
    return _ok(agg.projects_per_call_type(db[PROYECTOS.collection]))


@router.get("/profesores/por-unidad-academica", summary="Conteo de profesores por unidad académica")
def professors_per_unit(db: Database = Depends(get_db)):
    return _ok(agg.professors_per_unit(db[ACADEMICOS.collection]))


@router.get(
    "/instituciones-convocatoria/monto-total",
    summary="Monto total de proyectos por institución de convocatoria",
)
def call_institutions_amount(db: Database = Depends(get_db)):
    return _ok(agg.amount_per_call_institution(db[PROYECTOS.collection]))


@router.get("/tipos-convocatoria/monto-total", summary="Monto total de proyectos por tipo de convocatoria")
def call_types_amount(db: Database = Depends(get_db)):
    return _ok(agg.amount_per_call_type(db[PROYECTOS.collection]))
