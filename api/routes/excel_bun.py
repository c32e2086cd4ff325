"""
EXCEL-BUN: filas crudas de la planilla de proyectos + análisis en memoria.

- POST   /excel-bun                           : inserta un objeto o un arreglo
- DELETE /excel-bun                           : borra toda la colección
- GET    /excel-bun/numero-proyectos          : total de documentos
- GET    /excel-bun/analisis                  : cantidad de valores distintos por categoría
- GET    /excel-bun/analisis-completo         : conteos por categoría + académicos únicos
- GET    /excel-bun/{tematicas|estatus|ua|tipo_convocatoria|institucion_convocatoria|fechas_postulacion}
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from pymongo.database import Database

from api.services import analysis as an
from api.services.db import get_db, serialize
from api.services.errors import ApiError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/excel-bun", tags=["ANALISIS DE LOS DATOS"])

COLLECTION = "EXCEL-BUN"

# Columnas de la planilla
TEMATICA = "Temática"
ESTATUS = "Estatus"
TIPO_APOYO = "Tipo Apoyo"
DETALLE_APOYO = "Detalle Apoyo"
UNIDAD = "Unidad Académica"
UNIDAD_EXTRA = "Unidad Académica ++"
LIDER = "Académic@/s-Líder"
PARTNER = "Académic@/s-Partner"
ESTUDIANTES = "Estudiantes"
NOMBRE_CONVOCATORIA = "Nombre Convocatoria a la que se postuló"
TIPO_CONVOCATORIA = "Tipo Convocatoria"
INSTITUCION_CONVOCATORIA = "Institucion Convocatoria"
FECHA_POSTULACION = "Fecha Postulación"
MONTO_MM = "Monto Proyecto MM$"

UNIDADES = (UNIDAD, UNIDAD_EXTRA)
ACADEMICOS = (LIDER, PARTNER)


def load_docs(db: Database) -> list[dict]:
    return list(db[COLLECTION].find({}, projection={"_id": 0}))


# ---------- carga ----------

@router.post("", summary="Inserta cualquier JSON (objeto o arreglo) en EXCEL-BUN", tags=["Proyectos"])
def insert_rows(payload: dict[str, Any] | list[dict[str, Any]] = Body(...), db: Database = Depends(get_db)):
    collection = db[COLLECTION]
    if isinstance(payload, list):
        if not payload:
            raise ApiError(400, "El arreglo de documentos no puede estar vacío")
        result = collection.insert_many([dict(row) for row in payload])
        logger.info("EXCEL-BUN: %d documentos insertados", len(result.inserted_ids))
        return {
            "success": True,
            "message": f"Se insertaron {len(result.inserted_ids)} documentos correctamente.",
            "insertedCount": len(result.inserted_ids),
        }

    result = collection.insert_one(dict(payload))
    return {
        "success": True,
        "message": "Documento insertado correctamente",
        "insertedId": serialize(result.inserted_id),
    }


@router.delete("", summary="Elimina todos los registros de EXCEL-BUN", tags=["Proyectos"])
def delete_rows(db: Database = Depends(get_db)):
    result = db[COLLECTION].delete_many({})
    logger.info("EXCEL-BUN: %d documentos eliminados", result.deleted_count)
    return {"success": True, "message": f"Se eliminaron {result.deleted_count} documentos."}


# ---------- análisis ----------

@router.get("/numero-proyectos", summary="Número total de proyectos en EXCEL-BUN")
def count_projects(db: Database = Depends(get_db)):
    return {
        "success": True,
        "message": "Conteo total de proyectos en EXCEL-BUN",
        "count": db[COLLECTION].count_documents({}),
    }


@router.get("/analisis", summary="Total de proyectos y cantidad de valores distintos por categoría")
def general_analysis(db: Database = Depends(get_db)):
    docs = load_docs(db)
    return {
        "success": True,
        "message": "Análisis general: número total de proyectos y valores distintos por categoría en EXCEL-BUN",
        "resumen": {
            "Total proyectos": len(docs),
            TEMATICA: len(an.distinct_labels(docs, TEMATICA)),
            ESTATUS: len(an.distinct_labels(docs, ESTATUS)),
            TIPO_APOYO: len(an.distinct_labels(docs, TIPO_APOYO)),
            DETALLE_APOYO: len(an.distinct_labels(docs, DETALLE_APOYO)),
            "Académic@/s": len(an.distinct_tokens(docs, ACADEMICOS)),
            ESTUDIANTES: len(an.distinct_tokens(docs, (ESTUDIANTES,))),
            UNIDAD: len(an.distinct_labels(docs, UNIDAD)),
            NOMBRE_CONVOCATORIA: len(an.distinct_labels(docs, NOMBRE_CONVOCATORIA)),
            TIPO_CONVOCATORIA: len(an.distinct_labels(docs, TIPO_CONVOCATORIA)),
            INSTITUCION_CONVOCATORIA: len(an.distinct_labels(docs, INSTITUCION_CONVOCATORIA)),
        },
    }


@router.get("/analisis-completo", summary="Análisis completo de EXCEL-BUN")
def full_analysis(db: Database = Depends(get_db)):
    docs = load_docs(db)

    def block(total_key: str, counts) -> dict:
        datos = an.rank(counts)
        return {total_key: len(datos), "datos": datos}

    return {
        "success": True,
        "message": (
            "Análisis completo de proyectos en EXCEL-BUN: conteo total, temáticas, estatus, tipo de apoyo, "
            "unidades académicas, tipos/instituciones de convocatoria y total de académicos únicos."
        ),
        "totalProyectos": len(docs),
        "tematicas": block("totalTematicasDistintas", an.count_labels(docs, TEMATICA, "Sin temática")),
        "estatus": block("totalEstatusDistintos", an.count_labels(docs, ESTATUS, "Sin estatus")),
        "tipoApoyo": block("totalTiposApoyoDistintos", an.count_labels(docs, TIPO_APOYO, "Sin tipo de apoyo")),
        "unidadesAcademicas": block("totalUnidadesDistintas", an.count_tokens(docs, UNIDADES)),
        "tipoConvocatoria": block(
            "totalTiposConvocatoriaDistintos",
            an.count_labels(docs, TIPO_CONVOCATORIA, "Sin tipo de convocatoria"),
        ),
        "institucionConvocatoria": block(
            "totalInstitucionesConvocatoriaDistintas",
            an.count_labels(docs, INSTITUCION_CONVOCATORIA, "Sin institucion de convocatoria"),
        ),
        "academicos": {"totalAcademicosUnicos": len(an.distinct_tokens(docs, ACADEMICOS))},
    }


def _field_counts_route(path: str, field: str, default: str, title: str, total_key: str):
    """Registra GET /excel-bun/<path>: ocurrencias de un campo de valor único."""

    @router.get(f"/{path}", summary=f"{title} y cuántas veces se repiten en EXCEL-BUN", name=f"excel_bun_{path}")
    def field_counts(db: Database = Depends(get_db)):
        datos = an.rank(an.count_labels(load_docs(db), field, default))
        return {
            "success": True,
            "message": f"{title} y su cantidad de ocurrencias en EXCEL-BUN",
            total_key: len(datos),
            "datos": datos,
        }

    return field_counts


_field_counts_route("tematicas", TEMATICA, "Sin temática", "Temáticas", "totalTematicas")
_field_counts_route("estatus", ESTATUS, "Sin estatus", "Estatus", "totalEstatus")
_field_counts_route("ua", UNIDAD, "Sin unidad académica", "Unidad Académica", "totalUnidadAcademica")
_field_counts_route(
    "tipo_convocatoria", TIPO_CONVOCATORIA, "Sin tipo de convocatoria",
    "Tipo de Convocatoria", "totalTipoConvocatoria",
)
_field_counts_route(
    "institucion_convocatoria", INSTITUCION_CONVOCATORIA, "Sin institucion de convocatoria",
    "Institución de Convocatoria", "totalInstitucionConvocatoria",
)
_field_counts_route(
    "fechas_postulacion", FECHA_POSTULACION, "Sin fecha de postulación",
    "Fechas de Postulación", "totalFechasPostulacion",
)
