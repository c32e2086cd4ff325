"""
Gráficos / estadísticas sobre EXCEL-BUN (montos y conteos multi-valor).
"""

from fastapi import APIRouter, Depends
from pymongo.database import Database

from api.routes.excel_bun import (
    ACADEMICOS,
    INSTITUCION_CONVOCATORIA,
    MONTO_MM,
    TEMATICA,
    UNIDADES,
    load_docs,
)
from api.services import analysis as an
from api.services.db import get_db

router = APIRouter(prefix="/estadisticas-excel-bun", tags=["GRAFICOS"])

# Los montos de la planilla vienen en millones
MILLION = 1_000_000


@router.get(
    "/resumen",
    summary="Suma total de 'Monto Proyecto MM$' y monto agrupado por 'Institucion Convocatoria'",
    tags=["ANALISIS DE LOS DATOS"],
)
def summary(db: Database = Depends(get_db)):
    total, per_institution = an.amounts_by_label(
        load_docs(db), MONTO_MM, INSTITUCION_CONVOCATORIA, default="Sin Institución"
    )
    datos = an.rank(per_institution * MILLION, key="institucion", value="monto", cast=float)
    return {
        "success": True,
        "message": "Resumen de estadísticas: Suma total de Monto Proyecto y monto por institución.",
        "sumaMontoProyectos": total * MILLION,
        "montoPorInstitucion": {"totalInstitucionesConMonto": len(datos), "datos": datos},
    }


@router.get(
    "/proyectos-por-profesor",
    summary="Número de proyectos por profesor (Líder o Partner)",
)
def projects_per_professor(db: Database = Depends(get_db)):
    datos = an.rank(an.count_tokens(load_docs(db), ACADEMICOS))
    return {
        "success": True,
        "message": "Conteo de proyectos por profesor (Académic@/s-Líder y Académic@/s-Partner).",
        "totalProfesoresConProyectos": len(datos),
        "datos": datos,
    }


@router.get("/proyectos-por-tematica", summary="Número de proyectos por temática (multi-valor)")
def projects_per_topic(db: Database = Depends(get_db)):
    datos = an.rank(an.count_tokens(load_docs(db), (TEMATICA,)))
    return {
        "success": True,
        "message": "Conteo de proyectos por temática (campo 'Temática').",
        "totalTematicasConProyectos": len(datos),
        "datos": datos,
    }


@router.get(
    "/proyectos-por-unidad-academica",
    summary="Número de proyectos por Unidad Académica ('Unidad Académica' + 'Unidad Académica ++')",
)
def projects_per_unit(db: Database = Depends(get_db)):
    datos = an.rank(an.count_tokens(load_docs(db), UNIDADES))
    return {
        "success": True,
        "message": (
            "Conteo de proyectos por Unidad Académica "
            "(combinando 'Unidad Académica' y 'Unidad Académica ++')."
        ),
        "totalUnidadesAcademicasConProyectos": len(datos),
        "datos": datos,
    }


@router.get(
    "/profesores-por-unidad-academica",
    summary="Profesores únicos por Unidad Académica",
)
def professors_per_unit(db: Database = Depends(get_db)):
    counts = an.count_members_per_group(load_docs(db), UNIDADES, ACADEMICOS)
    datos = an.rank(counts, key="unidad", value="totalProfesoresUnicos")
    return {
        "success": True,
        "message": (
            "Conteo de profesores únicos asociados a cada Unidad Académica "
            "(combinando Líder, Partner y ambas unidades)."
        ),
        "totalUnidadesConProfesores": len(datos),
        "datos": datos,
    }
