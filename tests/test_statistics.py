"""
Tests para las estadísticas de PROYECTOS / ACADEMICOS (pipelines de agregación).
Finalidad: Verificar la forma de los pipelines y los conteos que devuelven los endpoints de /proyectos.
"""

from fastapi.testclient import TestClient

from api.main import app
from api.services import aggregations as agg

client = TestClient(app)


def _seed_projects(db):
    db["PROYECTOS"].insert_many(
        [
            {
                "nombre": "P1",
                "tematica": "Agua",
                "unidad": "FCFM",
                "inst_conv": "ANID",
                "tipo_convocatoria": "Fondecyt",
                "academicos": [{"nombre": "Ana", "a_paterno": "Pérez"}, {"nombre": "Luis", "a_paterno": "Soto"}],
            },
            {
                "nombre": "P2",
                "tematica": "Agua",
                "unidad": "Medicina",
                "inst_conv": "CORFO",
                "tipo_convocatoria": "null",
                "academicos": [{"nombre": "Ana", "a_paterno": "Pérez"}],
            },
            {
                "nombre": "P3",
                "tematica": "",
                "unidad": None,
                "inst_conv": "ANID",
                "academicos": [{"nombre": "Eva", "a_paterno": ""}],
            },
        ]
    )


def test_count_pipeline_shape():
    """
    Objetivo: Comprobar que el pipeline de conteo excluye vacíos y ordena por cantidad y luego etiqueta.
    """
    pipeline = agg.count_by_pipeline("tematica", "tematica")
    assert pipeline[0] == {"$match": {"tematica": {"$nin": [None, "", "null"]}}}
    assert pipeline[-1] == {"$sort": {"cantidad_proyectos": -1, "tematica": 1}}


def test_amount_pipeline_converts_monto():
    """
    Objetivo: Verificar que el monto se convierte a double con 0 ante error o null antes de agrupar.
    """
    pipeline = agg.sum_amount_pipeline("inst_conv", "institucion_convocatoria")
    convert = pipeline[0]["$addFields"]["monto_numeric"]["$convert"]
    assert convert == {"input": "$monto", "to": "double", "onError": 0, "onNull": 0}
    assert pipeline[2]["$group"]["monto_total"] == {"$sum": "$monto_numeric"}


def test_topics_count(db):
    """
    Objetivo: Comprobar el conteo de proyectos por temática descartando la temática vacía.
    """
    _seed_projects(db)
    response = client.get("/proyectos/tematicas/proyectos-conteo")
    assert response.status_code == 200
    assert response.json() == {"success": True, "data": [{"tematica": "Agua", "cantidad_proyectos": 2}]}


def test_call_institutions_count_sorted(db):
    """
    Objetivo: Verificar el orden por cantidad descendente en el conteo por institución de convocatoria.
    """
    _seed_projects(db)
    data = client.get("/proyectos/instituciones-convocatoria/proyectos-conteo").json()["data"]
    assert data == [
        {"institucion_convocatoria": "ANID", "cantidad_proyectos": 2},
        {"institucion_convocatoria": "CORFO", "cantidad_proyectos": 1},
    ]


def test_call_types_excludes_null_string(db):
    """
    Objetivo: Comprobar que el texto "null" se trata como dato faltante.
    """
    _seed_projects(db)
    data = client.get("/proyectos/tipos-convocatoria/proyectos-conteo").json()["data"]
    assert data == [{"tipo_convocatoria": "Fondecyt", "cantidad_proyectos": 1}]


def test_projects_per_academic(db):
    """
    Objetivo: Verificar el conteo por académico embebido (nombre + apellido paterno) sin apellidos vacíos.
    """
    _seed_projects(db)
    data = client.get("/proyectos/academicos/proyectos-conteo-nombre-completo").json()["data"]
    assert data == [
        {"nombre_completo_academico": "Ana Pérez", "cantidad_proyectos": 2},
        {"nombre_completo_academico": "Luis Soto", "cantidad_proyectos": 1},
    ]


def test_professors_per_unit(db):
    """
    Objetivo: Comprobar el conteo de profesores por unidad sobre la colección ACADEMICOS.
    """
    db["ACADEMICOS"].insert_many(
        [
            {"nombre": "Ana", "a_paterno": "Pérez", "unidad": "FCFM"},
            {"nombre": "Luis", "a_paterno": "Soto", "unidad": "FCFM"},
            {"nombre": "Eva", "a_paterno": "Lira", "unidad": "Derecho"},
            {"nombre": "Sin", "a_paterno": "Unidad", "unidad": None},
        ]
    )
    data = client.get("/proyectos/profesores/por-unidad-academica").json()["data"]
    assert data == [
        {"unidad_academica": "FCFM", "cantidad_profesores": 2},
        {"unidad_academica": "Derecho", "cantidad_profesores": 1},
    ]


def test_amount_routes_wrap_rows(db, monkeypatch):
    """
    Objetivo: Verificar que los endpoints de monto total devuelven las filas del pipeline en el sobre estándar.
    """
    rows = [{"institucion_convocatoria": "ANID", "monto_total": 3.5}]
    monkeypatch.setattr(agg, "amount_per_call_institution", lambda collection: rows)
    monkeypatch.setattr(agg, "amount_per_call_type", lambda collection: [])

    assert client.get("/proyectos/instituciones-convocatoria/monto-total").json() == {"success": True, "data": rows}
    assert client.get("/proyectos/tipos-convocatoria/monto-total").json() == {"success": True, "data": []}


def test_amount_pipeline_sums_per_institution(db):
    """
    Objetivo: Ejecutar las etapas de suma del pipeline de montos sobre documentos con monto ya convertido:
    totales por institución, sin etiquetas vacías / "null" y orden por monto desc y nombre asc.
    """
    db["PROYECTOS"].insert_many(
        [
            {"inst_conv": "CORFO", "monto_numeric": 150.0},
            {"inst_conv": "ANID", "monto_numeric": 100.0},
            {"inst_conv": "ANID", "monto_numeric": 50.0},
            {"inst_conv": "BID", "monto_numeric": 20.0},
            {"inst_conv": "BID", "monto_numeric": 0.0},
            {"inst_conv": "", "monto_numeric": 7.0},
            {"inst_conv": "null", "monto_numeric": 3.0},
            {"inst_conv": None, "monto_numeric": 9.0},
            {"monto_numeric": 11.0},
        ]
    )
    # $convert no está disponible en mongomock; se omite la etapa $addFields
    stages = agg.sum_amount_pipeline("inst_conv", "institucion_convocatoria")[1:]
    rows = list(db["PROYECTOS"].aggregate(stages))

    assert rows == [
        {"institucion_convocatoria": "ANID", "monto_total": 150.0},
        {"institucion_convocatoria": "CORFO", "monto_total": 150.0},
        {"institucion_convocatoria": "BID", "monto_total": 20.0},
    ]
