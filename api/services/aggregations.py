"""
Pipelines de agregación sobre PROYECTOS y ACADEMICOS.

Todos siguen la misma receta:
  $match (descarta null / "" / "null") -> $group -> $project -> $sort
ordenando por la métrica descendente y, a igualdad, por la etiqueta.
"""

from pymongo.collection import Collection

# Valores que se consideran "sin dato" en los campos de categoría
EMPTY_VALUES = [None, "", "null"]


def _to_double(field: str) -> dict:
    """monto puede venir como número, string o null; lo no convertible suma 0."""
    return {"$convert": {"input": f"${field}", "to": "double", "onError": 0, "onNull": 0}}


def count_by_pipeline(field: str, out_label: str, out_metric: str = "cantidad_proyectos") -> list[dict]:
    return [
        {"$match": {field: {"$nin": EMPTY_VALUES}}},
        {"$group": {"_id": f"${field}", out_metric: {"$sum": 1}}},
        {"$project": {"_id": 0, out_label: "$_id", out_metric: 1}},
        {"$sort": {out_metric: -1, out_label: 1}},
    ]


def sum_amount_pipeline(field: str, out_label: str, amount_field: str = "monto") -> list[dict]:
    return [
        {"$addFields": {"monto_numeric": _to_double(amount_field)}},
        {"$match": {field: {"$nin": EMPTY_VALUES}}},
        {"$group": {"_id": f"${field}", "monto_total": {"$sum": "$monto_numeric"}}},
        {"$project": {"_id": 0, out_label: "$_id", "monto_total": 1}},
        {"$sort": {"monto_total": -1, out_label: 1}},
    ]


def academics_pipeline() -> list[dict]:
    """Un proyecto cuenta una vez por cada académico embebido (nombre + apellido paterno)."""
    return [
        {"$unwind": "$academicos"},
        {
            "$match": {
                "academicos.nombre": {"$nin": EMPTY_VALUES},
                "academicos.a_paterno": {"$nin": EMPTY_VALUES},
            }
        },
        {
            "$group": {
                "_id": {"nombre": "$academicos.nombre", "a_paterno": "$academicos.a_paterno"},
                "cantidad_proyectos": {"$sum": 1},
            }
        },
        {
            "$project": {
                "_id": 0,
                "nombre_completo_academico": {"$concat": ["$_id.nombre", " ", "$_id.a_paterno"]},
                "cantidad_proyectos": 1,
            }
        },
        {"$sort": {"cantidad_proyectos": -1, "nombre_completo_academico": 1}},
    ]


# ---------- consultas ----------

def projects_per_academic(projects: Collection) -> list[dict]:
    return list(projects.aggregate(academics_pipeline()))


def projects_per_topic(projects: Collection) -> list[dict]:
    return list(projects.aggregate(count_by_pipeline("tematica", "tematica")))


def projects_per_unit(projects: Collection) -> list[dict]:
    return list(projects.aggregate(count_by_pipeline("unidad", "unidad")))


def projects_per_call_institution(projects: Collection) -> list[dict]:
    return list(projects.aggregate(count_by_pipeline("inst_conv", "institucion_convocatoria")))


def projects_per_call_type(projects: Collection) -> list[dict]:
    return list(projects.aggregate(count_by_pipeline("tipo_convocatoria", "tipo_convocatoria")))


def professors_per_unit(academics: Collection) -> list[dict]:
    return list(
        academics.aggregate(count_by_pipeline("unidad", "unidad_academica", out_metric="cantidad_profesores"))
    )


def amount_per_call_institution(projects: Collection) -> list[dict]:
    return list(projects.aggregate(sum_amount_pipeline("inst_conv", "institucion_convocatoria")))


def amount_per_call_type(projects: Collection) -> list[dict]:
    return list(projects.aggregate(sum_amount_pipeline("tipo_convocatoria", "tipo_convocatoria")))
