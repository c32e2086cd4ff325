"""
Modelos Pydantic para la colección PROYECTOS.

Los académicos y estudiantes embebidos son texto libre (no referencias a
ACADEMICOS / ESTUDIANTES).
"""

from pydantic import BaseModel, Field

from api.domain.base import NonEmptyStr, PartialUpdate


class AcademicoRef(BaseModel):
    nombre: NonEmptyStr
    a_paterno: NonEmptyStr
    a_materno: str | None = None


class EstudianteRef(BaseModel):
    nombre: str | None = None
    a_paterno: str | None = None
    a_materno: str | None = None


class ProyectoIn(BaseModel):
    nombre: NonEmptyStr = Field(..., description="Nombre del proyecto")
    academicos: list[AcademicoRef] = Field(..., min_length=1, description="Al menos un académico")
    estudiantes: list[EstudianteRef] = Field(default_factory=list)
    id_kth: str | None = None
    comentarios: str | None = None
    monto: int | float | None = Field(None, description="Monto adjudicado/postulado")
    fecha_postulacion: str | None = None
    unidad: str | None = None
    tematica: str | None = None
    estatus: str | None = None
    convocatoria: str | None = None
    tipo_convocatoria: str | None = None
    inst_conv: str | None = Field(None, description="Institución de la convocatoria")
    detalle_apoyo: str | None = None
    apoyo: str | None = None


class ProyectoUpdate(PartialUpdate):
    not_null = frozenset({"nombre", "academicos", "estudiantes"})

    nombre: NonEmptyStr | None = None
    academicos: list[AcademicoRef] | None = Field(None, min_length=1)
    estudiantes: list[EstudianteRef] | None = None
    id_kth: str | None = None
    comentarios: str | None = None
    monto: int | float | None = None
    fecha_postulacion: str | None = None
    unidad: str | None = None
    tematica: str | None = None
    estatus: str | None = None
    convocatoria: str | None = None
    tipo_convocatoria: str | None = None
    inst_conv: str | None = None
    detalle_apoyo: str | None = None
    apoyo: str | None = None
