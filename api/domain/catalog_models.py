"""
Modelos de las tablas de catálogo (instituciones, unidades académicas,
temáticas, tipos de apoyo/convocatoria, estatus) y de FONDOS.
"""

from pydantic import BaseModel, Field

from api.domain.base import NonEmptyStr, PartialUpdate


class NombreIn(BaseModel):
    nombre: NonEmptyStr = Field(..., description="Nombre (único en la colección)")


class NombreUpdate(PartialUpdate):
    not_null = frozenset({"nombre"})

    nombre: NonEmptyStr | None = None


class TipoIn(BaseModel):
    tipo: NonEmptyStr = Field(..., description="Tipo (único en la colección)")


class TipoUpdate(PartialUpdate):
    not_null = frozenset({"tipo"})

    tipo: NonEmptyStr | None = None


class FondoIn(BaseModel):
    nombre: NonEmptyStr
    inicio: NonEmptyStr
    cierre: NonEmptyStr
    financiamiento: NonEmptyStr = Field(..., description='Texto libre, ej. "100 millones"')
    plazo: NonEmptyStr = Field(..., description='Texto libre, ej. "24 meses"')
    objetivo: NonEmptyStr
    trl: int | float = Field(..., ge=0)
    crl: int | float | None = None
    team: int | float | None = None
    brl: int | float | None = None
    iprl: int | float | None = None
    frl: int | float | None = None
    tipo: int = Field(..., ge=1, description="Id numérico del tipo de convocatoria")
    req: str | None = None


class FondoUpdate(PartialUpdate):
    not_null = frozenset(
        {"nombre", "inicio", "cierre", "financiamiento", "plazo", "objetivo", "trl", "tipo"}
    )

    nombre: NonEmptyStr | None = None
    inicio: NonEmptyStr | None = None
    cierre: NonEmptyStr | None = None
    financiamiento: NonEmptyStr | None = None
    plazo: NonEmptyStr | None = None
    objetivo: NonEmptyStr | None = None
    trl: int | float | None = Field(None, ge=0)
    crl: int | float | None = None
    team: int | float | None = None
    brl: int | float | None = None
    iprl: int | float | None = None
    frl: int | float | None = None
    tipo: int | None = Field(None, ge=1)
    req: str | None = None
