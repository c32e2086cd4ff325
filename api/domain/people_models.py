"""
Modelos para ACADEMICOS y ESTUDIANTES (mismo esquema en ambas colecciones).
"""

from typing import Literal

from pydantic import BaseModel, EmailStr, Field

from api.domain.base import HttpUrlStr, NonEmptyStr, PartialUpdate


class PersonaIn(BaseModel):
    nombre: NonEmptyStr
    a_paterno: NonEmptyStr
    a_materno: str | None = None
    email: EmailStr | Literal[""] | None = Field(None, description="Email válido, vacío o null")
    unidad: str | None = Field(None, description="Unidad o departamento")
    link_foto: HttpUrlStr | Literal[""] | None = Field(None, description="URL de la foto, vacío o null")


class PersonaUpdate(PartialUpdate):
    not_null = frozenset({"nombre", "a_paterno"})

    nombre: NonEmptyStr | None = None
    a_paterno: NonEmptyStr | None = None
    a_materno: str | None = None
    email: EmailStr | Literal[""] | None = None
    unidad: str | None = None
    link_foto: HttpUrlStr | Literal[""] | None = None


class FotoUpdate(BaseModel):
    """Busca a la persona por nombre completo y le cambia link_foto."""

    nombre: NonEmptyStr
    a_paterno: NonEmptyStr
    a_materno: str | None = Field(
        None,
        description="Si se envía (incluso null) se usa en el filtro; si se omite, no filtra por él.",
    )
    link_foto: HttpUrlStr | Literal[""] | None

    def filter(self) -> dict:
        query = {"nombre": self.nombre, "a_paterno": self.a_paterno}
        if "a_materno" in self.model_fields_set:
            query["a_materno"] = self.a_materno
        return query
