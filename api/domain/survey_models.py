"""
Perfil de proyecto: preguntas (PERFIL_PROYECTO) y respuestas (RESPUESTAS_PERFIL).
"""

from pydantic import BaseModel, Field

from api.domain.base import NonEmptyStr, PartialUpdate


class PreguntaIn(BaseModel):
    numero: int = Field(..., ge=1, description="Número de la pregunta")
    pregunta: NonEmptyStr = Field(..., description="Texto de la pregunta")


class PreguntaUpdate(PartialUpdate):
    not_null = frozenset({"numero", "pregunta"})

    numero: int | None = Field(None, ge=1)
    pregunta: NonEmptyStr | None = None


class RespuestaIn(BaseModel):
    # fecha_creacion la pone el servidor; si viene en el body se ignora
    titulo: NonEmptyStr
    investigador: NonEmptyStr
    escuela: NonEmptyStr
    respuestas: list[NonEmptyStr] = Field(..., min_length=1)


class RespuestaUpdate(PartialUpdate):
    not_null = frozenset({"titulo", "investigador", "escuela", "respuestas"})

    titulo: NonEmptyStr | None = None
    investigador: NonEmptyStr | None = None
    escuela: NonEmptyStr | None = None
    respuestas: list[NonEmptyStr] | None = Field(None, min_length=1)
