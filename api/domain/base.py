"""
Tipos y base comunes para los modelos de entrada.
"""

from typing import Annotated, ClassVar

from pydantic import AfterValidator, AnyHttpUrl, BaseModel, StringConstraints, TypeAdapter, model_validator

# String obligatorio con al menos un caracter visible
NonEmptyStr = Annotated[str, StringConstraints(min_length=1, pattern=r"\S")]

_http_url = TypeAdapter(AnyHttpUrl)


def _check_http_url(value: str) -> str:
    # se valida, pero se guarda el string tal cual llegó (sin normalizar)
    _http_url.validate_python(value)
    return value


HttpUrlStr = Annotated[str, AfterValidator(_check_http_url)]


class PartialUpdate(BaseModel):
    """
    Base para los cuerpos de PUT/PATCH parciales: todos los campos son opcionales,
    pero los listados en `not_null` no aceptan un null explícito.
    """

    not_null: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        for name in self.model_fields_set & self.not_null:
            if getattr(self, name) is None:
                raise ValueError(f"'{name}' no puede ser null")
        return self

    def changes(self) -> dict:
        """Solo los campos enviados en el request."""
        return self.model_dump(exclude_unset=True)
