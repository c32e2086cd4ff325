"""
Perfil de proyecto.
- /perfil-proyecto     : preguntas (número y texto únicos)
- /respuestas-perfil   : respuestas; fecha_creacion la asigna el servidor
"""

from datetime import datetime, timezone

from api.domain.survey_models import PreguntaIn, PreguntaUpdate, RespuestaIn, RespuestaUpdate
from api.routes.crud_router import build_crud_router
from api.services.crud import Resource

PREGUNTAS = Resource("PERFIL_PROYECTO", "pregunta de perfil", feminine=True, unique=("numero", "pregunta"))
RESPUESTAS = Resource("RESPUESTAS_PERFIL", "respuesta de perfil", feminine=True)


def _stamp_creation(data: dict) -> dict:
    return {**data, "fecha_creacion": datetime.now(timezone.utc)}


preguntas_router = build_crud_router(
    prefix="/perfil-proyecto",
    tag="Perfil Proyecto",
    resource=PREGUNTAS,
    create_model=PreguntaIn,
    update_model=PreguntaUpdate,
)

respuestas_router = build_crud_router(
    prefix="/respuestas-perfil",
    tag="Respuestas Perfil",
    resource=RESPUESTAS,
    create_model=RespuestaIn,
    update_model=RespuestaUpdate,
    prepare_create=_stamp_creation,
)
