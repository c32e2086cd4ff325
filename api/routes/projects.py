"""
/proyectos: CRUD de la colección PROYECTOS.
Los reportes agregados sobre proyectos viven en api/routes/statistics.py.
"""

from api.domain.project_models import ProyectoIn, ProyectoUpdate
from api.routes.crud_router import build_crud_router
from api.services.crud import Resource

PROYECTOS = Resource(collection="PROYECTOS", label="proyecto")

router = build_crud_router(
    prefix="/proyectos",
    tag="Proyectos",
    resource=PROYECTOS,
    create_model=ProyectoIn,
    update_model=ProyectoUpdate,
)
