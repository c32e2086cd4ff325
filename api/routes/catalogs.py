"""
Tablas de catálogo y fondos. Todas comparten el mismo CRUD y rechazan
nombres/tipos duplicados con 409.

- /instituciones          INSTITUCIONES   (nombre único)
- /unidades-academicas    UA              (nombre único)
- /tematicas              TEMATICAS       (nombre único)
- /tipos-apoyo            TIPO_APOYO      (tipo único)
- /tipos-convocatoria     TIPO_CONV       (nombre único)
- /estatus                ESTATUS         (tipo único)
- /fondos                 FONDOS          (nombre único)
"""

from api.domain.catalog_models import FondoIn, FondoUpdate, NombreIn, NombreUpdate, TipoIn, TipoUpdate
from api.routes.crud_router import build_crud_router
from api.services.crud import Resource

INSTITUCIONES = Resource("INSTITUCIONES", "institución", feminine=True, unique=("nombre",))
UNIDADES = Resource("UA", "unidad académica", feminine=True, unique=("nombre",))
TEMATICAS = Resource("TEMATICAS", "temática", feminine=True, unique=("nombre",))
TIPOS_APOYO = Resource("TIPO_APOYO", "tipo de apoyo", unique=("tipo",))
TIPOS_CONVOCATORIA = Resource("TIPO_CONV", "tipo de convocatoria", unique=("nombre",))
ESTATUS = Resource("ESTATUS", "estatus", unique=("tipo",))
FONDOS = Resource("FONDOS", "fondo", unique=("nombre",))

routers = [
    build_crud_router(prefix="/instituciones", tag="Instituciones", resource=INSTITUCIONES,
                      create_model=NombreIn, update_model=NombreUpdate),
    build_crud_router(prefix="/unidades-academicas", tag="Unidades Académicas", resource=UNIDADES,
                      create_model=NombreIn, update_model=NombreUpdate),
    build_crud_router(prefix="/tematicas", tag="Temáticas", resource=TEMATICAS,
                      create_model=NombreIn, update_model=NombreUpdate),
    build_crud_router(prefix="/tipos-apoyo", tag="Tipos de Apoyo", resource=TIPOS_APOYO,
                      create_model=TipoIn, update_model=TipoUpdate),
    build_crud_router(prefix="/tipos-convocatoria", tag="Tipos de Convocatoria", resource=TIPOS_CONVOCATORIA,
                      create_model=NombreIn, update_model=NombreUpdate),
    build_crud_router(prefix="/estatus", tag="Estatus", resource=ESTATUS,
                      create_model=TipoIn, update_model=TipoUpdate),
    build_crud_router(prefix="/fondos", tag="Fondos", resource=FONDOS,
                      create_model=FondoIn, update_model=FondoUpdate),
]
