"""
Punto de entrada de FastAPI: registra routers, CORS y handlers de error.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import (
    catalogs,
    excel_bun,
    excel_bun_stats,
    funds_excel,
    people,
    profile,
    projects,
    statistics,
)
from api.services.db import close_client, ping
from api.services.errors import register_error_handlers
from common.logging_setup import setup_logging
from common.settings import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    if ping():
        logger.info("Conectado a MongoDB (%s)", settings.db_name)
    else:
        logger.warning("MongoDB no disponible al iniciar; se reintentará en cada request")
    yield
    close_client()


app = FastAPI(
    title="API de Gestión de Proyectos de Cartera",
    description="Proyectos, académicos, estudiantes, catálogos y análisis de planillas EXCEL-BUN.",
    version="1.0.0",
    docs_url="/swagger",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.get("/", tags=["General"])
def root():
    return {"message": "Bienvenido a la API de Gestión de Proyectos de Cartera. Docs en /swagger"}


@app.get("/health", tags=["General"])
def health():
    return {"ok": True, "database": "up" if ping() else "down"}


# Las rutas fijas de /proyectos van antes que /proyectos/{item_id}
app.include_router(statistics.router)
app.include_router(projects.router)
app.include_router(people.academicos_router)
app.include_router(people.estudiantes_router)
for r in catalogs.routers:
    app.include_router(r)
app.include_router(profile.preguntas_router)
app.include_router(profile.respuestas_router)
app.include_router(excel_bun.router)
app.include_router(excel_bun_stats.router)
app.include_router(funds_excel.router)


def serve() -> None:
    """Console script `cartera-api`."""
    uvicorn.run("api.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())
