"""
Tests para la API REST (FastAPI).
Finalidad: Verificar que los endpoints generales están accesibles y que la documentación se publica en /swagger.
"""

from fastapi.testclient import TestClient

import api.main
from api.main import app

client = TestClient(app)


def test_read_main():
    """
    Objetivo: Comprobar que el endpoint raíz ("/") responde con status 200 y un mensaje de bienvenida.
    """
    response = client.get("/")
    assert response.status_code == 200
    assert "Bienvenido" in response.json()["message"]


def test_health_reports_database(monkeypatch):
    """
    Objetivo: Verificar que /health informa el estado de MongoDB sin fallar cuando la base no responde.
    """
    monkeypatch.setattr(api.main, "ping", lambda: False)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True, "database": "down"}

    monkeypatch.setattr(api.main, "ping", lambda: True)
    assert client.get("/health").json()["database"] == "up"


def test_swagger_published():
    """
    Objetivo: Comprobar que la UI de Swagger y el esquema OpenAPI están disponibles.
    """
    assert client.get("/swagger").status_code == 200
    schema = client.get("/openapi.json").json()
    assert schema["info"]["title"] == "API de Gestión de Proyectos de Cartera"
    assert "/proyectos" in schema["paths"]
    assert "/fondos-excel-bun/sync" in schema["paths"]


def test_unknown_id_format_is_400(db):
    """
    Objetivo: Verificar que un id que no tiene 24 caracteres hexadecimales se rechaza con 400.
    """
    response = client.get("/instituciones/no-es-un-id")
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "ID de institución inválido"}
