"""
Fixtures compartidas: base MongoDB en memoria (mongomock) inyectada en la app.
"""

import mongomock
import pytest

from api.main import app
from api.services.db import get_db


@pytest.fixture
def db():
    """Base nueva por test; reemplaza la dependencia get_db de FastAPI."""
    database = mongomock.MongoClient(tz_aware=True)["CARTERA_TEST"]
    app.dependency_overrides[get_db] = lambda: database
    yield database
    app.dependency_overrides.pop(get_db, None)
