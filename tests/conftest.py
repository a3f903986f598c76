from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event

from placement_api.db.postgres import PlacementStore, get_store
from placement_api.main import app

SCHEMA_PATH = Path(__file__).parent / "sqlite_schema.sql"


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def engine(tmp_path):
    # File-backed so each pooled connection (one per threadpool worker) sees the same data
    engine = create_engine(
        f"sqlite:///{tmp_path / 'placement.db'}",
        connect_args={"check_same_thread": False}
    )
    event.listen(engine, "connect", _enable_foreign_keys)
    raw = engine.raw_connection()
    try:
        raw.driver_connection.executescript(SCHEMA_PATH.read_text())
        raw.commit()
    finally:
        raw.close()
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    return PlacementStore(engine)


@pytest.fixture
def make_client():
    """Build a TestClient whose handlers receive the given store."""
    clients = []

    def _make(store_obj):
        app.dependency_overrides[get_store] = lambda: store_obj
        client = TestClient(app)
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
    app.dependency_overrides.clear()


@pytest.fixture
def client(store, make_client):
    return make_client(store)


@pytest.fixture
def seeded(client):
    """One department, student, company and job role; returns their ids."""
    dept_id = client.post("/api/departments", json={"dept_name": "CS"}).json()["id"]
    student_id = client.post("/api/students", json={
        "student_name": "Asha", "roll_no": "CS001", "cgpa": 8.5, "department_id": dept_id
    }).json()["id"]
    company_id = client.post("/api/companies", json={
        "company_name": "Acme", "location": "Pune",
        "contact_email": "hr@acme.test", "website": "https://acme.test"
    }).json()["id"]
    jobrole_id = client.post("/api/jobroles", json={
        "company_id": company_id, "role_title": "SDE", "package_lpa": 12.5
    }).json()["id"]
    return {
        "dept_id": dept_id, "student_id": student_id,
        "company_id": company_id, "jobrole_id": jobrole_id
    }
