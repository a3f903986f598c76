"""Application wiring: diagnostics, health, front end, config and logging."""

import logging

from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from placement_api.core.config import Settings
from placement_api.core.logging_config import CONSOLE_HANDLER, FILE_HANDLER, setup_logging
from placement_api.db.postgres import PlacementStore
from placement_api.main import create_app


def test_debug_routes_lists_api_routes(client):
    response = client.get("/debug/routes")

    assert response.status_code == 200
    routes = {(r["path"], r["methods"]) for r in response.json()["routes"]}
    for expected in [
        ("/api/data", "GET"),
        ("/api/students", "POST"),
        ("/api/departments", "POST"),
        ("/api/companies", "POST"),
        ("/api/jobroles", "POST"),
        ("/api/placements", "POST"),
        ("/api/placement-stats", "GET"),
        ("/api/eligible-students/{jobrole_id}", "GET"),
        ("/api/top-companies", "GET"),
        ("/api/apply-job", "POST"),
        ("/api/record-placement", "POST"),
        ("/api/views/placement-ready", "GET"),
        ("/api/views/active-jobs", "GET"),
        ("/api/views/placement-summary", "GET"),
        ("/api/student-audit", "GET"),
        ("/debug/routes", "GET"),
    ]:
        assert expected in routes


def test_health_connected(client):
    assert client.get("/health").json() == {"status": "healthy", "database": "connected"}


def test_health_disconnected(make_client, tmp_path):
    broken = PlacementStore(create_engine(f"sqlite:///{tmp_path / 'missing' / 'nowhere.db'}"))

    assert make_client(broken).get("/health").json()["database"] == "disconnected"


def test_root_serves_front_end(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Placement Management" in response.text


def test_root_without_front_end_reports_api_status(tmp_path):
    settings = Settings(frontend_dir=str(tmp_path / "no-frontend"), _env_file=None)

    with TestClient(create_app(settings)) as client:
        response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "app": "Placement Management API",
        "message": "Frontend not found. API is running."
    }


def test_debug_routes_include_unlisted_app_routes(client):
    routes = {(r["path"], r["methods"]) for r in client.get("/debug/routes").json()["routes"]}

    assert ("/", "GET") in routes
    assert ("/health", "GET") in routes


def test_openapi_documents_error_response(client):
    schema = client.get("/openapi.json").json()

    for path, method in [("/api/data", "get"), ("/api/students", "post"), ("/api/apply-job", "post")]:
        error = schema["paths"][path][method]["responses"]["500"]
        assert error["content"]["application/json"]["schema"] == {"$ref": "#/components/schemas/ErrorResponse"}
    assert schema["components"]["schemas"]["ErrorResponse"]["required"] == ["error"]


def test_cors_headers(client):
    response = client.get("/api/data", headers={"Origin": "http://localhost:5173"})

    assert "access-control-allow-origin" in response.headers


def test_settings_build_postgres_url():
    settings = Settings(
        postgres_user="u", postgres_password="p", postgres_host="db",
        postgres_port=6543, postgres_db="placements", _env_file=None
    )

    assert settings.postgres_url == "postgresql+psycopg2://u:p@db:6543/placements"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("POSTGRES_DB", "from_env")
    monkeypatch.setenv("DB_POOL_SIZE", "20")

    settings = Settings(_env_file=None)

    assert settings.postgres_db == "from_env"
    assert settings.db_pool_size == 20


def _app_handlers(root):
    return [h for h in root.handlers if h.get_name() in (CONSOLE_HANDLER, FILE_HANDLER)]


def test_setup_logging_reuses_named_handlers(monkeypatch):
    root = logging.getLogger()
    foreign = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [foreign])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging(Settings(log_level="debug", _env_file=None))
    setup_logging(Settings(log_level="info", _env_file=None))

    assert [h.get_name() for h in _app_handlers(root)] == [CONSOLE_HANDLER]
    assert foreign in root.handlers
    assert root.level == logging.INFO
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_setup_logging_writes_log_file(monkeypatch, tmp_path):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    log_file = tmp_path / "api.log"

    setup_logging(Settings(log_file=str(log_file), _env_file=None))
    logging.getLogger("placement_api.tests").info("placement recorded")
    for handler in _app_handlers(root):
        handler.flush()

    assert [h.get_name() for h in _app_handlers(root)] == [CONSOLE_HANDLER, FILE_HANDLER]
    assert "| INFO     | placement_api.tests | placement recorded" in log_file.read_text()

    setup_logging(Settings(_env_file=None))
    assert [h.get_name() for h in _app_handlers(root)] == [CONSOLE_HANDLER]
