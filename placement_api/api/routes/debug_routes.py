"""
Debug Routes

GET /debug/routes - List registered routes and their methods

Routes come from the OpenAPI document, so routers included at any depth
are listed. Top-level routes left out of the schema (front end, docs)
are added from the app's own route table.
"""

from typing import Dict, Set

from fastapi import APIRouter, Request

router = APIRouter(prefix="/debug", tags=["Debug"])

HTTP_METHODS = {"get", "post", "put", "patch", "delete", "head", "options", "trace"}


def collect_routes(app) -> Dict[str, Set[str]]:
    """Map each path to its HTTP methods (upper-case)."""
    routes: Dict[str, Set[str]] = {}
    for path, operations in app.openapi().get("paths", {}).items():
        methods = {m.upper() for m in operations if m in HTTP_METHODS}
        routes.setdefault(path, set()).update(methods)

    for route in app.routes:
        path = getattr(route, "path", None)
        methods = getattr(route, "methods", None)
        if path and methods:
            routes.setdefault(path, set()).update(methods)
    return routes


@router.get("/routes")
async def list_routes(request: Request):
    routes = collect_routes(request.app)
    return {
        "routes": [
            {"path": path, "methods": ",".join(sorted(methods))}
            for path, methods in sorted(routes.items())
        ]
    }
