"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from placement_api.api.routes.data_routes import router as data_router
from placement_api.api.routes.student_routes import router as student_router
from placement_api.api.routes.department_routes import router as department_router
from placement_api.api.routes.company_routes import router as company_router
from placement_api.api.routes.jobrole_routes import router as jobrole_router
from placement_api.api.routes.placement_routes import router as placement_router
from placement_api.api.routes.report_routes import router as report_router
from placement_api.api.routes.view_routes import router as view_router
from placement_api.api.routes.debug_routes import router as debug_router

# Main API router (mounted under /api)
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(data_router)
api_router.include_router(student_router)
api_router.include_router(department_router)
api_router.include_router(company_router)
api_router.include_router(jobrole_router)
api_router.include_router(placement_router)
api_router.include_router(report_router)
api_router.include_router(view_router)

__all__ = ["api_router", "debug_router"]
