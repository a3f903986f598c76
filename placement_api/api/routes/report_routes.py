"""
Report Routes - backed by set-returning stored routines

GET /placement-stats - Per-department placement statistics (GetPlacementStats)
GET /eligible-students/{jobrole_id} - Students eligible for a role (GetEligibleStudents)
GET /top-companies - Companies ranked by average package (GetTopCompaniesByPackage)
"""

from fastapi import APIRouter, Depends

from placement_api.db.postgres import PlacementStore, get_store

router = APIRouter(tags=["Reports"])


@router.get("/placement-stats")
def placement_stats(store: PlacementStore = Depends(get_store)):
    return store.call_function("GetPlacementStats")


@router.get("/eligible-students/{jobrole_id}")
def eligible_students(jobrole_id: int, store: PlacementStore = Depends(get_store)):
    """Eligibility rules live in the database routine."""
    return store.call_function("GetEligibleStudents", jobrole_id)


@router.get("/top-companies")
def top_companies(store: PlacementStore = Depends(get_store)):
    return store.call_function("GetTopCompaniesByPackage")
