"""
View Routes - read-only SQL views and the student audit trail

GET /views/placement-ready - Placement_Ready_Students
GET /views/active-jobs - Active_Job_Openings
GET /views/placement-summary - Student_Placement_Summary
GET /student-audit - Student_Audit, newest first
"""

from fastapi import APIRouter, Depends

from placement_api.db.postgres import PlacementStore, get_store

router = APIRouter(tags=["Views"])


@router.get("/views/placement-ready")
def placement_ready_students(store: PlacementStore = Depends(get_store)):
    return store.fetch_all("SELECT * FROM Placement_Ready_Students")


@router.get("/views/active-jobs")
def active_job_openings(store: PlacementStore = Depends(get_store)):
    return store.fetch_all("SELECT * FROM Active_Job_Openings")


@router.get("/views/placement-summary")
def student_placement_summary(store: PlacementStore = Depends(get_store)):
    return store.fetch_all("SELECT * FROM Student_Placement_Summary")


@router.get("/student-audit")
def student_audit_log(store: PlacementStore = Depends(get_store)):
    """Audit rows are written by database triggers; read-only here."""
    return store.fetch_all("SELECT * FROM Student_Audit ORDER BY action_time DESC")
