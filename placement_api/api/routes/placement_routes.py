"""
Placement Routes

POST /placements - Create placement record (status defaults to 'Applied')
POST /apply-job - Apply via stored procedure ApplyForJob
POST /record-placement - Record outcome via stored procedure RecordPlacement

The procedures validate, generate ids and write their own messages;
this module only forwards their outputs.
"""

from fastapi import APIRouter, Depends

from placement_api.db.postgres import PlacementStore, get_store
from placement_api.schemas.schemas import (
    PlacementCreate, CreatedResponse, ApplyJobRequest, ApplyJobResponse,
    RecordPlacementRequest, RecordPlacementResponse
)

router = APIRouter(tags=["Placements"])


@router.post("/placements", response_model=CreatedResponse)
def create_placement(data: PlacementCreate, store: PlacementStore = Depends(get_store)):
    """Insert a placement row directly."""
    placement_id = store.insert(
        """
            INSERT INTO Placement (student_id, jobrole_id, status)
            VALUES (:student_id, :jobrole_id, :status)
            RETURNING placement_id
        """,
        {"student_id": data.student_id, "jobrole_id": data.jobrole_id, "status": data.status}
    )
    return CreatedResponse(message="✅ Placement added!", id=placement_id)


@router.post("/apply-job", response_model=ApplyJobResponse)
def apply_for_job(data: ApplyJobRequest, store: PlacementStore = Depends(get_store)):
    """
    Apply a student to a job role.
    ApplyForJob(student_id, jobrole_id, INOUT application_id, INOUT message)
    """
    result = store.call_procedure(
        "ApplyForJob",
        [data.student_id, data.jobrole_id],
        ("application_id", "message")
    )
    return ApplyJobResponse(**result)


@router.post("/record-placement", response_model=RecordPlacementResponse)
def record_placement(data: RecordPlacementRequest, store: PlacementStore = Depends(get_store)):
    """
    Record a placement outcome.
    RecordPlacement(student_id, jobrole_id, status, INOUT placement_id, INOUT message)
    """
    result = store.call_procedure(
        "RecordPlacement",
        [data.student_id, data.jobrole_id, data.status],
        ("placement_id", "message")
    )
    return RecordPlacementResponse(**result)
