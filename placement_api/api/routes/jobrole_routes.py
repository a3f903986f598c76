"""
Job Role Routes

POST /jobroles - Create job role (accepts "title" and "salary" shorthands)
"""

from fastapi import APIRouter, Depends

from placement_api.db.postgres import PlacementStore, get_store
from placement_api.schemas.schemas import JobRoleCreate, CreatedResponse

router = APIRouter(prefix="/jobroles", tags=["Job Roles"])


@router.post("", response_model=CreatedResponse)
def create_job_role(data: JobRoleCreate, store: PlacementStore = Depends(get_store)):
    """Add a job role. The company must already exist."""
    jobrole_id = store.insert(
        """
            INSERT INTO Job_Roles (company_id, role_title, package_lpa)
            VALUES (:company_id, :role_title, :package_lpa)
            RETURNING jobrole_id
        """,
        {
            "company_id": data.company_id,
            "role_title": data.role_title,
            "package_lpa": data.package_lpa
        }
    )
    return CreatedResponse(message="✅ Job Role added!", id=jobrole_id)
