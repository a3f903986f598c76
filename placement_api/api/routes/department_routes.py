"""
Department Routes

POST /departments - Create department
"""

from fastapi import APIRouter, Depends

from placement_api.db.postgres import PlacementStore, get_store
from placement_api.schemas.schemas import DepartmentCreate, CreatedResponse

router = APIRouter(prefix="/departments", tags=["Departments"])


@router.post("", response_model=CreatedResponse)
def create_department(data: DepartmentCreate, store: PlacementStore = Depends(get_store)):
    dept_id = store.insert(
        "INSERT INTO Department (dept_name) VALUES (:dept_name) RETURNING dept_id",
        {"dept_name": data.dept_name}
    )
    return CreatedResponse(message="✅ Department added!", id=dept_id)
