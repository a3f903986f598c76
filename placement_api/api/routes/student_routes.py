"""
Student Routes

POST /students - Create student
"""

from fastapi import APIRouter, Depends

from placement_api.db.postgres import PlacementStore, get_store
from placement_api.schemas.schemas import StudentCreate, CreatedResponse

router = APIRouter(prefix="/students", tags=["Students"])


@router.post("", response_model=CreatedResponse)
def create_student(data: StudentCreate, store: PlacementStore = Depends(get_store)):
    """Add a student. department_id may be null; the store checks it exists otherwise."""
    student_id = store.insert(
        """
            INSERT INTO Student (student_name, roll_no, cgpa, department_id)
            VALUES (:student_name, :roll_no, :cgpa, :department_id)
            RETURNING student_id
        """,
        {
            "student_name": data.student_name,
            "roll_no": data.roll_no,
            "cgpa": data.cgpa,
            "department_id": data.department_id
        }
    )
    return CreatedResponse(message="✅ Student added!", id=student_id)
