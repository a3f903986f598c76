"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.

Request fields are optional: a missing value is sent to the database as
NULL and the table constraints decide whether the row is accepted.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Optional


DEFAULT_PLACEMENT_STATUS = "Applied"


def _default_status(value: Optional[str]) -> str:
    # Placement status is an open set; only an absent/empty value is replaced
    return value or DEFAULT_PLACEMENT_STATUS


# ============================================================
# CREATE SCHEMAS
# ============================================================

class RequestModel(BaseModel):
    """Base for request bodies. JSON numbers sent for text columns are kept as text."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

class StudentCreate(RequestModel):
    student_name: Optional[str] = None
    roll_no: Optional[str] = None
    cgpa: Optional[float] = None
    department_id: Optional[int] = None

class DepartmentCreate(RequestModel):
    dept_name: Optional[str] = None

class CompanyCreate(RequestModel):
    company_name: Optional[str] = Field(None, validation_alias=AliasChoices("company_name", "name"))
    location: Optional[str] = None
    contact_email: Optional[str] = None
    website: Optional[str] = None

class JobRoleCreate(RequestModel):
    company_id: Optional[int] = None
    role_title: Optional[str] = Field(None, validation_alias=AliasChoices("role_title", "title"))
    package_lpa: Optional[float] = Field(None, validation_alias=AliasChoices("package_lpa", "salary"))

class PlacementCreate(RequestModel):
    student_id: Optional[int] = None
    jobrole_id: Optional[int] = Field(None, validation_alias=AliasChoices("jobrole_id", "job_id"))
    status: str = DEFAULT_PLACEMENT_STATUS

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, value):
        return _default_status(value)


# ============================================================
# STORED PROCEDURE SCHEMAS
# ============================================================

class ApplyJobRequest(RequestModel):
    student_id: Optional[int] = None
    jobrole_id: Optional[int] = Field(None, validation_alias=AliasChoices("jobrole_id", "job_id"))

class RecordPlacementRequest(RequestModel):
    student_id: Optional[int] = None
    jobrole_id: Optional[int] = Field(None, validation_alias=AliasChoices("jobrole_id", "job_id"))
    status: str = DEFAULT_PLACEMENT_STATUS

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, value):
        return _default_status(value)

class ApplyJobResponse(BaseModel):
    application_id: Optional[int] = None
    message: Optional[str] = None

class RecordPlacementResponse(BaseModel):
    placement_id: Optional[int] = None
    message: Optional[str] = None


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class CreatedResponse(BaseModel):
    message: str
    id: int

class ErrorResponse(BaseModel):
    error: str
