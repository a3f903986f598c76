"""
Schemas module - Request/Response schemas for API endpoints.
"""
from placement_api.schemas.schemas import (
    ApplyJobRequest, ApplyJobResponse, CompanyCreate, CreatedResponse,
    DepartmentCreate, ErrorResponse, JobRoleCreate, PlacementCreate,
    RecordPlacementRequest, RecordPlacementResponse, StudentCreate,
    DEFAULT_PLACEMENT_STATUS
)

__all__ = [
    "ApplyJobRequest", "ApplyJobResponse", "CompanyCreate", "CreatedResponse",
    "DepartmentCreate", "ErrorResponse", "JobRoleCreate", "PlacementCreate",
    "RecordPlacementRequest", "RecordPlacementResponse", "StudentCreate",
    "DEFAULT_PLACEMENT_STATUS"
]
