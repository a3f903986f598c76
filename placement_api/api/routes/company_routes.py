"""
Company Routes

POST /companies - Create company (accepts "name" for company_name)
"""

from fastapi import APIRouter, Depends

from placement_api.db.postgres import PlacementStore, get_store
from placement_api.schemas.schemas import CompanyCreate, CreatedResponse

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.post("", response_model=CreatedResponse)
def create_company(data: CompanyCreate, store: PlacementStore = Depends(get_store)):
    """Add a company."""
    company_id = store.insert(
        """
            INSERT INTO Company (company_name, location, contact_email, website)
            VALUES (:company_name, :location, :contact_email, :website)
            RETURNING company_id
        """,
        {
            "company_name": data.company_name,
            "location": data.location,
            "contact_email": data.contact_email,
            "website": data.website
        }
    )
    return CreatedResponse(message="✅ Company added!", id=company_id)
