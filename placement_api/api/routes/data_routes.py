"""
Data Routes

GET /data - All five collections in one response
"""

from fastapi import APIRouter, Depends

from placement_api.db.postgres import PlacementStore, get_store
from placement_api.services.aggregate_service import fetch_all_collections

router = APIRouter(tags=["Data"])


@router.get("/data")
async def get_all_data(store: PlacementStore = Depends(get_store)):
    """
    Students, departments, companies, job roles and placements.
    Every key is always present; an empty table gives [].
    """
    return await fetch_all_collections(store)
