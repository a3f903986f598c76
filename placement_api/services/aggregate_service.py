"""
Aggregate Fetch Service

Gathers all five entity collections for GET /api/data.

HOW IT WORKS:
1. Each collection has one independent SELECT (with LEFT JOINs for display names)
2. The five queries run concurrently in the threadpool, each on its own pooled connection
3. asyncio.gather joins them: it resolves exactly once, with every result or the first error
4. Later results after a failure are discarded, so only one response is ever produced
"""

import asyncio
import logging
from typing import Any, Dict, List

from starlette.concurrency import run_in_threadpool

from placement_api.db.postgres import PlacementStore

logger = logging.getLogger(__name__)


AGGREGATE_QUERIES: Dict[str, str] = {
    "students": """
        SELECT s.*, d.dept_name AS department_name
        FROM Student s
        LEFT JOIN Department d ON s.department_id = d.dept_id
        ORDER BY s.student_id
    """,
    "departments": "SELECT * FROM Department ORDER BY dept_id",
    "companies": "SELECT * FROM Company ORDER BY company_id",
    "job_roles": """
        SELECT j.*, c.company_name
        FROM Job_Roles j
        LEFT JOIN Company c ON j.company_id = c.company_id
        ORDER BY j.jobrole_id
    """,
    "placements": """
        SELECT p.*, s.student_name, j.role_title, j.package_lpa, c.company_name
        FROM Placement p
        LEFT JOIN Student s ON p.student_id = s.student_id
        LEFT JOIN Job_Roles j ON p.jobrole_id = j.jobrole_id
        LEFT JOIN Company c ON j.company_id = c.company_id
        ORDER BY p.placement_id
    """,
}


def _run_query(store: PlacementStore, key: str, sql: str) -> List[Dict[str, Any]]:
    try:
        return store.fetch_all(sql)
    except Exception:
        logger.error("Aggregate query '%s' failed", key)
        raise


async def fetch_all_collections(store: PlacementStore) -> Dict[str, List[Dict[str, Any]]]:
    """
    Run every aggregate query concurrently and return {key: rows}.
    Raises the first failure; no partial result is returned.
    """
    keys = list(AGGREGATE_QUERIES)
    results = await asyncio.gather(
        *(run_in_threadpool(_run_query, store, key, AGGREGATE_QUERIES[key]) for key in keys)
    )
    return dict(zip(keys, results))
