"""
Placement Management API
A thin FastAPI layer over a PostgreSQL placement database.

Architecture:
- PostgreSQL: tables, views, audit triggers and stored routines (source of truth)
- FastAPI: maps HTTP requests to parameterized SQL and results to JSON
- Static front end: renders the aggregate data as HTML tables
"""

__version__ = "1.0.0"
