#!/usr/bin/env python3
"""
Database Bootstrap Script

Creates tables, views, the audit trigger and stored routines
from scripts/schema.sql. Safe to re-run.

Usage: python scripts/init_db.py
"""
import os
import sys
sys.path.insert(0, '.')

from placement_api.core.config import get_settings
from placement_api.db.postgres import get_engine

SCHEMA_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "schema.sql")


def main():
    settings = get_settings()
    print("=" * 50)
    print("PLACEMENT MANAGEMENT - SCHEMA SETUP")
    print("=" * 50)
    print(f"    Target: {settings.postgres_host}:{settings.postgres_port}/{settings.postgres_db}")

    with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
        schema_sql = f.read()

    # psycopg2 accepts a multi-statement script in one execute()
    raw = get_engine().raw_connection()
    try:
        cursor = raw.cursor()
        cursor.execute(schema_sql)
        raw.commit()
    except Exception as e:
        raw.rollback()
        print(f"    ❌ Schema setup failed: {e}")
        sys.exit(1)
    finally:
        raw.close()

    print("    ✅ Tables, views, trigger and procedures created")


if __name__ == "__main__":
    main()
