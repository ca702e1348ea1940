#!/usr/bin/env python3
"""Create tables (optional) and seed the employees list.

This script is runnable directly (python scripts/seed_employees.py) and also import-safe.
If you see `ModuleNotFoundError: No module named 'stoneworks'`, run from the project root or set PYTHONPATH=. before running.
"""
import sys
from pathlib import Path

# Ensure project root is on sys.path when running the script directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import argparse

from stoneworks import crud
from stoneworks.config.settings import get_settings
from stoneworks.db import Base, build_engine, build_session_factory


def main():
    parser = argparse.ArgumentParser(description='Seed the employees table used by the scheduling calendar.')
    parser.add_argument('--create-tables', action='store_true', help='Create missing tables before seeding')
    parser.add_argument('--database-url', default=None, help='Override DATABASE_URL from the environment')
    args = parser.parse_args()

    settings = get_settings()
    engine = build_engine(args.database_url or settings.DATABASE_URL)
    SessionLocal = build_session_factory(engine)

    if args.create_tables:
        try:
            Base.metadata.create_all(bind=engine)
        except Exception as exc:
            print("Warning: could not create tables:", exc)

    with SessionLocal() as db:
        created = crud.ensure_employees(db)
        if created:
            print(f"Seeded {len(created)} employees")
        else:
            print("Employees already seeded")


if __name__ == '__main__':
    main()
