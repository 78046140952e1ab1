"""
Initialize database: creates all tables and optionally loads the garage layout.
Run once before first launch, or after adding new models.
Usage: python scripts/setup/init_db.py [--load-layout]
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from sqlalchemy import inspect, text

from garage.database import SessionLocal, create_tables, engine
from garage.config import settings
from garage.services.garage_service import initialize_garage


def main():
    parser = argparse.ArgumentParser(description="Create garage tables")
    parser.add_argument("--load-layout", action="store_true",
                        help=f"Fetch sectors/spots from {settings.GARAGE_API_URL}/garage")
    args = parser.parse_args()

    print("Garage DB Initialization")
    print("=" * 40)
    print(f"Database: {settings.DATABASE_URL}")

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("Database connection OK")
    except Exception as e:
        print(f"Cannot connect to database: {e}")
        sys.exit(1)

    print("\nCreating tables...")
    create_tables()

    tables = sorted(inspect(engine).get_table_names())
    print(f"\nTables in database ({len(tables)} total):")
    for t in tables:
        print(f"   - {t}")

    if args.load_layout:
        db = SessionLocal()
        try:
            loaded = initialize_garage(db)
        finally:
            db.close()
        print("\nGarage layout loaded" if loaded else "\nGarage layout already present, skipped")

    print("\nDatabase ready! You can now start the backend:")
    print(f"   uvicorn garage.main:app --host {settings.BACKEND_IP} --port {settings.BACKEND_PORT} --reload")


if __name__ == "__main__":
    main()
