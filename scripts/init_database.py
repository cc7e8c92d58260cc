"""
Database initialization script.

Creates the profile tables and loads seed CSV files into them. Each CSV in
SEED_DATA_DIR is named after the table it fills, e.g.
``caste_population.csv``. Run this once before starting the API server.
"""
import os
import sys
import uuid
import pandas as pd
from tqdm import tqdm
import logging

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import Integer, Numeric

from digital_profile.config import settings, ensure_directories
from digital_profile.database import SessionLocal, init_db
from digital_profile import models

# Setup logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

SKIPPED_COLUMNS = ("created_at", "updated_at")


def clean_string(value) -> str:
    """Clean string values."""
    if pd.isna(value):
        return None
    return str(value).strip()


def clean_int(value) -> int:
    """Clean integer values."""
    if pd.isna(value):
        return 0
    try:
        return int(float(value))
    except (ValueError, TypeError):
        return 0


def clean_float(value) -> float:
    """Clean decimal values."""
    if pd.isna(value):
        return 0.0
    try:
        return float(value)
    except (ValueError, TypeError):
        return 0.0


def build_record(model, row):
    """Map one CSV row onto a model instance using the column types."""
    values = {}
    for column in model.__table__.columns:
        if column.name in SKIPPED_COLUMNS:
            continue

        raw = row.get(column.name)
        if column.primary_key:
            if raw is None or pd.isna(raw):
                # Integer keys autoincrement; string keys use the column default or a uuid
                if column.default is None and not isinstance(column.type, Integer):
                    values[column.name] = str(uuid.uuid4())
                continue
            values[column.name] = clean_int(raw) if isinstance(column.type, Integer) else clean_string(raw)
        elif isinstance(column.type, Integer):
            values[column.name] = clean_int(raw)
        elif isinstance(column.type, Numeric):
            values[column.name] = clean_float(raw)
        else:
            values[column.name] = clean_string(raw)
    return model(**values)


def load_table(db, model, csv_path: str, batch_size: int = 1000) -> int:
    """Load one seed CSV into ``model``'s table."""
    logger.info(f"  Processing: {os.path.basename(csv_path)}")

    total_records = 0
    try:
        df = pd.read_csv(csv_path, dtype=str, keep_default_na=True)

        records = []
        for _, row in tqdm(df.iterrows(), total=len(df), desc=f"    {model.__tablename__}"):
            records.append(build_record(model, row))

            if len(records) >= batch_size:
                db.bulk_save_objects(records)
                db.commit()
                total_records += len(records)
                records = []

        # Save remaining records
        if records:
            db.bulk_save_objects(records)
            db.commit()
            total_records += len(records)

    except Exception as e:
        logger.error(f"  Error processing {csv_path}: {e}")
        db.rollback()

    return total_records


def seed_models():
    """Every model whose table can be seeded from CSV."""
    return [getattr(models, name) for name in models.__all__]


def main():
    """Main initialization function."""
    logger.info("=" * 60)
    logger.info(f"{settings.PROJECT_NAME} - Database Initialization")
    logger.info("=" * 60)

    ensure_directories()
    seed_dir = settings.SEED_DATA_DIR
    if not os.path.isdir(seed_dir):
        logger.error(f"Seed directory not found: {seed_dir}")
        sys.exit(1)

    logger.info("Initializing database...")
    init_db()
    logger.info(f"Database ready at: {settings.database_url}")

    db = SessionLocal()
    counts = {}

    try:
        for model in seed_models():
            csv_path = os.path.join(seed_dir, f"{model.__tablename__}.csv")
            if not os.path.exists(csv_path):
                continue

            existing = db.query(model).count()
            if existing > 0:
                response = input(
                    f"  {model.__tablename__} already has {existing} rows. Clear and reload? (y/N): "
                ).strip().lower()
                if response != 'y':
                    logger.info(f"  Keeping existing {model.__tablename__} rows")
                    continue
                db.query(model).delete()
                db.commit()

            counts[model.__tablename__] = load_table(db, model, csv_path)

        logger.info("=" * 60)
        logger.info("Database initialization complete")
        for table_name, count in counts.items():
            logger.info(f"  {table_name}: {count:,} records")
        logger.info(f"  Total records: {sum(counts.values()):,}")
        logger.info("=" * 60)
        logger.info("You can now start the API server with: python run_server.py")

    except Exception as e:
        logger.error(f"Error during initialization: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
