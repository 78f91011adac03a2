"""
Script to bulk-create demo translation groups with a value in every language.
Useful for exercising listing and export performance on large datasets.
"""
import sys
import time
import logging
from sqlmodel import Session
from app.core.database import engine, init_db
from app.services.seed_service import seed_translation_groups

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def main():
    """Main entry point for the script."""
    import argparse

    parser = argparse.ArgumentParser(description="Seed demo translation groups")
    parser.add_argument("--count", type=int, default=25000, help="Number of translation groups to create")
    parser.add_argument("--batch-size", type=int, default=1000, help="Groups inserted per batch")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for repeatable data")
    args = parser.parse_args()

    init_db()
    start_time = time.perf_counter()
    with Session(engine) as session:
        created = seed_translation_groups(session, args.count, batch_size=args.batch_size, seed=args.seed)
    logger.info(f"Seeding completed in {time.perf_counter() - start_time:.2f} seconds ({created} groups)")


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        logger.error("Error during translation seeding: %s", e, exc_info=True)
        sys.exit(1)
