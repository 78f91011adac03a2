"""
Script to seed the reference tables: languages (en, fr, es, de) and tags (mobile, desktop, web).
"""
import sys
import logging
from sqlmodel import Session
from app.core.database import engine, init_db
from app.services.seed_service import seed_languages, seed_tags

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


if __name__ == "__main__":
    logger.info("Seeding languages and tags...")
    try:
        init_db()
        with Session(engine) as session:
            seed_languages(session)
            seed_tags(session)
        logger.info("Successfully completed!")
    except Exception as e:
        logger.error("Error while seeding reference data: %s", e, exc_info=True)
        sys.exit(1)
