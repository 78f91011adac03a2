"""
Script to create (or reset the password of) an API user.
"""
import sys
import logging
from sqlmodel import Session
from app.core.database import engine, init_db
from app.services.seed_service import create_user

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def main():
    """Main entry point for the script."""
    import argparse

    parser = argparse.ArgumentParser(description="Create an API user that can log in and manage translations")
    parser.add_argument("--email", type=str, required=True, help="Login email")
    parser.add_argument("--password", type=str, required=True, help="Login password")
    parser.add_argument("--name", type=str, default="Admin", help="Display name")
    args = parser.parse_args()

    init_db()
    with Session(engine) as session:
        user = create_user(session, name=args.name, email=args.email, password=args.password)
    logger.info(f"User ready: id={user.id} email={user.email}")


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        logger.error("Error while creating user: %s", e, exc_info=True)
        sys.exit(1)
