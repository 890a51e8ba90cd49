"""Create (or, with --reset, recreate) the document store table and the upload directory."""
import argparse
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import settings
from app.database import engine, Base
import app.models  # noqa: F401 - registers the document model


def init_db(reset: bool = False):
    if reset:
        print(f"Dropping tables in {settings.DATABASE_URL} ...")
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    print(f"Document store ready; uploads go to {os.path.abspath(settings.UPLOAD_DIR)}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--reset", action="store_true", help="drop all stored documents first")
    args = parser.parse_args()
    init_db(reset=args.reset)
