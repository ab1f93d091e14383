import logging
import sys

from app.core.config import load_settings, resolve_config_path
from app.core.exceptions import StartupError, StorageError
from app.core.logging import setup_logging
from app.storage.base import Storage
from app.storage.sqlite import SQLiteStorage

logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    {"name": "Nguyen Van A", "email": "vana@example.com", "age": 20},
    {"name": "Tran Thi B", "email": "thib@example.com", "age": 21},
    {"name": "Le Van C", "email": "vanc@example.com", "age": 22},
]


def seed_data(storage: Storage) -> int:
    """
    Insert the sample students unless the store already has data.
    Returns the number of students created.
    """
    if storage.fetch_all_students():
        logger.info("Database already contains data. Skipping seed.")
        return 0

    logger.info("Seeding data...")
    for student in SAMPLE_STUDENTS:
        student_id = storage.create_student(**student)
        logger.info("student created id=%s", student_id)

    logger.info("Data seeded successfully")
    return len(SAMPLE_STUDENTS)


def main() -> int:
    setup_logging()
    try:
        settings = load_settings(resolve_config_path())
        storage = SQLiteStorage(settings)
    except StartupError as exc:
        logger.critical("%s", exc)
        return 1

    try:
        seed_data(storage)
    except StorageError as exc:
        logger.error(f"Error seeding data: {exc}")
        return 1
    finally:
        storage.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
