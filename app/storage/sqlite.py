import logging
from pathlib import Path
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings
from app.core.database import create_database_tables, create_session_factory, create_sqlite_engine
from app.core.exceptions import StartupError, StorageError
from app.models.student import StudentRecord
from app.schemas.student import Student
from app.storage.base import Storage

logger = logging.getLogger(__name__)


class SQLiteStorage(Storage):
    """Student storage backed by a local SQLite file."""

    def __init__(self, settings: Settings):
        storage_path = Path(settings.STORAGE_PATH)
        try:
            storage_path.parent.mkdir(parents=True, exist_ok=True)
            self.engine = create_sqlite_engine(str(storage_path))
            create_database_tables(self.engine)
        except (OSError, SQLAlchemyError) as exc:
            raise StartupError(f"unable to initialize storage at {storage_path}: {exc}") from exc
        self.SessionLocal = create_session_factory(self.engine)

    def create_student(self, name: str, email: str, age: int) -> int:
        db = self.SessionLocal()
        try:
            db_student = StudentRecord(name=name, email=email, age=age)
            db.add(db_student)
            db.commit()
            db.refresh(db_student)
            return db_student.id
        except SQLAlchemyError as exc:
            db.rollback()
            raise StorageError(str(exc)) from exc
        finally:
            db.close()

    def fetch_student_by_id(self, student_id: int) -> Student:
        db = self.SessionLocal()
        try:
            db_student = db.get(StudentRecord, student_id)
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc
        finally:
            db.close()

        if db_student is None:
            raise StorageError(f"no student found with id {student_id}")
        return Student.model_validate(db_student)

    def fetch_all_students(self) -> List[Student]:
        db = self.SessionLocal()
        try:
            rows = db.scalars(select(StudentRecord).order_by(StudentRecord.id)).all()
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc
        finally:
            db.close()

        return [Student.model_validate(row) for row in rows]

    def close(self) -> None:
        logger.info("Closing storage engine")
        self.engine.dispose()
