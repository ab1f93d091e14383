from abc import ABC, abstractmethod
from typing import List

from app.schemas.student import Student


class Storage(ABC):
    """
    Persistence capability the request handlers depend on.

    Implementations raise `StorageError` for every failure, not-found
    included.
    """

    @abstractmethod
    def create_student(self, name: str, email: str, age: int) -> int:
        """Persist a new student and return its assigned id."""

    @abstractmethod
    def fetch_student_by_id(self, student_id: int) -> Student:
        """Return the student with `student_id`."""

    @abstractmethod
    def fetch_all_students(self) -> List[Student]:
        """Return every student, ordered by id."""

    def close(self) -> None:
        """Release engine resources."""
