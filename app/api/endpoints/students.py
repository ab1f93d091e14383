import json
import re
import logging
from typing import List

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from app.api.deps import get_storage
from app.core.exceptions import BadRequestException, StudentValidationException
from app.core.response import write_json
from app.schemas.student import Student, StudentCreate
from app.storage.base import Storage

logger = logging.getLogger(__name__)

router = APIRouter()

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_ID_MIN = -(2 ** 63)
_ID_MAX = 2 ** 63 - 1


def parse_student_id(raw: str) -> int:
    """
    Parse a path id as a signed 64-bit integer written in ASCII digits.

    Raises BadRequestException for anything else (`1_0`, ` 1`, out of range).
    """
    if not _ID_PATTERN.fullmatch(raw):
        raise BadRequestException(f'invalid student id "{raw}": invalid syntax')

    student_id = int(raw)
    if not _ID_MIN <= student_id <= _ID_MAX:
        raise BadRequestException(f'invalid student id "{raw}": value out of range')
    return student_id


def decode_student(body: bytes) -> StudentCreate:
    """
    Decode and validate a create request body.

    Raises BadRequestException for an empty or undecodable body and
    StudentValidationException when fields break their constraints.
    """
    if not body.strip():
        raise BadRequestException("body is empty")

    try:
        data = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise BadRequestException(f"unable to decode request body: {exc}") from exc

    if not isinstance(data, dict):
        raise BadRequestException("unable to decode request body: expected a JSON object")

    try:
        return StudentCreate.model_validate(data)
    except ValidationError as exc:
        raise StudentValidationException(exc.errors()) from exc


@router.post("/student", status_code=status.HTTP_201_CREATED)
async def create_student(
    request: Request,
    storage: Storage = Depends(get_storage)
):
    """
    Create a student.

    - **name**: required, non-empty
    - **email**: required, valid address
    - **age**: required, greater than 0
    """
    logger.info("creating student")

    student = decode_student(await request.body())

    last_id = await run_in_threadpool(
        storage.create_student,
        student.name,
        student.email,
        student.age,
    )

    logger.info("student created id=%s", last_id)
    return write_json(status.HTTP_201_CREATED, {"id": last_id})


@router.get("/student/{id}", response_model=Student)
def fetch_student_by_id(
    id: str,
    storage: Storage = Depends(get_storage)
):
    """
    Fetch one student by id. Unknown ids are reported as storage errors.
    """
    logger.info("fetching student by id")

    student_id = parse_student_id(id)

    return storage.fetch_student_by_id(student_id)


@router.get("/students", response_model=List[Student])
def fetch_all_students(storage: Storage = Depends(get_storage)):
    """
    Fetch every student.
    """
    logger.info("fetching all students")

    return storage.fetch_all_students()
