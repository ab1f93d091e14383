from pydantic import BaseModel, EmailStr, ConfigDict, Field


class StudentBase(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    age: int = Field(gt=0)


class StudentCreate(StudentBase):
    # JSON values must already have the declared type: no "30" -> 30
    model_config = ConfigDict(strict=True)


class Student(StudentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
