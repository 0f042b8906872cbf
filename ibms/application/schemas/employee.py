"""Pydantic DTOs for the Employee feature."""

from typing import Literal

from pydantic import Field

from ibms.application.schemas.common import CamelModel

EmployeeStatus = Literal["active", "inactive", "on_leave"]


class EmployeeCreate(CamelModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str
    phone: str | None = None
    designation: str | None = None
    department: str | None = None
    role: str = "employee"
    joining_date: str | None = None
    salary: float | None = Field(None, ge=0)
    skills: list[str] = Field(default_factory=list)


class EmployeeUpdate(CamelModel):
    first_name: str | None = Field(None, min_length=1)
    last_name: str | None = Field(None, min_length=1)
    designation: str | None = None
    department: str | None = None
    role: str | None = None
    status: EmployeeStatus | None = None
    salary: float | None = Field(None, ge=0)


class PerformanceUpdate(CamelModel):
    rating: float = Field(..., ge=0, le=5)
    review_date: str | None = None
    goals: int | None = None
    achievements: int | None = None
