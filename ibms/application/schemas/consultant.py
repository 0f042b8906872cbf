"""Pydantic DTOs for the Consultant feature. Consultant fields are snake_case on the wire."""

from pydantic import BaseModel, Field


class ConsultantCreate(BaseModel):
    name: str = Field(..., min_length=1, examples=["Priya Sharma"])
    email: str
    phone: str | None = None
    specialization: str | None = None
    hourly_rate: float = Field(0, ge=0)
    experience_years: int = Field(0, ge=0)
    skills: list[str] = Field(default_factory=list)

    model_config = {"extra": "allow"}


class ConsultantUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    specialization: str | None = None
    hourly_rate: float | None = Field(None, ge=0)
    status: str | None = None

    model_config = {"extra": "allow"}


class AvailabilitySlot(BaseModel):
    day_of_week: int = Field(..., ge=0, le=6)
    start_time: str
    end_time: str
    is_available: bool = True


class ProjectAssignment(BaseModel):
    project_id: str
    role: str = "consultant"
    start_date: str | None = None
    end_date: str | None = None
    hourly_rate: float | None = Field(None, ge=0)
