from __future__ import annotations

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field

from ..techniques.models import ProjectRequirement


def _new_id() -> str:
    return str(uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class RequirementCreate(ProjectRequirement):
    project_name: str = Field(..., min_length=1)


class RequirementUpdate(BaseModel):
    project_name: str | None = Field(default=None, min_length=1)
    date: datetime | None = None
    problem_statement: str | None = None
    role: str | None = None
    output_type: list[str] | None = None
    outcome: list[str] | None = None
    device_type: list[str] | None = None
    project_type: str | None = None
    existing_users: bool | None = None


class Requirement(ProjectRequirement):
    project_name: str = Field(..., min_length=1)
    id: str = Field(default_factory=_new_id)
    user_id: str
    created_at: datetime = Field(default_factory=_now)


class SavedResult(BaseModel):
    id: str = Field(default_factory=_new_id)
    user_id: str
    requirement_id: str | None = None
    project_name: str | None = None
    role: str | None = None
    date: datetime | None = None
    problem_statement: str | None = None
    output_type: list[str] = Field(default_factory=list)
    outcome: list[str] = Field(default_factory=list)
    device_type: list[str] = Field(default_factory=list)
    existing_users: bool | None = None
    stage_techniques: dict[str, list[dict[str, str]]] | None = None
    created_at: datetime = Field(default_factory=_now)


class SavedResultUpdate(BaseModel):
    project_name: str | None = Field(default=None, min_length=1)
    role: str | None = None
    date: datetime | None = None
    problem_statement: str | None = None


class ChecklistItem(BaseModel):
    id: str = Field(default_factory=_new_id)
    text: str
    checked: bool = False


class Attachment(BaseModel):
    id: str = Field(default_factory=_new_id)
    description: str = ""
    value: Any = None


class LinkAttachment(BaseModel):
    id: str = Field(default_factory=_new_id)
    description: str = ""
    value: str


class NoteAttachment(BaseModel):
    id: str = Field(default_factory=_new_id)
    value: str


class Attachments(BaseModel):
    files: list[Attachment] = Field(default_factory=list)
    links: list[LinkAttachment] = Field(default_factory=list)
    notes: list[NoteAttachment] = Field(default_factory=list)


class RemixRequest(BaseModel):
    """A user's notes on how they applied a technique. ``id`` set means update."""

    id: str | None = None
    project_id: str | None = None
    technique_name: str = Field(..., min_length=1)
    date: str | None = None
    duration: str | None = None
    team_size: str | None = None
    why: str | None = None
    overview: str | None = None
    problem_statement: str | None = None
    role: str | None = None
    prerequisites: list[ChecklistItem] = Field(default_factory=list)
    execution_steps: list[ChecklistItem] = Field(default_factory=list)
    attachments: Attachments = Field(default_factory=Attachments)


class RemixedTechnique(RemixRequest):
    id: str = Field(default_factory=_new_id)
    user_id: str
    project_id: str
    project_name: str | None = None
    created_at: datetime = Field(default_factory=_now)
