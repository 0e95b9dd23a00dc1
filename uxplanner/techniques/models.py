from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Stage(str, Enum):
    discover = "Discover"
    define = "Define"
    design = "Design"
    develop = "Develop"
    deliver = "Deliver"


STAGES: tuple[str, ...] = tuple(s.value for s in Stage)

# Techniques in these stages are never gated on output type.
EARLY_STAGES: frozenset[str] = frozenset({"Discover", "Define", "Design"})

OUTPUT_TYPES = [
    "Mobile App", "Web App", "Desktop Software", "Smartwatch Interface", "TV or Console Experience",
    "AR/VR Application", "Service Blueprint", "Journey Map", "Persona Profile", "Usability Report",
    "Design System", "Accessibility Audio", "KPI Dashboard/Analytics Report", "Storyboards",
    "Content Strategy", "Chatbot/Voice Interface", "Presentation", "Video", "Interactive Prototype",
    "UI Design", "Visual Design", "Motion Design", "Animation", "Voice Interaction", "Wireframe",
    "Information Architecture",
]
OUTCOMES = ["Qualitative", "Quantitative", "Insight"]
DEVICE_TYPES = ["Mobile", "Desktop", "Electronics", "Kiosk"]
PROJECT_TYPES = ["new", "old"]


class TechniqueDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    stage: Stage
    outcomes: tuple[str, ...] = ()
    output_types: tuple[str, ...] = ()
    device_types: tuple[str, ...] = ()
    project_types: tuple[str, ...] = ()
    # None means the technique fits any user base.
    user_base: tuple[str, ...] | None = None


class ProjectRequirement(BaseModel):
    project_name: str | None = None
    date: datetime | None = None
    problem_statement: str | None = None
    role: str | None = None
    output_type: list[str] = Field(default_factory=list)
    outcome: list[str] = Field(default_factory=list)
    device_type: list[str] = Field(default_factory=list)
    project_type: str | None = None
    existing_users: bool | None = None

    @field_validator("project_type")
    @classmethod
    def _check_project_type(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if value.strip().lower() not in PROJECT_TYPES:
            raise ValueError(f"project_type must be one of {PROJECT_TYPES}")
        return value.strip()


class TechniqueRef(BaseModel):
    name: str
    slug: str


StageMap = dict[str, list[TechniqueRef]]


class RecommendationResponse(BaseModel):
    requirement_id: str | None = None
    stages: StageMap
