"""Pydantic contracts for every structured LLM output."""
from __future__ import annotations

from pydantic import BaseModel, Field


# ── Single technique portfolio ───────────────────────────────────────────


class PortfolioMeta(BaseModel):
    date: str = Field(..., description="The date the project or technique was executed.")
    duration: str = Field(..., description="The duration of the work.")
    team_size: str = Field(..., description="The size of the team involved.")


class PortfolioOutput(BaseModel):
    title: str = Field(..., description="The name of the UX technique used.")
    tags: list[str] = Field(
        default_factory=list,
        description='Relevant tags inferred from the project, e.g. "Wireframe", "Quantitative", "Mobile".',
    )
    meta: PortfolioMeta
    why: str = Field(..., description="Why this technique was chosen, past tense.")
    overview: str = Field(..., description="Compelling summary of key actions taken and results.")
    problem_statement: str = Field(..., description="The problem statement, sharp and clear.")
    role_and_responsibilities: list[str] = Field(
        default_factory=list, description="3-4 key responsibilities, past tense.",
    )
    impact_on_design: str = Field(..., description="How the findings influenced the design.")
    prerequisites: list[str] = Field(
        default_factory=list, description="Prerequisites completed, as past-tense sentences.",
    )
    execution_steps: list[str] = Field(
        default_factory=list, description="Execution steps taken, as past-tense sentences.",
    )


# ── Full portfolio ───────────────────────────────────────────────────────


class ProjectMeta(PortfolioMeta):
    role: str = Field(..., description="The user's primary role in this project.")


class TechniqueBullets(BaseModel):
    technique: str
    bullets: list[str] = Field(default_factory=list)


class ProjectPortfolio(BaseModel):
    project_name: str
    tags: list[str] = Field(default_factory=list)
    meta: ProjectMeta
    why_and_problem: str = Field(..., description="One paragraph combining the why and the problem statement.")
    introduction: str = Field(..., description="Summary of the project's purpose and the user's involvement.")
    approach: list[str] = Field(default_factory=list, description="4-6 bullets on the overall approach.")
    prerequisites: list[TechniqueBullets] = Field(default_factory=list)
    execution_steps: list[TechniqueBullets] = Field(default_factory=list)
    impact_on_design: list[str] = Field(default_factory=list, description="3-5 bullets on design impact.")


class FullPortfolioOutput(BaseModel):
    projects: list[ProjectPortfolio] = Field(default_factory=list)


# ── Technique guide ──────────────────────────────────────────────────────


class ExecutionStep(BaseModel):
    step: int
    title: str
    description: str


class ResourceLink(BaseModel):
    title: str
    url: str


class ResourceLinks(BaseModel):
    create: list[ResourceLink] = Field(
        default_factory=list, description="Templates or tools to create assets for this technique.",
    )
    guides: list[ResourceLink] = Field(default_factory=list, description="Best-practice guides.")


class TechniqueDetailsOutput(BaseModel):
    overview: str
    prerequisites: list[str] = Field(default_factory=list)
    execution_steps: list[ExecutionStep] = Field(default_factory=list)
    resource_links: ResourceLinks = Field(default_factory=ResourceLinks)
    effort_and_timing: str
    best_for: list[str] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)

