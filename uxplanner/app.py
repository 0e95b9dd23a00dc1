from __future__ import annotations

import os

from fastapi import Depends, FastAPI, HTTPException, Request
from starlette.middleware.sessions import SessionMiddleware

from .auth.dependencies import get_store, require_user
from .auth.models import (
    LoginRequest,
    PasswordSuggestionRequest,
    PasswordSuggestionResponse,
    ProfileUpdate,
    SignupRequest,
)
from .auth.passwords import estimate_strength, generate_password
from .auth.users import authenticate, create_user, delete_user, update_profile
from .llm.groq_client import generate_full_portfolio, generate_portfolio, get_technique_details
from .llm.schemas import FullPortfolioOutput, PortfolioOutput, TechniqueDetailsOutput
from .projects.models import (
    RemixedTechnique,
    RemixRequest,
    Requirement,
    RequirementCreate,
    RequirementUpdate,
    SavedResult,
    SavedResultUpdate,
)
from .projects.store import ProjectStore
from .techniques.catalog import find_technique, get_catalog
from .techniques.engine import recommend
from .techniques.models import (
    DEVICE_TYPES,
    OUTCOMES,
    OUTPUT_TYPES,
    PROJECT_TYPES,
    STAGES,
    ProjectRequirement,
    RecommendationResponse,
    TechniqueDefinition,
)

app = FastAPI(title="UX Planner API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "uxplanner-secret-change-in-production"),
)
app.state.store = ProjectStore()

# Fail at startup, not mid-request, if the bundled catalog is malformed.
get_catalog()


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "stages": list(STAGES),
        "output_types": OUTPUT_TYPES,
        "outcomes": OUTCOMES,
        "device_types": DEVICE_TYPES,
        "project_types": PROJECT_TYPES,
    }


@app.get("/techniques", response_model=list[TechniqueDefinition])
def techniques() -> list[TechniqueDefinition]:
    return list(get_catalog())


@app.get("/techniques/{slug}", response_model=TechniqueDefinition)
def technique(slug: str) -> TechniqueDefinition:
    tech = find_technique(slug)
    if tech is None:
        raise HTTPException(status_code=404, detail="Technique not found")
    return tech


@app.post("/recommendations", response_model=RecommendationResponse)
def recommendations(body: ProjectRequirement) -> RecommendationResponse:
    return RecommendationResponse(stages=recommend(body))


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/signup", status_code=201)
def signup(body: SignupRequest, request: Request) -> dict:
    user = create_user(
        body.username,
        body.password,
        full_name=body.full_name,
        role=body.role,
        company=body.company,
    )
    if not user:
        raise HTTPException(status_code=409, detail="Username already taken")
    request.session["user"] = {"id": user["id"], "username": user["username"]}
    return {"status": "ok", "user": user}


@app.post("/auth/login")
def login(body: LoginRequest, request: Request) -> dict:
    user = authenticate(body.username, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    request.session["user"] = {"id": user["id"], "username": user["username"]}
    return {"status": "ok", "user": user}


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.clear()
    return {"status": "logged_out"}


@app.get("/auth/me")
def auth_me(user: dict = Depends(require_user)) -> dict:
    return user


@app.patch("/auth/me")
def update_me(body: ProfileUpdate, user: dict = Depends(require_user)) -> dict:
    return update_profile(user["id"], **body.model_dump(exclude_unset=True))


@app.delete("/auth/me")
def delete_me(
    request: Request,
    user: dict = Depends(require_user),
    store: ProjectStore = Depends(get_store),
) -> dict:
    store.delete_user_data(user["id"])
    delete_user(user["id"])
    request.session.clear()
    return {"status": "deleted"}


@app.post("/auth/password-suggestion", response_model=PasswordSuggestionResponse)
def password_suggestion(body: PasswordSuggestionRequest) -> PasswordSuggestionResponse:
    password = generate_password(body.length, body.use_symbols, body.use_numbers)
    strength, feedback = estimate_strength(password)
    return PasswordSuggestionResponse(password=password, strength=strength, feedback=feedback)


# ── Requirements ─────────────────────────────────────────────────────────


def _owned_requirement(store: ProjectStore, user: dict, requirement_id: str) -> Requirement:
    requirement = store.get_requirement(user["id"], requirement_id)
    if requirement is None:
        raise HTTPException(status_code=404, detail="Requirement not found")
    return requirement


@app.post("/requirements", response_model=Requirement, status_code=201)
def create_requirement(
    body: RequirementCreate,
    user: dict = Depends(require_user),
    store: ProjectStore = Depends(get_store),
) -> Requirement:
    return store.insert_requirement(user["id"], body)


@app.get("/requirements", response_model=list[Requirement])
def list_requirements(
    user: dict = Depends(require_user),
    store: ProjectStore = Depends(get_store),
) -> list[Requirement]:
    return store.list_requirements(user["id"])


@app.get("/requirements/{requirement_id}", response_model=Requirement)
def get_requirement(
    requirement_id: str,
    user: dict = Depends(require_user),
    store: ProjectStore = Depends(get_store),
) -> Requirement:
    return _owned_requirement(store, user, requirement_id)


@app.patch("/requirements/{requirement_id}", response_model=Requirement)
def update_requirement(
    requirement_id: str,
    body: RequirementUpdate,
    user: dict = Depends(require_user),
    store: ProjectStore = Depends(get_store),
) -> Requirement:
    _owned_requirement(store, user, requirement_id)
    try:
        updated = store.update_requirement(
            user["id"], requirement_id, body.model_dump(exclude_unset=True),
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return updated


@app.get("/requirements/{requirement_id}/recommendations", response_model=RecommendationResponse)
def requirement_recommendations(
    requirement_id: str,
    user: dict = Depends(require_user),
    store: ProjectStore = Depends(get_store),
) -> RecommendationResponse:
    requirement = _owned_requirement(store, user, requirement_id)
    return RecommendationResponse(requirement_id=requirement.id, stages=recommend(requirement))


@app.post("/requirements/{requirement_id}/save", response_model=SavedResult)
def save_requirement_result(
    requirement_id: str,
    user: dict = Depends(require_user),
    store: ProjectStore = Depends(get_store),
) -> SavedResult:
    requirement = _owned_requirement(store, user, requirement_id)
    return store.save_or_update_result(requirement, recommend(requirement))


# ── Projects (saved results) ─────────────────────────────────────────────


def _owned_project(store: ProjectStore, user: dict, project_id: str) -> SavedResult:
    project = store.get_saved_result(user["id"], project_id)
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@app.get("/projects", response_model=list[SavedResult])
def list_projects(
    user: dict = Depends(require_user),
    store: ProjectStore = Depends(get_store),
) -> list[SavedResult]:
    return store.list_saved_results(user["id"])


@app.get("/projects/{project_id}", response_model=SavedResult)
def get_project(
    project_id: str,
    user: dict = Depends(require_user),
    store: ProjectStore = Depends(get_store),
) -> SavedResult:
    return _owned_project(store, user, project_id)


@app.patch("/projects/{project_id}", response_model=SavedResult)
def update_project(
    project_id: str,
    body: SavedResultUpdate,
    user: dict = Depends(require_user),
    store: ProjectStore = Depends(get_store),
) -> SavedResult:
    _owned_project(store, user, project_id)
    return store.update_saved_result(user["id"], project_id, body.model_dump(exclude_unset=True))


@app.delete("/projects/{project_id}")
def delete_project(
    project_id: str,
    user: dict = Depends(require_user),
    store: ProjectStore = Depends(get_store),
) -> dict:
    if not store.delete_saved_result(user["id"], project_id):
        raise HTTPException(status_code=404, detail="Project not found")
    return {"status": "deleted"}


@app.get("/projects/{project_id}/remixes", response_model=list[RemixedTechnique])
def list_project_remixes(
    project_id: str,
    user: dict = Depends(require_user),
    store: ProjectStore = Depends(get_store),
) -> list[RemixedTechnique]:
    _owned_project(store, user, project_id)
    return store.list_remixes_for_project(user["id"], project_id)


# ── Remixed techniques & portfolio ───────────────────────────────────────


@app.post("/remixes", response_model=RemixedTechnique)
def save_remix(
    body: RemixRequest,
    user: dict = Depends(require_user),
    store: ProjectStore = Depends(get_store),
) -> RemixedTechnique:
    remix = store.save_or_update_remix(user["id"], body)
    if remix is None:
        raise HTTPException(status_code=404, detail="Project or remix not found")
    return remix


@app.get("/remixes", response_model=list[RemixedTechnique])
def list_remixes(
    user: dict = Depends(require_user),
    store: ProjectStore = Depends(get_store),
) -> list[RemixedTechnique]:
    return store.list_remixes(user["id"])


@app.get("/remixes/{remix_id}", response_model=RemixedTechnique)
def get_remix(
    remix_id: str,
    user: dict = Depends(require_user),
    store: ProjectStore = Depends(get_store),
) -> RemixedTechnique:
    remix = store.get_remix(user["id"], remix_id)
    if remix is None:
        raise HTTPException(status_code=404, detail="Remix not found")
    return remix


@app.post("/remixes/{remix_id}/portfolio", response_model=PortfolioOutput)
def remix_portfolio(
    remix_id: str,
    user: dict = Depends(require_user),
    store: ProjectStore = Depends(get_store),
) -> PortfolioOutput:
    remix = store.get_remix(user["id"], remix_id)
    if remix is None:
        raise HTTPException(status_code=404, detail="Remix not found")
    portfolio = generate_portfolio(remix.model_dump(mode="json"))
    if portfolio is None:
        raise HTTPException(status_code=503, detail="Failed to generate portfolio details")
    return portfolio


@app.post("/portfolio", response_model=FullPortfolioOutput)
def full_portfolio(
    user: dict = Depends(require_user),
    store: ProjectStore = Depends(get_store),
) -> FullPortfolioOutput:
    remixes = store.list_remixes(user["id"])
    if not remixes:
        raise HTTPException(status_code=400, detail="No remixed techniques to build a portfolio from")
    portfolio = generate_full_portfolio([r.model_dump(mode="json") for r in remixes])
    if portfolio is None:
        raise HTTPException(status_code=503, detail="Failed to generate full portfolio")
    return portfolio


@app.get("/techniques/{slug}/details", response_model=TechniqueDetailsOutput)
def technique_details(slug: str, user: dict = Depends(require_user)) -> TechniqueDetailsOutput:
    tech = find_technique(slug)
    if tech is None:
        raise HTTPException(status_code=404, detail="Technique not found")
    details = get_technique_details(tech.name)
    if details is None:
        raise HTTPException(status_code=503, detail="Failed to generate technique details")
    return details
