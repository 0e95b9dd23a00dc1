from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from ..techniques.models import StageMap
from .models import (
    RemixedTechnique,
    RemixRequest,
    Requirement,
    RequirementCreate,
    SavedResult,
)

logger = logging.getLogger(__name__)


class ProjectStore:
    """
    In-process store for requirements, saved results and remixed techniques.

    Every lookup is scoped to an owner: records that belong to another user
    behave exactly like missing ones.
    """

    def __init__(self) -> None:
        self._requirements: dict[str, Requirement] = {}
        self._results: dict[str, SavedResult] = {}
        self._remixes: dict[str, RemixedTechnique] = {}

    # ── Requirements ─────────────────────────────────────────────────────

    def insert_requirement(self, user_id: str, body: RequirementCreate) -> Requirement:
        requirement = Requirement(user_id=user_id, **body.model_dump())
        self._requirements[requirement.id] = requirement
        return requirement

    def get_requirement(self, user_id: str, requirement_id: str) -> Requirement | None:
        requirement = self._requirements.get(requirement_id)
        if requirement is None or requirement.user_id != user_id:
            return None
        return requirement

    def list_requirements(self, user_id: str) -> list[Requirement]:
        owned = [r for r in self._requirements.values() if r.user_id == user_id]
        return sorted(owned, key=lambda r: r.created_at, reverse=True)

    def update_requirement(
        self, user_id: str, requirement_id: str, updates: dict[str, Any],
    ) -> Requirement | None:
        current = self.get_requirement(user_id, requirement_id)
        if current is None:
            return None
        # Re-validate so a bad project_type is rejected the same way as on insert.
        merged = Requirement.model_validate({**current.model_dump(), **updates})
        self._requirements[requirement_id] = merged
        return merged

    # ── Saved results ────────────────────────────────────────────────────

    def save_or_update_result(
        self, requirement: Requirement, stage_techniques: StageMap | None = None,
    ) -> SavedResult:
        """Return the saved result for ``requirement``, creating it on first call."""
        for result in self._results.values():
            if result.requirement_id == requirement.id and result.user_id == requirement.user_id:
                return result

        snapshot = None
        if stage_techniques is not None:
            snapshot = {
                stage: [t.model_dump() for t in techs]
                for stage, techs in stage_techniques.items()
            }
        result = SavedResult(
            user_id=requirement.user_id,
            requirement_id=requirement.id,
            project_name=requirement.project_name,
            role=requirement.role,
            date=requirement.date,
            problem_statement=requirement.problem_statement,
            output_type=list(requirement.output_type),
            outcome=list(requirement.outcome),
            device_type=list(requirement.device_type),
            existing_users=requirement.existing_users,
            stage_techniques=snapshot,
        )
        self._results[result.id] = result
        return result

    def get_saved_result(self, user_id: str, result_id: str) -> SavedResult | None:
        result = self._results.get(result_id)
        if result is None or result.user_id != user_id:
            return None
        return result

    def list_saved_results(self, user_id: str) -> list[SavedResult]:
        owned = [r for r in self._results.values() if r.user_id == user_id]
        return sorted(owned, key=lambda r: r.created_at, reverse=True)

    def update_saved_result(
        self, user_id: str, result_id: str, updates: dict[str, Any],
    ) -> SavedResult | None:
        current = self.get_saved_result(user_id, result_id)
        if current is None:
            return None
        updated = current.model_copy(update=updates)
        self._results[result_id] = updated
        return updated

    def delete_saved_result(self, user_id: str, result_id: str) -> bool:
        """Delete a project together with every remix attached to it."""
        if self.get_saved_result(user_id, result_id) is None:
            return False
        for remix_id in [
            r.id for r in self._remixes.values()
            if r.project_id == result_id and r.user_id == user_id
        ]:
            del self._remixes[remix_id]
        del self._results[result_id]
        return True

    # ── Remixed techniques ───────────────────────────────────────────────

    def _placeholder_project(self, user_id: str, body: RemixRequest) -> SavedResult:
        project = SavedResult(
            user_id=user_id,
            project_name=f"Standalone: {body.technique_name or 'Remix'}",
            date=datetime.now(timezone.utc),
            role=body.role or "N/A",
            problem_statement=body.problem_statement or "N/A",
        )
        self._results[project.id] = project
        logger.info("Created placeholder project %s for remix of %r", project.id, body.technique_name)
        return project

    def save_or_update_remix(self, user_id: str, body: RemixRequest) -> RemixedTechnique | None:
        """
        Insert a new remix, or update the one named by ``body.id``.

        Without a ``project_id`` a standalone placeholder project is created
        once the referenced remix (if any) is known to exist. Returns ``None``
        when the referenced project or remix is not owned by ``user_id``.
        """
        existing = None
        if body.id:
            existing = self.get_remix(user_id, body.id)
            if existing is None:
                return None

        if body.project_id:
            project = self.get_saved_result(user_id, body.project_id)
            if project is None:
                return None
        else:
            project = self._placeholder_project(user_id, body)

        data = body.model_dump(exclude={"id", "project_id"})

        if existing is not None:
            remix = RemixedTechnique(
                **data,
                id=existing.id,
                user_id=user_id,
                project_id=project.id,
                created_at=existing.created_at,
            )
        else:
            remix = RemixedTechnique(**data, user_id=user_id, project_id=project.id)

        self._remixes[remix.id] = remix
        return self._with_project_name(remix)

    def _with_project_name(self, remix: RemixedTechnique) -> RemixedTechnique:
        project = self._results.get(remix.project_id)
        return remix.model_copy(update={"project_name": project.project_name if project else None})

    def get_remix(self, user_id: str, remix_id: str) -> RemixedTechnique | None:
        remix = self._remixes.get(remix_id)
        if remix is None or remix.user_id != user_id:
            return None
        return self._with_project_name(remix)

    def list_remixes(self, user_id: str) -> list[RemixedTechnique]:
        owned = [self._with_project_name(r) for r in self._remixes.values() if r.user_id == user_id]
        return sorted(owned, key=lambda r: r.created_at, reverse=True)

    def list_remixes_for_project(self, user_id: str, project_id: str) -> list[RemixedTechnique]:
        return [r for r in self.list_remixes(user_id) if r.project_id == project_id]

    # ── Account ──────────────────────────────────────────────────────────

    def delete_user_data(self, user_id: str) -> None:
        self._remixes = {k: v for k, v in self._remixes.items() if v.user_id != user_id}
        self._results = {k: v for k, v in self._results.items() if v.user_id != user_id}
        self._requirements = {k: v for k, v in self._requirements.items() if v.user_id != user_id}
