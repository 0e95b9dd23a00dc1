from __future__ import annotations

from collections.abc import Iterable, Sequence

from .catalog import get_catalog
from .models import (
    EARLY_STAGES,
    STAGES,
    ProjectRequirement,
    StageMap,
    TechniqueDefinition,
    TechniqueRef,
)


def _lenient_intersection(selected: Iterable[str], supported: Iterable[str]) -> bool:
    """True if either side is empty or the two share at least one tag."""
    selected = set(selected)
    supported = set(supported)
    if not selected or not supported:
        return True
    return bool(selected & supported)


def _project_type_match(tech: TechniqueDefinition, requirement: ProjectRequirement) -> bool:
    if not requirement.project_type:
        return True
    wanted = requirement.project_type.lower()
    return any(p.lower() == wanted for p in tech.project_types)


def _user_base_match(tech: TechniqueDefinition, requirement: ProjectRequirement) -> bool:
    user_context = "existing" if requirement.existing_users else "new"
    if not tech.user_base:
        return True
    return user_context in tech.user_base


def _output_type_match(tech: TechniqueDefinition, requirement: ProjectRequirement) -> bool:
    if tech.stage.value in EARLY_STAGES:
        return True
    return _lenient_intersection(requirement.output_type, tech.output_types)


def matches(tech: TechniqueDefinition, requirement: ProjectRequirement) -> bool:
    return (
        _project_type_match(tech, requirement)
        and _user_base_match(tech, requirement)
        and _lenient_intersection(requirement.outcome, tech.outcomes)
        and _lenient_intersection(requirement.device_type, tech.device_types)
        and _output_type_match(tech, requirement)
    )


def recommend(
    requirement: ProjectRequirement,
    catalog: Sequence[TechniqueDefinition] | None = None,
) -> StageMap:
    """
    Bucket every matching technique into its design-process stage.

    All five stages are always present in the result, in process order.
    Within a stage, techniques keep catalog order and a repeated name is
    only listed once.
    """
    if catalog is None:
        catalog = get_catalog()

    result: StageMap = {stage: [] for stage in STAGES}
    seen: dict[str, set[str]] = {stage: set() for stage in STAGES}

    for tech in catalog:
        if not matches(tech, requirement):
            continue
        stage = tech.stage.value
        if tech.name in seen[stage]:
            continue
        seen[stage].add(tech.name)
        result[stage].append(TechniqueRef(name=tech.name, slug=tech.slug))

    return result
