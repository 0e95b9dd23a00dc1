from __future__ import annotations

from uxplanner.techniques.catalog import get_catalog
from uxplanner.techniques.engine import recommend
from uxplanner.techniques.models import STAGES, ProjectRequirement, TechniqueDefinition


def _tech(name: str, stage: str, **tags) -> TechniqueDefinition:
    slug = tags.pop("slug", name.lower().replace(" ", "-"))
    return TechniqueDefinition(name=name, slug=slug, stage=stage, **tags)


USER_INTERVIEWS = _tech(
    "User Interviews",
    "Discover",
    outcomes=("Qualitative",),
    project_types=("New", "Old"),
    user_base=("new", "existing"),
)


def _names(result, stage):
    return [t.name for t in result[stage]]


# ── Totality ─────────────────────────────────────────────────────────────


def test_empty_requirement_returns_all_five_stages():
    result = recommend(ProjectRequirement(), catalog=[])
    assert list(result.keys()) == list(STAGES)
    assert all(v == [] for v in result.values())


def test_empty_selections_return_every_technique_once():
    catalog = get_catalog()
    result = recommend(ProjectRequirement(), catalog=catalog)

    # existing_users unset means "new" users, so techniques limited to
    # existing user bases drop out.
    expected = [t for t in catalog if not t.user_base or "new" in t.user_base]
    returned = [ref.slug for refs in result.values() for ref in refs]
    assert sorted(returned) == sorted(t.slug for t in expected)
    assert len(returned) == len(set(returned))


def test_permissive_when_no_restrictions_in_catalog():
    catalog = [
        _tech("Sketching", "Design"),
        _tech("Handoff", "Deliver", output_types=("UI Design",)),
        _tech("Personas", "Define", outcomes=("Insight",)),
    ]
    result = recommend(ProjectRequirement(), catalog=catalog)
    assert _names(result, "Design") == ["Sketching"]
    assert _names(result, "Deliver") == ["Handoff"]
    assert _names(result, "Define") == ["Personas"]


def test_recommend_uses_bundled_catalog_by_default():
    result = recommend(ProjectRequirement())
    assert sum(len(v) for v in result.values()) > 0


# ── Output-type gating ───────────────────────────────────────────────────


def test_early_stage_ignores_output_type():
    catalog = [_tech("Field Study", "Discover", output_types=("Mobile App",))]
    req = ProjectRequirement(output_type=["Kiosk"])
    assert _names(recommend(req, catalog=catalog), "Discover") == ["Field Study"]


def test_late_stage_is_gated_on_output_type():
    catalog = [_tech("Release Review", "Deliver", output_types=("Mobile App",))]
    req = ProjectRequirement(output_type=["Desktop Software"])
    assert recommend(req, catalog=catalog)["Deliver"] == []


def test_late_stage_passes_on_overlap():
    catalog = [_tech("Release Review", "Develop", output_types=("Mobile App", "Web App"))]
    req = ProjectRequirement(output_type=["Web App"])
    assert _names(recommend(req, catalog=catalog), "Develop") == ["Release Review"]


# ── Lenient intersection ─────────────────────────────────────────────────


def test_outcome_mismatch_excludes():
    req = ProjectRequirement(outcome=["Quantitative"])
    assert recommend(req, catalog=[USER_INTERVIEWS])["Discover"] == []


def test_device_type_lenient_when_technique_has_no_devices():
    req = ProjectRequirement(device_type=["Kiosk"])
    assert _names(recommend(req, catalog=[USER_INTERVIEWS]), "Discover") == ["User Interviews"]


def test_device_type_mismatch_excludes():
    catalog = [_tech("Diary Study", "Discover", device_types=("Mobile",))]
    req = ProjectRequirement(device_type=["Desktop"])
    assert recommend(req, catalog=catalog)["Discover"] == []


# ── Project type & user base ─────────────────────────────────────────────


def test_project_type_is_case_insensitive():
    catalog = [_tech("Competitive Analysis", "Discover", project_types=("New",))]
    req = ProjectRequirement(project_type="new")
    assert _names(recommend(req, catalog=catalog), "Discover") == ["Competitive Analysis"]


def test_project_type_mismatch_excludes():
    catalog = [_tech("Competitive Analysis", "Discover", project_types=("New",))]
    req = ProjectRequirement(project_type="old")
    assert recommend(req, catalog=catalog)["Discover"] == []


def test_user_base_existing_only():
    catalog = [_tech("A/B Testing", "Discover", slug="a-b-testing", user_base=("existing",))]
    assert recommend(ProjectRequirement(existing_users=False), catalog=catalog)["Discover"] == []
    assert recommend(ProjectRequirement(), catalog=catalog)["Discover"] == []
    result = recommend(ProjectRequirement(existing_users=True), catalog=catalog)
    assert _names(result, "Discover") == ["A/B Testing"]


def test_missing_user_base_is_unrestricted():
    catalog = [_tech("Blueprinting", "Define")]
    assert _names(recommend(ProjectRequirement(existing_users=True), catalog=catalog), "Define") == [
        "Blueprinting"
    ]


# ── Aggregation ──────────────────────────────────────────────────────────


def test_duplicate_names_suppressed_first_wins():
    catalog = [
        _tech("Card Sorting", "Define", slug="card-sorting"),
        _tech("Card Sorting", "Define", slug="card-sorting-remote"),
    ]
    result = recommend(ProjectRequirement(), catalog=catalog)
    assert [(t.name, t.slug) for t in result["Define"]] == [("Card Sorting", "card-sorting")]


def test_catalog_order_preserved_within_stage():
    catalog = [_tech("B", "Design"), _tech("A", "Design"), _tech("C", "Design")]
    assert _names(recommend(ProjectRequirement(), catalog=catalog), "Design") == ["B", "A", "C"]


def test_each_call_returns_fresh_structure():
    first = recommend(ProjectRequirement(), catalog=[USER_INTERVIEWS])
    first["Discover"].clear()
    second = recommend(ProjectRequirement(), catalog=[USER_INTERVIEWS])
    assert _names(second, "Discover") == ["User Interviews"]


def test_example_scenario():
    req = ProjectRequirement(
        outcome=["Qualitative"],
        output_type=["Mobile App"],
        device_type=["Mobile"],
        project_type="new",
        existing_users=False,
    )
    result = recommend(req, catalog=[USER_INTERVIEWS])
    assert {stage: [t.model_dump() for t in refs] for stage, refs in result.items()} == {
        "Discover": [{"name": "User Interviews", "slug": "user-interviews"}],
        "Define": [],
        "Design": [],
        "Develop": [],
        "Deliver": [],
    }
