from __future__ import annotations

from unittest.mock import patch
from uuid import uuid4

from fastapi.testclient import TestClient

from uxplanner.app import app
from uxplanner.llm.schemas import (
    FullPortfolioOutput,
    PortfolioMeta,
    PortfolioOutput,
    TechniqueDetailsOutput,
)

PORTFOLIO = PortfolioOutput(
    title="Surveys",
    tags=["Quantitative"],
    meta=PortfolioMeta(date="June 2024", duration="1 week", team_size="2"),
    why="Surveys were chosen to measure satisfaction at scale.",
    overview="Collected 400 responses.",
    problem_statement="Satisfaction was unknown.",
    role_and_responsibilities=["Designed the questionnaire."],
    impact_on_design="Prioritised the settings redesign.",
    prerequisites=["Defined research goals."],
    execution_steps=["Distributed the survey."],
)


def _client_with_remix() -> tuple[TestClient, dict]:
    c = TestClient(app)
    c.post("/auth/signup", json={"username": f"writer-{uuid4().hex[:8]}", "password": "writer-pass"})
    remix = c.post("/remixes", json={"technique_name": "Surveys", "why": "measure satisfaction"}).json()
    return c, remix


@patch("uxplanner.app.generate_portfolio", return_value=PORTFOLIO)
def test_remix_portfolio(mock_generate):
    c, remix = _client_with_remix()
    resp = c.post(f"/remixes/{remix['id']}/portfolio")
    assert resp.status_code == 200
    assert resp.json()["title"] == "Surveys"
    sent = mock_generate.call_args.args[0]
    assert sent["technique_name"] == "Surveys"
    assert sent["why"] == "measure satisfaction"


@patch("uxplanner.app.generate_portfolio", return_value=None)
def test_remix_portfolio_ai_failure(mock_generate):
    c, remix = _client_with_remix()
    resp = c.post(f"/remixes/{remix['id']}/portfolio")
    assert resp.status_code == 503


def test_remix_portfolio_unknown_remix():
    c, _ = _client_with_remix()
    assert c.post("/remixes/does-not-exist/portfolio").status_code == 404


@patch("uxplanner.app.generate_full_portfolio", return_value=FullPortfolioOutput(projects=[]))
def test_full_portfolio_sends_all_remixes(mock_generate):
    c, remix = _client_with_remix()
    c.post("/remixes", json={"technique_name": "Card Sorting"})
    resp = c.post("/portfolio")
    assert resp.status_code == 200
    sent = mock_generate.call_args.args[0]
    assert {r["technique_name"] for r in sent} == {"Surveys", "Card Sorting"}
    assert all(r["project_name"].startswith("Standalone: ") for r in sent)


def test_full_portfolio_without_remixes():
    c = TestClient(app)
    c.post("/auth/signup", json={"username": f"empty-{uuid4().hex[:8]}", "password": "writer-pass"})
    assert c.post("/portfolio").status_code == 400


@patch("uxplanner.app.get_technique_details")
def test_technique_details_endpoint(mock_details):
    mock_details.return_value = TechniqueDetailsOutput(
        overview="Short questionnaires sent at scale.",
        effort_and_timing="Low effort, 2-3 days",
    )
    c, _ = _client_with_remix()
    resp = c.get("/techniques/surveys/details")
    assert resp.status_code == 200
    assert resp.json()["effort_and_timing"] == "Low effort, 2-3 days"
    mock_details.assert_called_once_with("Surveys")


@patch("uxplanner.app.get_technique_details", return_value=None)
def test_technique_details_unavailable(mock_details):
    c, _ = _client_with_remix()
    assert c.get("/techniques/surveys/details").status_code == 503
    assert c.get("/techniques/unknown-technique/details").status_code == 404
