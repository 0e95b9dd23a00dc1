from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from groq import Groq
from pydantic import BaseModel, ValidationError

from .cache import TTLCache
from .config import DEFAULT_LLM_CONFIG, LLMConfig
from .prompts import (
    FULL_PORTFOLIO_PROMPT,
    JSON_SCHEMA_SUFFIX,
    PORTFOLIO_PROMPT,
    TECHNIQUE_DETAILS_PROMPT,
)
from .schemas import (
    FullPortfolioOutput,
    PortfolioOutput,
    TechniqueDetailsOutput,
)

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)

details_cache = TTLCache(ttl=DEFAULT_LLM_CONFIG.details_cache_ttl)

# Remix fields the model never needs to see.
_REMIX_EXCLUDE = {"id", "user_id", "project_id", "attachments", "created_at"}


def _system_prompt(template: str, output_model: type[BaseModel], **fields: Any) -> str:
    schema = json.dumps(output_model.model_json_schema(), indent=2)
    return template.format(**fields).strip() + "\n" + JSON_SCHEMA_SUFFIX.format(schema=schema)


def _complete_json(
    system_prompt: str,
    user_message: str,
    output_model: type[OutputT],
    config: LLMConfig,
) -> OutputT | None:
    """
    Run one JSON-mode chat completion and validate it against ``output_model``.

    Returns ``None`` on any failure (disabled, timeout, API error, bad JSON,
    schema mismatch).
    """
    if not config.enabled or not config.api_key:
        return None

    try:
        client = Groq(api_key=config.api_key, timeout=config.timeout)
        response = client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            response_format={"type": "json_object"},
        )
        content = response.choices[0].message.content or ""
        return output_model.model_validate(json.loads(content))

    except (json.JSONDecodeError, ValidationError):
        logger.warning("Groq returned output that does not match %s", output_model.__name__, exc_info=True)
        return None
    except Exception:
        logger.warning("Groq LLM call failed", exc_info=True)
        return None


def _checklist_lines(items: list[dict[str, Any]]) -> list[str]:
    return [f"- {item['text']} (Completed: {item.get('checked', False)})" for item in items]


def _build_remix_message(remix: dict[str, Any]) -> str:
    lines = [f"Technique Name: {remix.get('technique_name', '')}", "Project Details:"]
    for label, key in (
        ("Date", "date"),
        ("Duration", "duration"),
        ("Team Size", "team_size"),
        ("Problem Statement", "problem_statement"),
        ("Why this technique was used", "why"),
        ("User's Role", "role"),
        ("Overview/Plan", "overview"),
    ):
        lines.append(f"- {label}: {remix.get(key) or 'N/A'}")

    lines.append("\nPrerequisites Checklist:")
    lines.extend(_checklist_lines(remix.get("prerequisites") or []))
    lines.append("\nExecution Steps Checklist:")
    lines.extend(_checklist_lines(remix.get("execution_steps") or []))
    return "\n".join(lines)


def generate_portfolio(
    remix: dict[str, Any],
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> PortfolioOutput | None:
    """Rewrite one remixed technique into a portfolio case-study section."""
    return _complete_json(
        _system_prompt(PORTFOLIO_PROMPT, PortfolioOutput),
        _build_remix_message(remix),
        PortfolioOutput,
        config,
    )


def generate_full_portfolio(
    remixes: list[dict[str, Any]],
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> FullPortfolioOutput | None:
    """
    Build one case study per project from all of a user's remixes.

    Each remix dict must carry ``project_name`` for grouping.
    """
    if not remixes:
        return None

    payload = [
        {k: v for k, v in remix.items() if k not in _REMIX_EXCLUDE}
        for remix in remixes
    ]
    return _complete_json(
        _system_prompt(FULL_PORTFOLIO_PROMPT, FullPortfolioOutput),
        json.dumps(payload, indent=2, default=str),
        FullPortfolioOutput,
        config,
    )


def get_technique_details(
    technique_name: str,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> TechniqueDetailsOutput | None:
    """Return a practical guide for a technique, cached per technique and model."""
    key = (technique_name.strip().lower(), config.model)
    cached = details_cache.get(key)
    if cached is not None:
        return cached

    details = _complete_json(
        _system_prompt(TECHNIQUE_DETAILS_PROMPT, TechniqueDetailsOutput, technique_name=technique_name),
        f"Write the guide for: {technique_name}",
        TechniqueDetailsOutput,
        config,
    )
    if details is not None:
        details_cache.set(key, details)
    return details
