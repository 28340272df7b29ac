"""FastAPI server — JSON access to the energy budget.

Run with:
    uvicorn hygiene_budget.api.server:app --reload --port 8000

Or:
    python -m hygiene_budget.api.server

Endpoints:
    GET  /                 — welcome message
    GET  /health           — health check
    GET  /schema           — JSON Schema for SensorProfile
    GET  /profiles         — built-in profile names
    GET  /profiles/{name}  — one built-in profile as JSON
    POST /budget           — compute a budget (profile name + partial overrides)
    POST /sensitivity      — tornado bars for life expectancy
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, ValidationError

from hygiene_budget.config.profile import SensorProfile
from hygiene_budget.config.profiles import apply_overrides, builtin_profile, list_profiles
from hygiene_budget.engine.orchestrator import run_budget
from hygiene_budget.engine.sensitivity import run_sensitivity
from hygiene_budget.errors import ConfigurationError
from hygiene_budget.report.renderer import build_report, render_report

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Hygiene Sensor Energy Budget API",
    version="1.0",
    description=(
        "Battery life estimate for the hygiene sensor: per-subsystem daily "
        "energy, total, life expectancy and bench verification currents."
    ),
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class BudgetRequest(BaseModel):
    """Request body for /budget and /sensitivity. All fields optional."""
    profile: str = Field(default="extended", description="Built-in profile to start from")
    overrides: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial SensorProfile JSON merged onto the profile. "
                    "Example: {'radio': {'static_current_a': 0.0001}}",
    )


class SectionOut(BaseModel):
    title: str
    lines: list[str]


class BudgetResponse(BaseModel):
    """Response from /budget."""
    budget: dict[str, Any]
    report: str
    sections: list[SectionOut]


class SensitivityResponse(BaseModel):
    """Response from /sensitivity."""
    base_life_days: float
    bars: list[dict[str, Any]]


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _build_profile(req: BudgetRequest) -> SensorProfile:
    """Resolve the named profile and merge overrides; map errors to HTTP."""
    try:
        base = builtin_profile(req.profile)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0])) from e
    try:
        return apply_overrides(base, req.overrides)
    except ValidationError as e:
        detail = e.errors(include_url=False, include_context=False, include_input=False)
        raise HTTPException(status_code=422, detail=detail) from e


def _config_error(e: ConfigurationError) -> HTTPException:
    logger.warning("Rejected configuration: %s", e)
    return HTTPException(status_code=422, detail={"parameter": e.parameter, "message": str(e)})


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": "Hygiene Sensor Energy Budget API",
        "version": "1.0",
        "profiles": list_profiles(),
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/schema")
def get_schema():
    """JSON Schema for SensorProfile — every input with units, defaults and constraints."""
    return SensorProfile.model_json_schema()


@app.get("/profiles")
def get_profiles():
    return {"profiles": list_profiles()}


@app.get("/profiles/{name}")
def get_profile(name: str):
    try:
        return builtin_profile(name).model_dump()
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0])) from e


@app.post("/budget", response_model=BudgetResponse)
def compute_budget(req: BudgetRequest):
    """Compute the energy budget and its rendered report."""
    profile = _build_profile(req)
    try:
        budget = run_budget(profile)
    except ConfigurationError as e:
        raise _config_error(e) from e

    sections = build_report(budget)
    return BudgetResponse(
        budget=budget.model_dump(),
        report=render_report(sections),
        sections=[SectionOut(title=s.title, lines=s.lines) for s in sections],
    )


@app.post("/sensitivity", response_model=SensitivityResponse)
def compute_sensitivity(req: BudgetRequest):
    """One-at-a-time sweeps ranked by swing in life expectancy."""
    profile = _build_profile(req)
    try:
        result = run_sensitivity(profile)
    except ConfigurationError as e:
        raise _config_error(e) from e
    except ValidationError as e:
        detail = e.errors(include_url=False, include_context=False, include_input=False)
        raise HTTPException(status_code=422, detail=detail) from e

    return SensitivityResponse(
        base_life_days=result.base_life_days,
        bars=[asdict(b) for b in result.bars],
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
