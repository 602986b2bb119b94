"""Liveness (/health) e readiness (/ready) do extrator.

Readiness depende só de recursos locais: o asset de gazetteers e as
settings. O Spotter não é consultado; indisponibilidade do CRM aparece
nos resultados de envio, não aqui.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings, get_extraction_settings, get_spotter_settings
from extraction.rules import GazetteerAssetError, load_gazetteers

logger = logging.getLogger(__name__)

router = APIRouter()

API_VERSION = "1.0.0"

CheckStatus = Literal["ok", "degraded", "failed"]


class HealthResponse(BaseModel):
    status: str
    service: str
    timestamp: str
    version: str = API_VERSION


class CheckResult(BaseModel):
    status: CheckStatus
    error: str | None = None


class ReadinessResponse(BaseModel):
    status: Literal["ready", "not_ready"]
    checks: dict[str, CheckResult]
    timestamp: str


def _now() -> str:
    return datetime.now(UTC).isoformat()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=_now(),
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check() -> JSONResponse:
    """503 se algum check falhou; gazetteer de cidades vazio só degrada."""
    checks = {name: check() for name, check in _READINESS_CHECKS}
    ready = all(result.status != "failed" for result in checks.values())

    if not ready:
        failed = sorted(name for name, result in checks.items() if result.status == "failed")
        logger.warning("readiness_failed", extra={"failed_checks": failed})

    body = ReadinessResponse(
        status="ready" if ready else "not_ready",
        checks=checks,
        timestamp=_now(),
    )
    return JSONResponse(content=body.model_dump(), status_code=200 if ready else 503)


def _check_gazetteers() -> CheckResult:
    try:
        gazetteers = load_gazetteers()
    except GazetteerAssetError as exc:
        return CheckResult(status="failed", error=type(exc).__name__)
    if not gazetteers.cities:
        return CheckResult(status="degraded", error="empty_city_gazetteer")
    return CheckResult(status="ok")


def _check_settings() -> CheckResult:
    error_count = sum(
        len(settings.validate())
        for settings in (get_base_settings(), get_extraction_settings(), get_spotter_settings())
    )
    if error_count:
        return CheckResult(status="failed", error=f"{error_count} erro(s) de configuração")
    return CheckResult(status="ok")


_READINESS_CHECKS: tuple[tuple[str, Callable[[], CheckResult]], ...] = (
    ("gazetteers", _check_gazetteers),
    ("settings", _check_settings),
)
