"""Monta o APIRouter da aplicação."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.leads.router import router as leads_router

LEADS_PREFIX = "/v1/leads"


def create_api_router() -> APIRouter:
    """/health e /ready na raiz; extração, salvamento e envio sob /v1/leads."""
    api_router = APIRouter()
    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(leads_router, prefix=LEADS_PREFIX, tags=["leads"])
    return api_router
