"""Rotas HTTP.

- health/: liveness e readiness
- leads/: extração de texto colado, salvamento e envio ao Spotter
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
