"""FastAPI dependency factories for the fortune teller API."""

from __future__ import annotations

from fastapi import Request

from app.orchestrator.fortune_orchestrator import FortuneOrchestrator


def get_orchestrator(request: Request) -> FortuneOrchestrator:
    """Return the shared orchestrator built in `create_app`."""

    return request.app.state.orchestrator
