"""FastAPI dependency injection helpers."""

from fastapi import Request

from rideshare.domain.registry import Registry


def get_registry(request: Request) -> Registry:
    """Return the registry owned by the running application."""
    return request.app.state.registry
