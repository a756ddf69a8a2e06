"""Shared FastAPI dependencies for service access."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from line_relay.services import CommandStore, ServiceContainer


def get_service_container(request: Request) -> ServiceContainer:
    """Resolve the service container attached to the running app."""
    services = getattr(request.app.state, "services", None)
    if not isinstance(services, ServiceContainer):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Service container not configured",
        )
    return services


def get_command_store(
    container: Annotated[ServiceContainer, Depends(get_service_container)],
) -> CommandStore:
    """Return the command store bound to the active container."""
    return container.store


__all__ = ["get_command_store", "get_service_container"]
