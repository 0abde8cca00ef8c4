from fastapi import Request

from ..services.container import ServiceContainer


def get_container(request: Request) -> ServiceContainer:
    """Service container attached to the running application."""

    return request.app.state.container
