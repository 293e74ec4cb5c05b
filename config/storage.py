"""Storage lifecycle and request dependency."""

from fastapi import Request

from repositories.storage import MemStorage


def get_storage(request: Request) -> MemStorage:
    """Dependency that provides the application's storage.

    The storage is created by the application lifespan and lives on
    ``app.state`` until shutdown.
    """
    return request.app.state.storage
