"""
FastAPI dependencies shared by the endpoint modules.
"""

from fastapi import Request

from ..core.storage import MemStorage


def get_storage(request: Request) -> MemStorage:
    """Return the store attached to the running application.

    The store is created by ``create_app`` and kept on ``app.state``,
    so each application instance (and each test) works on its own
    data.
    """
    return request.app.state.storage
