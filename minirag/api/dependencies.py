"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from minirag.session import Session


def get_session(request: Request) -> Session:
    """Get the session owned by the application.

    Returns:
        Session instance created at app startup
    """
    return request.app.state.session
