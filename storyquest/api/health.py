"""Health check endpoint."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """Return application and game session status."""
    session = getattr(request.app.state, "session", None)
    if session is None:
        return {"status": "ok", "session": "uninitialized"}
    return {"status": "ok", "session": session.state.value}
