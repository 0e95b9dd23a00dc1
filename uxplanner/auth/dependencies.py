from __future__ import annotations

from fastapi import HTTPException, Request

from ..projects.store import ProjectStore
from .users import get_user


def require_user(request: Request) -> dict:
    """Raise 401 if no user is logged in or the account no longer exists."""
    user = request.session.get("user")
    if not user:
        raise HTTPException(status_code=401, detail="Not authenticated")
    current = get_user(user["id"])
    if current is None:
        request.session.clear()
        raise HTTPException(status_code=401, detail="Not authenticated")
    return current


def get_store(request: Request) -> ProjectStore:
    return request.app.state.store
