# -*- coding: utf-8 -*-
"""Auth — session cookie helpers + FastAPI dependencies."""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Dict, Optional
from uuid import uuid4

from fastapi import Depends, HTTPException, Request, Response

from ..app_db import get_db
from ..config import settings
from ..users.storage import get_user_by_session_token

SESSION_COOKIE_NAME = "sessionId"

logger = logging.getLogger(__name__)


def new_session_token() -> str:
    return str(uuid4())


def set_session_cookie(resp: Response, token: str) -> None:
    resp.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        httponly=True,
        secure=bool(settings.cookie_secure),
        samesite="lax",
        max_age=settings.session_max_age,
        path="/",
    )


def get_session_token_from_request(request: Request) -> Optional[str]:
    cookie = (request.cookies.get(SESSION_COOKIE_NAME) or "").strip()
    return cookie or None


def get_current_user_from_request(request: Request, conn: sqlite3.Connection) -> Dict[str, Any]:
    """Resolve the session cookie to a stored user, or fail with 401.

    The resolved row is cached on ``request.state.user`` for downstream handlers.
    """
    user = getattr(request.state, "user", None)
    if user:
        return user

    token = get_session_token_from_request(request)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    user_row = get_user_by_session_token(conn, token)
    if not user_row:
        logger.warning("Rejected request with unrecognised session cookie: %s %s", request.method, request.url.path)
        raise HTTPException(status_code=401, detail="Invalid session")

    request.state.user = user_row
    return user_row


def get_current_user(request: Request, conn: sqlite3.Connection = Depends(get_db)) -> Dict[str, Any]:
    return get_current_user_from_request(request, conn)
